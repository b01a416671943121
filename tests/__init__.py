"""
Test suite for eventbrite-types

Contains:
- tests/unit/          : Unit tests for codecs, value types and the entity graph
"""
