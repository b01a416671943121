"""
Core value types and codecs.

Temporal codecs, compound value types, the pagination envelope and the error
surface. Nothing here depends on the entity graph.
"""
