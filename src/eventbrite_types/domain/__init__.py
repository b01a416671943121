"""
Entity graph of the Eventbrite v3 resource schema.

Contains events, venues, organizers, categories, ticket classes, attendees,
orders, webhooks and tracking beacons.
"""

from eventbrite_types.domain.attendee import (
    Attendee,
    AttendeeAddress,
    AttendeeAnswer,
    AttendeeBarcode,
    AttendeeCosts,
    AttendeeProfile,
    AttendeeTeam,
    Order,
)
from eventbrite_types.domain.category import Category, SubCategory
from eventbrite_types.domain.event import (
    Event,
    EventDisplaySettings,
    Organizer,
    TicketClass,
    Venue,
)
from eventbrite_types.domain.webhook import TrackingBeacon, Webhook

__all__ = [
    # Category
    "Category",
    "SubCategory",
    # Event
    "Event",
    "EventDisplaySettings",
    "Organizer",
    "TicketClass",
    "Venue",
    # Attendee
    "Attendee",
    "AttendeeAddress",
    "AttendeeAnswer",
    "AttendeeBarcode",
    "AttendeeCosts",
    "AttendeeProfile",
    "AttendeeTeam",
    "Order",
    # Integrations
    "TrackingBeacon",
    "Webhook",
]
