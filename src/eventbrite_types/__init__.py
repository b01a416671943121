"""
Typed, immutable representation of the Eventbrite v3 REST resource schema.

Serialization and data-modeling layer only: no transport, no pagination
traversal, no business rules.
"""

import logging

from eventbrite_types.codec import (
    Codec,
    DecodePolicy,
    DecodeResult,
    DecodeWarning,
    check_response,
    decode,
    decode_error,
    decode_lenient,
    encode,
)
from eventbrite_types.core.errors import APIError, DecodeError, Error, TemporalFormatError
from eventbrite_types.core.pagination import Pagination
from eventbrite_types.core.temporal import (
    Date,
    DateTime,
    DatetimeTz,
    decode_date,
    decode_datetime,
    decode_datetime_tz,
    encode_date,
    encode_datetime,
    encode_datetime_tz,
)
from eventbrite_types.core.values import (
    Address,
    Country,
    CountryCode,
    Currency,
    CurrencyCode,
    Image,
    MultipartText,
    Region,
    Timezone,
)
from eventbrite_types.domain import (
    Attendee,
    AttendeeAddress,
    AttendeeAnswer,
    AttendeeBarcode,
    AttendeeCosts,
    AttendeeProfile,
    AttendeeTeam,
    Category,
    Event,
    EventDisplaySettings,
    Order,
    Organizer,
    SubCategory,
    TicketClass,
    TrackingBeacon,
    Venue,
    Webhook,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Codec
    "Codec",
    "DecodePolicy",
    "DecodeResult",
    "DecodeWarning",
    "check_response",
    "decode",
    "decode_error",
    "decode_lenient",
    "encode",
    # Errors
    "APIError",
    "DecodeError",
    "Error",
    "TemporalFormatError",
    # Temporal
    "Date",
    "DateTime",
    "DatetimeTz",
    "decode_date",
    "decode_datetime",
    "decode_datetime_tz",
    "encode_date",
    "encode_datetime",
    "encode_datetime_tz",
    # Values
    "Address",
    "Country",
    "CountryCode",
    "Currency",
    "CurrencyCode",
    "Image",
    "MultipartText",
    "Pagination",
    "Region",
    "Timezone",
    # Entities
    "Attendee",
    "AttendeeAddress",
    "AttendeeAnswer",
    "AttendeeBarcode",
    "AttendeeCosts",
    "AttendeeProfile",
    "AttendeeTeam",
    "Category",
    "Event",
    "EventDisplaySettings",
    "Order",
    "Organizer",
    "SubCategory",
    "TicketClass",
    "TrackingBeacon",
    "Venue",
    "Webhook",
]
