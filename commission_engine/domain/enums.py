"""Shared enumerations for hotels, agreements and bookings."""

from enum import Enum


class HotelStatus(str, Enum):
    """Hotel partner status."""

    STANDARD = "STANDARD"
    PREFERRED = "PREFERRED"


class CommissionType(str, Enum):
    """How the base commission of an agreement is computed."""

    PERCENTAGE = "PERCENTAGE"
    FLAT_FEE = "FLAT_FEE"


class BookingStatus(str, Enum):
    """Booking lifecycle states."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
