"""Booking state machine."""

from commission_engine.core.exceptions import InvalidBookingStatus
from commission_engine.domain.enums import BookingStatus

BOOKING_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.COMPLETED: set(),
    BookingStatus.CANCELLED: set(),
}


def assert_booking_transition(current: str, target: str) -> None:
    current, target = BookingStatus(current), BookingStatus(target)
    if target not in BOOKING_TRANSITIONS.get(current, set()):
        if current == target:
            raise InvalidBookingStatus(f"Booking is already {current.value.lower()}")
        raise InvalidBookingStatus(
            f"Invalid booking transition: {current.value} → {target.value}"
        )
