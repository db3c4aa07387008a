"""Booking completion service."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from commission_engine.core.exceptions import NotFoundError
from commission_engine.domain.booking_state import assert_booking_transition
from commission_engine.domain.enums import BookingStatus
from commission_engine.models.booking import Booking
from commission_engine.repositories.base import CommissionRepository

logger = logging.getLogger(__name__)


class BookingService:
    """Booking lifecycle transitions relevant to commissions."""

    async def complete_booking(
        self,
        repository: CommissionRepository,
        booking_id: UUID,
        completed_at: datetime | None = None,
    ) -> Booking:
        """Mark a pending booking as completed."""
        booking = await repository.get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(booking_id))

        assert_booking_transition(booking.status, BookingStatus.COMPLETED)

        booking.status = BookingStatus.COMPLETED.value
        booking.completed_at = completed_at or datetime.now(UTC)
        booking = await repository.save_booking(booking)

        logger.info(f"Booking completed booking_id={booking.id} completed_at={booking.completed_at.isoformat()}")
        return booking


booking_service = BookingService()
