"""Commission calculation service.

Orchestrates one calculation run for a booking:
- the booking must exist, be COMPLETED, have a completion date and no
  prior calculation (checked here, not by the pure calculator)
- the agreement in force at the booking date governs the terms
- volume counts the hotel's bookings completed earlier in the same
  month, never the booking itself
- the breakdown is stored once and never changed afterwards
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from commission_engine.core.exceptions import (
    CommissionAlreadyCalculated,
    InvalidBookingStatus,
    NotFoundError,
)
from commission_engine.domain.agreement_resolver import resolve_agreement
from commission_engine.domain.commission_calculator import (
    CalculationInput,
    CommissionBreakdown,
    calculate_commission,
)
from commission_engine.domain.enums import BookingStatus
from commission_engine.domain.money import Money
from commission_engine.domain.periods import start_of_month
from commission_engine.domain.tier_selector import TierTerms
from commission_engine.models.booking import Booking
from commission_engine.models.commission import CommissionCalculation
from commission_engine.models.hotel import CommissionAgreement
from commission_engine.repositories.base import CommissionRepository

logger = logging.getLogger(__name__)


class CommissionService:
    """Service for calculating and storing booking commissions."""

    async def calculate_for_booking(
        self,
        repository: CommissionRepository,
        booking_id: UUID,
        calculated_at: datetime | None = None,
    ) -> CommissionCalculation:
        """Calculate and store the commission for a completed booking.

        Args:
            repository: Data access adapter
            booking_id: Booking to price
            calculated_at: Timestamp for the record (defaults to now, UTC)

        Returns:
            CommissionCalculation: The stored record

        Raises:
            NotFoundError: booking missing, or no agreement covers its date
            InvalidBookingStatus: booking not completed / no completion date
            CommissionAlreadyCalculated: booking already has a calculation
            InvalidAgreementError: governing agreement is inconsistent
        """
        booking = await repository.get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(booking_id))

        self._assert_calculable(booking)

        agreements = await repository.list_agreements(booking.hotel_id)
        agreement = resolve_agreement(booking.hotel_id, booking.booking_date, agreements)

        monthly_count = await repository.count_completed_bookings(
            booking.hotel_id,
            start_of_month(booking.completed_at),
            booking.completed_at,
        )

        breakdown = calculate_commission(
            self.build_input(booking, agreement, monthly_count)
        )

        calculation = CommissionCalculation(
            booking_id=booking.id,
            hotel_id=booking.hotel_id,
            commission_agreement_id=agreement.id,
            base_amount=breakdown.base_amount.amount,
            base_rate=breakdown.base_rate,
            preferred_bonus=breakdown.preferred_bonus.amount,
            tier_bonus=breakdown.tier_bonus.amount,
            total_amount=breakdown.total_amount.amount,
            calculation_details=self.build_details(breakdown, monthly_count),
            calculated_at=calculated_at or datetime.now(UTC),
        )
        stored = await repository.save_calculation(calculation)

        logger.info(
            f"Commission calculated booking_id={booking.id} hotel_id={booking.hotel_id} "
            f"agreement_id={agreement.id} monthly_count={monthly_count} "
            f"total={breakdown.total_amount}"
        )
        return stored

    def _assert_calculable(self, booking: Booking) -> None:
        if booking.status != BookingStatus.COMPLETED:
            logger.warning(f"Commission rejected booking_id={booking.id}: status={booking.status}")
            raise InvalidBookingStatus("Booking must be completed before calculating commission")

        if booking.commission_calculation is not None:
            logger.warning(f"Commission rejected booking_id={booking.id}: already calculated")
            raise CommissionAlreadyCalculated()

        if booking.completed_at is None:
            logger.warning(f"Commission rejected booking_id={booking.id}: no completion date")
            raise InvalidBookingStatus("Booking has no completion date")

    def build_input(
        self,
        booking: Booking,
        agreement: CommissionAgreement,
        monthly_count: int,
    ) -> CalculationInput:
        """Map stored booking and agreement records to calculator input."""
        return CalculationInput(
            booking_amount=Money.of(booking.amount),
            agreement_type=agreement.type,
            hotel_status=booking.hotel.status,
            base_rate=agreement.base_rate,
            flat_amount=Money.of(agreement.flat_amount) if agreement.flat_amount is not None else None,
            preferred_bonus=agreement.preferred_bonus,
            tier_rules=[
                TierTerms(min_bookings=rule.min_bookings, bonus_rate=rule.bonus_rate)
                for rule in agreement.tier_rules
            ],
            monthly_booking_count=monthly_count,
        )

    def build_details(self, breakdown: CommissionBreakdown, monthly_count: int) -> dict:
        """Audit payload stored alongside the breakdown."""
        tier = breakdown.applied_tier_rule
        return {
            "monthly_booking_count": monthly_count,
            "applied_tier_rule": (
                {"min_bookings": tier.min_bookings, "bonus_rate": str(tier.bonus_rate)}
                if tier
                else None
            ),
        }


commission_service = CommissionService()
