"""Base commission repository interface.

All storage adapters must implement this interface.
Business logic should NOT live in adapters - only data access.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from commission_engine.models.booking import Booking
from commission_engine.models.commission import CommissionCalculation
from commission_engine.models.hotel import CommissionAgreement, Hotel


class CommissionRepository(ABC):
    """Abstract data access for the commission engine."""

    @abstractmethod
    async def get_hotel(self, hotel_id: UUID) -> Hotel | None:
        """Fetch a hotel by ID."""
        pass

    @abstractmethod
    async def get_booking(self, booking_id: UUID) -> Booking | None:
        """Fetch a booking with its hotel and existing calculation loaded."""
        pass

    @abstractmethod
    async def list_agreements(self, hotel_id: UUID) -> list[CommissionAgreement]:
        """All agreements ever set for a hotel, tier rules loaded."""
        pass

    @abstractmethod
    async def count_completed_bookings(
        self,
        hotel_id: UUID,
        start: datetime,
        end: datetime,
    ) -> int:
        """Count COMPLETED bookings with ``start <= completed_at < end``.

        Args:
            hotel_id: Hotel whose volume is counted
            start: First instant of the month (inclusive)
            end: Completion instant of the booking under evaluation (exclusive)

        Returns:
            int: Number of completed bookings in the window
        """
        pass

    @abstractmethod
    async def save_calculation(self, calculation: CommissionCalculation) -> CommissionCalculation:
        """Persist a new calculation and return the stored record."""
        pass

    @abstractmethod
    async def list_calculations_between(
        self,
        start: datetime,
        end: datetime,
    ) -> list[CommissionCalculation]:
        """Calculations with ``start <= calculated_at <= end``, hotel and booking loaded."""
        pass

    @abstractmethod
    async def save_agreement(self, agreement: CommissionAgreement) -> CommissionAgreement:
        """Persist a new agreement together with any pending supersede changes."""
        pass

    @abstractmethod
    async def save_booking(self, booking: Booking) -> Booking:
        """Persist booking changes."""
        pass
