import uuid
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from commission_engine.domain.enums import BookingStatus, CommissionType, HotelStatus
from commission_engine.models import Booking, CommissionAgreement, Hotel, TierRule
from commission_engine.repositories.base import CommissionRepository


def utc(year, month, day, hour=0, minute=0, second=0):
    return datetime(year, month, day, hour, minute, second, tzinfo=UTC)


class InMemoryCommissionRepository(CommissionRepository):
    """Repository fake holding transient ORM objects in lists."""

    def __init__(self):
        self.hotels = {}
        self.bookings = {}
        self.agreements = []
        self.calculations = []
        self.saved_agreements = []

    async def get_hotel(self, hotel_id):
        return self.hotels.get(hotel_id)

    async def get_booking(self, booking_id):
        return self.bookings.get(booking_id)

    async def list_agreements(self, hotel_id):
        return [a for a in self.agreements if a.hotel_id == hotel_id]

    async def count_completed_bookings(self, hotel_id, start, end):
        return sum(
            1
            for b in self.bookings.values()
            if b.hotel_id == hotel_id
            and b.status == BookingStatus.COMPLETED
            and b.completed_at is not None
            and start <= b.completed_at < end
        )

    async def save_calculation(self, calculation):
        if calculation.id is None:
            calculation.id = uuid.uuid4()
        calculation.booking = self.bookings[calculation.booking_id]
        calculation.hotel = self.hotels[calculation.hotel_id]
        self.calculations.append(calculation)
        return calculation

    async def list_calculations_between(self, start, end):
        found = [c for c in self.calculations if start <= c.calculated_at <= end]
        return sorted(found, key=lambda c: c.calculated_at)

    async def save_agreement(self, agreement):
        if agreement.id is None:
            agreement.id = uuid.uuid4()
        self.agreements.append(agreement)
        self.saved_agreements.append(agreement)
        return agreement

    async def save_booking(self, booking):
        self.bookings[booking.id] = booking
        return booking


@pytest.fixture
def repository():
    return InMemoryCommissionRepository()


@pytest.fixture
def add_hotel(repository):
    def _add(name="Test Hotel", status=HotelStatus.STANDARD):
        hotel = Hotel(id=uuid.uuid4(), name=name, status=status.value)
        repository.hotels[hotel.id] = hotel
        return hotel

    return _add


@pytest.fixture
def add_agreement(repository):
    def _add(
        hotel,
        type=CommissionType.PERCENTAGE,
        base_rate="0.10",
        flat_amount=None,
        preferred_bonus=None,
        valid_from=None,
        valid_to=None,
        is_active=True,
        tiers=(),
    ):
        agreement = CommissionAgreement(
            id=uuid.uuid4(),
            hotel_id=hotel.id,
            type=type.value,
            base_rate=Decimal(base_rate) if base_rate is not None else None,
            flat_amount=Decimal(flat_amount) if flat_amount is not None else None,
            preferred_bonus=Decimal(preferred_bonus) if preferred_bonus is not None else None,
            valid_from=valid_from or utc(2024, 1, 1),
            valid_to=valid_to,
            is_active=is_active,
            tier_rules=[
                TierRule(min_bookings=min_bookings, bonus_rate=Decimal(rate))
                for min_bookings, rate in tiers
            ],
        )
        repository.agreements.append(agreement)
        return agreement

    return _add


@pytest.fixture
def add_booking(repository):
    def _add(
        hotel,
        amount="1000",
        status=BookingStatus.COMPLETED,
        booking_date=None,
        completed_at=None,
    ):
        booking = Booking(
            id=uuid.uuid4(),
            hotel_id=hotel.id,
            amount=Decimal(amount),
            status=status.value,
            booking_date=booking_date or utc(2024, 3, 15),
            completed_at=completed_at,
        )
        booking.hotel = hotel
        repository.bookings[booking.id] = booking
        return booking

    return _add
