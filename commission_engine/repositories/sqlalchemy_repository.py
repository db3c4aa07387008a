"""SQLAlchemy (async) implementation of the commission repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from commission_engine.domain.enums import BookingStatus
from commission_engine.models.booking import Booking
from commission_engine.models.commission import CommissionCalculation
from commission_engine.models.hotel import CommissionAgreement, Hotel
from commission_engine.repositories.base import CommissionRepository


class SqlAlchemyCommissionRepository(CommissionRepository):
    """Commission data access over an ``AsyncSession``."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_hotel(self, hotel_id: UUID) -> Hotel | None:
        result = await self.db.execute(select(Hotel).where(Hotel.id == hotel_id))
        return result.scalar_one_or_none()

    async def get_booking(self, booking_id: UUID) -> Booking | None:
        result = await self.db.execute(
            select(Booking)
            .options(
                selectinload(Booking.hotel),
                selectinload(Booking.commission_calculation),
            )
            .where(Booking.id == booking_id)
        )
        return result.scalar_one_or_none()

    async def list_agreements(self, hotel_id: UUID) -> list[CommissionAgreement]:
        result = await self.db.execute(
            select(CommissionAgreement)
            .options(selectinload(CommissionAgreement.tier_rules))
            .where(CommissionAgreement.hotel_id == hotel_id)
            .order_by(CommissionAgreement.valid_from)
        )
        return list(result.scalars().all())

    async def count_completed_bookings(
        self,
        hotel_id: UUID,
        start: datetime,
        end: datetime,
    ) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Booking)
            .where(
                Booking.hotel_id == hotel_id,
                Booking.status == BookingStatus.COMPLETED.value,
                Booking.completed_at >= start,
                Booking.completed_at < end,
            )
        )
        return result.scalar_one()

    async def save_calculation(self, calculation: CommissionCalculation) -> CommissionCalculation:
        self.db.add(calculation)
        await self.db.commit()
        await self.db.refresh(calculation)
        return calculation

    async def list_calculations_between(
        self,
        start: datetime,
        end: datetime,
    ) -> list[CommissionCalculation]:
        result = await self.db.execute(
            select(CommissionCalculation)
            .options(
                selectinload(CommissionCalculation.hotel),
                selectinload(CommissionCalculation.booking),
            )
            .where(
                CommissionCalculation.calculated_at >= start,
                CommissionCalculation.calculated_at <= end,
            )
            .order_by(CommissionCalculation.calculated_at)
        )
        return list(result.scalars().all())

    async def save_agreement(self, agreement: CommissionAgreement) -> CommissionAgreement:
        self.db.add(agreement)
        await self.db.commit()
        await self.db.refresh(agreement, attribute_names=["tier_rules"])
        return agreement

    async def save_booking(self, booking: Booking) -> Booking:
        self.db.add(booking)
        await self.db.commit()
        return booking
