"""Booking database model."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from commission_engine.database import Base

if TYPE_CHECKING:
    from commission_engine.models.commission import CommissionCalculation
    from commission_engine.models.hotel import Hotel


class Booking(Base):
    """Booking model."""

    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    hotel_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("hotels.id"), nullable=False, index=True
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Status
    status: Mapped[str] = mapped_column(
        String(20), default="PENDING", index=True
    )  # PENDING, COMPLETED, CANCELLED

    # Timestamps
    booking_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )  # selects the governing agreement
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), index=True
    )  # selects the month whose volume counts
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="bookings")
    commission_calculation: Mapped["CommissionCalculation | None"] = relationship(
        "CommissionCalculation", back_populates="booking", uselist=False
    )
