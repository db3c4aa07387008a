"""Hotel and commission agreement database models."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from commission_engine.database import Base

if TYPE_CHECKING:
    from commission_engine.models.booking import Booking


class Hotel(Base):
    """Hotel partner."""

    __tablename__ = "hotels"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="STANDARD"
    )  # STANDARD, PREFERRED

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    commission_agreements: Mapped[list["CommissionAgreement"]] = relationship(
        "CommissionAgreement", back_populates="hotel"
    )
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="hotel")


class CommissionAgreement(Base):
    """Commission terms for a hotel over ``[valid_from, valid_to)``.

    Agreements are superseded, never deleted.
    """

    __tablename__ = "commission_agreements"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    hotel_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("hotels.id"), nullable=False, index=True
    )

    # Terms
    type: Mapped[str] = mapped_column(String(20), nullable=False)  # PERCENTAGE, FLAT_FEE
    base_rate: Mapped[Decimal | None] = mapped_column(Numeric(7, 4))  # fraction, 0.0800 = 8%
    flat_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    preferred_bonus: Mapped[Decimal | None] = mapped_column(Numeric(7, 4))

    # Validity
    valid_from: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    valid_to: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="commission_agreements")
    tier_rules: Mapped[list["TierRule"]] = relationship(
        "TierRule", back_populates="agreement", cascade="all, delete-orphan"
    )


class TierRule(Base):
    """Monthly volume threshold granting an extra bonus rate."""

    __tablename__ = "tier_rules"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    commission_agreement_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("commission_agreements.id", ondelete="CASCADE"), nullable=False
    )
    min_bookings: Mapped[int] = mapped_column(Integer, nullable=False)
    bonus_rate: Mapped[Decimal] = mapped_column(Numeric(7, 4), nullable=False)

    agreement: Mapped["CommissionAgreement"] = relationship(
        "CommissionAgreement", back_populates="tier_rules"
    )
