"""Commission calculation record.

Immutable result of one calculation run. This record MUST NOT be modified
after creation; see ``commission_engine.core.immutability``.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Numeric
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from commission_engine.database import Base

if TYPE_CHECKING:
    from commission_engine.models.booking import Booking
    from commission_engine.models.hotel import CommissionAgreement, Hotel


class CommissionCalculation(Base):
    """Per-booking commission breakdown."""

    __tablename__ = "commission_calculations"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    booking_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("bookings.id"), nullable=False, unique=True
    )
    hotel_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("hotels.id"), nullable=False, index=True
    )
    commission_agreement_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("commission_agreements.id"), nullable=False
    )

    # Breakdown (rate x amount needs more than 2 places to stay exact)
    base_amount: Mapped[Decimal] = mapped_column(Numeric(18, 6), nullable=False)
    base_rate: Mapped[Decimal | None] = mapped_column(Numeric(7, 4))  # null for FLAT_FEE
    preferred_bonus: Mapped[Decimal | None] = mapped_column(Numeric(18, 6))
    tier_bonus: Mapped[Decimal | None] = mapped_column(Numeric(18, 6))
    total_amount: Mapped[Decimal] = mapped_column(Numeric(18, 6), nullable=False)

    # Audit: monthly_booking_count, applied_tier_rule
    calculation_details: Mapped[dict | None] = mapped_column(JSONB)

    calculated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    # Relationships
    booking: Mapped["Booking"] = relationship("Booking", back_populates="commission_calculation")
    hotel: Mapped["Hotel"] = relationship("Hotel")
    commission_agreement: Mapped["CommissionAgreement"] = relationship("CommissionAgreement")
