"""Commission agreement and monthly report schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from commission_engine.domain.enums import CommissionType, HotelStatus


class TierRuleCreate(BaseModel):
    """Volume tier for a new agreement."""

    min_bookings: int = Field(..., ge=1)
    bonus_rate: Decimal = Field(..., ge=0, le=1)


class CommissionAgreementCreate(BaseModel):
    """Terms for a new or amended commission agreement."""

    type: CommissionType
    base_rate: Decimal | None = Field(default=None, ge=0, le=1)
    flat_amount: Decimal | None = Field(default=None, ge=0)
    preferred_bonus: Decimal | None = Field(default=None, ge=0, le=1)
    valid_from: datetime
    valid_to: datetime | None = None
    tier_rules: list[TierRuleCreate] = []


class CommissionPeriod(BaseModel):
    """Inclusive reporting window."""

    start: datetime
    end: datetime


class CommissionLineItem(BaseModel):
    """Single calculation inside a hotel's monthly summary."""

    model_config = ConfigDict(frozen=True)

    booking_id: UUID
    booking_amount: Decimal
    commission: Decimal
    calculated_at: datetime


class HotelCommissionSummary(BaseModel):
    """Monthly commission totals for one hotel."""

    model_config = ConfigDict(frozen=True)

    hotel_id: UUID
    hotel_name: str
    hotel_status: HotelStatus
    total_commission: Decimal
    booking_count: int
    calculations: list[CommissionLineItem]


class MonthlyCommissionTotals(BaseModel):
    """Roll-up across all hotels."""

    model_config = ConfigDict(frozen=True)

    total_hotels: int
    total_bookings: int
    grand_total_commission: Decimal


class MonthlyCommissionSummary(BaseModel):
    """Monthly per-hotel commission summary."""

    model_config = ConfigDict(frozen=True)

    month: str
    period: CommissionPeriod
    summary: list[HotelCommissionSummary]
    totals: MonthlyCommissionTotals
