"""Pydantic schemas."""

from commission_engine.schemas.commission import (
    CommissionAgreementCreate,
    CommissionLineItem,
    CommissionPeriod,
    HotelCommissionSummary,
    MonthlyCommissionSummary,
    MonthlyCommissionTotals,
    TierRuleCreate,
)

__all__ = [
    "CommissionAgreementCreate",
    "CommissionLineItem",
    "CommissionPeriod",
    "HotelCommissionSummary",
    "MonthlyCommissionSummary",
    "MonthlyCommissionTotals",
    "TierRuleCreate",
]
