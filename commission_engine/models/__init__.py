"""Database models."""

from commission_engine.core.immutability import register_immutability_enforcement
from commission_engine.models.booking import Booking
from commission_engine.models.commission import CommissionCalculation
from commission_engine.models.hotel import CommissionAgreement, Hotel, TierRule

register_immutability_enforcement()

__all__ = [
    # Hotel
    "Hotel",
    "CommissionAgreement",
    "TierRule",
    # Booking
    "Booking",
    # Commission
    "CommissionCalculation",
]
