"""Core utilities."""

from commission_engine.core.exceptions import (
    AppException,
    CommissionAlreadyCalculated,
    InvalidAgreementError,
    InvalidBookingStatus,
    InvalidInputError,
    NotFoundError,
    ValidationError,
)
from commission_engine.core.immutability import (
    ImmutabilityViolationError,
    register_immutability_enforcement,
)

__all__ = [
    "AppException",
    "CommissionAlreadyCalculated",
    "ImmutabilityViolationError",
    "InvalidAgreementError",
    "InvalidBookingStatus",
    "InvalidInputError",
    "NotFoundError",
    "ValidationError",
    "register_immutability_enforcement",
]
