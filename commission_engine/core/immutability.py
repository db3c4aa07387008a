"""Immutability enforcement for commission records using SQLAlchemy events."""

import logging
from datetime import UTC, datetime

from sqlalchemy import event

from commission_engine.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_registered = False


class ImmutabilityViolationError(ValidationError):
    """Raised when attempting to modify immutable commission records."""

    def __init__(self, model_name: str, operation: str, record_id: str):
        self.model_name = model_name
        self.operation = operation
        self.record_id = record_id
        super().__init__(
            f"Immutability violation: Cannot {operation} {model_name} record {record_id}. "
            "Commission records are immutable after creation."
        )


def _log_immutability_violation(model_name: str, operation: str, record_id: str) -> None:
    """Log immutability violation for audit purposes."""
    logger.error(
        f"IMMUTABILITY_VIOLATION: Attempted to {operation} {model_name} "
        f"record_id={record_id} at {datetime.now(UTC).isoformat()}"
    )


def _reject(model_name: str, operation: str, target) -> None:
    _log_immutability_violation(model_name, operation, str(target.id))
    raise ImmutabilityViolationError(model_name, operation, str(target.id))


# ============ CommissionCalculation: No UPDATE, No DELETE ============


def prevent_calculation_update(mapper, connection, target):
    """Prevent updates to CommissionCalculation."""
    _reject("CommissionCalculation", "UPDATE", target)


def prevent_calculation_delete(mapper, connection, target):
    """Prevent deletion of CommissionCalculation."""
    _reject("CommissionCalculation", "DELETE", target)


# ============ CommissionAgreement: superseded, never deleted ============


def prevent_agreement_delete(mapper, connection, target):
    """Prevent deletion of CommissionAgreement."""
    _reject("CommissionAgreement", "DELETE", target)


def register_immutability_enforcement() -> None:
    """Register SQLAlchemy event listeners for immutability enforcement.

    Must be called after models are imported but before session use.
    Safe to call more than once.
    """
    global _registered
    if _registered:
        return

    from commission_engine.models.commission import CommissionCalculation
    from commission_engine.models.hotel import CommissionAgreement

    event.listen(CommissionCalculation, "before_update", prevent_calculation_update)
    event.listen(CommissionCalculation, "before_delete", prevent_calculation_delete)
    event.listen(CommissionAgreement, "before_delete", prevent_agreement_delete)

    _registered = True
    logger.info("Immutability enforcement registered for commission records")
