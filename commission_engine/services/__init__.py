"""Application services."""

from commission_engine.services.accounting_export_service import accounting_export_service
from commission_engine.services.agreement_service import agreement_service
from commission_engine.services.booking_service import booking_service
from commission_engine.services.commission_service import commission_service
from commission_engine.services.reporting_service import reporting_service

__all__ = [
    "accounting_export_service",
    "agreement_service",
    "booking_service",
    "commission_service",
    "reporting_service",
]
