"""Accounting export service for monthly commission reports.

Downstream consumers parse the CSV positionally, so the row shape is fixed:

    Hotel Name,Hotel Status,Total Bookings,Total Commission (CHF),Avg Commission (CHF)
    "Grand Hotel Zurich",PREFERRED,2,250.00,125.00
    TOTAL,,2,250.00,
"""

import json
from datetime import UTC, datetime

from commission_engine.config import settings
from commission_engine.domain.enums import HotelStatus
from commission_engine.domain.money import Money
from commission_engine.repositories.base import CommissionRepository
from commission_engine.schemas.commission import MonthlyCommissionSummary
from commission_engine.services.reporting_service import reporting_service

CSV_HEADER = [
    "Hotel Name",
    "Hotel Status",
    "Total Bookings",
    "Total Commission (CHF)",
    "Avg Commission (CHF)",
]


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


class AccountingExportService:
    """Generate flat exports of monthly commission summaries."""

    def export_monthly_summary_csv(self, summary: MonthlyCommissionSummary) -> str:
        """Render one row per hotel plus a trailing TOTAL row."""
        rows = [CSV_HEADER]

        for hotel in summary.summary:
            total = Money.of(hotel.total_commission)
            average = total.divided_by(hotel.booking_count)
            rows.append([
                _quote(hotel.hotel_name),
                HotelStatus(hotel.hotel_status).value,
                str(hotel.booking_count),
                total.to_fixed(),
                average.to_fixed(),
            ])

        rows.append([
            "TOTAL",
            "",
            str(summary.totals.total_bookings),
            Money.of(summary.totals.grand_total_commission).to_fixed(),
            "",
        ])

        return "\n".join(",".join(row) for row in rows)

    def export_monthly_summary_json(self, summary: MonthlyCommissionSummary) -> str:
        """Export the summary as JSON with currency and generation time."""
        data = summary.model_dump(mode="json")
        data["currency"] = settings.report_currency
        data["generated_at"] = datetime.now(UTC).isoformat()
        return json.dumps(data, indent=2)

    async def export_month_csv(self, repository: CommissionRepository, month: str) -> str:
        """Aggregate a ``YYYY-MM`` month and render it as CSV."""
        summary = await reporting_service.get_monthly_summary(repository, month)
        return self.export_monthly_summary_csv(summary)

    async def export_month_json(self, repository: CommissionRepository, month: str) -> str:
        """Aggregate a ``YYYY-MM`` month and render it as JSON."""
        summary = await reporting_service.get_monthly_summary(repository, month)
        return self.export_monthly_summary_json(summary)


accounting_export_service = AccountingExportService()
