"""Monthly commission reporting (read-only)."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from commission_engine.domain.money import Money, sum_money
from commission_engine.domain.periods import MonthWindow, parse_month
from commission_engine.repositories.base import CommissionRepository
from commission_engine.schemas.commission import (
    CommissionLineItem,
    CommissionPeriod,
    HotelCommissionSummary,
    MonthlyCommissionSummary,
    MonthlyCommissionTotals,
)

logger = logging.getLogger(__name__)


@dataclass
class _HotelAccumulator:
    """Running totals for one hotel, owned by a single aggregation call."""

    hotel_id: object
    hotel_name: str
    hotel_status: str
    total_commission: Money = field(default_factory=Money.zero)
    booking_count: int = 0
    line_items: list[CommissionLineItem] = field(default_factory=list)

    def add(self, calculation) -> None:
        commission = Money.of(calculation.total_amount)
        self.total_commission = self.total_commission + commission
        self.booking_count += 1
        self.line_items.append(
            CommissionLineItem(
                booking_id=calculation.booking.id,
                booking_amount=Money.of(calculation.booking.amount).amount,
                commission=commission.amount,
                calculated_at=calculation.calculated_at,
            )
        )

    def to_summary(self) -> HotelCommissionSummary:
        return HotelCommissionSummary(
            hotel_id=self.hotel_id,
            hotel_name=self.hotel_name,
            hotel_status=self.hotel_status,
            total_commission=self.total_commission.amount,
            booking_count=self.booking_count,
            calculations=self.line_items,
        )


def aggregate_monthly_commissions(
    calculations: Iterable,
    window: MonthWindow,
) -> MonthlyCommissionSummary:
    """Fold a month's calculations into per-hotel and grand totals.

    Hotels appear in order of first appearance. Each calculation must
    expose ``hotel`` (id, name, status), ``booking`` (id, amount),
    ``total_amount`` and ``calculated_at``.
    """
    hotels: dict = {}
    total_bookings = 0

    for calculation in calculations:
        hotel = calculation.hotel
        accumulator = hotels.get(hotel.id)
        if accumulator is None:
            accumulator = _HotelAccumulator(
                hotel_id=hotel.id,
                hotel_name=hotel.name,
                hotel_status=hotel.status,
            )
            hotels[hotel.id] = accumulator
        accumulator.add(calculation)
        total_bookings += 1

    grand_total = sum_money(acc.total_commission for acc in hotels.values())

    return MonthlyCommissionSummary(
        month=window.month,
        period=CommissionPeriod(start=window.start, end=window.end),
        summary=[acc.to_summary() for acc in hotels.values()],
        totals=MonthlyCommissionTotals(
            total_hotels=len(hotels),
            total_bookings=total_bookings,
            grand_total_commission=grand_total.amount,
        ),
    )


class ReportingService:
    """Read-only commission reporting service."""

    async def get_monthly_summary(
        self,
        repository: CommissionRepository,
        month: str,
    ) -> MonthlyCommissionSummary:
        """Get the per-hotel commission summary for a ``YYYY-MM`` month.

        Raises:
            InvalidInputError: malformed month token
        """
        window = parse_month(month)
        calculations = await repository.list_calculations_between(window.start, window.end)

        summary = aggregate_monthly_commissions(calculations, window)
        logger.info(
            f"Monthly commission summary month={window.month} hotels={summary.totals.total_hotels} "
            f"bookings={summary.totals.total_bookings} total={summary.totals.grand_total_commission}"
        )
        return summary


reporting_service = ReportingService()
