"""Commission calculation domain logic.

CRITICAL BUSINESS LOGIC:
- PERCENTAGE agreements: base = booking amount x base rate
- FLAT_FEE agreements: base = flat amount, independent of the booking amount
- PREFERRED hotels earn the agreement's preferred bonus rate on top;
  STANDARD hotels never do, even when a rate is configured
- Volume tiers: only the highest qualifying tier applies (non-cumulative)
- total = base + preferred bonus + tier bonus, exact, never rounded here

The calculator is pure. It does not check booking status or duplicate
calculations; callers enforce those preconditions.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from commission_engine.core.exceptions import InvalidAgreementError
from commission_engine.domain.enums import CommissionType, HotelStatus
from commission_engine.domain.money import Money, to_decimal
from commission_engine.domain.tier_selector import TierTerms, select_tier


@dataclass(frozen=True)
class CalculationInput:
    """Everything needed to price one booking's commission."""

    booking_amount: Money
    agreement_type: CommissionType | str
    hotel_status: HotelStatus | str
    base_rate: Decimal | None = None
    flat_amount: Money | None = None
    preferred_bonus: Decimal | None = None
    tier_rules: list[TierTerms] = field(default_factory=list)
    monthly_booking_count: int = 0


@dataclass(frozen=True)
class CommissionBreakdown:
    """Result of one calculation run."""

    base_amount: Money
    base_rate: Decimal | None
    preferred_bonus: Money
    tier_bonus: Money
    total_amount: Money
    applied_tier_rule: TierTerms | None


def _coerce_type(agreement_type: CommissionType | str) -> CommissionType:
    if isinstance(agreement_type, CommissionType):
        return agreement_type
    try:
        return CommissionType(agreement_type)
    except ValueError:
        raise InvalidAgreementError(f"Unknown commission type: {agreement_type}") from None


def _calculate_base(data: CalculationInput) -> tuple[Money, Decimal | None]:
    agreement_type = _coerce_type(data.agreement_type)

    if agreement_type == CommissionType.PERCENTAGE:
        if data.base_rate is None:
            raise InvalidAgreementError("PERCENTAGE agreement must have baseRate")
        base_rate = to_decimal(data.base_rate)
        return data.booking_amount.times(base_rate), base_rate

    if agreement_type == CommissionType.FLAT_FEE:
        if data.flat_amount is None:
            raise InvalidAgreementError("FLAT_FEE agreement must have flatAmount")
        return Money.of(data.flat_amount), None

    raise InvalidAgreementError(f"Unknown commission type: {agreement_type}")


def _calculate_preferred_bonus(data: CalculationInput) -> Money:
    if data.hotel_status == HotelStatus.PREFERRED and data.preferred_bonus is not None:
        return data.booking_amount.times(data.preferred_bonus)
    return Money.zero()


def _calculate_tier_bonus(data: CalculationInput) -> tuple[Money, TierTerms | None]:
    tier = select_tier(data.monthly_booking_count, data.tier_rules)
    if tier is None:
        return Money.zero(), None
    applied = TierTerms(min_bookings=tier.min_bookings, bonus_rate=to_decimal(tier.bonus_rate))
    return data.booking_amount.times(applied.bonus_rate), applied


def calculate_commission(data: CalculationInput) -> CommissionBreakdown:
    """Compute the commission breakdown for one booking.

    Args:
        data: Booking amount, agreement terms, hotel status and the hotel's
            completed-booking count for the month so far

    Returns:
        CommissionBreakdown: base, bonuses, total and the applied tier

    Raises:
        InvalidAgreementError: agreement terms are inconsistent
    """
    base_amount, base_rate = _calculate_base(data)
    preferred_bonus = _calculate_preferred_bonus(data)
    tier_bonus, applied_tier_rule = _calculate_tier_bonus(data)

    return CommissionBreakdown(
        base_amount=base_amount,
        base_rate=base_rate,
        preferred_bonus=preferred_bonus,
        tier_bonus=tier_bonus,
        total_amount=base_amount + preferred_bonus + tier_bonus,
        applied_tier_rule=applied_tier_rule,
    )
