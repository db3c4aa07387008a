from decimal import Decimal

import pytest

from commission_engine.core.exceptions import InvalidAgreementError
from commission_engine.domain.commission_calculator import CalculationInput, calculate_commission
from commission_engine.domain.enums import CommissionType, HotelStatus
from commission_engine.domain.money import Money
from commission_engine.domain.tier_selector import TierTerms


def _input(**overrides):
    defaults = {
        "booking_amount": Money.of("1000"),
        "agreement_type": CommissionType.PERCENTAGE,
        "hotel_status": HotelStatus.STANDARD,
        "base_rate": Decimal("0.10"),
    }
    defaults.update(overrides)
    return CalculationInput(**defaults)


class TestBaseAmount:
    def test_percentage_multiplies_amount_by_rate(self):
        result = calculate_commission(_input(base_rate=Decimal("0.08")))

        assert result.base_amount.amount == Decimal("80")
        assert result.base_rate == Decimal("0.08")

    def test_percentage_is_exact_for_fractional_amounts(self):
        result = calculate_commission(
            _input(booking_amount=Money.of("1234.56"), base_rate=Decimal("0.0825"))
        )

        assert result.base_amount.amount == Decimal("101.851200")

    @pytest.mark.parametrize("amount", ["500", "10000"])
    def test_flat_fee_ignores_booking_amount(self, amount):
        result = calculate_commission(
            _input(
                booking_amount=Money.of(amount),
                agreement_type=CommissionType.FLAT_FEE,
                base_rate=None,
                flat_amount=Money.of("150"),
            )
        )

        assert result.base_amount.amount == Decimal("150")
        assert result.base_rate is None

    def test_zero_base_rate_counts_as_present(self):
        result = calculate_commission(_input(base_rate=Decimal("0")))
        assert result.total_amount.amount == Decimal("0")

    def test_percentage_without_rate_is_invalid(self):
        with pytest.raises(InvalidAgreementError, match="PERCENTAGE agreement must have baseRate"):
            calculate_commission(_input(base_rate=None))

    def test_flat_fee_without_amount_is_invalid(self):
        with pytest.raises(InvalidAgreementError, match="FLAT_FEE agreement must have flatAmount"):
            calculate_commission(_input(agreement_type=CommissionType.FLAT_FEE, base_rate=None))

    def test_unknown_type_is_invalid(self):
        with pytest.raises(InvalidAgreementError, match="Unknown commission type"):
            calculate_commission(_input(agreement_type="TIERED"))

    def test_string_type_is_accepted(self):
        result = calculate_commission(_input(agreement_type="PERCENTAGE"))
        assert result.base_amount.amount == Decimal("100")


class TestPreferredBonus:
    def test_preferred_hotel_receives_bonus(self):
        result = calculate_commission(
            _input(hotel_status=HotelStatus.PREFERRED, preferred_bonus=Decimal("0.02"))
        )

        assert result.preferred_bonus.amount == Decimal("20")
        assert result.total_amount.amount == Decimal("120")

    def test_standard_hotel_never_receives_bonus(self):
        result = calculate_commission(
            _input(hotel_status=HotelStatus.STANDARD, preferred_bonus=Decimal("0.02"))
        )

        assert result.preferred_bonus.amount == Decimal("0")

    def test_preferred_hotel_without_configured_rate(self):
        result = calculate_commission(_input(hotel_status="PREFERRED"))
        assert result.preferred_bonus.amount == Decimal("0")


class TestTierBonus:
    def test_highest_qualifying_tier_is_applied(self):
        # best tier wins, not the first declared one
        result = calculate_commission(
            _input(
                tier_rules=[
                    TierTerms(min_bookings=5, bonus_rate=Decimal("0.003")),
                    TierTerms(min_bookings=10, bonus_rate=Decimal("0.005")),
                ],
                monthly_booking_count=12,
            )
        )

        assert result.tier_bonus.amount == Decimal("5")
        assert result.applied_tier_rule == TierTerms(min_bookings=10, bonus_rate=Decimal("0.005"))

    def test_below_threshold_gives_no_bonus(self):
        result = calculate_commission(
            _input(
                tier_rules=[TierTerms(min_bookings=5, bonus_rate=Decimal("0.003"))],
                monthly_booking_count=4,
            )
        )

        assert result.tier_bonus.amount == Decimal("0")
        assert result.applied_tier_rule is None


class TestTotal:
    def test_standard_hotel_with_tier(self):
        result = calculate_commission(
            _input(
                base_rate=Decimal("0.08"),
                tier_rules=[TierTerms(min_bookings=10, bonus_rate=Decimal("0.005"))],
                monthly_booking_count=10,
            )
        )

        assert result.base_amount.amount == Decimal("80")
        assert result.preferred_bonus.amount == Decimal("0")
        assert result.tier_bonus.amount == Decimal("5")
        assert result.total_amount.amount == Decimal("85")

    @pytest.mark.parametrize("status", [HotelStatus.STANDARD, HotelStatus.PREFERRED])
    @pytest.mark.parametrize("count", [0, 10])
    def test_total_is_sum_of_parts(self, status, count):
        result = calculate_commission(
            _input(
                booking_amount=Money.of("777.77"),
                hotel_status=status,
                base_rate=Decimal("0.0725"),
                preferred_bonus=Decimal("0.015"),
                tier_rules=[TierTerms(min_bookings=10, bonus_rate=Decimal("0.0045"))],
                monthly_booking_count=count,
            )
        )

        expected = result.base_amount + result.preferred_bonus + result.tier_bonus
        assert result.total_amount == expected
