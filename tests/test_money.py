from decimal import Decimal

from commission_engine.domain.money import Money, sum_money


def test_float_input_is_converted_through_str():
    assert Money.of(0.1).amount == Decimal("0.1")


def test_addition_is_exact():
    total = Money.of("0.1") + Money.of("0.2")
    assert total.amount == Decimal("0.3")


def test_times_keeps_full_precision():
    assert Money.of("1000.55").times("0.0825").amount == Decimal("82.545375")


def test_to_fixed_rounds_half_up():
    assert Money.of("82.545").to_fixed() == "82.55"
    assert Money.of("82.544").to_fixed() == "82.54"
    assert Money.of("250").to_fixed() == "250.00"


def test_divided_by_rounds_to_cents():
    assert Money.of("100").divided_by(3).amount == Decimal("33.33")
    assert Money.of("250").divided_by(2).to_fixed() == "125.00"


def test_divided_by_zero_count_is_zero():
    assert Money.of("100").divided_by(0).to_fixed() == "0.00"


def test_sum_money_of_many_small_amounts_has_no_drift():
    assert sum_money(Money.of("0.01") for _ in range(1000)).amount == Decimal("10.00")
