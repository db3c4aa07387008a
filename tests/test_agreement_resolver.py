import uuid
from datetime import UTC, datetime
from types import SimpleNamespace

import pytest

from commission_engine.core.exceptions import NotFoundError
from commission_engine.domain.agreement_resolver import resolve_agreement, supersede_agreements

HOTEL_ID = uuid.uuid4()


def _agreement(valid_from, valid_to=None, is_active=True, hotel_id=HOTEL_ID, rate="0.10"):
    return SimpleNamespace(
        hotel_id=hotel_id,
        valid_from=valid_from,
        valid_to=valid_to,
        is_active=is_active,
        base_rate=rate,
    )


def _at(day, month=3):
    return datetime(2024, month, day, tzinfo=UTC)


class TestResolveAgreement:
    def test_mid_month_change_selects_by_booking_date(self):
        march_first = _agreement(_at(1), valid_to=_at(16), is_active=False, rate="0.10")
        from_sixteenth = _agreement(_at(16), rate="0.12")
        agreements = [march_first, from_sixteenth]

        assert resolve_agreement(HOTEL_ID, _at(10), agreements) is march_first
        assert resolve_agreement(HOTEL_ID, _at(20), agreements) is from_sixteenth

    def test_interval_is_half_open(self):
        old = _agreement(_at(1), valid_to=_at(16))
        new = _agreement(_at(16))

        assert resolve_agreement(HOTEL_ID, _at(16), [old, new]) is new

    def test_valid_from_is_inclusive(self):
        agreement = _agreement(_at(1))
        assert resolve_agreement(HOTEL_ID, _at(1), [agreement]) is agreement

    def test_open_ended_agreement_covers_future(self):
        agreement = _agreement(_at(1))
        assert resolve_agreement(HOTEL_ID, datetime(2030, 1, 1, tzinfo=UTC), [agreement]) is agreement

    def test_inactive_flag_is_ignored(self):
        superseded = _agreement(_at(1), valid_to=_at(16), is_active=False)
        assert resolve_agreement(HOTEL_ID, _at(5), [superseded]) is superseded

    def test_overlap_prefers_latest_start(self):
        older = _agreement(_at(1))
        newer = _agreement(_at(10))

        assert resolve_agreement(HOTEL_ID, _at(12), [newer, older]) is newer
        assert resolve_agreement(HOTEL_ID, _at(12), [older, newer]) is newer

    def test_other_hotels_are_ignored(self):
        foreign = _agreement(_at(1), hotel_id=uuid.uuid4())

        with pytest.raises(NotFoundError):
            resolve_agreement(HOTEL_ID, _at(5), [foreign])

    def test_date_before_first_agreement_is_not_found(self):
        with pytest.raises(NotFoundError, match="No commission agreement found"):
            resolve_agreement(HOTEL_ID, _at(1, month=2), [_agreement(_at(1))])

    def test_no_agreements_is_not_found(self):
        with pytest.raises(NotFoundError):
            resolve_agreement(HOTEL_ID, _at(1), [])


class TestSupersedeAgreements:
    def test_active_agreement_is_closed_at_effective_time(self):
        current = _agreement(_at(1))

        superseded = supersede_agreements([current], _at(16))

        assert superseded == [current]
        assert current.is_active is False
        assert current.valid_to == _at(16)

    def test_earlier_end_date_is_kept(self):
        current = _agreement(_at(1), valid_to=_at(10))

        supersede_agreements([current], _at(16))

        assert current.valid_to == _at(10)
        assert current.is_active is False

    def test_inactive_agreements_are_untouched(self):
        old = _agreement(_at(1), valid_to=_at(5), is_active=False)

        assert supersede_agreements([old], _at(16)) == []
        assert old.valid_to == _at(5)
