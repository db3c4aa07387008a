"""Volume tier selection.

Tiers are non-cumulative: only the best qualifying tier applies, i.e. the
rule with the highest ``min_bookings`` that the monthly count reaches.
Storage or declaration order of the rules is irrelevant.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TierTerms:
    """A volume threshold and the bonus rate it grants."""

    min_bookings: int
    bonus_rate: Decimal


def select_tier(monthly_count: int, tier_rules: Iterable[TierTerms] | None) -> TierTerms | None:
    """Return the highest qualifying tier, or ``None`` if none qualifies.

    Works with any objects exposing ``min_bookings`` and ``bonus_rate``.
    On equal thresholds the first rule given wins.
    """
    best = None
    for rule in tier_rules or ():
        if rule.min_bookings > monthly_count:
            continue
        if best is None or rule.min_bookings > best.min_bookings:
            best = rule
    return best
