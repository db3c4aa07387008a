"""Calendar month windows for reporting and volume counting."""

import re
from calendar import monthrange
from dataclasses import dataclass
from datetime import UTC, date, datetime, time

from commission_engine.core.exceptions import InvalidInputError

MONTH_PATTERN = re.compile(r"^\s*(\d+)-(\d+)\s*$")


@dataclass(frozen=True)
class MonthWindow:
    """A calendar month with an inclusive ``[start, end]`` instant range."""

    month: str
    start: datetime
    end: datetime


def parse_month(token: str) -> MonthWindow:
    """Parse a ``YYYY-MM`` token into its month window (UTC).

    The window ends at the last instant of the month's final day.
    """
    match = MONTH_PATTERN.match(token or "")
    if not match:
        raise InvalidInputError("Invalid month format. Use YYYY-MM")

    year, month = int(match.group(1)), int(match.group(2))
    if year < 1 or year > 9999 or month < 1 or month > 12:
        raise InvalidInputError("Invalid month format. Use YYYY-MM")

    _, last_day = monthrange(year, month)
    start = datetime(year, month, 1, tzinfo=UTC)
    end = datetime.combine(date(year, month, last_day), time.max, tzinfo=UTC)

    return MonthWindow(month=f"{year:04d}-{month:02d}", start=start, end=end)


def start_of_month(instant: datetime) -> datetime:
    """First instant of the month containing ``instant`` (same tzinfo)."""
    return instant.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
