# src/creative_report/dates.py
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from creative_report.exceptions import MonthFormatError


def last_day_of_month(year: int, month: int) -> date:
    """Return the last calendar day of the given month."""
    next_month = 1 if month == 12 else month + 1
    next_month_year = year + 1 if month == 12 else year
    return date(next_month_year, next_month, 1) - timedelta(days=1)


@dataclass(frozen=True)
class MonthSpec:
    """A calendar month used as the reporting period."""
    year: int
    month: int

    @property
    def start_date(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end_date(self) -> date:
        return last_day_of_month(self.year, self.month)

    @property
    def label(self) -> str:
        """Display form, e.g. ``02.2024``."""
        return self.start_date.strftime("%m.%Y")


def parse_month(value: str) -> MonthSpec:
    """Parse a ``YYYY-MM`` month argument."""
    try:
        parsed = datetime.strptime(f"{value}-01", "%Y-%m-%d")
    except ValueError as e:
        raise MonthFormatError(value) from e
    return MonthSpec(year=parsed.year, month=parsed.month)


def previous_month(today: date | None = None) -> MonthSpec:
    """Return the month before the one containing ``today`` (UTC now by default)."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    day_before = today.replace(day=1) - timedelta(days=1)
    return MonthSpec(year=day_before.year, month=day_before.month)
