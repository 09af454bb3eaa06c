# tests/unit/test_dates.py
from datetime import date, timedelta
import pytest
from creative_report.dates import MonthSpec, last_day_of_month, parse_month, previous_month
from creative_report.exceptions import MonthFormatError


@pytest.mark.parametrize("year", [2023, 2024, 2100])
@pytest.mark.parametrize("month", range(1, 13))
def test_end_date_is_day_before_next_month(year, month):
    spec = MonthSpec(year=year, month=month)
    next_first = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)

    assert spec.start_date == date(year, month, 1)
    assert spec.end_date == next_first - timedelta(days=1)


def test_december_rolls_over_year():
    assert last_day_of_month(2023, 12) == date(2023, 12, 31)


def test_leap_february():
    assert last_day_of_month(2024, 2) == date(2024, 2, 29)
    assert last_day_of_month(2023, 2) == date(2023, 2, 28)


def test_previous_month_from_fixed_date():
    spec = previous_month(today=date(2024, 3, 15))

    assert spec == MonthSpec(year=2024, month=2)
    assert spec.start_date == date(2024, 2, 1)
    assert spec.end_date == date(2024, 2, 29)


def test_previous_month_in_january():
    assert previous_month(today=date(2024, 1, 1)) == MonthSpec(year=2023, month=12)


def test_parse_month():
    assert parse_month("2024-07") == MonthSpec(year=2024, month=7)


@pytest.mark.parametrize("value", ["", "2024", "2024-13", "2024-00", "07-2024", "2024-07-01", "abcd-ef"])
def test_parse_month_rejects_malformed(value):
    with pytest.raises(MonthFormatError, match="YYYY-MM"):
        parse_month(value)


def test_month_label():
    assert MonthSpec(year=2024, month=2).label == "02.2024"
