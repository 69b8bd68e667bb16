from datetime import date, datetime, timedelta, timezone

import pytest

from atelier.calendar_tools import (
    days_until_christmas,
    main,
    minutes_until_year_end,
    years_with_wednesday_fifteenth,
)


def test_day_before_christmas():
    assert days_until_christmas(datetime(2023, 12, 24)) == 1


def test_same_day_partial_counts_as_zero():
    assert days_until_christmas(datetime(2023, 12, 24, 12, 0)) == 0


def test_on_christmas_targets_next_year():
    now = datetime(2023, 12, 25)
    expected = (datetime(2024, 12, 25) - now).days
    assert days_until_christmas(now) == expected


def test_days_until_christmas_timezone_aware():
    now = datetime(2023, 12, 20, tzinfo=timezone.utc)
    naive = datetime(2023, 12, 20)
    assert days_until_christmas(now) == days_until_christmas(naive)


def test_days_bounds_over_year():
    start = datetime(2023, 1, 1)
    for offset in range(0, 365, 17):
        assert 0 <= days_until_christmas(start + timedelta(days=offset)) <= 366


def test_minutes_last_hour():
    assert minutes_until_year_end(datetime(2023, 12, 31, 23, 0)) == 60


def test_minutes_decrease_with_time():
    now = datetime(2023, 6, 1, 8, 30)
    later = now + timedelta(minutes=5)
    assert minutes_until_year_end(now) - minutes_until_year_end(later) == 5


def test_wednesday_years_pinned():
    assert years_with_wednesday_fifteenth(2020, 2025) == [2020, 2025]


def test_wednesday_years_invariant():
    years = years_with_wednesday_fifteenth(1950, 2050)
    assert years
    assert all(date(y, 1, 15).weekday() == 2 for y in years)
    assert all(1950 <= y <= 2050 for y in years)


def test_wednesday_years_empty_range():
    assert years_with_wednesday_fifteenth(2025, 2020) == []


def test_main_wednesdays(capsys):
    assert main(["wednesdays", "2020", "2020"]) == 0
    out = capsys.readouterr().out
    assert out == "In year 2020, the 15th day of some month is a Wednesday.\n"


def test_main_requires_both_years():
    with pytest.raises(SystemExit):
        main(["wednesdays", "2020"])


def test_main_christmas_output(capsys):
    assert main(["christmas"]) == 0
    assert capsys.readouterr().out.startswith("Days remaining until the next Christmas: ")