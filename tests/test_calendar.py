# tests/test_calendar.py

import random
from datetime import date

import pytest

from gregcal.core import calendar as cal
from gregcal.core.types import Month, Weekday, YearDay, YearMonthDay


@pytest.mark.parametrize("year, leap", [
    (2000, True), (1900, False), (2015, False), (2016, True),
    (0, True), (-1, False), (-4, True), (-100, False), (-400, True), (2400, True),
])
def test_is_leap_year(year, leap):
    assert cal.is_leap_year(year) is leap
    assert cal.days_in_year(year) == (366 if leap else 365)


def test_days_in_month():
    assert cal.days_in_month(2015, Month.FEBRUARY) == 28
    assert cal.days_in_month(2016, Month.FEBRUARY) == 29
    assert cal.days_in_month(1900, 2) == 28
    assert cal.days_in_month(2015, 9) == 30
    assert sum(cal.days_in_month(2016, m) for m in range(1, 13)) == 366


def test_known_epochs():
    assert cal.to_days_since_epoch(YearMonthDay(1970, Month.JANUARY, 1)) == 0
    assert cal.to_days_since_epoch(YearMonthDay(2000, Month.JANUARY, 1)) == 10957
    assert cal.to_jdn(YearMonthDay(2000, Month.JANUARY, 1)) == 2451545
    assert cal.from_jdn(2451545) == YearMonthDay(2000, Month.JANUARY, 1)
    assert cal.to_days_since_epoch(YearMonthDay(1969, Month.DECEMBER, 31)) == -1


def test_day_zero_sentinel_is_last_day_of_previous_month():
    jan_0 = cal.to_days_since_epoch(YearMonthDay(2015, Month.JANUARY, 0))
    dec_31 = cal.to_days_since_epoch(YearMonthDay(2014, Month.DECEMBER, 31))
    assert jan_0 == dec_31
    mar_0 = cal.to_days_since_epoch(YearMonthDay(2016, Month.MARCH, 0))
    assert cal.from_days_since_epoch(mar_0).ymd == YearMonthDay(2016, Month.FEBRUARY, 29)


def test_from_days_since_epoch_parts():
    p = cal.from_days_since_epoch(cal.to_days_since_epoch(YearMonthDay(2015, Month.SEPTEMBER, 13)))
    assert p.ymd == YearMonthDay(2015, Month.SEPTEMBER, 13)
    assert p.weekday == Weekday.SUNDAY
    assert p.yd == YearDay(2015, 256)

    thursday = cal.from_days_since_epoch(0)
    assert thursday.weekday == Weekday.THURSDAY
    assert thursday.yd == YearDay(1970, 1)


def test_agrees_with_datetime():
    """Cross-check against the standard library over years 1..9999."""
    random.seed(42)
    base = date(1970, 1, 1).toordinal()
    for _ in range(5000):
        ordinal = random.randint(1, date(9999, 12, 31).toordinal())
        d = date.fromordinal(ordinal)
        days = ordinal - base
        parts = cal.from_days_since_epoch(days)
        assert (parts.ymd.year, parts.ymd.month, parts.ymd.day) == (d.year, d.month, d.day)
        assert parts.weekday == d.isoweekday()
        assert parts.yd.yearday == d.timetuple().tm_yday
        assert cal.to_days_since_epoch(YearMonthDay(d.year, Month(d.month), d.day)) == days


def test_roundtrip_including_negative_years():
    random.seed(42)
    for _ in range(10000):
        days = random.randint(-3_000_000, 3_000_000)
        parts = cal.from_days_since_epoch(days)
        assert cal.to_days_since_epoch(parts.ymd) == days
        assert cal.year_day_to_days(parts.yd) == days
        assert 1 <= parts.yd.yearday <= cal.days_in_year(parts.ymd.year)
        assert 1 <= parts.ymd.day <= cal.days_in_month(parts.ymd.year, parts.ymd.month)


def test_year_zero_is_not_skipped():
    dec_31_minus_1 = cal.to_days_since_epoch(YearMonthDay(-1, Month.DECEMBER, 31))
    jan_1_0 = cal.to_days_since_epoch(YearMonthDay(0, Month.JANUARY, 1))
    assert jan_1_0 - dec_31_minus_1 == 1
    feb_29_0 = cal.to_days_since_epoch(YearMonthDay(0, Month.FEBRUARY, 29))
    assert cal.from_days_since_epoch(feb_29_0).ymd == YearMonthDay(0, Month.FEBRUARY, 29)


def test_monotonic_across_month_and_year_boundaries():
    prev = None
    for y in (-401, -1, 0, 1, 1999, 2000):
        for m in range(1, 13):
            for d in range(1, cal.days_in_month(y, m) + 1):
                days = cal.to_days_since_epoch(YearMonthDay(y, Month(m), d))
                if prev is not None and d > 1:
                    assert days == prev + 1
                prev = days


def test_400_year_cycle_length():
    a = cal.to_days_since_epoch(YearMonthDay(2000, Month.MARCH, 1))
    b = cal.to_days_since_epoch(YearMonthDay(1600, Month.MARCH, 1))
    assert a - b == 146097
