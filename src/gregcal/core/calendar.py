"""
gregcal.core.calendar
---------------------
Pure proleptic-Gregorian conversions between (year, month, day),
(year, day-of-year) and a signed day count from 1970-01-01.

All arithmetic is integer-only. Python's floor division makes the
Fliegel-Van Flandern formulas valid for every integer year, including
year 0 (= 1 BC) and negative years.
"""

from __future__ import annotations

from .types import DateParts, DaysSinceEpoch, Month, Weekday, YearDay, YearMonthDay

# JDN of the epoch day 1970-01-01.
JDN_EPOCH = 2440588

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    if month == Month.FEBRUARY and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def to_jdn(ymd: YearMonthDay) -> int:
    """Convert a Gregorian date to its Julian Day Number (JDN).

    `ymd.day` may be 0, which lands on the last day of the previous month.
    """
    y, m, day = ymd.year, int(ymd.month), ymd.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> YearMonthDay:
    """Fliegel-Van Flandern inverse of to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return YearMonthDay(year, Month(month), day)


def to_days_since_epoch(ymd: YearMonthDay) -> DaysSinceEpoch:
    return DaysSinceEpoch(to_jdn(ymd) - JDN_EPOCH)


def from_days_since_epoch(days: int) -> DateParts:
    jdn = days + JDN_EPOCH
    ymd = from_jdn(jdn)
    # JDN 0 was a Monday.
    weekday = Weekday(jdn % 7 + 1)
    jan_0 = to_jdn(YearMonthDay(ymd.year, Month.JANUARY, 0))
    return DateParts(ymd=ymd, weekday=weekday, yd=YearDay(ymd.year, jdn - jan_0))


def year_day_to_days(yd: YearDay) -> DaysSinceEpoch:
    """(year, day-of-year) -> day count. No range check; see Date.yd for the checked form."""
    jan_0 = to_days_since_epoch(YearMonthDay(yd.year, Month.JANUARY, 0))
    return DaysSinceEpoch(jan_0 + yd.yearday)
