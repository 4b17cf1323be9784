from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _pydate
from functools import cached_property
from typing import Union

from .calendar import (
    JDN_EPOCH,
    days_in_month,
    days_in_year,
    from_days_since_epoch,
    is_leap_year,
    to_days_since_epoch,
    year_day_to_days,
)
from .errors import RangeError
from .types import DateParts, DaysSinceEpoch, Month, Weekday, YearDay, YearMonthDay

# Day count of datetime.date(1, 1, 1), i.e. ordinal 1.
_PYDATE_ORDINAL_OFFSET = 719163


def _check_range(name: str, value: int, low: int, high: int) -> int:
    if not (low <= value <= high):
        raise RangeError(name, value, low, high)
    return value


@dataclass(frozen=True, order=True)
class Date:
    """
    A proleptic-Gregorian calendar date, stored as a day count from 1970-01-01.

    Only the day count is stored; year, month, day, weekday and day-of-year
    are derived on demand. Equality, hashing and ordering use the day count
    alone.

    >>> d = Date.yd(2015, 256)
    >>> (d.year, d.month, d.day)
    (2015, <Month.SEPTEMBER: 9>, 13)
    """
    days: DaysSinceEpoch

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_days(cls, days: int) -> "Date":
        return cls(DaysSinceEpoch(int(days)))

    @classmethod
    def yd(cls, year: int, yearday: int) -> "Date":
        """
        Build a date from a year and a day-of-year (1 = 1 January).

        Raises RangeError if `yearday` is outside [1, days_in_year(year)].
        """
        _check_range("yearday", yearday, 1, days_in_year(year))
        return cls(year_day_to_days(YearDay(year, yearday)))

    from_year_day = yd

    @classmethod
    def ymd(cls, year: int, month: Union[int, Month], day: int) -> "Date":
        month = Month(_check_range("month", int(month), 1, 12))
        _check_range("day", day, 1, days_in_month(year, month))
        return cls(to_days_since_epoch(YearMonthDay(year, month, day)))

    @classmethod
    def from_jdn(cls, jdn: int) -> "Date":
        return cls(DaysSinceEpoch(jdn - JDN_EPOCH))

    @classmethod
    def from_date(cls, d: _pydate) -> "Date":
        return cls(DaysSinceEpoch(d.toordinal() - _PYDATE_ORDINAL_OFFSET))

    def to_date(self) -> _pydate:
        """Convert to datetime.date (years 1..9999 only)."""
        return _pydate.fromordinal(self.days + _PYDATE_ORDINAL_OFFSET)

    # ---------------------------------------------------------
    # Derived attributes
    # ---------------------------------------------------------

    @cached_property
    def _parts(self) -> DateParts:
        return from_days_since_epoch(self.days)

    @property
    def year(self) -> int:
        return self._parts.ymd.year

    @property
    def month(self) -> Month:
        return self._parts.ymd.month

    @property
    def day(self) -> int:
        return self._parts.ymd.day

    @property
    def weekday(self) -> Weekday:
        return self._parts.weekday

    @property
    def yearday(self) -> int:
        return self._parts.yd.yearday

    @property
    def year_of_century(self) -> int:
        # Floor modulo keeps this in 0..99 for negative years too.
        return self.year % 100

    @property
    def jdn(self) -> int:
        return self.days + JDN_EPOCH

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def to_ymd(self) -> YearMonthDay:
        return self._parts.ymd

    def to_yd(self) -> YearDay:
        return self._parts.yd

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def __add__(self, delta: int) -> "Date":
        if not isinstance(delta, int):
            return NotImplemented
        return Date(DaysSinceEpoch(self.days + delta))

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Date):
            return self.days - other.days
        if isinstance(other, int):
            return Date(DaysSinceEpoch(self.days - other))
        return NotImplemented

    def __str__(self) -> str:
        y = self.year
        sign = "-" if y < 0 else ""
        return f"{sign}{abs(y):04d}-{int(self.month):02d}-{self.day:02d}"
