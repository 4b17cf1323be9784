from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import NewType

# Signed day count from 1970-01-01 (day 0).
DaysSinceEpoch = NewType("DaysSinceEpoch", int)


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    """ISO weekday numbering: Monday=1 .. Sunday=7."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True)
class YearMonthDay:
    year: int
    month: Month
    day: int  # 0 is the "day before the 1st" sentinel


@dataclass(frozen=True)
class YearDay:
    """Ordinal date. `yearday` counts from the January day-0 sentinel, so 1 is 1 January."""
    year: int
    yearday: int


@dataclass(frozen=True)
class DateParts:
    """Everything `from_days_since_epoch` derives from a day count."""
    ymd: YearMonthDay
    weekday: Weekday
    yd: YearDay
