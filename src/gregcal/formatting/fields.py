"""
gregcal.formatting.fields
-------------------------
Compiled template units. A template compiles to a sequence of these; each
directive carries its own padding arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, Union

from ..core.date import Date
from ..core.types import Month, Weekday


class Alignment(Enum):
    LEFT = "<"
    RIGHT = ">"
    MIDDLE = "^"


@dataclass(frozen=True)
class Arguments:
    alignment: Optional[Alignment] = None
    width: Optional[int] = None
    pad_char: Optional[str] = None

    def is_empty(self) -> bool:
        return self.alignment is None and self.width is None and self.pad_char is None

    def pad(self, text: str) -> str:
        """Pad `text` to `width`; never truncates. Defaults: width 0, space, left."""
        width = self.width or 0
        if len(text) >= width:
            return text
        fill = self.pad_char if self.pad_char is not None else " "
        align = (self.alignment or Alignment.LEFT).value
        return format(text, f"{fill}{align}{width}")


@dataclass(frozen=True)
class NumArguments:
    args: Arguments = Arguments()

    def format(self, out: TextIO, number: int) -> None:
        out.write(self.args.pad(str(number)))


@dataclass(frozen=True)
class TextArguments:
    args: Arguments = Arguments()

    def format(self, out: TextIO, text: str) -> None:
        out.write(self.args.pad(text))


# ------------------------------------------------------------------
# Name tables, indexed by ordinal (index 0 unused)
# ------------------------------------------------------------------

LONG_MONTH_NAMES = (
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
SHORT_MONTH_NAMES = (
    "", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
LONG_WEEKDAY_NAMES = (
    "", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
SHORT_WEEKDAY_NAMES = ("", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def month_name(month: Month, long: bool = True) -> str:
    return (LONG_MONTH_NAMES if long else SHORT_MONTH_NAMES)[month]


def weekday_name(weekday: Weekday, long: bool = True) -> str:
    return (LONG_WEEKDAY_NAMES if long else SHORT_WEEKDAY_NAMES)[weekday]


# ------------------------------------------------------------------
# Field variants
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    """A span [start, end) of the source template, resolved at render time."""
    start: int
    end: int

    def text(self, template: str) -> str:
        return template[self.start:self.end]

    def format(self, template: str, when: Date, out: TextIO) -> None:
        out.write(template[self.start:self.end])


@dataclass(frozen=True)
class Year:
    args: NumArguments = NumArguments()

    def format(self, template: str, when: Date, out: TextIO) -> None:
        self.args.format(out, when.year)


@dataclass(frozen=True)
class YearOfCentury:
    args: NumArguments = NumArguments()

    def format(self, template: str, when: Date, out: TextIO) -> None:
        self.args.format(out, when.year_of_century)


@dataclass(frozen=True)
class MonthName:
    long: bool = True
    args: TextArguments = TextArguments()

    def format(self, template: str, when: Date, out: TextIO) -> None:
        self.args.format(out, month_name(when.month, self.long))


@dataclass(frozen=True)
class MonthNumber:
    args: NumArguments = NumArguments()

    def format(self, template: str, when: Date, out: TextIO) -> None:
        self.args.format(out, int(when.month))


@dataclass(frozen=True)
class Day:
    args: NumArguments = NumArguments()

    def format(self, template: str, when: Date, out: TextIO) -> None:
        self.args.format(out, when.day)


@dataclass(frozen=True)
class YearDayNumber:
    args: NumArguments = NumArguments()

    def format(self, template: str, when: Date, out: TextIO) -> None:
        self.args.format(out, when.yearday)


@dataclass(frozen=True)
class WeekdayName:
    long: bool = True
    args: TextArguments = TextArguments()

    def format(self, template: str, when: Date, out: TextIO) -> None:
        self.args.format(out, weekday_name(when.weekday, self.long))


Field = Union[Literal, Year, YearOfCentury, MonthName, MonthNumber, Day, YearDayNumber, WeekdayName]
