from .fields import (
    Alignment,
    Arguments,
    Day,
    Field,
    Literal,
    MonthName,
    MonthNumber,
    NumArguments,
    TextArguments,
    WeekdayName,
    Year,
    YearDayNumber,
    YearOfCentury,
)
from .parser import DateFormat, FormatParser, parse
from .render import render, render_into

__all__ = [
    "Alignment",
    "Arguments",
    "Day",
    "Field",
    "Literal",
    "MonthName",
    "MonthNumber",
    "NumArguments",
    "TextArguments",
    "WeekdayName",
    "Year",
    "YearDayNumber",
    "YearOfCentury",
    "DateFormat",
    "FormatParser",
    "parse",
    "render",
    "render_into",
]
