"""gregcal public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .api import (
    compile_format,
    date_info,
    format_date,
    local_timezone,
    today,
)
from .core.calendar import (
    days_in_month,
    days_in_year,
    from_days_since_epoch,
    is_leap_year,
    to_days_since_epoch,
)
from .core.date import Date
from .core.errors import (
    CloseCurlyBrace,
    FormatError,
    GregcalError,
    InvalidChar,
    MissingField,
    OpenCurlyBrace,
    RangeError,
)
from .core.types import DaysSinceEpoch, Month, Weekday, YearDay, YearMonthDay
from .formatting import DateFormat

__all__ = [
    "compile_format",
    "date_info",
    "format_date",
    "local_timezone",
    "today",
    "days_in_month",
    "days_in_year",
    "from_days_since_epoch",
    "is_leap_year",
    "to_days_since_epoch",
    "Date",
    "DateFormat",
    "CloseCurlyBrace",
    "FormatError",
    "GregcalError",
    "InvalidChar",
    "MissingField",
    "OpenCurlyBrace",
    "RangeError",
    "DaysSinceEpoch",
    "Month",
    "Weekday",
    "YearDay",
    "YearMonthDay",
]
