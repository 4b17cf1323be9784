from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

from .attributes import compute_attributes
from .config import load_settings
from .core.date import Date
from .formatting.parser import DateFormat
from .system.clock import ClockSource, SystemClock
from .system.timezone import SymlinkTimezone, TimezoneSource

SECONDS_PER_DAY = 86400

def today(clock: Optional[ClockSource] = None) -> Date:
    """The current UTC date according to `clock` (the OS clock by default)."""
    seconds, _millis = (clock or SystemClock()).now()
    return Date.from_days(seconds // SECONDS_PER_DAY)

def local_timezone(source: Optional[TimezoneSource] = None) -> Optional[str]:
    return (source or SymlinkTimezone()).zone()

def compile_format(template: str) -> DateFormat:
    return DateFormat.parse(template)

def format_date(when: Date, template: Union[str, DateFormat, None] = None) -> str:
    """Render `when` through `template` (GREGCAL_FORMAT or "{:Y}-{:M}-{:D}" when omitted)."""
    if template is None:
        template = load_settings().default_format
    fmt = template if isinstance(template, DateFormat) else DateFormat.parse(template)
    return fmt.render(when)

def date_info(when: Date, *, attributes: Sequence[str] = ()) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "date": str(when),
        "days": when.days,
        "year": when.year,
        "month": int(when.month),
        "day": when.day,
        "weekday": when.weekday.name.capitalize(),
        "yearday": when.yearday,
    }
    if attributes:
        out.update(compute_attributes(when, attributes))
    return out
