"""OS-facing collaborators. Nothing in gregcal.core or gregcal.formatting imports this package."""
from .clock import ClockSource, FixedClock, SystemClock
from .timezone import FixedTimezone, SymlinkTimezone, TimezoneSource, extract_timezone

__all__ = [
    "ClockSource",
    "FixedClock",
    "SystemClock",
    "FixedTimezone",
    "SymlinkTimezone",
    "TimezoneSource",
    "extract_timezone",
]
