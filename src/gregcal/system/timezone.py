"""
Local timezone name discovery.

On most Unix systems /etc/localtime is a symlink into a zoneinfo tree, e.g.
/usr/share/zoneinfo/Europe/London. The zone name is recovered from the
trailing path components that begin with an uppercase letter.
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Optional, Protocol, Union

log = logging.getLogger(__name__)


class TimezoneSource(Protocol):
    def zone(self) -> Optional[str]: ...


def _is_tz_component(component: str) -> bool:
    return bool(component) and component[0].isupper()


def extract_timezone(path: Union[str, os.PathLike]) -> str:
    """Return the zoneinfo-style name at the end of `path` ("" if none)."""
    bits = []
    for part in reversed(PurePath(path).parts):
        if not _is_tz_component(part):
            break
        bits.append(part)
    return "/".join(reversed(bits))


class SymlinkTimezone:
    """TimezoneSource that reads the target of a localtime symlink."""

    def __init__(self, path: Union[str, os.PathLike, None] = None):
        if path is None:
            from ..config import load_settings
            path = load_settings().localtime_path
        self.path = path

    def zone(self) -> Optional[str]:
        try:
            target = os.readlink(self.path)
        except OSError as e:
            log.debug("cannot read timezone link %s: %s", self.path, e)
            return None
        tz = extract_timezone(target)
        log.debug("timezone link %s -> %s (zone %r)", self.path, target, tz)
        return tz or None


class FixedTimezone:
    """TimezoneSource returning a fixed (possibly absent) name."""

    def __init__(self, name: Optional[str]):
        self.name = name

    def zone(self) -> Optional[str]:
        return self.name
