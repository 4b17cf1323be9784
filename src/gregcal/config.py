"""
gregcal.config

Settings come from environment variables and are read once:

  GREGCAL_LOCALTIME   symlink followed to find the local zone name (default /etc/localtime)
  GREGCAL_FORMAT      default template for format_date and the CLI
  GREGCAL_LOG_LEVEL   log level used by the CLI (default WARNING)

Call load_settings.cache_clear() after changing the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

log = logging.getLogger(__name__)

DEFAULT_FORMAT = "{:Y}-{:M}-{:D}"
DEFAULT_LOCALTIME = "/etc/localtime"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    localtime_path: str = DEFAULT_LOCALTIME
    default_format: str = DEFAULT_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL


def _env(name: str, default: str) -> str:
    v = os.environ.get(name, "").strip()
    return v or default


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    s = Settings(
        localtime_path=_env("GREGCAL_LOCALTIME", DEFAULT_LOCALTIME),
        default_format=os.environ.get("GREGCAL_FORMAT") or DEFAULT_FORMAT,
        log_level=_env("GREGCAL_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
    log.debug("loaded settings: %s", s)
    return s
