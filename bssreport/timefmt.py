# bssreport/timefmt.py
"""Render instants in the report's fixed local timezone."""
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bssreport.config import TIMEZONE
from bssreport.exceptions import ConfigError

PLACEHOLDER = "-"
FORMAT = "%Y-%m-%d %H:%M:%S %Z"


@lru_cache(maxsize=None)
def load_zone(name: str = TIMEZONE) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"could not load {name} timezone: {e}") from e


def format_local(ts: Optional[datetime], tz_name: str = TIMEZONE) -> str:
    """`2024-01-15 13:00:00 CET`, or "-" when there is no instant. Naive input is UTC."""
    if ts is None:
        return PLACEHOLDER
    zone = load_zone(tz_name)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(zone).strftime(FORMAT)
