"""
goal_core.utils
Small reusable helpers.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo
from .config import LOCAL_TIMEZONE

def normalize_spaces(text: str) -> str:
    return " ".join((text or "").split()).strip()

def now_local(tz_name: str = LOCAL_TIMEZONE) -> datetime:
    try:
        return datetime.now(ZoneInfo(tz_name))
    except Exception:
        return datetime.now()

def timestamp_line(prefix: str = "Generated", now: Optional[datetime] = None) -> str:
    dt = now or now_local()
    return f"{prefix}: {dt.strftime('%Y-%m-%d %H:%M:%S')}"

def export_stamp(now: Optional[datetime] = None) -> str:
    dt = now or now_local()
    return dt.strftime("%Y-%m-%dT%H-%M-%S")

def stamped_filename(template: str, now: Optional[datetime] = None) -> str:
    return template.replace("{stamp}", export_stamp(now))
