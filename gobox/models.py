"""The record kept for every package gobox has fetched."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[Tt]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>[Zz]|[+-]\d{2}:\d{2})"
)


def parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, keeping its UTC offset."""
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    micro = int((match["frac"] or "")[:6].ljust(6, "0"))
    tz_text = match["tz"]
    if tz_text in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if tz_text[0] == "-" else 1
        offset = timedelta(hours=int(tz_text[1:3]), minutes=int(tz_text[4:6]))
        tz = timezone(sign * offset)
    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        micro,
        tzinfo=tz,
    )


def format_time(moment: datetime) -> str:
    """Render a datetime as an RFC 3339 timestamp with trimmed fraction."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}T"
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _time_field(data: dict[str, Any], key: str) -> datetime:
    value = data.get(key)
    if value is None:
        return ZERO_TIME
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a timestamp string")
    return parse_time(value)


@dataclass
class Package:
    """A fetched package and how it has been used."""

    name: str = ""
    usage_count: int = 0
    last_used: datetime = field(default=ZERO_TIME)
    installed_at: datetime = field(default=ZERO_TIME)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping stored on disk."""
        return {
            "name": self.name,
            "usage_count": self.usage_count,
            "last_used": format_time(self.last_used),
            "installed_at": format_time(self.installed_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Package:
        """Build a package from a stored mapping; missing fields get zero values."""
        if not isinstance(data, dict):
            raise ValueError("package entry must be an object")
        name = data.get("name") or ""
        count = data.get("usage_count") or 0
        if not isinstance(name, str):
            raise ValueError("name must be a string")
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError("usage_count must be an integer")
        return cls(
            name=name,
            usage_count=count,
            last_used=_time_field(data, "last_used"),
            installed_at=_time_field(data, "installed_at"),
        )