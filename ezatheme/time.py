"""Timestamp formatting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from functools import lru_cache
from typing import Optional

from wcwidth import wcswidth


def _display_width(text: str) -> int:
    width = wcswidth(text)
    return len(text) if width < 0 else width


@lru_cache(maxsize=None)
def _current_year() -> int:
    return datetime.now().year


@lru_cache(maxsize=None)
def _max_month_width() -> int:
    """The widest abbreviated month name in the current locale."""
    return max(
        _display_width(datetime(2000, month, 1).strftime("%b"))
        for month in range(1, 13)
    )


def _is_recent(time: datetime) -> bool:
    return time.year == _current_year()


def short_month_padding(max_month_width: int, month: str) -> int:
    """Return the character count to pad ``month`` to ``max_month_width`` columns.

    Padding counts characters while alignment needs display columns, so wide
    characters shrink the padding and zero-width ones grow it.
    """
    shift = len(month) - _display_width(month)
    return max_month_width + shift


_UNITS = (
    (31_557_600, "year"),
    (2_630_016, "month"),
    (604_800, "week"),
    (86_400, "day"),
    (3_600, "hour"),
    (60, "minute"),
    (1, "second"),
)


def format_relative(seconds: int) -> str:
    """Describe a duration in its largest whole unit, such as ``3 days``."""
    seconds = max(0, int(seconds))
    for size, name in _UNITS:
        if seconds >= size:
            count = seconds // size
            return f"{count} {name}{'' if count == 1 else 's'}"
    return "now"


def _year(time: datetime) -> str:
    return f"{time.year:04d}"


def _default(time: datetime) -> str:
    month = time.strftime("%b")
    width = short_month_padding(_max_month_width(), month)
    day = f"{time.day:>2}"
    if _is_recent(time):
        return f"{day} {month:<{width}} {time:%H:%M}"
    return f"{day} {month:<{width}}  {_year(time)}"


def _iso(time: datetime) -> str:
    if _is_recent(time):
        return f"{time:%m-%d %H:%M}"
    return f"{_year(time)}-{time:%m-%d}"


def _long(time: datetime) -> str:
    return f"{_year(time)}-{time:%m-%d %H:%M}"


def _offset(time: datetime) -> str:
    delta = time.utcoffset()
    minutes = 0 if delta is None else int(delta.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{mins:02d}"


def _full(time: datetime) -> str:
    nanos = time.microsecond * 1000
    return f"{_year(time)}-{time:%m-%d %H:%M:%S}.{nanos:09d} {_offset(time)}"


def _relative(time: datetime) -> str:
    now = datetime.now(timezone.utc)
    if time.tzinfo is None:
        time = time.astimezone()
    return format_relative(int(now.timestamp()) - int(time.timestamp()))


class TimeFormat(Enum):
    """The built-in timestamp styles."""

    DEFAULT = "default"
    ISO = "iso"
    LONG_ISO = "long-iso"
    FULL_ISO = "full-iso"
    RELATIVE = "relative"

    def format(self, time: datetime) -> str:
        """Render ``time`` in this style."""
        if self is TimeFormat.DEFAULT:
            return _default(time)
        if self is TimeFormat.ISO:
            return _iso(time)
        if self is TimeFormat.LONG_ISO:
            return _long(time)
        if self is TimeFormat.FULL_ISO:
            return _full(time)
        return _relative(time)


@dataclass(frozen=True)
class CustomFormat:
    """User-given strftime formats, optionally a different one for this year."""

    non_recent: str
    recent: Optional[str] = None

    def format(self, time: datetime) -> str:
        """Render ``time`` with the recent format if it is from this year."""
        if self.recent is not None and _is_recent(time):
            return time.strftime(self.recent)
        return time.strftime(self.non_recent)