"""Byte, duration, throughput and timestamp rendering for status lines.

The helpers here are best-effort: they never raise for representable input.
Conversions that can fail (scaling a byte count, turning a timestamp into a
string) return ``None`` and leave the choice of a shorter rendering to the
caller.
"""

from __future__ import annotations

import time
from datetime import datetime

BYTE_SIZE_UNIT = 1024

_UNIT_PREFIXES = ("", "K", "M", "G", "T", "P", "E", "Z", "Y")


def byte_size_string(size: int) -> str | None:
    """Render ``size`` with a binary unit and one truncated decimal.

    >>> byte_size_string(2 * 1024 * 1024)
    '2.0 MiB'
    >>> byte_size_string(1536)
    '1.5 KiB'
    """
    if size < 0:
        return None

    factor = 0
    remainder = 0
    while size >= BYTE_SIZE_UNIT:
        remainder = size % BYTE_SIZE_UNIT
        size //= BYTE_SIZE_UNIT
        factor += 1
        if factor >= len(_UNIT_PREFIXES):
            return None

    if factor == 0:
        return f"{size} B"
    decimal = (remainder * 10) // BYTE_SIZE_UNIT
    return f"{size}.{decimal} {_UNIT_PREFIXES[factor]}iB"


def format_bytes(size: int) -> str:
    """Return ``" <human> (<raw> bytes)"`` or ``" <raw> bytes"``.

    The leading space is part of the result so the value can be appended
    directly to a label.
    """
    human = byte_size_string(size) if size > BYTE_SIZE_UNIT else None
    if human is not None:
        return f" {human} ({size} bytes)"
    return f" {size} bytes"


def format_duration(seconds: int) -> str | None:
    """Break an elapsed number of seconds into days, hours, minutes, seconds.

    The decomposition goes through ``time.gmtime`` so days are the UTC
    day-of-year of the elapsed offset. Returns ``None`` when the platform
    cannot convert the value.
    """
    try:
        elements = time.gmtime(seconds)
    except (OverflowError, OSError, ValueError):
        return None

    days = elements.tm_yday - 1
    hours = elements.tm_hour
    minutes = elements.tm_min
    # An elapsed duration is not a wall-clock instant; drop any DST hour.
    if elements.tm_isdst > 0:
        hours -= 1

    if days > 0:
        prefix = f"{days} day(s), {hours} hour(s), {minutes} minute(s) and "
    elif hours > 0:
        prefix = f"{hours} hour(s), {minutes} minute(s) and "
    elif minutes > 0:
        prefix = f"{minutes} minute(s) and "
    else:
        prefix = ""
    return f"{prefix}{elements.tm_sec} second(s)"


def bytes_per_second(size: int, seconds: int) -> int | None:
    """Integer throughput, or ``None`` when no time has elapsed."""
    if seconds <= 0:
        return None
    return size // seconds


def format_throughput(size: int, seconds: int) -> str:
    """Return ``" with ..."`` describing the throughput, or ``""``."""
    rate = bytes_per_second(size, seconds)
    if rate is None:
        return ""

    human = byte_size_string(rate) if rate > BYTE_SIZE_UNIT else None
    if human is not None:
        return f" with {human}/s ({rate} bytes/second)"
    return f" with {rate} bytes/second"


def format_timestamp(timestamp: float) -> str | None:
    """Render a wall-clock timestamp as local ``ctime`` text.

    Returns ``None`` when the timestamp is outside the platform's range.
    """
    try:
        return datetime.fromtimestamp(timestamp).ctime()
    except (OverflowError, OSError, ValueError):
        return None


__all__ = [
    "BYTE_SIZE_UNIT",
    "byte_size_string",
    "bytes_per_second",
    "format_bytes",
    "format_duration",
    "format_throughput",
    "format_timestamp",
]
