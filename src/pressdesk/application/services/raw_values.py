"""Tolerant readers for untyped metrics records.

Every reader returns ``None`` for values it cannot interpret, so callers
can apply their own defaults. Nothing here raises on bad input.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is a mapping, else an empty one."""
    if isinstance(value, Mapping):
        return value
    return {}


def as_list(value: Any) -> list[Any]:
    """Return ``value`` as a list if it is a list or tuple, else ``[]``."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def first_present(record: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-``None`` value stored under any of ``keys``."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def to_number(value: Any) -> float | None:
    """Read a finite number.

    Accepts ints, floats, Decimals and numeric strings (some backends send
    amounts as strings to keep precision). Booleans, NaN and infinities are
    rejected.
    """
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float, Decimal)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def to_int(value: Any) -> int | None:
    """Read a finite number and round it to the nearest integer."""
    number = to_number(value)
    if number is None:
        return None
    return int(round(number))


def to_text(value: Any) -> str | None:
    """Read a non-empty string; integers are accepted as identifiers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        text = value.strip()
        return text or None
    return None


def to_date(value: Any) -> date | None:
    """Read a calendar date from a date, datetime or ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def to_datetime(value: Any) -> datetime | None:
    """Read a timezone-aware datetime; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
