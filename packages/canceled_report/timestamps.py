"""``createdAt`` normalization into comparable sort keys.

Inputs in the wild carry creation timestamps either as epoch numbers or as
ISO-8601 strings. Rather than assuming one representation, the transformer
asks :func:`timestamp_key` for a sort key under a :class:`TimestampPolicy`:

- ``numeric``: ``int``/``float`` (not ``bool``) and numeric strings; the key is
  the number itself, with integers kept exact.
- ``iso``: ISO-8601 date/datetime strings and ``date``/``datetime`` objects;
  the key is POSIX seconds. Naive values are read as UTC.
- ``auto``: ``numeric`` first, then ``iso``.

Values that cannot be normalized raise ``ValueError``; the transformer treats
such records as malformed and drops them.
"""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time
from enum import StrEnum
from typing import Any


class TimestampPolicy(StrEnum):
    AUTO = "auto"
    NUMERIC = "numeric"
    ISO = "iso"


def resolve_policy(value: TimestampPolicy | str) -> TimestampPolicy:
    """Coerce a policy name (case-insensitive) into :class:`TimestampPolicy`."""

    if isinstance(value, TimestampPolicy):
        return value
    try:
        return TimestampPolicy(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(p.value for p in TimestampPolicy)
        raise ValueError(f"unknown timestamp policy {value!r} (expected one of: {allowed})") from exc


def _numeric_key(value: Any) -> int | float:
    if isinstance(value, bool):
        raise ValueError(f"boolean is not a timestamp: {value!r}")
    if isinstance(value, int):
        # Kept exact: epoch nanoseconds exceed float precision.
        return value
    if isinstance(value, float):
        n = value
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            raise ValueError("empty timestamp")
        try:
            return int(s)
        except ValueError:
            pass
        try:
            n = float(s)
        except ValueError as exc:
            raise ValueError(f"not a numeric timestamp: {value!r}") from exc
    else:
        raise ValueError(f"not a numeric timestamp: {value!r}")
    if math.isnan(n):
        raise ValueError("NaN is not a timestamp")
    return n


def _iso_key(value: Any) -> float:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            raise ValueError("empty timestamp")
        try:
            dt = datetime.fromisoformat(s)
        except ValueError as exc:
            raise ValueError(f"not an ISO-8601 timestamp: {value!r}") from exc
    else:
        raise ValueError(f"not an ISO-8601 timestamp: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.timestamp()


def timestamp_key(
    value: Any, policy: TimestampPolicy | str = TimestampPolicy.AUTO
) -> int | float:
    """Return a sort key for a ``createdAt`` value; larger means more recent."""

    policy = resolve_policy(policy)
    if policy is TimestampPolicy.NUMERIC:
        return _numeric_key(value)
    if policy is TimestampPolicy.ISO:
        return _iso_key(value)
    try:
        return _numeric_key(value)
    except ValueError:
        return _iso_key(value)


__all__ = ["TimestampPolicy", "resolve_policy", "timestamp_key"]
