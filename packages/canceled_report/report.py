"""Canceled-transactions-by-year report.

:func:`canceled_by_year` is the core transformation: filter the canceled,
well-formed records, bucket them by integer year, then order buckets by year
and each bucket by ``createdAt``, both newest first. :func:`render_report`
serializes the result as pretty-printed JSON.

Both functions are pure. Input mappings are never mutated and the output
refers to the same record objects that came in.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .errors import InvalidInputError
from .logging_setup import get_logger
from .models import (
    CANCELED_STATE,
    CREATED_AT_FIELD,
    STATE_FIELD,
    YEAR_FIELD,
    TransactionRecord,
    YearGroup,
)
from .timestamps import TimestampPolicy, resolve_policy, timestamp_key

_logger = get_logger("canceled_report.report")

_INT_RE = re.compile(r"^[+-]?\d+$")


def _coerce_year(value: Any) -> int | None:
    """Return ``value`` as an ``int`` year, or ``None`` when it is not one."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        s = value.strip()
        if not _INT_RE.fullmatch(s):
            return None
        try:
            return int(s)
        except ValueError:
            # Beyond the interpreter's integer digit limit.
            return None
    return None


def _select_canceled(
    transactions: Sequence[Any],
    policy: TimestampPolicy,
) -> Iterable[tuple[int, int | float, TransactionRecord]]:
    """Yield ``(year, sort_key, record)`` for canceled, well-formed records."""

    for pos, tx in enumerate(transactions):
        if not isinstance(tx, Mapping):
            _logger.debug("skipping #%d: not a mapping (%s)", pos, type(tx).__name__)
            continue
        if tx.get(STATE_FIELD) != CANCELED_STATE:
            continue
        if YEAR_FIELD not in tx or CREATED_AT_FIELD not in tx:
            _logger.debug("skipping #%d: missing %s or %s", pos, YEAR_FIELD, CREATED_AT_FIELD)
            continue
        year = _coerce_year(tx[YEAR_FIELD])
        if year is None:
            _logger.debug("skipping #%d: unusable year %r", pos, tx[YEAR_FIELD])
            continue
        try:
            key = timestamp_key(tx[CREATED_AT_FIELD], policy)
        except ValueError as e:
            _logger.debug("skipping #%d: %s", pos, e)
            continue
        yield year, key, tx


def canceled_by_year(
    transactions: Sequence[TransactionRecord],
    *,
    timestamps: TimestampPolicy | str = TimestampPolicy.AUTO,
) -> list[YearGroup]:
    """Group canceled transactions by year, newest year and newest record first.

    Parameters
    ----------
    transactions:
        The raw records, e.g. from :func:`~canceled_report.ingest.load_transactions`.
        Elements that are not mappings, are not ``"canceled"``, or lack a usable
        ``year``/``createdAt`` are dropped without error.
    timestamps:
        How ``createdAt`` values are compared; see
        :class:`~canceled_report.timestamps.TimestampPolicy`.

    Returns
    -------
    list[YearGroup]
        One non-empty group per distinct year, in descending year order. Within
        a group records are sorted by ``createdAt`` descending; ties keep
        their input order.

    Raises
    ------
    InvalidInputError
        When ``transactions`` is not a sequence (strings, bytes and mappings
        are rejected too).
    ValueError
        When ``timestamps`` names an unknown policy.
    """

    if not isinstance(transactions, Sequence) or isinstance(
        transactions, str | bytes | bytearray
    ):
        raise InvalidInputError(
            f"Expected a sequence of transactions, got {type(transactions).__name__}"
        )

    policy = resolve_policy(timestamps)

    by_year: dict[int, list[tuple[int | float, TransactionRecord]]] = {}
    for year, key, tx in _select_canceled(transactions, policy):
        by_year.setdefault(year, []).append((key, tx))

    groups: list[YearGroup] = []
    for year in sorted(by_year, reverse=True):
        # sorted() is stable and reverse=True preserves the order of equal keys.
        bucket = sorted(by_year[year], key=lambda item: item[0], reverse=True)
        groups.append(YearGroup(year=year, transactions=tuple(tx for _, tx in bucket)))

    _logger.info(
        "kept %d canceled transactions across %d years (of %d input records)",
        sum(len(g.transactions) for g in groups),
        len(groups),
        len(transactions),
    )
    return groups


def render_report(groups: Iterable[YearGroup], *, indent: int | None = 2) -> str:
    """Serialize year groups as JSON text (``[{"year": ..., "transactions": [...]}]``)."""

    return json.dumps(
        [g.to_dict() for g in groups],
        indent=indent,
        ensure_ascii=False,
        default=str,
    )


__all__ = ["canceled_by_year", "render_report"]
