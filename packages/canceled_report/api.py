"""Public API for the ``canceled_report`` package.

The individual stages live in ``canceled_report.ingest`` and
``canceled_report.report`` and are re-exported here. :func:`build_report`
chains them into the all-or-nothing pipeline the CLI runs.
"""

from __future__ import annotations

from os import PathLike
from typing import IO, Any

from .ingest import load_transactions, parse_transactions
from .logging_setup import get_logger
from .report import canceled_by_year, render_report
from .timestamps import TimestampPolicy

_logger = get_logger("canceled_report.api")


def build_report(
    source: str | PathLike[str] | IO[str] | list[Any] | tuple[Any, ...],
    *,
    timestamps: TimestampPolicy | str = TimestampPolicy.AUTO,
    indent: int | None = 2,
) -> str:
    """Load ``source``, group its canceled transactions by year and render JSON.

    Either the full report text is returned or an exception is raised:
    :class:`~canceled_report.errors.LoadError` for unreadable/unparseable
    input, :class:`~canceled_report.errors.InvalidInputError` for a
    non-sequence, ``ValueError`` for an unknown timestamp policy.
    """

    transactions = load_transactions(source)
    groups = canceled_by_year(transactions, timestamps=timestamps)
    _logger.debug("rendering %d year groups", len(groups))
    return render_report(groups, indent=indent)


__all__ = [
    "build_report",
    "canceled_by_year",
    "load_transactions",
    "parse_transactions",
    "render_report",
]
