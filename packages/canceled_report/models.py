"""Data models and type aliases for ``canceled_report``.

Input records are kept opaque: the pipeline only reads ``state``, ``year``
and ``createdAt`` and passes every other field through untouched.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, TypeAlias

# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------

TransactionRecord: TypeAlias = Mapping[str, Any]
"""A single transaction as loaded from the input.

Notes
-----
- ``state``, ``year`` and ``createdAt`` are optional at the type level; the
  transformer performs explicit presence and type checks before using them.
- Values are whatever the parser produced (JSON scalars for file input, any
  Python object for in-memory feeds).
"""

Transactions: TypeAlias = Sequence[TransactionRecord]
"""An ordered collection of transaction records."""

STATE_FIELD: Final = "state"
YEAR_FIELD: Final = "year"
CREATED_AT_FIELD: Final = "createdAt"

CANCELED_STATE: Final = "canceled"


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class YearGroup:
    """One year of canceled transactions.

    Attributes
    ----------
    year:
        The reporting year as an integer, regardless of how it was spelled in
        the input.
    transactions:
        The year's canceled transactions, newest ``createdAt`` first. Never
        empty. Elements are the original input mappings.
    """

    year: int
    transactions: tuple[TransactionRecord, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"year": self.year, "transactions": list(self.transactions)}


__all__ = [
    "CANCELED_STATE",
    "CREATED_AT_FIELD",
    "STATE_FIELD",
    "YEAR_FIELD",
    "TransactionRecord",
    "Transactions",
    "YearGroup",
]
