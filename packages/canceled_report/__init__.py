"""Public interface for the ``canceled_report`` package.

This module only re-exports the API functions and public models/types; there
is no runtime logic here.
"""

from .api import (
    build_report,
    canceled_by_year,
    load_transactions,
    parse_transactions,
    render_report,
)
from .errors import InvalidInputError, LoadError, ReportError
from .models import TransactionRecord, Transactions, YearGroup
from .timestamps import TimestampPolicy

__all__ = [
    # API
    "build_report",
    "canceled_by_year",
    "load_transactions",
    "parse_transactions",
    "render_report",
    # Models / types
    "TimestampPolicy",
    "TransactionRecord",
    "Transactions",
    "YearGroup",
    # Errors
    "InvalidInputError",
    "LoadError",
    "ReportError",
]
