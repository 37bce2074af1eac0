"""Exception types raised by the report pipeline.

Both concrete errors are terminal for a run: the CLI reports them on stderr
and exits non-zero without printing a partial report.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base class for failures the CLI reports instead of crashing on."""


class LoadError(ReportError):
    """Input is missing, unreadable, or not parseable into an array of records."""


class InvalidInputError(ReportError, TypeError):
    """The transformer received something other than a sequence of records."""


__all__ = ["InvalidInputError", "LoadError", "ReportError"]
