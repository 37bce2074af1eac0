"""Load transaction records from a JSON array.

The input is parsed with :mod:`json` only; nothing in it is ever evaluated.
Accepted sources for :func:`load_transactions`:

- a filesystem path (``str`` or ``os.PathLike``);
- a readable text handle (anything with ``.read()``);
- an in-memory ``list``/``tuple`` of records, returned as a new list.

Raw text goes through :func:`parse_transactions`. Every failure surfaces as
:class:`~canceled_report.errors.LoadError` with the underlying exception
chained.
"""

from __future__ import annotations

import json
import math
import os
from os import PathLike
from pathlib import Path
from typing import IO, Any

from ..errors import LoadError
from ..logging_setup import get_logger
from ..models import TransactionRecord

_logger = get_logger("canceled_report.ingest.loader")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    return value


def parse_transactions(text: str, *, origin: str = "<text>") -> list[TransactionRecord]:
    """Parse JSON text into a list of records.

    ``origin`` only appears in error messages. Elements are returned as parsed
    and in their original order; filtering is the transformer's job.
    """

    try:
        value: Any = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        raise LoadError(
            f"Failed to parse {origin}: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e
    except ValueError as e:
        # Integer digit limit and the non-finite guards above.
        raise LoadError(f"Failed to parse {origin}: {e}") from e
    except RecursionError as e:
        raise LoadError(f"Failed to parse {origin}: nesting is too deep") from e

    if not isinstance(value, list):
        raise LoadError(
            f"Content of {origin} is not an array (got {type(value).__name__})"
        )

    _logger.debug("parsed %d records from %s", len(value), origin)
    return value


def _read_path(path: str | PathLike[str]) -> str:
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise LoadError(f"File not found: {os.fspath(p)}") from e
    except PermissionError as e:
        raise LoadError(f"Permission denied: {os.fspath(p)}") from e
    except IsADirectoryError as e:
        raise LoadError(f"Expected a file but found a directory: {os.fspath(p)}") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"File is not valid UTF-8: {os.fspath(p)}") from e
    except OSError as e:
        raise LoadError(f"Unable to read '{os.fspath(p)}': {e}") from e


def _read_handle(handle: IO[str]) -> str:
    try:
        content = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Unable to read input stream: {e}") from e
    if isinstance(content, bytes):
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise LoadError("Input stream is not valid UTF-8") from e
    return content


def load_transactions(
    source: str | PathLike[str] | IO[str] | list[Any] | tuple[Any, ...],
) -> list[TransactionRecord]:
    """Load the raw transaction records from ``source``.

    A ``str`` is always treated as a path; use :func:`parse_transactions`
    for raw JSON text.
    """

    if isinstance(source, list | tuple):
        _logger.debug("using %d in-memory records", len(source))
        return list(source)

    if isinstance(source, str | PathLike):
        origin = f"'{os.fspath(source)}'"
        _logger.info("loading transactions from %s", origin)
        return parse_transactions(_read_path(source), origin=origin)

    if hasattr(source, "read"):
        origin = f"'{getattr(source, 'name', '<stream>')}'"
        _logger.info("loading transactions from %s", origin)
        return parse_transactions(_read_handle(source), origin=origin)

    raise LoadError(f"Unsupported transaction source: {type(source).__name__}")


__all__ = ["load_transactions", "parse_transactions"]
