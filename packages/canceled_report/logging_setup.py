"""Centralized logging configuration for the ``canceled_report`` package.

- ``configure_logging(...)``: attach a single ``StreamHandler`` to the package
  root logger (``"canceled_report"``). Called once by the CLI at startup.
- ``get_logger(name)``: acquire a logger by name. When nothing has been
  configured the package root logger gets a ``NullHandler`` so library use
  stays silent.

Library modules never attach their own handlers. They call
``get_logger("canceled_report.<module>")`` and rely on the entrypoint.

The report itself is written to stdout, so all log output goes to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "canceled_report"
_ENV_LEVEL = "CANCELED_REPORT_LOG_LEVEL"
_CONFIGURED = False


def _parse_level(level: int | str | None, default: int = logging.WARNING) -> int:
    """Resolve ``level``, then ``CANCELED_REPORT_LOG_LEVEL``, then ``default``.

    Accepts ints, numeric strings and standard level names (INFO/DEBUG/etc.);
    unusable values fall through to the next candidate.
    """

    names = logging.getLevelNamesMapping()
    for candidate in (level, os.getenv(_ENV_LEVEL)):
        if isinstance(candidate, int):
            return candidate
        if isinstance(candidate, str):
            s = candidate.strip().upper()
            if s.isdigit():
                return int(s)
            if s in names:
                return names[s]
    return default


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string. When ``None`` the
        ``CANCELED_REPORT_LOG_LEVEL`` environment variable is used, falling
        back to ``logging.WARNING``.
    fmt:
        Optional format string. Defaults to
        ``"%(asctime)s %(name)s %(levelname)s %(message)s"``.
    stream:
        Output stream for the handler. Defaults to ``sys.stderr`` at call time.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Drop handlers installed by :func:`configure_logging` (test helper)."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, ensuring safe defaults for library use."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging"]
