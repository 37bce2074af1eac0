"""CLI for the ``canceled_report`` package.

Exposes :func:`cmd_report`, a plain handler that returns an exit code, and a
Typer-based console interface around it. Defaults can be supplied through
environment variables, loaded from a local ``.env`` via ``python-dotenv``
before options are resolved:

- ``CANCELED_REPORT_INPUT``: input path when ``--input`` is omitted
  (fallback: ``./transactions.txt``).
- ``CANCELED_REPORT_TIMESTAMPS``: ``auto``, ``numeric`` or ``iso``.
- ``CANCELED_REPORT_LOG_LEVEL``: log level for stderr diagnostics.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging, get_logger

DEFAULT_INPUT_NAME = "transactions.txt"

_logger = get_logger("canceled_report.cli")


# ---- Option resolution -------------------------------------------------------


def _resolve_input_path(input_path: Path | None) -> Path:
    if input_path is not None:
        return input_path
    env_val = os.getenv("CANCELED_REPORT_INPUT")
    if env_val and env_val.strip():
        return Path(env_val.strip())
    return Path.cwd() / DEFAULT_INPUT_NAME


def _resolve_timestamps(timestamps: str | None) -> str:
    if timestamps is not None:
        return timestamps
    env_val = os.getenv("CANCELED_REPORT_TIMESTAMPS")
    if env_val and env_val.strip():
        return env_val
    return "auto"


# ---- Command handler ---------------------------------------------------------


def cmd_report(
    input_path: Path | None = None,
    *,
    timestamps: str | None = None,
    indent: int = 2,
) -> int:
    """Print the canceled-transactions-by-year report for ``input_path``.

    Writes the JSON report to stdout and returns ``0`` on success. Load,
    input and configuration errors are written to stderr as a single
    ``Error: ...`` line and the function returns ``1``; nothing is written
    to stdout in that case.
    """

    # Local imports keep ``--help`` fast
    from .api import build_report
    from .errors import ReportError
    from .timestamps import resolve_policy

    try:
        policy = resolve_policy(_resolve_timestamps(timestamps))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    path = _resolve_input_path(input_path)
    _logger.debug("input=%s timestamps=%s indent=%d", path, policy.value, indent)

    try:
        text = build_report(path, timestamps=policy, indent=indent)
    except ReportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    typer.echo(text)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    add_completion=False,
    help=(
        "Report canceled transactions grouped by year, newest first. "
        "Reads a JSON array of transactions and prints the report as JSON."
    ),
)

# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
INPUT_OPTION: OptionInfo = typer.Option(
    None,
    "--input",
    "-i",
    help=(
        "Path to a JSON array of transactions "
        f"(default: $CANCELED_REPORT_INPUT or ./{DEFAULT_INPUT_NAME})."
    ),
    dir_okay=True,  # the handler reports directories with a clear error
    file_okay=True,
    exists=False,  # allow non-existent here; the handler reports nice errors
)
TIMESTAMPS_OPTION: OptionInfo = typer.Option(
    None,
    "--timestamps",
    help=(
        "How createdAt values are compared: auto, numeric or iso "
        "(default: $CANCELED_REPORT_TIMESTAMPS or auto)."
    ),
)
INDENT_OPTION: OptionInfo = typer.Option(2, "--indent", min=0, help="JSON indentation width.")


@app.command()
def report(
    input_path: Path | None = INPUT_OPTION,
    timestamps: str | None = TIMESTAMPS_OPTION,
    indent: int = INDENT_OPTION,
) -> None:
    """Print canceled transactions grouped by year as JSON."""

    # Load environment from .env in CWD (override=False to keep existing env)
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging()

    code = cmd_report(input_path, timestamps=timestamps, indent=indent)
    if code:
        raise typer.Exit(code)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
