"""Pytest configuration for test isolation.

The CLI reads ``CANCELED_REPORT_*`` defaults from the environment (and from a
``.env`` in the working directory) and configures the package logger once per
process. Either would leak between tests, so every test starts from a clean
environment, runs in its own temporary working directory, and resets the
package logger afterwards.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Make sure the workspace `packages/` dir is on sys.path so `canceled_report` is importable
_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR), str(_ROOT)] if p not in sys.path]

from canceled_report.logging_setup import reset_logging  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"

_ENV_VARS = (
    "CANCELED_REPORT_INPUT",
    "CANCELED_REPORT_TIMESTAMPS",
    "CANCELED_REPORT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    work = tmp_path / "cwd"
    work.mkdir()
    monkeypatch.chdir(work)
    yield
    reset_logging()


@pytest.fixture
def sample_path() -> Path:
    return FIXTURES / "transactions.json"
