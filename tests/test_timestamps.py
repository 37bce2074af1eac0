from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from canceled_report.timestamps import TimestampPolicy, resolve_policy, timestamp_key


def test_numeric_values_are_their_own_key():
    assert timestamp_key(1700000000) == 1700000000.0
    assert timestamp_key(1.5, "numeric") == 1.5
    assert timestamp_key(" 42 ", TimestampPolicy.NUMERIC) == 42.0


def test_integers_are_kept_exact():
    assert timestamp_key(2**53 + 1) == 2**53 + 1
    assert timestamp_key("9007199254740993", "numeric") == 2**53 + 1
    assert timestamp_key(10**400) == 10**400
    assert isinstance(timestamp_key(10**400), int)


@pytest.mark.parametrize("value", [True, None, "", "nan", float("nan"), "2024-01-01"])
def test_numeric_policy_rejects(value):
    with pytest.raises(ValueError):
        timestamp_key(value, "numeric")


def test_iso_strings_and_objects_agree():
    expected = datetime(2024, 1, 2, tzinfo=UTC).timestamp()

    assert timestamp_key("2024-01-02", "iso") == expected
    assert timestamp_key("2024-01-02T00:00:00Z", "iso") == expected
    assert timestamp_key("2024-01-02T00:00:00", "iso") == expected
    assert timestamp_key(date(2024, 1, 2), "iso") == expected
    assert timestamp_key(datetime(2024, 1, 2), "iso") == expected


def test_iso_offsets_are_respected():
    plus_two = datetime(2024, 1, 2, 2, 0, tzinfo=timezone(timedelta(hours=2)))

    assert timestamp_key("2024-01-02T02:00:00+02:00", "iso") == timestamp_key(plus_two, "iso")
    assert timestamp_key("2024-01-02T02:00:00+02:00", "iso") == timestamp_key("2024-01-02", "iso")


@pytest.mark.parametrize("value", [1700000000, "yesterday", None, ""])
def test_iso_policy_rejects(value):
    with pytest.raises(ValueError):
        timestamp_key(value, "iso")


def test_auto_prefers_numeric_then_iso():
    assert timestamp_key("123") == 123.0
    assert timestamp_key("2024-01-02") == datetime(2024, 1, 2, tzinfo=UTC).timestamp()
    with pytest.raises(ValueError):
        timestamp_key({"when": 1})


def test_resolve_policy_is_case_insensitive():
    assert resolve_policy(" ISO ") is TimestampPolicy.ISO
    assert resolve_policy(TimestampPolicy.AUTO) is TimestampPolicy.AUTO
    with pytest.raises(ValueError, match="expected one of: auto, numeric, iso"):
        resolve_policy("unix")
