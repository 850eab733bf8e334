"""Tests for timestamp and identifier helpers."""

from __future__ import annotations

from app.utils import clock, new_identifier, now_ns


def test_now_ns_never_goes_backwards(monkeypatch):
    readings = iter([2_000, 1_000, 3_000])
    monkeypatch.setattr(clock, "_last_timestamp_ns", 0)
    monkeypatch.setattr(clock.time, "time_ns", lambda: next(readings))

    assert [now_ns(), now_ns(), now_ns()] == [2_000, 2_000, 3_000]


def test_new_identifier_is_unique():
    identifiers = {new_identifier() for _ in range(100)}

    assert len(identifiers) == 100
    assert all(len(identifier) == 36 for identifier in identifiers)
