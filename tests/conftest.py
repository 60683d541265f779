from __future__ import annotations

import pytest


class RecordingAccessor:
    """Accessor over a dict that records every key it was asked for."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = values or {}
        self.calls: list[str] = []

    def __call__(self, key: str) -> str:
        self.calls.append(key)
        return self._values.get(key, "")


@pytest.fixture
def empty_accessor() -> RecordingAccessor:
    """Accessor that has no value for any key."""
    return RecordingAccessor()


@pytest.fixture
def make_accessor():
    """Factory for recording accessors over fixed values."""

    def _make(values: dict[str, str]) -> RecordingAccessor:
        return RecordingAccessor(values)

    return _make
