"""Tests for :class:`LifespanService` (core/lifespan_service.py).

The store and clock are replaced by in-memory doubles — no filesystem,
no real time.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from life_calc.core.lifespan_service import END_KEY, ORDERING_MESSAGE, START_KEY, LifespanService
from life_calc.core.models import StoredDates
from life_calc.exceptions import (
    InvalidDateError,
    InvalidDateOrderingError,
    StorageError,
)

NOW = datetime(2024, 1, 1, 12, 0, 0)


# ---------------------------------------------------------------------------
# Doubles
# ---------------------------------------------------------------------------

class FixedClock:
    def __init__(self, now: datetime = NOW) -> None:
        self._now = now
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self._now


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


def _service(
    initial: dict[str, str] | None = None,
    now: datetime = NOW,
) -> tuple[LifespanService, MemoryStore, FixedClock]:
    store = MemoryStore(initial)
    clock = FixedClock(now)
    return LifespanService(store, clock), store, clock


# ---------------------------------------------------------------------------
# Persisted dates
# ---------------------------------------------------------------------------

class TestLoadDates:
    def test_empty_store(self) -> None:
        service, _, _ = _service()
        assert service.load_dates() == StoredDates(start=None, end=None)

    def test_reads_original_key_names(self) -> None:
        service, _, _ = _service({"birthday": "1990-05-17", "deathDay": "2070-05-17"})
        assert service.load_dates() == StoredDates(start="1990-05-17", end="2070-05-17")

    def test_unparseable_value_is_treated_as_missing(self) -> None:
        service, _, _ = _service({START_KEY: "not a date", END_KEY: "2070-05-17"})
        assert service.load_dates() == StoredDates(start=None, end="2070-05-17")


class TestSaveDates:
    def test_writes_both_keys(self) -> None:
        service, store, _ = _service()
        service.save_dates(" 1990-05-17 ", "2070-05-17")
        assert store.data == {START_KEY: "1990-05-17", END_KEY: "2070-05-17"}

    def test_rejects_malformed_before_writing(self) -> None:
        service, store, _ = _service()
        with pytest.raises(InvalidDateError):
            service.save_dates("1990-05-17", "someday")
        assert store.data == {}

    def test_saves_even_when_ordering_is_invalid(self) -> None:
        """Persisting is independent of whether the dates compute."""
        service, store, _ = _service()
        service.save_dates("2050-01-01", "2090-01-01")
        assert store.data[START_KEY] == "2050-01-01"

    def test_foreign_store_errors_are_wrapped(self) -> None:
        store = MagicMock()
        store.set.side_effect = OSError("disk full")
        service = LifespanService(store, FixedClock())
        with pytest.raises(StorageError, match="disk full"):
            service.save_dates("1990-05-17", "2070-05-17")

    def test_storage_errors_propagate_unchanged(self) -> None:
        store = MagicMock()
        original = StorageError("locked", hint="close the other window")
        store.get.side_effect = original
        service = LifespanService(store, FixedClock())
        with pytest.raises(StorageError) as exc_info:
            service.load_dates()
        assert exc_info.value is original


class TestClearDates:
    def test_removes_both_keys(self) -> None:
        service, store, _ = _service({START_KEY: "1990-05-17", END_KEY: "2070-05-17", "other": "x"})
        service.clear_dates()
        assert store.data == {"other": "x"}


# ---------------------------------------------------------------------------
# Calculation
# ---------------------------------------------------------------------------

class TestCalculate:
    def test_valid_dates(self) -> None:
        service, _, clock = _service()
        result = service.calculate("2000-01-01", "2080-01-01")
        assert result.lived.total_days == 8766
        assert result.remaining.total_days == 20453
        assert 0 < result.life_progress < 100
        assert clock.calls == 1

    def test_start_in_future_raises(self) -> None:
        service, _, _ = _service()
        with pytest.raises(InvalidDateOrderingError) as exc_info:
            service.calculate("2050-01-01", "2090-01-01")
        assert str(exc_info.value) == ORDERING_MESSAGE
        assert exc_info.value.hint

    def test_end_before_start_raises(self) -> None:
        service, _, _ = _service()
        with pytest.raises(InvalidDateOrderingError):
            service.calculate("2000-01-01", "1999-01-01")

    def test_end_today_raises(self) -> None:
        service, _, _ = _service(now=datetime(2024, 1, 1))
        with pytest.raises(InvalidDateOrderingError):
            service.calculate("2000-01-01", "2024-01-01")

    def test_malformed_date_raises(self) -> None:
        service, _, _ = _service()
        with pytest.raises(InvalidDateError):
            service.calculate("2000-13-01", "2080-01-01")

    def test_idempotent_for_fixed_clock(self) -> None:
        service, _, _ = _service()
        assert service.calculate("2000-01-01", "2080-01-01") == service.calculate(
            "2000-01-01", "2080-01-01",
        )
