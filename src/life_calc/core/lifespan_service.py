"""Core lifespan service — ties persisted dates, the clock and the calculator.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~life_calc.core.protocols.DateStore` and a
:class:`~life_calc.core.protocols.Clock` injected at construction time,
keeping the core free of any filesystem or clock access of its own.

Guarantees
----------
* The clock is read exactly once per :meth:`LifespanService.calculate`.
* Only :class:`~life_calc.exceptions.LifeCalcError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from life_calc.core.calculator import compute
from life_calc.core.models import CalculationResult, StoredDates
from life_calc.core.protocols import Clock, DateStore
from life_calc.exceptions import (
    InvalidDateError,
    InvalidDateOrderingError,
    LifeCalcError,
    StorageError,
)
from life_calc.utils.dates import parse_date_boundary

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

START_KEY = "birthday"
END_KEY = "deathDay"

ORDERING_MESSAGE = (
    "Please ensure your birthday is in the past and your projected end "
    "date is in the future and after your birthday."
)


class LifespanService:
    """Stateless service that loads, saves and evaluates the two dates.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`DateStore` protocol.
    clock:
        Any object satisfying the :class:`Clock` protocol.
    """

    def __init__(self, store: DateStore, clock: Clock) -> None:
        self._store: DateStore = store
        self._clock: Clock = clock

    # ------------------------------------------------------------------
    # Persisted dates
    # ------------------------------------------------------------------

    def load_dates(self) -> StoredDates:
        """Return the saved dates, dropping any value that no longer parses."""
        return StoredDates(
            start=self._load_one(START_KEY),
            end=self._load_one(END_KEY),
        )

    def save_dates(self, start: str, end: str) -> None:
        """Persist both date strings after checking they parse.

        Raises
        ------
        InvalidDateError
            If either string is not a valid ``YYYY-MM-DD`` date.
        StorageError
            If the store cannot be written.
        """
        parse_date_boundary(start)
        parse_date_boundary(end)
        self._guarded(self._store.set, START_KEY, start.strip())
        self._guarded(self._store.set, END_KEY, end.strip())

    def clear_dates(self) -> None:
        self._guarded(self._store.delete, START_KEY)
        self._guarded(self._store.delete, END_KEY)

    # ------------------------------------------------------------------
    # Calculation
    # ------------------------------------------------------------------

    def calculate(self, start: str, end: str) -> CalculationResult:
        """Parse both strings and evaluate them against the current time.

        Raises
        ------
        InvalidDateError
            If either string is not a valid date.
        InvalidDateOrderingError
            If the start is in the future, or the end is not after both
            the start and the current time.
        """
        start_at = parse_date_boundary(start)
        end_at = parse_date_boundary(end)
        now = self._clock.now()

        result = compute(start_at, end_at, now)
        if result is None:
            logger.debug("Rejected ordering start=%s end=%s now=%s", start_at, end_at, now)
            raise InvalidDateOrderingError(
                ORDERING_MESSAGE,
                hint="The birthday must not be after today; the end date must be after today.",
            )
        return result

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _load_one(self, key: str) -> str | None:
        value = self._guarded(self._store.get, key)
        if value is None:
            return None
        try:
            parse_date_boundary(value)
        except InvalidDateError:
            logger.warning("Ignoring unparseable stored %s: %r", key, value)
            return None
        return value

    @staticmethod
    def _guarded(func: Callable[..., _T], *args: Any) -> _T:
        """Call a store method and ensure only our exceptions escape."""
        try:
            return func(*args)
        except LifeCalcError:
            raise
        except Exception as exc:
            raise StorageError(
                f"Unexpected storage error: {exc}",
            ) from exc
