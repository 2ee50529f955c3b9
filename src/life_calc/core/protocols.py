"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class DateStore(Protocol):
    """Contract for the key-value store that persists the input dates.

    Implementations must map all backend-specific exceptions to
    :class:`~life_calc.exceptions.StorageError`.
    """

    def get(self, key: str) -> str | None:
        """Return the string stored under *key*, or ``None``."""
        ...  # pragma: no cover

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...  # pragma: no cover

    def delete(self, key: str) -> None:
        """Remove *key*.  Missing keys are ignored."""
        ...  # pragma: no cover


class Clock(Protocol):
    """Source of the reference instant."""

    def now(self) -> datetime:
        """Return the current naive local time."""
        ...  # pragma: no cover
