"""Custom exception hierarchy for life-calc.

Every exception that crosses a layer boundary inherits from
:class:`LifeCalcError`.  Raw exceptions from the filesystem or the JSON
decoder never leave the infrastructure layer — they are caught and
re-raised as a typed subclass defined here.

Note that the core :func:`~life_calc.core.calculator.compute` function
does not raise for badly ordered dates; it returns ``None``.  The
service layer turns that absent result into
:class:`InvalidDateOrderingError` for the CLI error boundary.

Hierarchy
---------
LifeCalcError
├── InvalidDateError
├── InvalidDateOrderingError
├── InputCancelledError
├── StorageError
└── EnvironmentError
"""

from __future__ import annotations


class LifeCalcError(Exception):
    """Base exception for all life-calc errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Date input ------------------------------------------------------------

class InvalidDateError(LifeCalcError):
    """Raised when a date string is empty or not in ``YYYY-MM-DD`` form."""


class InvalidDateOrderingError(LifeCalcError):
    """Raised when start, end and the current instant are out of order."""


class InputCancelledError(LifeCalcError):
    """Raised when the user dismisses an interactive date prompt."""


# --- Persistence -----------------------------------------------------------

class StorageError(LifeCalcError):
    """Raised when the date store cannot be read or written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(LifeCalcError):
    """Raised when an optional runtime dependency is not available."""


def install_hint(package: str) -> str:
    """Return the standard ``pip install`` guidance for *package*."""
    return f"{package} is not installed. Install with: pip install {package}"
