"""Domain models for life-calc.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and plain-dict export.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Per-span breakdown
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DurationBreakdown:
    """One elapsed span expressed in several calendar units.

    Every unit is floored independently from :attr:`total_days` using a
    fixed average length; the units do **not** nest (``years`` and
    ``months`` describe the same span, not a remainder of each other).
    """

    years: int
    quarters: int
    months: int
    weeks: int
    days: int
    """Whole days in the span.  Always equal to :attr:`total_days`."""

    total_days: int
    """Whole days in the span, floored from the raw time difference."""

    def as_dict(self) -> dict[str, int]:
        """Return the unit name → value mapping used for JSON output."""
        return {
            "years": self.years,
            "quarters": self.quarters,
            "months": self.months,
            "weeks": self.weeks,
            "days": self.days,
            "totalDays": self.total_days,
        }


# ---------------------------------------------------------------------------
# Full calculation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Lived and remaining breakdowns plus the bounded progress ratio."""

    lived: DurationBreakdown
    """Span from the start date to the reference instant."""

    remaining: DurationBreakdown
    """Span from the reference instant to the end date."""

    life_progress: float
    """Lived share of the whole start → end span, in ``[0, 100]``."""

    def as_dict(self) -> dict[str, object]:
        return {
            "lived": self.lived.as_dict(),
            "remaining": self.remaining.as_dict(),
            "lifeProgress": self.life_progress,
        }


# ---------------------------------------------------------------------------
# Persisted inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StoredDates:
    """The two raw date strings as last saved by the shell.

    Either field is ``None`` when nothing usable has been saved yet.
    """

    start: str | None
    end: str | None
