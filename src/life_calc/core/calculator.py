"""Pure duration arithmetic — the heart of life-calc.

Every function in this module is a **pure** transformation: no I/O, no
clock reads, fully deterministic.  The current instant is always passed
in by the caller.

Pipeline order (enforced by :func:`compute`):

1. **Validate** — start ≤ now < end, and start < end.
2. **Break down** — lived ``[start, now]`` and remaining ``[now, end]``
   spans, each into independent average-length units.
3. **Progress** — raw lived / total ratio as a percentage, then clamped.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta

from life_calc.core.models import CalculationResult, DurationBreakdown

DAYS_PER_YEAR: float = 365.25
DAYS_PER_QUARTER: float = DAYS_PER_YEAR / 4
DAYS_PER_MONTH: float = 30.44
DAYS_PER_WEEK: int = 7

_ONE_DAY = timedelta(days=1)


# ---------------------------------------------------------------------------
# Input normalisation
# ---------------------------------------------------------------------------

def to_boundary(value: date | datetime) -> datetime:
    """Return *value* as a naive local datetime.

    Plain dates become local midnight; datetimes pass through unchanged.
    """
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


# ---------------------------------------------------------------------------
# 1. Validate
# ---------------------------------------------------------------------------

def is_valid_ordering(start: datetime, end: datetime, now: datetime) -> bool:
    """Return ``True`` when the three instants can produce a result."""
    if start > now:
        return False
    if end <= start:
        return False
    return end > now


# ---------------------------------------------------------------------------
# 2. Break down
# ---------------------------------------------------------------------------

def breakdown_from_span(span: timedelta) -> DurationBreakdown:
    """Convert a non-negative span into a :class:`DurationBreakdown`.

    ``total_days`` is the span floored to whole days; every other unit
    is an independent floor of that day count.
    """
    total_days = span // _ONE_DAY
    return DurationBreakdown(
        years=math.floor(total_days / DAYS_PER_YEAR),
        quarters=math.floor(total_days / DAYS_PER_QUARTER),
        months=math.floor(total_days / DAYS_PER_MONTH),
        weeks=math.floor(total_days / DAYS_PER_WEEK),
        days=total_days,
        total_days=total_days,
    )


# ---------------------------------------------------------------------------
# 3. Progress
# ---------------------------------------------------------------------------

def clamp_percentage(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """Bound *value* to ``[lower, upper]``."""
    return min(upper, max(lower, value))


def progress_percentage(start: datetime, end: datetime, now: datetime) -> float:
    """Share of ``[start, end]`` already elapsed at *now*, unclamped."""
    return (now - start) / (end - start) * 100


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

def compute(
    start: date | datetime,
    end: date | datetime,
    now: datetime,
) -> CalculationResult | None:
    """Compute lived/remaining breakdowns and life progress.

    Parameters
    ----------
    start:
        The start boundary (birthday).  Must not be after *now*.
    end:
        The projected end boundary.  Must be after both *start* and *now*.
    now:
        The reference instant.  Never read from a clock here.

    Returns
    -------
    CalculationResult | None
        ``None`` when the three inputs are out of order.
    """
    start_at = to_boundary(start)
    end_at = to_boundary(end)

    if not is_valid_ordering(start_at, end_at, now):
        return None

    return CalculationResult(
        lived=breakdown_from_span(now - start_at),
        remaining=breakdown_from_span(end_at - now),
        life_progress=clamp_percentage(progress_percentage(start_at, end_at, now)),
    )
