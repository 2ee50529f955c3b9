"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O and no clock reads.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from life_calc.core.calculator import breakdown_from_span, clamp_percentage, compute
from life_calc.core.lifespan_service import LifespanService
from life_calc.core.models import CalculationResult, DurationBreakdown, StoredDates
from life_calc.core.protocols import Clock, DateStore

__all__: list[str] = [
    "CalculationResult",
    "Clock",
    "DateStore",
    "DurationBreakdown",
    "LifespanService",
    "StoredDates",
    "breakdown_from_span",
    "clamp_percentage",
    "compute",
]
