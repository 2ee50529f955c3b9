"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and the system
clock.  Every raw exception must be caught here and re-raised as a
:class:`~life_calc.exceptions.LifeCalcError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from life_calc.infra.clock import SystemClock
from life_calc.infra.json_store import JsonDateStore

__all__: list[str] = [
    "JsonDateStore",
    "SystemClock",
]
