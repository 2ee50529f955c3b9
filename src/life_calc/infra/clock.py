"""Infrastructure: the system clock.

This is the only place life-calc reads the current time.  Everything
downstream receives the instant as a plain argument.
"""

from __future__ import annotations

from datetime import datetime


class SystemClock:
    """Concrete :class:`~life_calc.core.protocols.Clock` using local time."""

    def now(self) -> datetime:
        return datetime.now()
