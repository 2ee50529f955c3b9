"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path of ``life-calc`` uses a
well-known, tested value rather than magic integers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — report rendered, dates reset, or diagnostics passed."""

GENERAL_ERROR: int = 1
"""A known LifeCalcError was caught (bad date, bad ordering, storage)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
