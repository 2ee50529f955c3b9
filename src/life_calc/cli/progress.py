"""Bounded life-progress bar, rendered with Rich or as plain text.

The percentage arriving here is already clamped by the core; the bar
clamps again so that a hand-built value can never overflow its width.

Design
------
* :func:`build_rich_progress_bar` returns a Rich renderable.
* :func:`plain_progress_bar` is the fallback when Rich is missing.
* No ``print()`` — callers choose where the bar goes.
"""

from __future__ import annotations

from typing import Any

from life_calc.core.calculator import clamp_percentage
from life_calc.exceptions import EnvironmentError, install_hint

PLAIN_BAR_WIDTH: int = 40


def format_percentage(value: float) -> str:
    """Render a percentage with one decimal, e.g. ``"42.7%"``."""
    return f"{value:.1f}%"


def build_rich_progress_bar(percentage: float, *, width: int | None = None) -> Any:
    """Return a :class:`rich.progress_bar.ProgressBar` filled to *percentage*."""
    try:
        from rich.progress_bar import ProgressBar
    except ModuleNotFoundError as exc:
        raise EnvironmentError(install_hint("rich")) from exc

    return ProgressBar(
        total=100.0,
        completed=clamp_percentage(percentage),
        width=width,
        complete_style="magenta",
        finished_style="magenta",
    )


def plain_progress_bar(percentage: float, *, width: int = PLAIN_BAR_WIDTH) -> str:
    """Return ``[#####-----]`` filled to *percentage* of *width*."""
    bounded = clamp_percentage(percentage)
    filled = int(round(width * bounded / 100))
    return "[" + "#" * filled + "-" * (width - filled) + "]"
