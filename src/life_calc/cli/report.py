"""Rendering of a :class:`CalculationResult` for the terminal.

Sections, top to bottom: header, the entered dates, life progress,
"Time You've Lived", "Time Remaining", closing reminder.  Rich is used
when installed; otherwise the same content is printed as plain text.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from datetime import datetime

from life_calc.cli.console import report, rich_available
from life_calc.cli.progress import build_rich_progress_bar, format_percentage, plain_progress_bar
from life_calc.core.models import CalculationResult, DurationBreakdown
from life_calc.utils.dates import format_display_date

TITLE = "Life Calculator"
SUBTITLE = (
    "Discover how much time you've lived and visualize your remaining "
    "journey through life's chapters."
)
FOOTER = (
    "Remember: These calculations are estimates based on your projections. "
    "Make every moment count."
)

# (unit label, description) per row, in display order.
LIVED_ROWS: tuple[tuple[str, str], ...] = (
    ("Years", "Years on this Earth"),
    ("Quarters", "Quarters experienced"),
    ("Months", "Months of experiences"),
    ("Weeks", "Weeks of memories"),
    ("Days", "Days of existence"),
)
REMAINING_ROWS: tuple[tuple[str, str], ...] = (
    ("Years", "Years ahead"),
    ("Quarters", "Seasons to experience"),
    ("Months", "Months to cherish"),
    ("Weeks", "Weeks to make count"),
    ("Days", "Days left to live"),
)


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms)
# ---------------------------------------------------------------------------

def format_count(value: int) -> str:
    """Group thousands, e.g. ``12345`` → ``"12,345"``."""
    return f"{value:,}"


def unit_values(breakdown: DurationBreakdown) -> tuple[int, int, int, int, int]:
    """Return the five displayed units in row order."""
    return (
        breakdown.years,
        breakdown.quarters,
        breakdown.months,
        breakdown.weeks,
        breakdown.days,
    )


def breakdown_rows(
    breakdown: DurationBreakdown,
    labels: Sequence[tuple[str, str]],
) -> list[tuple[str, str, str]]:
    """Zip a breakdown with its labels into ``(unit, value, description)`` rows."""
    return [
        (unit, format_count(value), description)
        for (unit, description), value in zip(labels, unit_values(breakdown))
    ]


def result_to_json(result: CalculationResult) -> str:
    return json.dumps(result.as_dict(), indent=2)


# ---------------------------------------------------------------------------
# Rich rendering
# ---------------------------------------------------------------------------

def _render_rich(result: CalculationResult, start: datetime, end: datetime) -> None:
    from rich.table import Table

    report.print()
    report.print(f"[bold]{TITLE}[/bold]")
    report.print(f"[dim]{SUBTITLE}[/dim]")
    report.print()
    report.print(f"[bold cyan]Birthday:[/bold cyan]           {format_display_date(start)}")
    report.print(f"[bold cyan]Projected End Date:[/bold cyan] {format_display_date(end)}")
    report.print()

    report.print(
        f"[bold magenta]Life Progress:[/bold magenta] "
        f"[bold]{format_percentage(result.life_progress)}[/bold] "
        "of your projected life completed"
    )
    report.print(build_rich_progress_bar(result.life_progress))
    report.print()

    for title, breakdown, labels, style in (
        ("Time You've Lived", result.lived, LIVED_ROWS, "bold cyan"),
        ("Time Remaining", result.remaining, REMAINING_ROWS, "bold green"),
    ):
        table = Table(
            title=title,
            show_header=True,
            header_style=style,
            border_style="dim",
        )
        table.add_column("Unit", style="bold", min_width=10)
        table.add_column("Value", justify="right", min_width=10)
        table.add_column("", style="dim")
        for row in breakdown_rows(breakdown, labels):
            table.add_row(*row)
        report.print(table)
        report.print()

    report.print(f"[dim]{FOOTER}[/dim]")


# ---------------------------------------------------------------------------
# Plain rendering
# ---------------------------------------------------------------------------

def _render_plain(result: CalculationResult, start: datetime, end: datetime) -> None:
    out = sys.stdout
    print(f"\n{TITLE}", file=out)
    print("=" * 56, file=out)
    print(f"{'Birthday:':<20} {format_display_date(start)}", file=out)
    print(f"{'Projected End Date:':<20} {format_display_date(end)}", file=out)
    print(file=out)
    print(
        f"Life Progress: {format_percentage(result.life_progress)} "
        "of your projected life completed",
        file=out,
    )
    print(plain_progress_bar(result.life_progress), file=out)

    for title, breakdown, labels in (
        ("Time You've Lived", result.lived, LIVED_ROWS),
        ("Time Remaining", result.remaining, REMAINING_ROWS),
    ):
        print(f"\n{title}", file=out)
        print("-" * 56, file=out)
        for unit, value, description in breakdown_rows(breakdown, labels):
            print(f"{unit:<10} {value:>12}   {description}", file=out)

    print(f"\n{FOOTER}\n", file=out)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render_result(result: CalculationResult, start: datetime, end: datetime) -> None:
    """Render the full report to stdout."""
    if rich_available():
        _render_rich(result, start, end)
    else:
        _render_plain(result, start, end)
