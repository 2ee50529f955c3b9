"""``life-calc doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies life-calc's requirements.

This module lives in the CLI layer.  No business logic resides here; it
purely collects and displays diagnostic data.
"""

from __future__ import annotations

import os
import platform
import sys
from importlib import metadata
from pathlib import Path

from life_calc.cli import exit_codes
from life_calc.cli.console import console
from life_calc.config import load_settings
from life_calc.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = major >= 3 and minor >= 10
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _package_check(label: str, module: str, distribution: str) -> tuple[str, str, str]:
    """Return (label, value, status) for an optional UI package.

    Missing UI packages are a WARN: ``--json`` and ``doctor`` still work.
    """
    try:
        __import__(module)
    except ImportError:
        return label, "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        version = "unknown"
    return label, version, "[green]OK[/green]"


def _rich_check() -> tuple[str, str, str]:
    return _package_check("rich", "rich", "rich")


def _questionary_check() -> tuple[str, str, str]:
    return _package_check("questionary", "questionary", "questionary")


def _nearest_existing_dir(path: Path) -> Path:
    candidate = path
    while not candidate.exists() and candidate != candidate.parent:
        candidate = candidate.parent
    return candidate


def _store_check(store_path: Path) -> tuple[str, str, str]:
    """Return (label, value, status) for the date store location."""
    anchor = _nearest_existing_dir(store_path.parent)
    if os.access(anchor, os.W_OK):
        return "Store", str(store_path), "[green]OK[/green]"
    return "Store", str(store_path), "[red]FAIL (not writable)[/red]"


def _lifecalc_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the life-calc version row."""
    return "life-calc", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nlife-calc doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<40} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(store_path: Path | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    if store_path is None:
        store_path = load_settings().STORE_PATH

    checks = [
        _lifecalc_version_check(),
        _python_version_check(),
        _rich_check(),
        _questionary_check(),
        _store_check(store_path),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="life-calc doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
