"""CLI application entry point and command routing for life-calc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~life_calc.exceptions.LifeCalcError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure adapters.
* This is the only place that reads settings, installs logging, and
  builds the concrete store and clock.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from life_calc.cli import exit_codes
from life_calc.cli.console import console
from life_calc.config import Settings, load_settings
from life_calc.exceptions import LifeCalcError
from life_calc.log import configure_logging
from life_calc.version import __version__

if TYPE_CHECKING:
    from life_calc.core.lifespan_service import LifespanService

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``life-calc [show] [--start D] [--end D]`` — compute and render
    * ``life-calc reset``   — forget the stored dates
    * ``life-calc doctor``  — environment diagnostics
    * ``life-calc --version``
    """
    parser = argparse.ArgumentParser(
        prog="life-calc",
        description="How much time you've lived, and how much remains.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default="show",
        choices=("show", "reset", "doctor"),
        help="Command to run (default: show).",
    )
    parser.add_argument(
        "--start",
        metavar="YYYY-MM-DD",
        default=None,
        help="Birthday.  Defaults to the stored value, else prompts.",
    )
    parser.add_argument(
        "--end",
        metavar="YYYY-MM-DD",
        default=None,
        help="Projected end date.  Defaults to the stored value, else prompts.",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not remember the dates for next time.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON on stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service(settings: Settings) -> LifespanService:
    """Wire the JSON store and the system clock into the service."""
    from life_calc.core.lifespan_service import LifespanService
    from life_calc.infra.clock import SystemClock
    from life_calc.infra.json_store import JsonDateStore

    store_path = settings.STORE_PATH.expanduser()
    logger.debug("Using date store at %s", store_path)
    return LifespanService(JsonDateStore(store_path), SystemClock())


def _handle_show(args: argparse.Namespace, settings: Settings) -> int:
    """Resolve both dates, compute, and render.

    Flow:
    1. Take each date from the command line, else the store.
    2. Prompt interactively for whatever is still missing.
    3. Persist the dates (unless ``--no-save``).
    4. Compute against the current time and render (or print JSON).
    """
    from life_calc.cli.date_prompt import prompt_missing_dates
    from life_calc.cli.report import render_result, result_to_json
    from life_calc.utils.dates import parse_date_boundary

    service = _build_service(settings)
    stored = service.load_dates()

    start: str | None = args.start if args.start is not None else stored.start
    end: str | None = args.end if args.end is not None else stored.end
    if start is None or end is None:
        start, end = prompt_missing_dates(start, end)

    if not args.no_save:
        service.save_dates(start, end)

    result = service.calculate(start, end)

    if args.json:
        sys.stdout.write(result_to_json(result) + "\n")
        return exit_codes.SUCCESS

    render_result(result, parse_date_boundary(start), parse_date_boundary(end))
    return exit_codes.SUCCESS


def _handle_reset(settings: Settings) -> int:
    """Dispatch the ``reset`` command."""
    service = _build_service(settings)
    service.clear_dates()
    console.print("[green]Stored dates cleared.[/green]")
    return exit_codes.SUCCESS


def _handle_doctor(settings: Settings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from life_calc.cli.doctor import run_doctor

    return run_doctor(settings.STORE_PATH.expanduser())


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the life-calc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.LOG_LEVEL, verbose=args.verbose)

    if args.target == "doctor":
        return _handle_doctor(settings)

    if args.target == "reset":
        return _handle_reset(settings)

    return _handle_show(args, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LifeCalcError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
