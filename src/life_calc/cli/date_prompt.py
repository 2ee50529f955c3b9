"""Interactive date entry for the CLI layer.

This module is responsible for:

* Prompting the user for a ``YYYY-MM-DD`` date via questionary.
* Validating the answer inline so only parseable dates are accepted.
* Returning the entered string unchanged (stripped).

All interaction lives here — no calculation, no persistence.
"""

from __future__ import annotations

from typing import Any

from life_calc.exceptions import EnvironmentError, InputCancelledError, install_hint
from life_calc.utils.dates import is_valid_date_string

BIRTHDAY_LABEL = "Birthday"
END_DATE_LABEL = "Projected End Date"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive entry."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(install_hint("questionary")) from exc
    return questionary


# ---------------------------------------------------------------------------
# Validation (pure)
# ---------------------------------------------------------------------------

def _validate_answer(answer: str) -> bool | str:
    """questionary validator: ``True`` or the message shown under the input."""
    if is_valid_date_string(answer):
        return True
    return "Enter a date as YYYY-MM-DD"


# ---------------------------------------------------------------------------
# Public prompt functions
# ---------------------------------------------------------------------------

def prompt_date(label: str, default: str | None = None) -> str:
    """Ask for a single date.

    Parameters
    ----------
    label:
        Field name shown in the prompt (e.g. ``"Birthday"``).
    default:
        Pre-filled value, typically the last saved date.

    Returns
    -------
    str
        The entered ``YYYY-MM-DD`` string.

    Raises
    ------
    InputCancelledError
        If the user cancels the prompt (Esc / Ctrl+C returns ``None``).
    """
    questionary = _import_questionary()

    answer: str | None = questionary.text(
        f"{label} (YYYY-MM-DD):",
        default=default or "",
        validate=_validate_answer,
    ).ask()  # Returns None on Ctrl+C / Esc

    if answer is None:
        raise InputCancelledError(
            f"No {label.lower()} entered.",
            hint="Pass --start and --end to skip the prompts.",
        )

    return answer.strip()


def prompt_missing_dates(start: str | None, end: str | None) -> tuple[str, str]:
    """Prompt only for whichever of *start* / *end* is missing."""
    if start is None:
        start = prompt_date(BIRTHDAY_LABEL)
    if end is None:
        end = prompt_date(END_DATE_LABEL)
    return start, end
