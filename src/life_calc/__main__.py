"""Allow ``python -m life_calc`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m life_calc`` behaves exactly like the ``life-calc`` console
script.
"""

from __future__ import annotations

from life_calc.cli.app import cli

if __name__ == "__main__":
    cli()
