"""life-calc — how much time you've lived, and how much remains.

A pure duration calculator with a small terminal shell around it.
"""

from life_calc.version import __version__

__all__: list[str] = ["__version__"]
