"""Single source of truth for the life-calc version string."""

__version__: str = "1.0.0"
