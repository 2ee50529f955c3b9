"""CLI layer — argument parsing, user interaction, and error boundary.

This package is the outermost layer of the application (the display
shell).  It may import from ``core``, ``infra``, and ``utils``, but no
other layer may import from ``cli``.
"""
