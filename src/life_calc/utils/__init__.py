"""Shared utilities — date parsing and formatting helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
