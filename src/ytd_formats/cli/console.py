"""Rich consoles shared by the CLI layer.

Tables and JSON go to stdout so they can be piped; diagnostics and
error messages go to stderr.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
"""Primary output (catalog tables, JSON)."""

err_console = Console(stderr=True)
"""Errors, hints, and other diagnostics."""
