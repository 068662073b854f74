"""Process exit codes returned by ``ytd-formats``.

Every exit path in :mod:`ytd_formats.cli.app` uses one of these.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Formats were rendered."""

GENERAL_ERROR: int = 1
"""A YtdFormatsError (unknown itag, empty selection) was reported."""

UNEXPECTED_ERROR: int = 2
"""Anything not derived from YtdFormatsError reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
