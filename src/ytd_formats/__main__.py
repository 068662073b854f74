"""Allow ``python -m ytd_formats`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ytd_formats`` behaves identically to the ``ytd-formats``
console script.
"""

from __future__ import annotations

from ytd_formats.cli.app import cli

if __name__ == "__main__":
    cli()
