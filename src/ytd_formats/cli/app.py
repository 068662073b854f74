"""CLI application entry point for ytd-formats.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ytd_formats.exceptions.YtdFormatsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — lookups, filtering, and ordering are
  delegated to the core layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import sys

from ytd_formats.cli import exit_codes
from ytd_formats.cli.console import console, err_console
from ytd_formats.cli.listing import build_format_table
from ytd_formats.core.catalog import iter_formats, require_format
from ytd_formats.core.format_filter import filter_by_key, sort_by_key
from ytd_formats.core.models import FormatDescriptor, FormatKey
from ytd_formats.exceptions import FormatSelectionError, YtdFormatsError
from ytd_formats.version import __version__

_SORT_KEYS: tuple[str, ...] = (
    FormatKey.RESOLUTION.value,
    FormatKey.AUDIO_BITRATE.value,
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``ytd-formats``            — list every known itag
    * ``ytd-formats 18 22 137``  — show selected itags
    * ``ytd-formats --version``
    """
    parser = argparse.ArgumentParser(
        prog="ytd-formats",
        description="Inspect the catalog of known YouTube stream formats.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "itags",
        nargs="*",
        type=int,
        metavar="ITAG",
        help="Format ids to show.  Lists the whole catalog when omitted.",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        metavar="EXT",
        help="Only show formats in this container (repeatable).",
    )
    parser.add_argument(
        "--sort",
        choices=_SORT_KEYS,
        default=None,
        help="Order best-first by resolution or audio bitrate.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a table.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _select(args: argparse.Namespace) -> list[FormatDescriptor]:
    """Resolve the requested itags and apply ``--ext`` / ``--sort``."""
    if args.itags:
        formats = [require_format(itag) for itag in args.itags]
    else:
        formats = list(iter_formats())

    if args.ext:
        formats = filter_by_key(formats, FormatKey.EXTENSION, args.ext)
        if not formats:
            raise FormatSelectionError(
                f"No formats match container(s): {', '.join(args.ext)}",
                hint="Known containers: 3gp, flv, mp4, ts, webm.",
            )

    if args.sort is not None:
        formats = sort_by_key(formats, args.sort, reverse=True)

    return formats


def _render(formats: list[FormatDescriptor], *, as_json: bool) -> None:
    if as_json:
        payload = [fmt.to_dict() for fmt in formats]
        console.out(json.dumps(payload, indent=2), highlight=False)
        return
    console.print(build_format_table(formats))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ytd-formats CLI.

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
    _render(_select(args), as_json=args.json)
    return exit_codes.SUCCESS


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
    except YtdFormatsError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
