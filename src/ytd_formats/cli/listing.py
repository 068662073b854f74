"""Rendering of catalog descriptors for the ``ytd-formats`` command."""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table

from ytd_formats.core.models import FormatDescriptor

_DASH = "[dim]—[/dim]"


def _cell(value: str) -> str:
    return value if value else _DASH


def _bitrate_cell(fmt: FormatDescriptor) -> str:
    return f"{fmt.audio_bitrate} kbps" if fmt.audio_bitrate else _DASH


def _kind(fmt: FormatDescriptor) -> str:
    if fmt.has_video and fmt.has_audio:
        return "muxed"
    if fmt.has_video:
        return "video"
    if fmt.has_audio:
        return "audio"
    return "unknown"


def build_format_table(formats: Sequence[FormatDescriptor]) -> Table:
    """Build a Rich table with one row per descriptor."""
    table = Table(
        title="Known YouTube formats",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("itag", justify="right", style="bold")
    table.add_column("ext")
    table.add_column("resolution", justify="right")
    table.add_column("video")
    table.add_column("audio")
    table.add_column("bitrate", justify="right")
    table.add_column("kind")

    for fmt in formats:
        table.add_row(
            str(fmt.itag),
            fmt.extension,
            _cell(fmt.resolution),
            _cell(fmt.video_encoding),
            _cell(fmt.audio_encoding),
            _bitrate_cell(fmt),
            _kind(fmt),
        )
    return table
