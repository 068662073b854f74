"""Turn an already-fetched info dict into catalog descriptors.

Extraction backends such as yt-dlp report a ``formats`` list whose
entries carry the service itag as ``format_id``.  This module maps
those entries onto the static catalog and carries the per-stream data
(URL, size, ...) along in each descriptor's metadata bag.

Nothing here performs I/O; the caller supplies the dict.
"""

from __future__ import annotations

from typing import Any

from ytd_formats.core.accessor import set_meta
from ytd_formats.core.catalog import lookup
from ytd_formats.core.models import METADATA_VALUE_TYPES, FormatDescriptor

STREAM_FIELDS: tuple[str, ...] = ("url", "filesize", "fps", "protocol")
"""Info-dict fields copied into the metadata bag when present."""


def _extract_raw_formats(info: dict[str, Any]) -> list[dict[str, Any]]:
    """Safely pull the ``formats`` list from a raw info dict."""
    raw: object = info.get("formats")
    if not isinstance(raw, list):
        return []
    return [entry for entry in raw if isinstance(entry, dict)]


def _parse_itag(raw: dict[str, Any]) -> int | None:
    format_id = str(raw.get("format_id", "")).strip()
    if not (format_id.isascii() and format_id.isdigit()):
        return None
    return int(format_id)


def _stream_value(raw: dict[str, Any], name: str) -> object:
    value = raw.get(name)
    if value is None and name == "filesize":
        value = raw.get("filesize_approx")
    return value


def describe_format(raw: dict[str, Any]) -> FormatDescriptor | None:
    """Return the annotated descriptor for one raw format entry.

    ``None`` when the entry's ``format_id`` is not a catalogued itag
    (e.g. HLS variants such as ``"hls-1080p"``).
    """
    itag = _parse_itag(raw)
    if itag is None:
        return None
    descriptor, found = lookup(itag)
    if not found:
        return None
    for name in STREAM_FIELDS:
        value = _stream_value(raw, name)
        if isinstance(value, METADATA_VALUE_TYPES):
            set_meta(descriptor, name, value)
    return descriptor


def describe_formats(info: dict[str, Any]) -> list[FormatDescriptor]:
    """Return annotated descriptors for every catalogued format in *info*.

    Entries that are not dicts, have a non-numeric ``format_id``, or
    reference an unknown itag are skipped.  Order is preserved.
    """
    result: list[FormatDescriptor] = []
    for raw in _extract_raw_formats(info):
        descriptor = describe_format(raw)
        if descriptor is not None:
            result.append(descriptor)
    return result
