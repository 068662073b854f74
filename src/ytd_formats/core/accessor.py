"""Uniform key-based access to descriptor attributes.

Generic filter and sort pipelines address attributes by key rather than
by field name.  Well-known keys (:class:`FormatKey`) resolve to typed
fields through a fixed getter table; every other key falls through to
the descriptor's metadata bag.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from ytd_formats.core.models import (
    METADATA_VALUE_TYPES,
    FormatDescriptor,
    FormatKey,
    MetadataValue,
)
from ytd_formats.exceptions import MetadataKeyError, MetadataValueError

_GETTERS: Final[dict[FormatKey, Callable[[FormatDescriptor], MetadataValue]]] = {
    FormatKey.ITAG: lambda fmt: fmt.itag,
    FormatKey.EXTENSION: lambda fmt: fmt.extension,
    FormatKey.RESOLUTION: lambda fmt: fmt.resolution,
    FormatKey.VIDEO_ENCODING: lambda fmt: fmt.video_encoding,
    FormatKey.AUDIO_ENCODING: lambda fmt: fmt.audio_encoding,
    FormatKey.AUDIO_BITRATE: lambda fmt: fmt.audio_bitrate,
}


def as_format_key(key: FormatKey | str) -> FormatKey | None:
    """Return the well-known key matching *key*, or ``None``."""
    if isinstance(key, FormatKey):
        return key
    try:
        return FormatKey(key)
    except ValueError:
        return None


def value_for_key(
    descriptor: FormatDescriptor,
    key: FormatKey | str,
) -> MetadataValue | None:
    """Return the value stored under *key*.

    Well-known keys return the matching typed field.  Any other key is
    looked up in ``descriptor.meta``; ``None`` means it was never set.
    """
    known = as_format_key(key)
    if known is not None:
        return _GETTERS[known](descriptor)
    return descriptor.meta.get(key)


def set_meta(
    descriptor: FormatDescriptor,
    key: str,
    value: MetadataValue,
) -> None:
    """Store *value* in the metadata bag of *descriptor*.

    Raises
    ------
    MetadataKeyError
        If *key* is not a ``str``, or names a well-known attribute (the
        bag entry would never be reachable through :func:`value_for_key`).
    MetadataValueError
        If *value* is not a ``str``, ``int``, ``bool`` or ``float``.
    """
    if not isinstance(key, str):
        raise MetadataKeyError(
            f"Metadata keys must be strings, not {type(key).__name__}.",
        )
    if as_format_key(key) is not None:
        raise MetadataKeyError(
            f"Metadata key {key!r} is reserved for a catalog attribute.",
            hint="Choose a key outside: " + ", ".join(k.value for k in FormatKey),
        )
    if not isinstance(value, METADATA_VALUE_TYPES):
        raise MetadataValueError(
            f"Unsupported metadata value type: {type(value).__name__}",
        )
    descriptor.meta[key] = value
