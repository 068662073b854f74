"""Core layer — the itag catalog and pure functions over descriptors.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* ``lookup``, ``value_for_key``, and ``compare_key`` never raise.
"""

from ytd_formats.core.accessor import set_meta, value_for_key
from ytd_formats.core.catalog import (
    FORMATS,
    iter_formats,
    known_itags,
    lookup,
    require_format,
)
from ytd_formats.core.comparator import compare_key, resolution_rank
from ytd_formats.core.models import FormatDescriptor, FormatKey, MetadataValue

__all__: list[str] = [
    "FORMATS",
    "FormatDescriptor",
    "FormatKey",
    "MetadataValue",
    "compare_key",
    "iter_formats",
    "known_itags",
    "lookup",
    "require_format",
    "resolution_rank",
    "set_meta",
    "value_for_key",
]
