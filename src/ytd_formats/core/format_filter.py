"""Pure format selection helpers built on the accessor and comparator.

Every function in this module is a **pure** transformation — no I/O,
no side effects, and the input sequence is never mutated.

* **Filter** — keep formats whose value for a key is in an allowed set.
* **Sort** — order by a key using :func:`compare_key`.
* **Extremes** — formats tied at the best / worst value of a key.
* **Subtract** — drop formats whose itag appears in another sequence.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cmp_to_key

from ytd_formats.core.accessor import value_for_key
from ytd_formats.core.comparator import compare_key
from ytd_formats.core.models import FormatDescriptor, FormatKey, MetadataValue
from ytd_formats.exceptions import FormatSelectionError


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------

def _same_value(a: MetadataValue, b: MetadataValue) -> bool:
    """Variant-aware equality: a ``bool`` only ever equals a ``bool``."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def filter_by_key(
    formats: Sequence[FormatDescriptor],
    key: FormatKey | str,
    values: Iterable[MetadataValue],
) -> list[FormatDescriptor]:
    """Return formats whose value for *key* is one of *values*.

    Input order is preserved.  Metadata keys work as well as
    well-known ones; formats without the key never match.
    ``True`` does not match ``1`` (nor ``False`` ``0``).
    """
    allowed = list(values)
    result: list[FormatDescriptor] = []
    for fmt in formats:
        value = value_for_key(fmt, key)
        if value is not None and any(_same_value(value, v) for v in allowed):
            result.append(fmt)
    return result


# ---------------------------------------------------------------------------
# Sort
# ---------------------------------------------------------------------------

def sort_by_key(
    formats: Sequence[FormatDescriptor],
    key: FormatKey | str,
    *,
    reverse: bool = False,
) -> list[FormatDescriptor]:
    """Sort ascending by *key* (descending with ``reverse=True``).

    The sort is stable, so keys the comparator cannot order leave the
    input order untouched.
    """
    return sorted(
        formats,
        key=cmp_to_key(lambda a, b: compare_key(a, b, key)),
        reverse=reverse,
    )


# ---------------------------------------------------------------------------
# Extremes
# ---------------------------------------------------------------------------

def extremes(
    formats: Sequence[FormatDescriptor],
    key: FormatKey | str,
    *,
    best: bool = True,
) -> list[FormatDescriptor]:
    """Return every format tied at the highest (or lowest) value of *key*."""
    if not formats:
        return []
    ordered = sort_by_key(formats, key, reverse=best)
    head = ordered[0]
    return [fmt for fmt in ordered if compare_key(fmt, head, key) == 0]


def _first_extreme(
    formats: Sequence[FormatDescriptor],
    key: FormatKey | str,
    *,
    best: bool,
) -> FormatDescriptor:
    candidates = extremes(formats, key, best=best)
    if not candidates:
        raise FormatSelectionError(
            "No formats to choose from.",
            hint="Check that the filters applied beforehand left any formats.",
        )
    return candidates[0]


def best(
    formats: Sequence[FormatDescriptor],
    key: FormatKey | str,
) -> FormatDescriptor:
    """Return the first format with the highest value of *key*.

    Raises
    ------
    FormatSelectionError
        If *formats* is empty.
    """
    return _first_extreme(formats, key, best=True)


def worst(
    formats: Sequence[FormatDescriptor],
    key: FormatKey | str,
) -> FormatDescriptor:
    """Return the first format with the lowest value of *key*.

    Raises
    ------
    FormatSelectionError
        If *formats* is empty.
    """
    return _first_extreme(formats, key, best=False)


# ---------------------------------------------------------------------------
# Subtract
# ---------------------------------------------------------------------------

def subtract(
    formats: Sequence[FormatDescriptor],
    others: Iterable[FormatDescriptor],
) -> list[FormatDescriptor]:
    """Return *formats* minus any format whose itag occurs in *others*."""
    excluded = {fmt.itag for fmt in others}
    return [fmt for fmt in formats if fmt.itag not in excluded]
