"""Key-driven three-way comparison of format descriptors.

Only two attributes are orderable:

* **resolution** — labels are ranked by :func:`resolution_rank`.
* **audio bitrate** — plain integer difference.

Every other key compares equal (``0``).  Callers that need to order by
extension, codec, or itag do so themselves via
:func:`~ytd_formats.core.accessor.value_for_key`.
"""

from __future__ import annotations

from ytd_formats.core.accessor import as_format_key
from ytd_formats.core.models import FormatDescriptor, FormatKey


def resolution_rank(label: str) -> int:
    """Return the numeric rank of a resolution label.

    The last two characters are stripped and the remainder parsed as a
    non-negative decimal integer, so ``"720p"`` ranks ``72`` and
    ``"1080p"`` ranks ``108``.  Empty, too-short, and malformed labels
    rank ``0``.
    """
    if len(label) < 2:
        return 0
    digits = label[:-2]
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(digits)


def compare_key(
    a: FormatDescriptor,
    b: FormatDescriptor,
    key: FormatKey | str,
) -> int:
    """Compare *a* and *b* by *key*.

    Returns a negative number when ``a < b``, positive when ``a > b``,
    and ``0`` when equal or when *key* is not orderable.  Never raises.
    """
    known = as_format_key(key)
    if known is FormatKey.RESOLUTION:
        return resolution_rank(a.resolution) - resolution_rank(b.resolution)
    if known is FormatKey.AUDIO_BITRATE:
        return a.audio_bitrate - b.audio_bitrate
    return 0
