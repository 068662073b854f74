"""Static catalog of known itags.

The table below is literal data evaluated once at import time and
wrapped in a read-only mapping.  It stores plain tuples rather than
descriptors: every lookup builds a fresh :class:`FormatDescriptor` with
its own empty metadata bag, so callers can never alias each other's
annotations or reach into catalog storage.

Row layout: ``itag: (extension, resolution, video_encoding,
audio_encoding, audio_bitrate)``.

Some rows look inconsistent (itag 248 is video-only yet reports an
audio bitrate of 9, itag 82 has a bitrate but no audio codec, itag 5
spells its codec ``Sorenson H.283``).  Consumers already rank formats
by these exact values; they must not be corrected.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Final

from ytd_formats.core.models import FormatDescriptor
from ytd_formats.exceptions import UnknownFormatError

_Row = tuple[str, str, str, str, int]

FORMATS: Final[Mapping[int, _Row]] = MappingProxyType({
    5: ("flv", "240p", "Sorenson H.283", "mp3", 64),
    6: ("flv", "270p", "Sorenson H.263", "mp3", 64),
    13: ("3gp", "", "MPEG-4 Visual", "aac", 0),
    17: ("3gp", "144p", "MPEG-4 Visual", "aac", 24),
    18: ("mp4", "360p", "H.264", "aac", 96),
    22: ("mp4", "720p", "H.264", "aac", 192),
    34: ("flv", "480p", "H.264", "aac", 128),
    35: ("flv", "360p", "H.264", "aac", 128),
    36: ("3gp", "240p", "MPEG-4 Visual", "aac", 36),
    37: ("mp4", "1080p", "H.264", "aac", 192),
    38: ("mp4", "3072p", "H.264", "aac", 192),
    43: ("webm", "360p", "VP8", "vorbis", 128),
    44: ("webm", "480p", "VP8", "vorbis", 128),
    45: ("webm", "720p", "VP8", "vorbis", 192),
    46: ("webm", "1080p", "VP8", "vorbis", 192),
    82: ("mp4", "360p", "H.264", "", 96),
    83: ("mp4", "240p", "H.264", "aac", 96),
    84: ("mp4", "720p", "H.264", "aac", 192),
    85: ("mp4", "1080p", "H.264", "aac", 192),
    100: ("webm", "360p", "VP8", "vorbis", 128),
    101: ("webm", "360p", "VP8", "vorbis", 192),
    102: ("webm", "720p", "VP8", "vorbis", 192),
    # DASH (video only)
    133: ("mp4", "240p", "H.264", "", 0),
    134: ("mp4", "360p", "H.264", "", 0),
    135: ("mp4", "480p", "H.264", "", 0),
    136: ("mp4", "720p", "H.264", "", 0),
    137: ("mp4", "1080p", "H.264", "", 0),
    138: ("mp4", "2160p", "H.264", "", 0),
    160: ("mp4", "144p", "H.264", "", 0),
    242: ("webm", "240p", "VP9", "", 0),
    243: ("webm", "360p", "VP9", "", 0),
    244: ("webm", "480p", "VP9", "", 0),
    247: ("webm", "720p", "VP9", "", 0),
    248: ("webm", "1080p", "VP9", "", 9),
    264: ("mp4", "1440p", "H.264", "", 0),
    266: ("mp4", "2160p", "H.264", "", 0),
    271: ("webm", "1440p", "VP9", "", 0),
    272: ("webm", "2160p", "VP9", "", 0),
    278: ("webm", "144p", "VP9", "", 0),
    298: ("mp4", "720p", "H.264", "", 0),
    299: ("mp4", "1080p", "H.264", "", 0),
    302: ("webm", "720p", "VP9", "", 0),
    303: ("webm", "1080p", "VP9", "", 0),
    # DASH (audio only)
    139: ("mp4", "", "", "aac", 48),
    140: ("mp4", "", "", "aac", 128),
    141: ("mp4", "", "", "aac", 256),
    171: ("webm", "", "", "vorbis", 128),
    172: ("webm", "", "", "vorbis", 192),
    249: ("webm", "", "", "opus", 50),
    250: ("webm", "", "", "opus", 70),
    251: ("webm", "", "", "opus", 160),
    # Live streaming
    92: ("ts", "240p", "H.264", "aac", 48),
    93: ("ts", "480p", "H.264", "aac", 128),
    94: ("ts", "720p", "H.264", "aac", 128),
    95: ("ts", "1080p", "H.264", "aac", 256),
    96: ("ts", "720p", "H.264", "aac", 256),
    120: ("flv", "720p", "H.264", "aac", 128),
    127: ("ts", "", "", "aac", 96),
    128: ("ts", "", "", "aac", 96),
    132: ("ts", "240p", "H.264", "aac", 48),
    151: ("ts", "720p", "H.264", "aac", 24),
})


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def lookup(itag: int) -> tuple[FormatDescriptor, bool]:
    """Return the descriptor for *itag* and whether it was found.

    A miss is not an error: the zero-valued descriptor is returned
    together with ``False``.  Ids that are not plain ``int`` values
    (``18.0``, ``True``) are never found.
    """
    # bool is an int subclass; floats hash equal to ints.
    if isinstance(itag, bool) or not isinstance(itag, int):
        return FormatDescriptor(), False
    row = FORMATS.get(itag)
    if row is None:
        return FormatDescriptor(), False
    extension, resolution, video_encoding, audio_encoding, audio_bitrate = row
    return (
        FormatDescriptor(
            itag=itag,
            extension=extension,
            resolution=resolution,
            video_encoding=video_encoding,
            audio_encoding=audio_encoding,
            audio_bitrate=audio_bitrate,
        ),
        True,
    )


def require_format(itag: int) -> FormatDescriptor:
    """Like :func:`lookup`, but raise when *itag* is not catalogued.

    Raises
    ------
    UnknownFormatError
        If *itag* has no catalog entry.
    """
    descriptor, found = lookup(itag)
    if not found:
        raise UnknownFormatError(
            itag,
            hint="Run 'ytd-formats' without arguments to list known itags.",
        )
    return descriptor


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------

def known_itags() -> tuple[int, ...]:
    """Return every catalogued itag in ascending order."""
    return tuple(sorted(FORMATS))


def iter_formats() -> Iterator[FormatDescriptor]:
    """Yield a fresh descriptor for every catalogued itag, ascending."""
    for itag in known_itags():
        yield lookup(itag)[0]
