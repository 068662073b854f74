"""Domain models for ytd-formats.

:class:`FormatDescriptor` is a **frozen** dataclass — its catalog
fields are immutable value data.  The one exception is the ``meta``
bag: a plain dict that callers may annotate after lookup (e.g. with a
stream URL).  The bag never takes part in equality, hashing, or repr,
so two descriptors for the same itag compare equal regardless of their
annotations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

MetadataValue = Union[str, int, bool, float]
"""Variant of values a metadata bag (and the accessor) may hold."""

METADATA_VALUE_TYPES: tuple[type, ...] = (str, int, bool, float)


# ---------------------------------------------------------------------------
# Attribute keys
# ---------------------------------------------------------------------------

class FormatKey(str, Enum):
    """Closed set of well-known descriptor attributes.

    Members compare equal to their string values, so ``"res"`` and
    ``FormatKey.RESOLUTION`` address the same attribute.
    """

    ITAG = "itag"
    EXTENSION = "ext"
    RESOLUTION = "res"
    VIDEO_ENCODING = "videnc"
    AUDIO_ENCODING = "audenc"
    AUDIO_BITRATE = "audbr"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Format descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatDescriptor:
    """One encoding profile known to the hosting service.

    The zero value (``FormatDescriptor()``) stands for "no such format"
    and is what an unsuccessful catalog lookup returns.
    """

    itag: int = 0
    """Service-assigned format identifier."""

    extension: str = ""
    """Container extension (e.g. ``mp4``, ``webm``, ``ts``)."""

    resolution: str = ""
    """Resolution label such as ``"720p"``; empty for audio-only."""

    video_encoding: str = ""
    """Video codec name; empty when the profile has no video track."""

    audio_encoding: str = ""
    """Audio codec name; empty when the profile has no audio track."""

    audio_bitrate: int = 0
    """Audio bitrate in kbit/s; ``0`` when unknown or absent."""

    meta: dict[str, MetadataValue] = field(
        default_factory=dict, compare=False, hash=False, repr=False,
    )
    """Caller-supplied annotations.  Never populated by the catalog."""

    @property
    def has_video(self) -> bool:
        return self.video_encoding != ""

    @property
    def has_audio(self) -> bool:
        return self.audio_encoding != ""

    def to_dict(self) -> dict[str, Any]:
        """Return the catalog fields keyed by their JSON names.

        The metadata bag is not included.
        """
        return {
            "itag": self.itag,
            "extension": self.extension,
            "resolution": self.resolution,
            "videoEncoding": self.video_encoding,
            "audioEncoding": self.audio_encoding,
            "audioBitrate": self.audio_bitrate,
        }
