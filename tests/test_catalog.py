"""Tests for the static itag catalog (core/catalog.py)."""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from ytd_formats.core.catalog import (
    FORMATS,
    iter_formats,
    known_itags,
    lookup,
    require_format,
)
from ytd_formats.core.models import FormatDescriptor
from ytd_formats.exceptions import UnknownFormatError, YtdFormatsError

_RESOLUTION = re.compile(r"^[0-9]+p$")

# Every catalog row, by itag.  Values are reproduced exactly, including
# the odd ones (itag 5 codec spelling, itag 248 bitrate).
EXPECTED_FORMATS: dict[int, tuple[str, str, str, str, int]] = {
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
}


# ---------------------------------------------------------------------------
# Table contents
# ---------------------------------------------------------------------------

class TestTable:
    def test_entry_count(self) -> None:
        assert len(FORMATS) == 61

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            FORMATS[999] = ("mp4", "", "", "", 0)  # type: ignore[index]

    @pytest.mark.parametrize("itag", sorted(FORMATS))
    def test_row_invariants(self, itag: int) -> None:
        extension, resolution, _, _, audio_bitrate = FORMATS[itag]
        assert extension in {"flv", "3gp", "mp4", "webm", "ts"}
        assert resolution == "" or _RESOLUTION.match(resolution)
        assert audio_bitrate >= 0

    def test_every_row_matches(self) -> None:
        assert dict(FORMATS) == EXPECTED_FORMATS

    def test_no_extra_or_missing_itags(self) -> None:
        assert set(FORMATS) == set(EXPECTED_FORMATS)

    def test_dash_audio_only_rows(self) -> None:
        for itag in (139, 140, 141, 171, 172, 249, 250, 251):
            _, resolution, video_encoding, audio_encoding, bitrate = FORMATS[itag]
            assert resolution == ""
            assert video_encoding == ""
            assert audio_encoding in {"aac", "vorbis", "opus"}
            assert bitrate > 0

    def test_dash_video_only_rows_except_248(self) -> None:
        video_only = (133, 134, 135, 136, 137, 138, 160, 242, 243, 244,
                      247, 264, 266, 271, 272, 278, 298, 299, 302, 303)
        for itag in video_only:
            assert FORMATS[itag][3] == ""
            assert FORMATS[itag][4] == 0
        assert FORMATS[248][3] == ""
        assert FORMATS[248][4] == 9


# ---------------------------------------------------------------------------
# lookup
# ---------------------------------------------------------------------------

class TestLookup:
    @pytest.mark.parametrize("itag", sorted(FORMATS))
    def test_every_published_itag_is_found(self, itag: int) -> None:
        descriptor, found = lookup(itag)
        assert found is True
        assert descriptor.itag == itag
        assert descriptor.meta == {}

    def test_fields_copied_from_row(self) -> None:
        descriptor, _ = lookup(22)
        assert descriptor.extension == "mp4"
        assert descriptor.resolution == "720p"
        assert descriptor.video_encoding == "H.264"
        assert descriptor.audio_encoding == "aac"
        assert descriptor.audio_bitrate == 192

    @pytest.mark.parametrize("itag", [0, -1, 1, 999, 10_000])
    def test_missing_itag(self, itag: int) -> None:
        descriptor, found = lookup(itag)
        assert found is False
        assert descriptor == FormatDescriptor()
        assert descriptor.meta == {}

    def test_bags_are_not_aliased(self) -> None:
        a, _ = lookup(18)
        b, _ = lookup(18)
        a.meta["url"] = "https://example.com/a"
        assert b.meta == {}
        assert lookup(18)[0].meta == {}

    @pytest.mark.parametrize("itag", [18.0, True, "18", None])
    def test_non_int_itag_is_not_found(self, itag: object) -> None:
        descriptor, found = lookup(itag)  # type: ignore[arg-type]
        assert found is False
        assert descriptor == FormatDescriptor()
        assert type(descriptor.itag) is int

    def test_missing_lookups_get_independent_bags(self) -> None:
        a, _ = lookup(999)
        b, _ = lookup(999)
        a.meta["k"] = "v"
        assert b.meta == {}

    def test_concurrent_lookups(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: lookup(22), range(64)))
        assert all(found for _, found in results)
        assert len({id(d.meta) for d, _ in results}) == 64


# ---------------------------------------------------------------------------
# require_format / iteration
# ---------------------------------------------------------------------------

class TestRequireFormat:
    def test_returns_descriptor(self) -> None:
        assert require_format(37).resolution == "1080p"

    def test_raises_for_unknown(self) -> None:
        with pytest.raises(UnknownFormatError) as exc_info:
            require_format(999)
        assert exc_info.value.itag == 999
        assert "999" in str(exc_info.value)
        assert exc_info.value.hint is not None

    def test_is_domain_error(self) -> None:
        with pytest.raises(YtdFormatsError):
            require_format(1)


class TestIteration:
    def test_known_itags_sorted(self) -> None:
        itags = known_itags()
        assert list(itags) == sorted(FORMATS)
        assert len(set(itags)) == len(itags)

    def test_iter_formats_yields_fresh_descriptors(self) -> None:
        first = list(iter_formats())
        second = list(iter_formats())
        assert [d.itag for d in first] == list(known_itags())
        first[0].meta["k"] = "v"
        assert second[0].meta == {}
