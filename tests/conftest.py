"""Shared pytest fixtures and configuration for the ytd-formats test suite.

Guidelines
----------
* No internet access in any test.
* Core tests must be pure — no side effects.
* Descriptors come from the real catalog unless a test needs a
  synthetic label.
"""

from __future__ import annotations

import pytest

from ytd_formats.core.catalog import lookup
from ytd_formats.core.models import FormatDescriptor


def _get(itag: int) -> FormatDescriptor:
    descriptor, found = lookup(itag)
    assert found, f"itag {itag} missing from catalog"
    return descriptor


@pytest.fixture
def fmt_18() -> FormatDescriptor:
    """mp4 360p H.264 / aac 96 kbps."""
    return _get(18)


@pytest.fixture
def fmt_22() -> FormatDescriptor:
    """mp4 720p H.264 / aac 192 kbps."""
    return _get(22)


@pytest.fixture
def fmt_37() -> FormatDescriptor:
    """mp4 1080p H.264 / aac 192 kbps."""
    return _get(37)
