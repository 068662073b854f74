"""Custom exception hierarchy for ytd-formats.

The catalog primitives (``lookup``, ``value_for_key``, ``compare_key``)
never raise — absence and malformed input degrade to default values.
The exceptions below belong to the stricter convenience helpers built
on top of them, and to the CLI error boundary.

Hierarchy
---------
YtdFormatsError
├── UnknownFormatError
├── FormatSelectionError
└── MetadataError
    ├── MetadataKeyError
    └── MetadataValueError
"""

from __future__ import annotations


class YtdFormatsError(Exception):
    """Base exception for all ytd-formats errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Catalog ---------------------------------------------------------------

class UnknownFormatError(YtdFormatsError):
    """Raised when an itag is required but absent from the catalog."""

    def __init__(self, itag: int, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown format itag: {itag}", hint=hint)
        self.itag: int = itag


# --- Format handling -------------------------------------------------------

class FormatSelectionError(YtdFormatsError):
    """Raised when no suitable format can be determined."""


# --- Metadata bag ----------------------------------------------------------

class MetadataError(YtdFormatsError):
    """Raised when a write to a descriptor's metadata bag is rejected."""


class MetadataKeyError(MetadataError, KeyError):
    """Raised when a metadata key collides with a well-known attribute."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0]) if self.args else ""


class MetadataValueError(MetadataError, TypeError):
    """Raised when a metadata value is not a supported variant."""
