"""ytd-formats — catalog of known YouTube stream encoding profiles.

Exposes a static itag table plus a key-based accessor and comparator
used by format-selection logic.
"""

from ytd_formats.version import __version__

__all__: list[str] = ["__version__"]
