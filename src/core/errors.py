# core/errors.py
from __future__ import annotations


class TrackSearchError(Exception):
    """Base class for everything this app raises on purpose."""


class NetworkError(TrackSearchError):
    """Transport failure while talking to the catalog (DNS, timeout, HTTP status)."""


class MalformedResponseError(TrackSearchError):
    """Catalog answered, but not with a `tracks.items` list."""


class UnsupportedPlatformError(TrackSearchError):
    """
    Describes a platform with no playback mechanism.
    Never raised by the dispatcher; it only builds the notice text.
    """

    def __init__(self, platform_name: str):
        self.platform_name = platform_name or "unknown"
        super().__init__(f"Playback is not supported on this platform: {self.platform_name}")
