"""Project-native typed exceptions for claim source failures."""

from __future__ import annotations


class ClaimSourceError(Exception):
    """Base exception for one claim source that could not be loaded.

    Attributes:
        source_name: Name of the failing claim source.
    """

    def __init__(self, message: str, source_name: str | None = None):
        super().__init__(message)
        self.source_name = source_name


class ClaimSourceConnectionError(ClaimSourceError, ConnectionError):
    """Transport-level failure while fetching a remote claim source."""


class ClaimSourceTimeoutError(ClaimSourceError, TimeoutError):
    """Timeout while fetching a remote claim source."""


class ClaimSourceNotFoundError(ClaimSourceError, FileNotFoundError):
    """Claim source location does not exist."""


class ClaimSourceFormatError(ClaimSourceError, ValueError):
    """Claim source payload is not a readable GeoJSON feature collection."""
