"""GeoJSON claim source adapter for local files and HTTP locations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Final

import httpx

from .interfaces import ClaimSourcePort
from .source_errors import (
    ClaimSourceConnectionError,
    ClaimSourceFormatError,
    ClaimSourceNotFoundError,
    ClaimSourceTimeoutError,
)


class GeoJsonClaimSource(ClaimSourcePort):
    """Claim source reading one GeoJSON `FeatureCollection`.

    `location` is a filesystem path or an `http://` / `https://` URL. A bare
    JSON list of features is accepted as well; entries that are not JSON
    objects are dropped.
    """

    _USER_AGENT: Final[str] = "fra-atlas/1.0 (Python/httpx)"
    _REMOTE_SCHEMES: Final[tuple[str, ...]] = ("http://", "https://")

    def __init__(
        self,
        source_name: str,
        location: str,
        request_timeout_seconds: float = 30.0,
        http_client: httpx.Client | None = None,
    ):
        """Initialize GeoJSON claim source.

        Args:
            source_name: Human-readable source name, typically a state name.
            location: File path or http(s) URL of the GeoJSON payload.
            request_timeout_seconds: HTTP request timeout in seconds.
            http_client: Optional preconfigured httpx client for URL locations.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_source_name = source_name.strip()
        normalized_location = location.strip()
        if not normalized_source_name:
            raise ValueError("source_name must not be blank")
        if not normalized_location:
            raise ValueError("location must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._source_name = normalized_source_name
        self._location = normalized_location
        self._request_timeout_seconds = request_timeout_seconds
        self._http_client = http_client

    def adapter_source_name(self) -> str:
        """Return configured source name."""

        return self._source_name

    def adapter_source_location(self) -> str:
        """Return configured source location."""

        return self._location

    def adapter_fetch_features(self) -> list[dict[str, Any]]:
        """Read the source payload and return its feature mappings.

        Returns:
            list[dict[str, Any]]: Feature mappings in payload order.

        Raises:
            ClaimSourceNotFoundError: Raised when a file location does not exist.
            ClaimSourceConnectionError: Raised for HTTP transport or status failures.
            ClaimSourceTimeoutError: Raised when an HTTP request times out.
            ClaimSourceFormatError: Raised when the payload is not a feature collection.
        """

        if self._location.lower().startswith(self._REMOTE_SCHEMES):
            payload_bytes = self._adapter_http_get(self._location)
        else:
            payload_bytes = self._adapter_read_file(self._location)
        return self._adapter_parse_features(payload_bytes)

    def _adapter_read_file(self, location: str) -> bytes:
        path = Path(location)
        try:
            return path.read_bytes()
        except FileNotFoundError as error:
            raise ClaimSourceNotFoundError(
                f"claim source file not found: {location}",
                source_name=self._source_name,
            ) from error
        except OSError as error:
            raise ClaimSourceConnectionError(
                f"claim source file could not be read: {location}: {error}",
                source_name=self._source_name,
            ) from error

    def _adapter_http_get(self, url: str) -> bytes:
        """Execute one HTTP GET and return the response body.

        Args:
            url: Absolute source URL.

        Returns:
            bytes: Response body.

        Raises:
            ClaimSourceTimeoutError: Raised when the request times out.
            ClaimSourceConnectionError: Raised for transport errors and non-success status codes.
        """

        client = self._http_client or httpx.Client(
            timeout=self._request_timeout_seconds,
            headers={"User-Agent": self._USER_AGENT},
            follow_redirects=True,
        )
        try:
            response = client.get(url)
            response.raise_for_status()
            return response.content
        except httpx.TimeoutException as error:
            raise ClaimSourceTimeoutError(
                f"claim source request timed out: {url}",
                source_name=self._source_name,
            ) from error
        except httpx.HTTPStatusError as error:
            raise ClaimSourceConnectionError(
                f"claim source returned HTTP {error.response.status_code}: {url}",
                source_name=self._source_name,
            ) from error
        except httpx.HTTPError as error:
            raise ClaimSourceConnectionError(
                f"claim source request failed: {url}: {error}",
                source_name=self._source_name,
            ) from error
        finally:
            if self._http_client is None:
                client.close()

    def _adapter_parse_features(self, payload_bytes: bytes) -> list[dict[str, Any]]:
        """Parse GeoJSON payload bytes into feature mappings.

        Args:
            payload_bytes: Raw payload bytes.

        Returns:
            list[dict[str, Any]]: Feature mappings.

        Raises:
            ClaimSourceFormatError: Raised when payload is not JSON or has no feature list.
        """

        try:
            payload = json.loads(payload_bytes.decode("utf-8-sig"))
        except (UnicodeDecodeError, json.JSONDecodeError) as error:
            raise ClaimSourceFormatError(
                f"claim source payload is not valid JSON: {error}",
                source_name=self._source_name,
            ) from error
        except RecursionError as error:
            raise ClaimSourceFormatError(
                "claim source payload is nested too deeply",
                source_name=self._source_name,
            ) from error

        if isinstance(payload, dict):
            features = payload.get("features")
        else:
            features = payload
        if not isinstance(features, list):
            raise ClaimSourceFormatError(
                "claim source payload has no `features` list",
                source_name=self._source_name,
            )
        return [feature for feature in features if isinstance(feature, dict)]
