"""
HTTP fetching of version manifests.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urljoin

import requests

from .config import CheckerConfig
from .errors import DecodeError, MissingRedirectTarget, TooManyRedirects, TransportError


logger = logging.getLogger(__name__)


class ManifestFetcher:
    """Fetch manifest bodies, following redirects hop by hop."""

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or CheckerConfig()
        self.session = session or requests.Session()

    def fetch(self, url: str) -> str:
        """Return the response body for ``url`` as text.

        Args:
            url: Manifest URL

        Returns:
            Decoded body text

        Raises:
            TransportError: Network failure, malformed URL or error status
            MissingRedirectTarget: A 3xx response without a Location header
            TooManyRedirects: More than ``max_redirects`` hops
            DecodeError: The body could not be decompressed or decoded
        """
        current_url = url
        for _ in range(self.config.max_redirects + 1):
            with self._get(url, current_url) as response:
                if 300 <= response.status_code <= 399:
                    location = response.headers.get("Location")
                    if not location:
                        raise MissingRedirectTarget(url)
                    current_url = urljoin(current_url, location)
                    logger.debug("Following redirect to %s", current_url)
                    continue

                try:
                    response.raise_for_status()
                except requests.HTTPError as e:
                    raise TransportError(url, f"HTTP {response.status_code}") from e

                return self._read_body(url, response)

        raise TooManyRedirects(url, self.config.max_redirects)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ManifestFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, url: str, current_url: str) -> requests.Response:
        try:
            return self.session.get(
                current_url,
                headers={
                    "Accept-Encoding": "gzip",
                    "User-Agent": self.config.user_agent,
                },
                timeout=self.config.timeout_secs,
                allow_redirects=False,
                stream=True,
            )
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e

    def _read_body(self, url: str, response: requests.Response) -> str:
        # requests undoes Content-Encoding: gzip while reading content.
        try:
            raw = response.content
        except requests.exceptions.ContentDecodingError as e:
            raise DecodeError(url, f"Could not decompress body ({e})") from e
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e

        encoding = requests.utils.get_encoding_from_headers(response.headers) or "utf-8"
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise DecodeError(url, f"Could not decode body as {encoding} ({e})") from e
