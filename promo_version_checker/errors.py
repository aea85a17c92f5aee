"""
Exceptions raised while checking a module for updates.

Every failure is caught at the module-task boundary and stored as a
``FAILED`` result, so these never reach the caller of ``start_check``.
"""

from __future__ import annotations


class UpdateCheckError(Exception):
    """Base class for version-check failures."""


class FetchError(UpdateCheckError):
    """The manifest could not be fetched."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} while trying to fetch {url}")
        self.url = url


class TransportError(FetchError):
    """Network-level failure: DNS, connect, read, timeout or bad status."""


class RedirectError(FetchError):
    """A redirect chain could not be followed."""


class MissingRedirectTarget(RedirectError):
    def __init__(self, url: str) -> None:
        super().__init__(url, "Got a 3xx response code but no Location header")


class TooManyRedirects(RedirectError):
    def __init__(self, url: str, max_redirects: int) -> None:
        super().__init__(url, f"Too many redirects (more than {max_redirects})")
        self.max_redirects = max_redirects


class DecodeError(FetchError):
    """The response body could not be decompressed or decoded."""


class ManifestParseError(UpdateCheckError):
    """The manifest document is malformed or misses required fields."""


class ClassificationError(UpdateCheckError):
    """Versions could not be parsed or compared."""
