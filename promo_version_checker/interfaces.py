"""
Interfaces for version comparators and manifest sources.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol


class Version(Protocol):
    """A totally ordered version value.

    ``str()`` must render the text the version was parsed from so changelog
    entries can be matched back to manifest keys.
    """

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...


VersionComparator = Callable[[str], Version]


class ManifestSource(Protocol):
    """Fetch a manifest document as text."""

    def fetch(self, url: str) -> str:
        ...
