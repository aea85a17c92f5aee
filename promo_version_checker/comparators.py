"""
Ready-made version comparators.

The check engine accepts any ``text -> Version`` callable; these cover PEP 440
versions and the looser dotted/dashed schemes common for game mods.
"""

from __future__ import annotations

import functools
import re
from itertools import zip_longest
from typing import Callable, Dict, List, Tuple, Union

from packaging import version as pkg_version

from .interfaces import Version


Part = Union[int, str]


def pep440(text: str) -> pkg_version.Version:
    """Parse ``text`` as a PEP 440 version.

    Raises:
        packaging.version.InvalidVersion: ``text`` is not PEP 440
    """
    return pkg_version.Version(text)


@functools.total_ordering
class LooseVersion:
    """Tolerant version ordering for loosely formatted identifiers.

    Segments are split on ``.``, ``-``, ``+`` and ``_``; numeric segments
    compare numerically and rank above textual ones, textual segments
    compare case-insensitively, and missing trailing segments count as zero.
    """

    __slots__ = ("text", "parts")

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Version text must be a string, got {type(text).__name__}")
        self.text = text
        self.parts = _version_parts(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LooseVersion):
            return NotImplemented
        return _compare_parts(self.parts, other.parts) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LooseVersion):
            return NotImplemented
        return _compare_parts(self.parts, other.parts) < 0

    def __hash__(self) -> int:
        return hash(_normalized(self.parts))

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"LooseVersion({self.text!r})"


def loose(text: str) -> LooseVersion:
    return LooseVersion(text)


_COMPARATORS: Dict[str, Callable[[str], Version]] = {
    "pep440": pep440,
    "loose": loose,
}


def get_comparator(name: str) -> Callable[[str], Version]:
    """Return the comparator registered under ``name``."""
    try:
        return _COMPARATORS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown comparator {name!r}, expected one of {sorted(_COMPARATORS)}"
        ) from None


def comparator_names() -> List[str]:
    return sorted(_COMPARATORS)


def _version_parts(text: str) -> List[Part]:
    text = text.strip()
    if text[:1] in {"v", "V"}:
        text = text[1:]
    parts: List[Part] = []
    for chunk in re.split(r"[.\-+_]", text):
        if not chunk:
            continue
        if chunk.isdecimal():
            parts.append(int(chunk))
        else:
            parts.append(chunk.lower())
    return parts


def _normalized(parts: List[Part]) -> Tuple[Part, ...]:
    trimmed = list(parts)
    while trimmed and trimmed[-1] == 0:
        trimmed.pop()
    return tuple(trimmed)


def _compare_parts(left: List[Part], right: List[Part]) -> int:
    for a, b in zip_longest(left, right, fillvalue=0):
        if a == b:
            continue
        if isinstance(a, int) and isinstance(b, int):
            return -1 if a < b else 1
        if isinstance(a, int):
            return 1
        if isinstance(b, int):
            return -1
        return -1 if a < b else 1
    return 0
