"""
Core data models for version checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class Status(Enum):
    """Outcome of comparing an installed version against a manifest.

    Each member carries display hints: the sheet offset of its icon, whether
    the icon is drawn at all and whether it animates.
    """

    PENDING = (0, False, False)
    FAILED = (0, False, False)
    UP_TO_DATE = (0, False, False)
    OUTDATED = (3, True, True)
    AHEAD = (0, False, False)
    BETA = (0, False, False)
    BETA_OUTDATED = (6, True, True)

    def __new__(cls, sheet_offset: int, draw: bool, animated: bool) -> "Status":
        # Values are sequence numbers; display hints repeat across members.
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        return obj

    def __init__(self, sheet_offset: int, draw: bool, animated: bool) -> None:
        self.sheet_offset = sheet_offset
        self.draw = draw
        self.animated = animated

    @property
    def should_draw(self) -> bool:
        return self.draw

    @property
    def is_animated(self) -> bool:
        return self.animated


@dataclass(frozen=True, eq=False)
class ModuleDescriptor:
    """An installed module to check.

    Descriptors compare and hash by identity because they key the result
    store for the lifetime of a check run.
    """

    module_id: str
    current_version: str
    manifest_url: Optional[str]


@dataclass(frozen=True)
class CheckResult:
    """Terminal result of one module check."""

    status: Status
    target: Optional[Any] = None
    changelog: Optional[Mapping[Any, str]] = None
    url: Optional[str] = None

    @classmethod
    def build(
        cls,
        status: Status,
        target: Optional[Any],
        changelog: Mapping[Any, str],
        url: Optional[str],
    ) -> "CheckResult":
        """Create a result with a read-only copy of ``changelog``."""
        return cls(status, target, MappingProxyType(dict(changelog)), url)

    @classmethod
    def failed(cls) -> "CheckResult":
        return cls(Status.FAILED)

    @property
    def changes(self) -> Mapping[Any, str]:
        """Changelog entries, empty when the check produced none."""
        return self.changelog if self.changelog is not None else MappingProxyType({})


PENDING_RESULT = CheckResult(Status.PENDING)
