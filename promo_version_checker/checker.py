"""
Mod-facing entry point over the check engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional
from urllib.parse import urlparse

from .interfaces import VersionComparator
from .models import PENDING_RESULT, CheckResult, ModuleDescriptor
from .orchestrator import CheckOrchestrator


@dataclass(frozen=True)
class Mod:
    """A mod as declared by its owner, with its update URL as text."""

    mod_id: str
    current_version: str
    update_url: Optional[str] = None


class UpdateChecker:
    """Register mods, start checks and look up their results."""

    def __init__(self, orchestrator: Optional[CheckOrchestrator] = None) -> None:
        self.orchestrator = orchestrator or CheckOrchestrator()
        self._descriptors: Dict[Mod, ModuleDescriptor] = {}

    def check(
        self,
        game_version: str,
        mods: Iterable[Mod],
        comparator: VersionComparator,
    ) -> None:
        """Start a check run for ``mods``.

        Raises:
            ValueError: A mod's update URL is malformed; nothing is dispatched
        """
        mods = list(mods)
        for mod in mods:
            _validate_url(mod)

        run = []
        for mod in mods:
            descriptor = self._descriptors.get(mod)
            if descriptor is None:
                descriptor = ModuleDescriptor(mod.mod_id, mod.current_version, mod.update_url)
                self._descriptors[mod] = descriptor
            run.append(descriptor)
        self.orchestrator.start_check(run, game_version, comparator)

    def result(self, mod: Mod) -> CheckResult:
        descriptor = self._descriptors.get(mod)
        if descriptor is None:
            return PENDING_RESULT
        return self.orchestrator.get(descriptor)

    def descriptor(self, mod: Mod) -> Optional[ModuleDescriptor]:
        return self._descriptors.get(mod)


def _validate_url(mod: Mod) -> None:
    if mod.update_url is None:
        return
    parsed = urlparse(mod.update_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Update url is malformed for {mod.mod_id}: {mod.update_url!r}")
