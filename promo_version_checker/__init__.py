"""
Promo Version Checker

Checks installed modules against remote update manifests and classifies
each one as up to date, outdated, ahead or beta.
"""

__version__ = "0.1.0"

from .checker import Mod, UpdateChecker
from .classifier import classify
from .config import CheckerConfig
from .fetcher import ManifestFetcher
from .manifest import Manifest, parse_manifest
from .models import PENDING_RESULT, CheckResult, ModuleDescriptor, Status
from .orchestrator import CheckOrchestrator
from .store import ResultStore

__all__ = [
    "CheckOrchestrator",
    "CheckResult",
    "CheckerConfig",
    "Manifest",
    "ManifestFetcher",
    "Mod",
    "ModuleDescriptor",
    "PENDING_RESULT",
    "ResultStore",
    "Status",
    "UpdateChecker",
    "classify",
    "parse_manifest",
]
