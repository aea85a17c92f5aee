"""
Shared store of check results.
"""

from __future__ import annotations

import threading
from typing import Dict

from .models import PENDING_RESULT, CheckResult, ModuleDescriptor


class ResultStore:
    """Thread-safe mapping of modules to their latest check result.

    Lookups for modules without a result return ``PENDING_RESULT``. A later
    run replaces a module's entry; entries are never removed.
    """

    def __init__(self) -> None:
        self._results: Dict[ModuleDescriptor, CheckResult] = {}
        self._lock = threading.Lock()

    def get(self, module: ModuleDescriptor) -> CheckResult:
        with self._lock:
            return self._results.get(module, PENDING_RESULT)

    def put(self, module: ModuleDescriptor, result: CheckResult) -> None:
        with self._lock:
            self._results[module] = result

    def snapshot(self) -> Dict[ModuleDescriptor, CheckResult]:
        """Return a copy of all recorded results."""
        with self._lock:
            return dict(self._results)

    def __contains__(self, module: object) -> bool:
        with self._lock:
            return module in self._results

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
