"""
Concurrent dispatch of version checks.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterable, List, Optional

from .classifier import classify
from .config import CheckerConfig
from .errors import UpdateCheckError
from .fetcher import ManifestFetcher
from .interfaces import ManifestSource, VersionComparator
from .manifest import parse_manifest
from .models import CheckResult, ModuleDescriptor
from .store import ResultStore


logger = logging.getLogger(__name__)


class CheckOrchestrator:
    """Run one fetch-and-classify task per module on a bounded worker pool.

    Results land in ``store``; callers poll it at any time without waiting on
    the run.
    """

    def __init__(
        self,
        fetcher: Optional[ManifestSource] = None,
        store: Optional[ResultStore] = None,
        config: Optional[CheckerConfig] = None,
    ):
        """Initialize the orchestrator.

        Args:
            fetcher: Manifest source; a ``ManifestFetcher`` is created when omitted
            store: Result store to publish into; a new one is created when omitted
            config: Fetch and pool settings, from the environment when omitted
        """
        self.config = config or CheckerConfig.from_env()
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or ManifestFetcher(self.config)
        self._store = store if store is not None else ResultStore()
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="version-check",
        )
        self._shut_down = False

    @property
    def store(self) -> ResultStore:
        return self._store

    def start_check(
        self,
        modules: Iterable[ModuleDescriptor],
        game_version: str,
        comparator: VersionComparator,
    ) -> List[Future]:
        """Dispatch a check for every module and return without waiting.

        Modules without a manifest URL are skipped and keep reporting
        ``PENDING``.

        Returns:
            One future per dispatched module, resolving to its result

        Raises:
            RuntimeError: The orchestrator has been shut down
        """
        if self._shut_down:
            raise RuntimeError("Cannot start a version check after shutdown()")
        futures = []
        for module in modules:
            if not module.manifest_url:
                logger.debug("[%s] No manifest URL, skipping version check", module.module_id)
                continue
            futures.append(
                self._executor.submit(self._process, module, game_version, comparator)
            )
        logger.info("Dispatched %d version checks for %s", len(futures), game_version)
        return futures

    def get(self, module: ModuleDescriptor) -> CheckResult:
        return self._store.get(module)

    def shutdown(self, wait: bool = True) -> None:
        self._shut_down = True
        self._executor.shutdown(wait=wait)
        if self._owns_fetcher:
            self.fetcher.close()

    def __enter__(self) -> "CheckOrchestrator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def _process(
        self,
        module: ModuleDescriptor,
        game_version: str,
        comparator: VersionComparator,
    ) -> CheckResult:
        try:
            result = self._check(module, game_version, comparator)
        except UpdateCheckError as e:
            logger.warning("[%s] Failed to process update information: %s", module.module_id, e)
            result = CheckResult.failed()
        except Exception as e:
            logger.warning(
                "[%s] Failed to process update information: %s",
                module.module_id,
                e,
                exc_info=True,
            )
            result = CheckResult.failed()
        self._store.put(module, result)
        return result

    def _check(
        self,
        module: ModuleDescriptor,
        game_version: str,
        comparator: VersionComparator,
    ) -> CheckResult:
        logger.info("[%s] Starting version check at %s", module.module_id, module.manifest_url)
        data = self.fetcher.fetch(module.manifest_url)
        logger.debug("[%s] Received version check data:\n%s", module.module_id, data)

        manifest = parse_manifest(data)
        result = classify(module.current_version, game_version, manifest, comparator)
        logger.info(
            "[%s] Found status: %s Current: %s Target: %s",
            module.module_id,
            result.status.name,
            module.current_version,
            result.target,
        )
        return result
