#!/usr/bin/env python3
"""
Example script showing how to use the promo version checker.
"""

import time

from promo_version_checker import CheckOrchestrator, Mod, ModuleDescriptor, Status, UpdateChecker
from promo_version_checker.comparators import loose, pep440


FORGE_PROMOTIONS = "https://files.minecraftforge.net/net/minecraftforge/forge/promotions_slim.json"


def example_poll_store():
    """Example: Start a check and poll the store while it runs."""
    print("="*60)
    print("Example 1: Polling the result store")
    print("="*60)

    forge = ModuleDescriptor("forge", "1.20.1-47.1.0", FORGE_PROMOTIONS)

    with CheckOrchestrator() as orchestrator:
        orchestrator.start_check([forge], "1.20.1", loose)
        while orchestrator.get(forge).status is Status.PENDING:
            print("still pending...")
            time.sleep(0.5)

        result = orchestrator.get(forge)
        print(f"\nStatus: {result.status.name}")
        print(f"Target: {result.target}")
        for version, change in result.changes.items():
            print(f"  {version}: {change}")


def example_update_checker():
    """Example: Register mods by URL and read their results."""
    print("\n" + "="*60)
    print("Example 2: Mod-facing checker")
    print("="*60)

    mods = [
        Mod("examplemod", "4.0", "https://example.org/examplemod/update.json"),
        Mod("bundled", "1.0"),
    ]

    with CheckOrchestrator() as orchestrator:
        checker = UpdateChecker(orchestrator)
        checker.check("1.20", mods, pep440)

    for mod in mods:
        result = checker.result(mod)
        print(f"{mod.mod_id}: {result.status.name} (target {result.target})")


if __name__ == "__main__":
    example_poll_store()
    example_update_checker()
