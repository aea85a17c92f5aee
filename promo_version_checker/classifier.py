"""
Status classification of an installed version against a manifest.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from .errors import ClassificationError
from .interfaces import Version, VersionComparator
from .manifest import Manifest
from .models import CheckResult, Status


logger = logging.getLogger(__name__)


def classify(
    current_version: str,
    game_version: str,
    manifest: Union[Manifest, Mapping[str, Any]],
    comparator: VersionComparator,
) -> CheckResult:
    """Classify ``current_version`` against the promotions in ``manifest``.

    Never raises: any parsing or comparison failure is logged and reported
    as a ``FAILED`` result.

    Args:
        current_version: Installed version text
        game_version: Game version whose promotions and changelog apply
        manifest: Decoded manifest, or the raw JSON object
        comparator: Parses version text into an ordered value

    Returns:
        The check result
    """
    try:
        if not isinstance(manifest, Manifest):
            manifest = Manifest.from_dict(manifest)
        return _classify(current_version, game_version, manifest, comparator)
    except Exception as e:
        logger.warning("Failed to process update information: %s", e, exc_info=True)
        return CheckResult.failed()


def _classify(
    current_version: str,
    game_version: str,
    manifest: Manifest,
    comparator: VersionComparator,
) -> CheckResult:
    rec = manifest.recommended(game_version)
    lat = manifest.latest(game_version)
    current = _parse(comparator, current_version)
    target: Optional[Version] = None

    if rec is not None:
        recommended = _parse(comparator, rec)
        diff = _compare(recommended, current)
        if diff == 0:
            status = Status.UP_TO_DATE
        elif diff < 0:
            status = Status.AHEAD
            if lat is not None:
                latest = _parse(comparator, lat)
                if _compare(current, latest) < 0:
                    status = Status.OUTDATED
                    target = latest
        else:
            status = Status.OUTDATED
            target = recommended
    elif lat is not None:
        latest = _parse(comparator, lat)
        if _compare(current, latest) < 0:
            status = Status.BETA_OUTDATED
        else:
            status = Status.BETA
        target = latest
    else:
        status = Status.BETA

    changes = _changelog(manifest.changelog(game_version), current, target, comparator)
    return CheckResult.build(status, target, changes, manifest.homepage)


def _changelog(
    section: Mapping[str, str],
    current: Version,
    target: Optional[Version],
    comparator: VersionComparator,
) -> dict:
    # Entries newer than current, up to and including target.
    selected: List[tuple] = []
    for key, description in section.items():
        ver = _parse(comparator, key)
        if _compare(ver, current) > 0 and (target is None or _compare(ver, target) <= 0):
            selected.append((ver, description))

    try:
        selected.sort(key=lambda item: item[0])
    except TypeError as e:
        raise ClassificationError(f"Changelog versions are not comparable: {e}") from e
    return dict(selected)


def _parse(comparator: VersionComparator, text: str) -> Version:
    try:
        return comparator(text)
    except Exception as e:
        raise ClassificationError(f"Could not parse version {text!r}: {e}") from e


def _compare(left: Version, right: Version) -> int:
    try:
        if left < right:
            return -1
        if right < left:
            return 1
    except TypeError as e:
        raise ClassificationError(f"Cannot compare {left!r} and {right!r}") from e
    return 0
