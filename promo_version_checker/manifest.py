"""
Decoding of update manifests.

A manifest is a JSON object of the form::

    {
        "homepage": "https://example.org/mod",
        "promos": {"1.20-recommended": "5.0", "1.20-latest": "5.2"},
        "1.20": {"5.1": "fix A", "5.2": "fix B"}
    }

``promos`` is required, ``homepage`` and the per-game-version changelog
sections are optional.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .errors import ManifestParseError


@dataclass(frozen=True)
class Manifest:
    """A decoded update manifest."""

    promos: Dict[str, str]
    homepage: Optional[str] = None
    sections: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "Manifest":
        if not isinstance(data, Mapping):
            raise ManifestParseError(
                f"Manifest must be a JSON object, got {type(data).__name__}"
            )

        promos = data.get("promos")
        if promos is None:
            raise ManifestParseError("Manifest has no 'promos' field")
        promos = _string_map(promos, "promos")

        homepage = data.get("homepage")
        if homepage is not None and not isinstance(homepage, str):
            raise ManifestParseError("Manifest 'homepage' must be a string")

        sections = {
            key: value for key, value in data.items() if key not in ("promos", "homepage")
        }
        return cls(promos=promos, homepage=homepage, sections=sections)

    def recommended(self, game_version: str) -> Optional[str]:
        return self.promos.get(f"{game_version}-recommended")

    def latest(self, game_version: str) -> Optional[str]:
        return self.promos.get(f"{game_version}-latest")

    def changelog(self, game_version: str) -> Dict[str, str]:
        """Return the changelog section for ``game_version``.

        A missing section yields an empty mapping.
        """
        section = self.sections.get(game_version)
        if section is None:
            return {}
        return _string_map(section, game_version)


def parse_manifest(text: str) -> Manifest:
    """Decode manifest JSON text.

    Raises:
        ManifestParseError: Malformed JSON or a schema violation
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ManifestParseError(f"Manifest is not valid JSON: {e}") from e
    return Manifest.from_dict(data)


def _string_map(value: Any, name: str) -> Dict[str, str]:
    if not isinstance(value, Mapping):
        raise ManifestParseError(f"Manifest '{name}' must be an object")
    result = {}
    for key, item in value.items():
        if item is None:
            continue
        if not isinstance(item, str):
            raise ManifestParseError(f"Manifest '{name}.{key}' must be a string")
        result[key] = item
    return result
