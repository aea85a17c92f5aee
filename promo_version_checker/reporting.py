"""
Reporting and export utilities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from .models import ModuleDescriptor
from .store import ResultStore


logger = logging.getLogger(__name__)

COLUMNS = ["module_id", "current_version", "status", "target", "changes", "homepage"]


def results_frame(modules: Iterable[ModuleDescriptor], store: ResultStore) -> pd.DataFrame:
    """Tabulate the current result of every module, in the given order."""
    rows = []
    for module in modules:
        result = store.get(module)
        rows.append({
            "module_id": module.module_id,
            "current_version": module.current_version,
            "status": result.status.name,
            "target": str(result.target) if result.target is not None else None,
            "changes": {str(ver): text for ver, text in result.changes.items()},
            "homepage": result.url,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def print_summary(frame: pd.DataFrame, game_version: str) -> None:
    logger.info("=" * 60)
    logger.info("VERSION CHECK RESULTS (%s)", game_version)
    logger.info("=" * 60)
    for row in frame.itertuples(index=False):
        target = f" -> {row.target}" if row.target else ""
        logger.info("%-30s %-15s %s%s", row.module_id, row.current_version, row.status, target)
    logger.info("-" * 60)
    counts = frame["status"].value_counts()
    for status, count in counts.items():
        logger.info("%s: %d", status, count)
    logger.info("=" * 60)


def save_results_json(frame: pd.DataFrame, output_dir: Path, name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / f"{name}_results.json"
    with open(results_file, 'w') as f:
        json.dump(frame.to_dict(orient="records"), f, indent=2, default=str)
    return results_file


def export_results_csv(frame: pd.DataFrame, output_dir: Path, name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / f"{name}_results.csv"
    export = frame.copy()
    export["changes"] = export["changes"].map(lambda changes: "; ".join(
        f"{ver}: {text}" for ver, text in changes.items()
    ))
    export.to_csv(csv_file, index=False)
    return csv_file
