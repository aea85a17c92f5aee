import json
from pathlib import Path

import pandas as pd

from promo_version_checker.comparators import pep440
from promo_version_checker.models import CheckResult, ModuleDescriptor, Status
from promo_version_checker.reporting import export_results_csv, results_frame, save_results_json
from promo_version_checker.store import ResultStore


def test_reporting_exports(tmp_path: Path):
    output_dir = tmp_path / "out"
    outdated = ModuleDescriptor("demo", "1.0", "https://example.org/demo.json")
    pending = ModuleDescriptor("local", "0.1", None)
    store = ResultStore()
    store.put(outdated, CheckResult.build(
        Status.OUTDATED,
        pep440("1.2"),
        {pep440("1.1"): "fix A", pep440("1.2"): "fix B"},
        "https://example.org/demo",
    ))

    frame = results_frame([outdated, pending], store)

    assert list(frame["status"]) == ["OUTDATED", "PENDING"]
    assert frame.loc[0, "target"] == "1.2"
    assert frame.loc[0, "changes"] == {"1.1": "fix A", "1.2": "fix B"}

    results_file = save_results_json(frame, output_dir, "demo")
    csv_file = export_results_csv(frame, output_dir, "demo")

    assert results_file.exists()
    assert csv_file.exists()
    assert json.loads(results_file.read_text())[0]["homepage"] == "https://example.org/demo"

    exported = pd.read_csv(csv_file)
    assert exported.loc[0, "changes"] == "1.1: fix A; 1.2: fix B"
