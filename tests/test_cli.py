"""End-to-end tests for the command-line interface."""

import json

import pytest

from fakes import FakeFetcher
from promo_version_checker import cli
from promo_version_checker.fetcher import ManifestFetcher


def test_main_checks_modules_and_writes_reports(tmp_path, monkeypatch):
    bodies = {
        "https://example.org/a.json": json.dumps({"promos": {"1.20-recommended": "2.0"}}),
        "https://example.org/b.json": "{broken",
    }
    fake = FakeFetcher(bodies)
    monkeypatch.setattr(ManifestFetcher, "fetch", lambda self, url: fake.fetch(url))

    exit_code = cli.main([
        "--game-version", "1.20",
        "--module", "alpha=1.0=https://example.org/a.json",
        "--module", "beta=1.0=https://example.org/b.json",
        "--module", "local=1.0=",
        "--comparator", "pep440",
        "--max-redirects", "0",
        "--poll-interval", "0.01",
        "--output-dir", str(tmp_path),
    ])

    assert exit_code == 0
    results = json.loads((tmp_path / "version_check_1.20_results.json").read_text())
    statuses = {row["module_id"]: row["status"] for row in results}
    assert statuses == {"alpha": "OUTDATED", "beta": "FAILED", "local": "PENDING"}
    assert (tmp_path / "version_check_1.20_results.csv").exists()


def test_main_requires_modules(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--game-version", "1.20", "--output-dir", str(tmp_path)])

    assert excinfo.value.code == 2


def test_main_rejects_non_positive_timeout(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([
            "--game-version", "1.20",
            "--module", "alpha=1.0=https://example.org/a.json",
            "--timeout", "0",
        ])

    assert excinfo.value.code == 2


def test_main_rejects_negative_redirects(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([
            "--game-version", "1.20",
            "--module", "alpha=1.0=https://example.org/a.json",
            "--max-redirects", "-1",
        ])

    assert excinfo.value.code == 2
