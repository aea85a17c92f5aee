"""Tests for module input helpers."""

import argparse
from pathlib import Path

import pandas as pd
import pytest

from promo_version_checker.cli import _build_modules, _load_input_csv, _parse_module_arg


def test_load_input_csv_parses_headers(tmp_path: Path) -> None:
    csv_content = (
        "module_id,current_version,manifest_url,extra\n"
        "examplemod,1.0,https://example.org/a.json,one\n"
        "othermod,2.3.1,https://example.org/b.json,two\n"
        "localmod,0.1,,three\n"
    )
    csv_path = tmp_path / "input.csv"
    csv_path.write_text(csv_content, encoding="utf-8")

    rows = _load_input_csv(csv_path)
    assert len(rows) == 3
    assert rows[0]["module_id"] == "examplemod"
    assert rows[1]["current_version"] == "2.3.1"
    assert rows[2]["manifest_url"] == ""

    df = pd.DataFrame(rows)
    assert "extra" in df.columns

    modules = _build_modules(rows)
    assert modules[2].manifest_url is None


def test_load_input_csv_requires_columns(tmp_path: Path) -> None:
    csv_path = tmp_path / "input.csv"
    csv_path.write_text("module_id,version\nexamplemod,1.0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="manifest_url"):
        _load_input_csv(csv_path)


def test_parse_module_arg() -> None:
    row = _parse_module_arg("examplemod=1.0=https://example.org/a.json?x=1")

    assert row == {
        "module_id": "examplemod",
        "current_version": "1.0",
        "manifest_url": "https://example.org/a.json?x=1",
    }
    assert _parse_module_arg("localmod=1.0=")["manifest_url"] == ""

    with pytest.raises(argparse.ArgumentTypeError):
        _parse_module_arg("examplemod")
