"""
Integration tests for the demo driver (scripts/run_convert.py).
"""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration

SCRIPT = Path(__file__).resolve().parent.parent.parent / "scripts" / "run_convert.py"


@pytest.fixture(scope="module")
def run_convert():
    spec = importlib.util.spec_from_file_location("run_convert", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunConvert:

    def test_converts_to_json(self, run_convert, tmp_path, app_ini: str):
        src = tmp_path / "app.ini"
        src.write_text(app_ini, encoding="utf-8")
        out_dir = tmp_path / "outputs"

        assert run_convert.main([str(src), "--output-dir", str(out_dir)]) == 0
        result = json.loads((out_dir / "app.json").read_text(encoding="utf-8"))
        assert result["general"]["app_name"] == "MyApp"

    def test_config_and_explicit_input_format(self, run_convert, tmp_path):
        src = tmp_path / "table.dat"
        src.write_text("a|b\n1|2\n", encoding="utf-8")
        config = tmp_path / "convert.yaml"
        config.write_text("flat_file:\n  separator: '|'\n", encoding="utf-8")
        out_dir = tmp_path / "outputs"

        code = run_convert.main([
            str(src), "--from", "flat_file", "--to", "csv",
            "--config", str(config), "--output-dir", str(out_dir),
        ])
        assert code == 0
        assert (out_dir / "table.csv").read_text(encoding="utf-8") == "a,b\n1,2\n"

    def test_failures_reported_in_exit_code(self, run_convert, tmp_path):
        src = tmp_path / "bad.yaml"
        src.write_text("a: 1\n  b: 2\n", encoding="utf-8")
        assert run_convert.main([str(src), "--output-dir", str(tmp_path / "out")]) == 1

    def test_missing_input_skipped(self, run_convert, tmp_path):
        assert run_convert.main([str(tmp_path / "nope.yaml"), "--output-dir", str(tmp_path)]) == 0
