"""Tests for the blueprintgen command line interface."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from blueprintgen import cli
from blueprintgen.generation.generator import build_initial_spec
from blueprintgen.layout import LayoutEngine

runner = CliRunner()


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("BLUEPRINT_ENV", "testing")
    monkeypatch.setenv("BLUEPRINT_OUTPUT_DIR", str(tmp_path / "exports"))
    cli._state.clear()
    yield
    cli._state.clear()


@pytest.fixture
def spec_file(tmp_path):
    final, _ = LayoutEngine(build_initial_spec("house", "US")).finalize()
    path = tmp_path / "house.json"
    path.write_text(final.to_json(), encoding="utf-8")
    return path


class TestCLI:
    def test_generate_writes_json(self, tmp_path):
        out = tmp_path / "spec.json"
        result = runner.invoke(cli.app, ["generate", "house", "--country", "US", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "Bedroom overlaps with Bathroom" in result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["totalArea"] == 1004.0

    def test_validate_strict(self, spec_file):
        result = runner.invoke(cli.app, ["validate", str(spec_file)])
        assert result.exit_code == 0
        result = runner.invoke(cli.app, ["validate", str(spec_file), "--strict"])
        assert result.exit_code == 1

    def test_validate_missing_file(self, tmp_path):
        result = runner.invoke(cli.app, ["validate", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_render(self, spec_file, tmp_path):
        out = tmp_path / "plan.png"
        result = runner.invoke(cli.app, ["render", str(spec_file), "-o", str(out), "--scale", "1.2"])
        assert result.exit_code == 0, result.output
        assert out.read_bytes().startswith(b"\x89PNG")

    def test_export_formats(self, spec_file, tmp_path):
        result = runner.invoke(cli.app, [
            "export", str(spec_file), "-f", "pdf", "-f", "svg", "-b", "plan",
        ])
        assert result.exit_code == 0, result.output
        exports = tmp_path / "exports"
        assert (exports / "plan.pdf").is_file()
        assert (exports / "plan.svg").is_file()

    def test_countries(self):
        result = runner.invoke(cli.app, ["countries"])
        assert result.exit_code == 0
        assert "Countries" in result.output
        assert "Building types" in result.output

    def test_env_template(self, tmp_path):
        result = runner.invoke(cli.app, ["env-template", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / ".env.example").is_file()
