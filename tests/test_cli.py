"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from sheetscan.cli import cli

T1 = 1_700_000_000
T2 = T1 + 3600


@pytest.fixture
def project(tmp_path: Path, make_file) -> Path:
    make_file(tmp_path / "A101.pdf", mtime=T1)
    make_file(tmp_path / "A101-Rev2.pdf", mtime=T2)
    make_file(tmp_path / "Contract.docx", mtime=T1)
    return tmp_path


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    for name in ("SHEETSCAN_PROJECT_ROOT", "SHEETSCAN_PORT", "PORT"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestScanCommand:
    """Tests for the scan command."""

    def test_table_output(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["--root", str(project), "scan", "--latest-per-sheet"])
        assert result.exit_code == 0
        assert "A101-Rev2.pdf" in result.output
        assert "2 files" in result.output

    def test_json_output(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["--root", str(project), "scan", "--ext", "pdf", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["count"] == 2
        assert data["files"][0]["name"] == "A101-Rev2.pdf"

    def test_inaccessible_path(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["--root", str(project), "scan", "missing"])
        assert result.exit_code == 1
        assert "Error: Path not accessible" in result.output

    def test_root_from_environment(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["scan", "--json"], env={"SHEETSCAN_PROJECT_ROOT": str(project)})
        assert json.loads(result.output)["count"] == 3


class TestOtherCommands:
    """Tests for keywords, count and check-root."""

    def test_keywords(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["--root", str(project), "keywords", "contract", "--json"])
        data = json.loads(result.output)
        assert [f["name"] for f in data["files"]] == ["Contract.docx"]

    def test_count(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["--root", str(project), "count"])
        assert result.output.strip() == "3"

    def test_check_root(self, runner: CliRunner, project: Path):
        assert runner.invoke(cli, ["--root", str(project), "check-root"]).exit_code == 0
        missing = runner.invoke(cli, ["--root", str(project / "missing"), "check-root"])
        assert missing.exit_code == 1

    def test_invalid_port(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["--root", str(project), "serve", "--port", "nope"])
        assert result.exit_code == 1
        assert "Invalid port" in result.output
