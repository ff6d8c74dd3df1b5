"""Tests for the todo-mapper CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from todo_mapper.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path, sample_csharp_code: str) -> Path:
    (tmp_path / "DataService.cs").write_text(sample_csharp_code, encoding="utf-8")
    (tmp_path / "Clean.cs").write_text("class Clean { }\n", encoding="utf-8")
    return tmp_path


class TestScanCommand:
    """Tests for `todo-mapper scan`."""

    def test_report(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["scan", str(project)])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[:4] == [
            "// TODO: file header",
            "",
            "Not in any namespace",
            "DataService.cs:1",
        ]
        ctor = lines.index("// TODO: inject dependencies")
        assert lines[ctor:ctor + 6] == [
            "// TODO: inject dependencies",
            "",
            "Namespace: Sample.Services",
            "Type: DataService",
            "Method/Property: .ctor",
            "DataService.cs:13",
        ]

    def test_between_members_has_no_member_line(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["scan", str(project)])

        lines = result.stdout.splitlines()
        start = lines.index("// TODO: split this class")
        assert lines[start:start + 5] == [
            "// TODO: split this class",
            "",
            "Namespace: Sample.Services",
            "Type: DataService",
            "DataService.cs:17",
        ]

    def test_json_output(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["scan", "--json", str(project)])

        assert result.exit_code == 0
        items = json.loads(result.stdout)
        assert len(items) == 8
        assert items[6] == {
            "path": "DataService.cs",
            "line": 25,
            "content": "// TODO",
            "namespace": "Sample.Services",
            "type": "DataService",
            "member": "Process",
        }

    def test_single_file(self, runner: CliRunner, tmp_path: Path):
        source = tmp_path / "tool.py"
        source.write_text("def run():\n    # TODO: implement\n    pass\n", encoding="utf-8")

        result = runner.invoke(cli, ["scan", "--json", str(source)])

        items = json.loads(result.stdout)
        assert [(item["line"], item["member"]) for item in items] == [(1, "run")]

    def test_fail_on_match(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["scan", "--fail-on-match", str(project)])

        assert result.exit_code == 1

    def test_fail_on_match_clean(self, runner: CliRunner, tmp_path: Path):
        (tmp_path / "Clean.cs").write_text("class Clean { }\n", encoding="utf-8")

        result = runner.invoke(cli, ["scan", "--fail-on-match", str(tmp_path)])

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_missing_path_rejected(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(cli, ["scan", str(tmp_path / "nope")])

        assert result.exit_code == 2

    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "todo-mapper" in result.stdout
