"""Tests for the export command group."""

from __future__ import annotations

import json
from pathlib import Path

import click
from click.testing import CliRunner

from scenectl.cli import cli

TAGS = [
    '<Point x="1" y="1" />',
    '<Line startX="1" startY="1" endX="4" endY="5" />',
    '<Circle cx="1" cy="1" radius="3" />',
]


class TestExportXml:
    def test_stdout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "xml"])
        assert result.exit_code == 0
        assert click.unstyle(result.stdout).splitlines() == TAGS

    def test_output_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "scene.xml"
        result = cli_runner.invoke(cli, ["--json", "export", "xml", "--output", str(target)])
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == "\n".join(TAGS) + "\n"
        data = json.loads(result.stdout)
        assert data["op"] == "export_xml_file"
        assert data["data"]["tag_count"] == 3

    def test_unknown_style_writes_nothing(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "scene.xml"
        result = cli_runner.invoke(cli, ["export", "xml", "-s", "neon", "--output", str(target)])
        assert result.exit_code == 1
        assert not target.exists()
