"""Tests for the closure-complete CLI."""

from __future__ import annotations

import json
import logging
import os
import tempfile

from click.testing import CliRunner
from rich.logging import RichHandler

from closure_complete.cli import cli
from closure_complete.config import SNAPSHOT_NAME
from tests.helpers import declaration


def _make_workspace(tmpdir: str) -> None:
    os.makedirs(os.path.join(tmpdir, "closure"))
    with open(os.path.join(tmpdir, "closure", "goog.d.ts"), "w", encoding="utf-8") as f:
        f.write(declaration("goog.dom", module=True))
        f.write(declaration("goog.ui.Component"))
        f.write(declaration("goog.ui.TabPane"))


class TestCli:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "scan" in result.output
        assert "complete" in result.output

    def test_scan_writes_output(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            _make_workspace(tmpdir)
            output_path = os.path.join(tmpdir, "out", "completions.json")
            result = runner.invoke(cli, ["scan", tmpdir, "-o", output_path])
            assert result.exit_code == 0
            assert "Namespaces" in result.output

            with open(output_path, encoding="utf-8") as f:
                data = json.load(f)
            assert {item["label"] for item in data} == {"dom", "Component"}
            assert os.path.exists(os.path.join(tmpdir, SNAPSHOT_NAME))

    def test_scan_quiet_no_snapshot(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            _make_workspace(tmpdir)
            result = runner.invoke(cli, ["scan", tmpdir, "--quiet", "--no-snapshot"])
            assert result.exit_code == 0
            assert result.output == ""
            assert not os.path.exists(os.path.join(tmpdir, SNAPSHOT_NAME))

    def test_scan_missing_path(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["scan", "/nonexistent/workspace"])
        assert result.exit_code != 0

    def test_complete_prints_imports(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            _make_workspace(tmpdir)
            result = runner.invoke(cli, ["complete", tmpdir])
            assert result.exit_code == 0
            assert result.output == (
                "import Component from 'goog:goog.ui.Component';\n"
                "import * as dom from 'goog:goog.dom';\n"
            )
            assert not os.path.exists(os.path.join(tmpdir, SNAPSHOT_NAME))

    def test_complete_prefix_and_limit(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(cli, ["complete", tmpdir, "--prefix", "E", "--limit", "1"])
            assert result.exit_code == 0
            assert result.output == "import Event from 'goog:goog.events.Event';\n"


class TestConfigureLogging:
    def _root_level(self, args):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(cli, ["scan", tmpdir, "--no-snapshot", *args])
            assert result.exit_code == 0
        root = logging.getLogger()
        assert any(isinstance(h, RichHandler) for h in root.handlers)
        return root.level

    def test_verbose_logs_debug(self):
        assert self._root_level(["--verbose"]) == logging.DEBUG

    def test_quiet_logs_errors_only(self):
        assert self._root_level(["--quiet"]) == logging.ERROR

    def test_default_logs_warnings(self):
        assert self._root_level([]) == logging.WARNING
