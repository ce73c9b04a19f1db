"""Tests for the css-describe CLI commands."""

from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner

from css_describe.cli.main import cli


@pytest.fixture
def script(tmp_path):
    def write(events) -> str:
        path = tmp_path / "script.json"
        path.write_text(json.dumps(events), encoding="utf-8")
        return str(path)

    return write


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "describe" in result.output
        assert "events" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "css-describe" in result.output


# ---------------------------------------------------------------------------
# describe command
# ---------------------------------------------------------------------------


class TestDescribeCommand:
    def test_describes_script(self, script) -> None:
        path = script([{"kind": "on_selector"}, {"kind": "type", "name": "div"}, {"kind": "id", "value": "x"}])
        result = CliRunner().invoke(cli, ["describe", path])
        assert result.exit_code == 0
        assert result.output == "Select all nodes with the <div> tag with an id of 'x'.\n"

    def test_legacy_dash_match_flag(self, script) -> None:
        path = script([{"kind": "on_selector"}, {"kind": "attribute_dash_match", "name": "lang", "value": "en"}])
        result = CliRunner().invoke(cli, ["describe", "--legacy-dash-match", path])
        assert result.exit_code == 0
        assert "{0}" in result.output

    def test_script_error_exits_1(self, script) -> None:
        path = script([{"kind": "hover"}])
        result = CliRunner().invoke(cli, ["describe", path])
        assert result.exit_code == 1
        assert "Script error: event 0: unknown event kind 'hover'" in result.output

    def test_empty_name_exits_1(self, script) -> None:
        path = script([{"kind": "on_selector"}, {"kind": "type", "name": ""}])
        result = CliRunner().invoke(cli, ["describe", path])
        assert result.exit_code == 1
        assert "Invalid event" in result.output

    def test_missing_file(self) -> None:
        result = CliRunner().invoke(cli, ["describe", "does-not-exist.json"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# events command
# ---------------------------------------------------------------------------


class TestEventsCommand:
    def test_lists_kinds_with_arguments(self) -> None:
        result = CliRunner().invoke(cli, ["events"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "init" in lines
        assert "attribute_exact  name value" in lines
        assert "nth_child  position" in lines
        assert len(lines) == 22


# ---------------------------------------------------------------------------
# Unreadable scripts and --verbose
# ---------------------------------------------------------------------------


class TestUnreadableScript:
    def test_non_utf8_script_exits_1(self, tmp_path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"kind": "type", "name": "\xff\xfe"}]')
        result = CliRunner().invoke(cli, ["describe", str(path)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Script error: cannot read" in result.output


class TestVerboseOption:
    def test_verbose_enables_debug_logging(self, script, monkeypatch, caplog) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        path = script([{"kind": "on_selector"}, {"kind": "type", "name": "div"}])

        with caplog.at_level(logging.DEBUG, logger="css_describe"):
            result = CliRunner().invoke(cli, ["-v", "describe", path])

        assert result.exit_code == 0
        assert calls and calls[0]["level"] == logging.DEBUG
        messages = [r.getMessage() for r in caplog.records if r.name == "css_describe"]
        assert messages == ["dispatch on_selector()", "dispatch type('div',)"]

    def test_quiet_by_default(self, script, monkeypatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        result = CliRunner().invoke(cli, ["describe", script([{"kind": "on_selector"}])])
        assert result.exit_code == 0
        assert calls == []
