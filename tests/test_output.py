"""Tests for the terminal and JSON reporters."""

import io
import json

import pytest
from rich.console import Console

from giturl.core.parser import InvalidURLError, parse
from giturl.output import json_report, terminal


@pytest.fixture
def parsed(sample_urls):
    return [parse(sample_urls["ssh"]), parse(sample_urls["scp"])]


@pytest.fixture
def errors():
    try:
        parse("git@gitlab.com/bomb")
    except InvalidURLError as exc:
        return [exc]
    raise AssertionError("expected parse failure")


class TestJsonReport:
    def test_valid_json(self, parsed, errors):
        data = json.loads(json_report.render(parsed, errors))
        assert data["version"] == "1.0"
        assert data["total"] == 3
        assert len(data["urls"]) == 2
        assert data["errors"] == [{"url": "git@gitlab.com/bomb", "reason": "expected ':'"}]

    def test_url_fields(self, parsed):
        first = json_report.to_dict(parsed)["urls"][0]
        assert first["protocol"] == "ssh"
        assert first["port"] == 22
        assert first["user"] == "git"
        assert first["path"] == "charlie/wto"
        assert first["repo"] == "bomb"
        assert first["raw"] == "ssh://git@gitlab.com/charlie/wto/bomb.git"

    def test_hide_raw(self, parsed):
        first = json_report.to_dict(parsed, show_raw=False)["urls"][0]
        assert "raw" not in first


class TestTerminal:
    def _render(self, *args, **kwargs) -> str:
        buf = io.StringIO()
        console = Console(file=buf, width=200, no_color=True)
        terminal.render(*args, console=console, **kwargs)
        return buf.getvalue()

    def test_table_rows(self, parsed):
        out = self._render(parsed)
        assert "Git URLs" in out
        assert "gitlab.com" in out
        assert "charlie/wto" in out
        assert "scp" in out

    def test_errors_listed(self, errors):
        out = self._render([], errors)
        assert "Invalid URL:" in out
        assert "expected ':'" in out

    def test_show_raw(self, parsed):
        assert "ssh://git@gitlab.com/charlie/wto/bomb.git" in self._render(parsed)
        assert "ssh://git@gitlab.com/charlie/wto/bomb.git" not in self._render(parsed, show_raw=False)
