"""Tests for the terminal and JSON reporters."""

import io
import json

from rich.console import Console

from gitsummary.git.models import Summary
from gitsummary.output import json_report, terminal
from gitsummary.output.terminal import SEPARATOR, render_lines


class TestRenderLines:
    def test_clean_repository(self):
        lines = render_lines(Summary(), "/repo")
        assert len(lines) == 4
        assert "/repo" in lines[0]
        assert lines[1] == SEPARATOR
        assert "Repository clean" in lines[2]
        assert lines[3] == SEPARATOR
        assert not any("Total" in line for line in lines)

    def test_zero_categories_suppressed(self):
        summary = Summary(modified=2, untracked=1, total=3)
        lines = render_lines(summary, "/repo")
        text = "\n".join(lines)
        assert "Modified: 2" in text
        assert "Untracked: 1" in text
        assert "Added" not in text
        assert "Deleted" not in text
        assert "Renamed" not in text
        assert lines[-2] == "Total: 3"
        assert lines[-1] == SEPARATOR
        assert lines[-3] == SEPARATOR

    def test_fixed_category_order(self):
        summary = Summary(modified=1, added=1, deleted=1, renamed=1, untracked=1, total=5)
        lines = render_lines(summary, "/repo", emoji=False)
        assert lines[2:7] == [
            "Modified: 1",
            "Added (staged): 1",
            "Deleted: 1",
            "Renamed: 1",
            "Untracked: 1",
        ]

    def test_no_emoji(self):
        lines = render_lines(Summary(deleted=1, total=1), "/repo", emoji=False)
        assert lines[0] == "Git status summary for: /repo"
        assert lines[2] == "Deleted: 1"

    def test_emoji_markers(self):
        lines = render_lines(Summary(renamed=1, total=1), "/repo")
        assert lines[0].startswith("📊 ")
        assert lines[2] == "🔄 Renamed: 1"

    def test_total_counts_lines_not_categories(self):
        summary = Summary(modified=1, added=1, total=1)
        lines = render_lines(summary, "/repo")
        assert "Total: 1" in lines


class TestTerminalRender:
    def test_prints_lines_verbatim(self):
        buf = io.StringIO()
        console = Console(file=buf, width=40)
        label = "/tmp/[bold]weird-path-that-is-longer-than-the-console"
        terminal.render(Summary(untracked=1, total=1), label, console=console)
        output = buf.getvalue()
        assert label in output
        assert "Untracked: 1" in output
        assert "Total: 1" in output


class TestJsonReport:
    def test_valid_json(self):
        summary = Summary(modified=2, added=1, renamed=1, untracked=1, total=5)
        data = json.loads(json_report.render(summary, "/repo"))
        assert data["version"] == "1.0"
        assert data["path"] == "/repo"
        assert data["clean"] is False
        assert data["summary"]["modified"] == 2
        assert data["summary"]["total"] == 5

    def test_zero_categories_present(self):
        data = json_report.to_dict(Summary(), "/repo")
        assert data["clean"] is True
        assert data["summary"]["deleted"] == 0
        assert set(data["summary"]) == {
            "modified", "added", "deleted", "renamed", "untracked", "total",
        }
