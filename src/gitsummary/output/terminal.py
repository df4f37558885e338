"""Rich terminal reporter — header, per-category counts, total."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.text import Text

from gitsummary.git.models import CATEGORIES, Summary

SEPARATOR = "-" * 50

_CATEGORY_LABEL = {
    "modified": "Modified",
    "added": "Added (staged)",
    "deleted": "Deleted",
    "renamed": "Renamed",
    "untracked": "Untracked",
}

_CATEGORY_ICON = {
    "modified": "📝",
    "added": "✨",
    "deleted": "❌",
    "renamed": "🔄",
    "untracked": "❓",
}

_HEADER_ICON = "📊"
_CLEAN_ICON = "✅"


def _with_icon(icon: str, text: str, emoji: bool) -> str:
    return f"{icon} {text}" if emoji else text


def render_lines(summary: Summary, label: str, *, emoji: bool = True) -> List[str]:
    """Return the report for *summary* as display lines.

    Categories appear in fixed order and only when their count is non-zero.
    """
    lines = [
        _with_icon(_HEADER_ICON, f"Git status summary for: {label}", emoji),
        SEPARATOR,
    ]

    if summary.is_clean:
        lines.append(_with_icon(_CLEAN_ICON, "Repository clean. No pending changes.", emoji))
        lines.append(SEPARATOR)
        return lines

    for category in CATEGORIES:
        count = getattr(summary, category)
        if count > 0:
            text = f"{_CATEGORY_LABEL[category]}: {count}"
            lines.append(_with_icon(_CATEGORY_ICON[category], text, emoji))

    lines.append(SEPARATOR)
    lines.append(f"Total: {summary.total}")
    lines.append(SEPARATOR)
    return lines


def render(
    summary: Summary,
    label: str,
    *,
    console: Optional[Console] = None,
    emoji: bool = True,
) -> None:
    """Print the summary report to stdout using Rich."""
    console = console or Console()
    lines = render_lines(summary, label, emoji=emoji)

    console.print()
    for idx, line in enumerate(lines):
        # Header in bold; paths are printed verbatim, never as markup.
        style = "bold" if idx == 0 else ""
        console.print(Text(line, style=style), highlight=False, soft_wrap=True)
