"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict

from gitsummary.git.models import Summary


def to_dict(summary: Summary, label: str) -> Dict[str, Any]:
    """Convert a Summary to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "path": label,
        "clean": summary.is_clean,
        "summary": summary.as_dict(),
    }


def render(summary: Summary, label: str) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(summary, label), indent=2, ensure_ascii=False)
