"""Porcelain status parser — counts changes per category.

Only the two-character status code at the start of each line is inspected.
Categories are not exclusive: every letter present in the code is counted,
so ``AM`` raises both ``added`` and ``modified`` while ``total`` grows by one.
Codes with no recognised letter (``C``, ``U``, ``!``) only count toward
``total``.
"""

from __future__ import annotations

from typing import Dict, Iterator

from gitsummary.git.models import CATEGORIES, StatusLine, Summary

UNTRACKED_CODE = "??"

_LETTER_CATEGORY: Dict[str, str] = {
    "M": "modified",
    "A": "added",
    "D": "deleted",
    "R": "renamed",
}


def iter_status_lines(output: str) -> Iterator[StatusLine]:
    """Yield a StatusLine for every non-blank line of *output*."""
    for raw_line in output.split("\n"):
        line = raw_line.rstrip()
        if not line:
            continue
        # Short lines keep whatever characters they have as the code.
        yield StatusLine(code=line[:2], path=line[3:])


def parse_status(output: str) -> Summary:
    """Aggregate ``git status --porcelain`` text into a Summary."""
    counts = dict.fromkeys(CATEGORIES, 0)
    total = 0

    for status_line in iter_status_lines(output):
        total += 1
        code = status_line.code
        for letter, category in _LETTER_CATEGORY.items():
            if letter in code:
                counts[category] += 1
        if code == UNTRACKED_CODE:
            counts["untracked"] += 1

    return Summary(total=total, **counts)
