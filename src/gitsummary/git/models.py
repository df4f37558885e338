"""Data models for porcelain status parsing."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple

# Fixed report order; also the field names on Summary.
CATEGORIES: Tuple[str, ...] = ("modified", "added", "deleted", "renamed", "untracked")


@dataclass(frozen=True, slots=True)
class StatusLine:
    """A single raw line from ``git status --porcelain``."""

    code: str  # up to two chars: index status, worktree status
    path: str  # 'old -> new' on renames


@dataclass(frozen=True)
class Summary:
    """Aggregate change counts for one working tree.

    ``total`` is the number of status lines, not the sum of the categories:
    a code such as ``AM`` counts toward both ``added`` and ``modified``.
    """

    modified: int = 0
    added: int = 0
    deleted: int = 0
    renamed: int = 0
    untracked: int = 0
    total: int = 0

    @property
    def is_clean(self) -> bool:
        return self.total == 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class StatusResult:
    """Captured result of one git status invocation."""

    stdout: str
    stderr: str
    exit_error: Optional[str] = None  # set when git failed or could not run

    @property
    def success(self) -> bool:
        return self.exit_error is None
