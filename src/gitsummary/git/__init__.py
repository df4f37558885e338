"""Git interface layer — adapter, status parsing, models."""

from gitsummary.git.adapter import (
    GitError,
    GitStderrError,
    NotARepositoryError,
    PathNotFoundError,
    ToolInvocationError,
    read_status,
    resolve_repo_path,
    run_status,
)
from gitsummary.git.models import CATEGORIES, StatusLine, StatusResult, Summary
from gitsummary.git.status_parser import iter_status_lines, parse_status

__all__ = [
    "CATEGORIES",
    "GitError",
    "GitStderrError",
    "NotARepositoryError",
    "PathNotFoundError",
    "StatusLine",
    "StatusResult",
    "Summary",
    "ToolInvocationError",
    "iter_status_lines",
    "parse_status",
    "read_status",
    "resolve_repo_path",
    "run_status",
]
