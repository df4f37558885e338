"""Git subprocess wrapper — path resolution and porcelain status."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from gitsummary.git.models import StatusResult

STATUS_ARGS: List[str] = ["status", "--porcelain"]
_NOT_A_REPO_MARKER = "not a git repository"


class PathNotFoundError(Exception):
    """Raised when the target directory does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Directory "{path}" was not found.')


class GitError(Exception):
    """Base class for failures while asking git for the status."""


class ToolInvocationError(GitError):
    """Raised when git could not run or reported a failure."""


class NotARepositoryError(ToolInvocationError):
    """Raised when the target directory is not inside a git repository."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f'Directory "{path}" does not appear to be a git repository.')


class GitStderrError(GitError):
    """Raised when git succeeded but wrote diagnostics to stderr."""


def resolve_repo_path(raw: Union[str, Path]) -> Path:
    """Return *raw* as an absolute path. Raises PathNotFoundError if missing."""
    path = Path(raw).expanduser().resolve()
    if not path.exists():
        raise PathNotFoundError(path)
    return path


def status_command(git: str = "git") -> List[str]:
    return [git, *STATUS_ARGS]


def run_status(
    repo_path: Path,
    *,
    git: str = "git",
    timeout: Optional[int] = None,
) -> StatusResult:
    """Run ``git status --porcelain`` in *repo_path* and capture the result."""
    cmd = status_command(git)
    try:
        result = subprocess.run(
            cmd,
            cwd=repo_path,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        return StatusResult(
            stdout="",
            stderr="",
            exit_error=f"{git} is not installed or not on PATH",
        )
    except subprocess.TimeoutExpired:
        return StatusResult(
            stdout="",
            stderr="",
            exit_error=f"command timed out after {timeout}s: {' '.join(cmd)}",
        )
    except OSError as exc:
        return StatusResult(stdout="", stderr="", exit_error=str(exc))

    exit_error = None
    if result.returncode != 0:
        exit_error = f"Command failed: {' '.join(cmd)} (exit status {result.returncode})"
        if stderr := result.stderr.strip():
            exit_error = f"{exit_error}: {stderr}"
    return StatusResult(
        stdout=result.stdout,
        stderr=result.stderr,
        exit_error=exit_error,
    )


def check_status(result: StatusResult, repo_path: Path) -> str:
    """Return stdout of *result*, or raise the matching GitError."""
    if not result.success:
        if _NOT_A_REPO_MARKER in result.stderr:
            raise NotARepositoryError(repo_path, result.exit_error)
        raise ToolInvocationError(result.exit_error)
    if result.stderr:
        raise GitStderrError(result.stderr.strip())
    return result.stdout


def read_status(
    repo_path: Path,
    *,
    git: str = "git",
    timeout: Optional[int] = None,
) -> str:
    """Return the porcelain status text for *repo_path*."""
    return check_status(run_status(repo_path, git=git, timeout=timeout), repo_path)
