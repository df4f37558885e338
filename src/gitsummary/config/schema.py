"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: Tuple[str, ...] = ("terminal", "json")


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    emoji: bool = True


@dataclass
class GitConfig:
    executable: str = "git"
    timeout: Optional[int] = None  # seconds; None waits for git indefinitely


@dataclass
class GitSummaryConfig:
    output: OutputConfig = field(default_factory=OutputConfig)
    git: GitConfig = field(default_factory=GitConfig)
