"""Load and merge configuration from .gitsummary.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitsummary.config.schema import (
    OUTPUT_FORMATS,
    GitConfig,
    GitSummaryConfig,
    OutputConfig,
)


CONFIG_FILENAME = ".gitsummary.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_path: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_path / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitSummaryConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {cfg.output.format!r} "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    if not isinstance(cfg.output.emoji, bool):
        raise ConfigError(f"output.emoji must be true or false, got {cfg.output.emoji!r}")
    if not isinstance(cfg.git.executable, str) or not cfg.git.executable:
        raise ConfigError(f"git.executable must be a non-empty string, got {cfg.git.executable!r}")
    timeout = cfg.git.timeout
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0):
        raise ConfigError(f"git.timeout must be a positive integer, got {timeout!r}")


def _merge_env_overrides(cfg: GitSummaryConfig) -> None:
    """Apply GITSUMMARY_* environment variable overrides."""
    if val := os.environ.get("GITSUMMARY_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if os.environ.get("GITSUMMARY_NO_EMOJI") == "1":
        cfg.output.emoji = False
    if val := os.environ.get("GITSUMMARY_GIT"):
        cfg.git.executable = val
    if val := os.environ.get("GITSUMMARY_TIMEOUT"):
        try:
            timeout = int(val)
        except ValueError:
            pass
        else:
            if timeout > 0:
                cfg.git.timeout = timeout


def load_config(
    repo_path: Path,
    config_override: Optional[str] = None,
) -> GitSummaryConfig:
    """Load, validate, and return a GitSummaryConfig."""
    config_path = find_config_file(repo_path, config_override)

    if config_path is None:
        cfg = GitSummaryConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitSummaryConfig(
            output=_build_section(raw, OutputConfig, "output"),
            git=_build_section(raw, GitConfig, "git"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
