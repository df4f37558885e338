"""gitsummary CLI — Typer application printing a working-tree change summary."""

from __future__ import annotations

from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from gitsummary import __version__

EXIT_USAGE = 1
EXIT_GIT = 2

app = typer.Typer(
    name="gitsummary",
    help="Summarise pending changes in a git working tree.",
    add_completion=False,
)

console = Console(stderr=True, soft_wrap=True)


def _fail(prefix: str, message: str, code: int) -> NoReturn:
    console.print(f"[bold red]{prefix}[/bold red] {escape(message)}")
    raise typer.Exit(code=code)


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitsummary {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Optional[str] = typer.Argument(None, help="Path to the git repository", show_default=False),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitsummary.toml"),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Plain labels without icons"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Print counts of modified, added, deleted, renamed and untracked files."""
    from gitsummary.config.loader import ConfigError, find_config_file, load_config
    from gitsummary.config.schema import OUTPUT_FORMATS
    from gitsummary.git.adapter import (
        GitError,
        NotARepositoryError,
        PathNotFoundError,
        read_status,
        resolve_repo_path,
        status_command,
    )
    from gitsummary.git.status_parser import parse_status
    from gitsummary.output import json_report, terminal

    if not path:
        console.print("[bold red]Error:[/bold red] Please provide the path to a git repository.")
        console.print("Usage: gitsummary <repository-path>")
        raise typer.Exit(code=EXIT_USAGE)

    # --- Resolve path ---
    try:
        repo_path = resolve_repo_path(path)
    except PathNotFoundError as exc:
        _fail("Error:", str(exc), EXIT_USAGE)

    # --- Load config ---
    try:
        cfg = load_config(repo_path, config)
    except ConfigError as exc:
        _fail("Config error:", str(exc), EXIT_USAGE)

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            _fail("Invalid format:", format, EXIT_USAGE)
        cfg.output.format = format  # type: ignore[assignment]
    if no_emoji:
        cfg.output.emoji = False

    if verbose:
        config_path = find_config_file(repo_path, config)
        console.print(f"[dim]Repository: {escape(str(repo_path))}[/dim]")
        console.print(f"[dim]Config: {escape(str(config_path)) if config_path else 'defaults'}[/dim]")
        console.print(f"[dim]Command: {escape(' '.join(status_command(cfg.git.executable)))}[/dim]")

    # --- Run git ---
    try:
        output = read_status(
            repo_path,
            git=cfg.git.executable,
            timeout=cfg.git.timeout,
        )
    except NotARepositoryError as exc:
        console.print(f"[bold red]Git error:[/bold red] {escape(exc.detail)}")
        _fail("Error:", str(exc), EXIT_GIT)
    except GitError as exc:
        _fail("Git error:", str(exc), EXIT_GIT)

    summary = parse_status(output)

    if verbose:
        console.print(f"[dim]Status lines: {summary.total}[/dim]")

    # --- Output ---
    if cfg.output.format == "json":
        print(json_report.render(summary, str(repo_path)))
    else:
        terminal.render(summary, str(repo_path), emoji=cfg.output.emoji)
