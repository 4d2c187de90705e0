"""gitgrove CLI — Typer application with status, log, show, diff, branches and init."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional, Tuple

import structlog
import typer
from rich.console import Console

from gitgrove import __version__
from gitgrove.config.schema import OUTPUT_FORMATS, GroveConfig

app = typer.Typer(
    name="gitgrove",
    help="Structured views over git status, history and diffs.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)
log = structlog.get_logger(__name__)

RepoOption = typer.Option(None, "--repo", "-C", help="Repository or worktree path (default: cwd)")
ConfigOption = typer.Option(None, "--config", "-c", help="Path to .gitgrove.toml")
FormatOption = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml")


def _resolve_repo_root(repo: Optional[Path], timeout: int = 30) -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitgrove.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root(repo, timeout=timeout)
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _setup(
    repo: Optional[Path],
    config: Optional[str],
    format: Optional[str],
) -> Tuple[Path, GroveConfig]:
    """Resolve the repo, load config, apply CLI overrides, configure logging."""
    from gitgrove.config.loader import ConfigError, load_config
    from gitgrove.logging import configure_logging

    repo_root = _resolve_repo_root(repo)

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    configure_logging(cfg.logging)
    log.debug("cli.setup", repo=str(repo_root), format=cfg.output.format)
    return repo_root, cfg


def _query(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run a git query, mapping GitError to exit code 2."""
    from gitgrove.git.adapter import GitError

    try:
        return fn(*args, **kwargs)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _emit(value: Any, cfg: GroveConfig, render_terminal: Callable[[Console], None]) -> None:
    from gitgrove.output import json_report, yaml_report

    if cfg.output.format == "json":
        print(json_report.render(value))
    elif cfg.output.format == "yaml":
        print(yaml_report.render(value), end="")
    else:
        render_terminal(Console())


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    repo: Optional[Path] = RepoOption,
    config: Optional[str] = ConfigOption,
    format: Optional[str] = FormatOption,
) -> None:
    """Count staged, modified, untracked and conflicted paths."""
    from gitgrove.git.queries import get_worktree_status
    from gitgrove.output import terminal

    repo_root, cfg = _setup(repo, config, format)
    result = _query(get_worktree_status, repo_root, cfg.git)
    _emit(result, cfg, lambda c: terminal.render_status(result, c))


# ── log ───────────────────────────────────────────────────────────────────────


@app.command("log")
def log_(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Number of commits"),
    offset: int = typer.Option(0, "--skip", min=0, help="Skip this many commits"),
    repo: Optional[Path] = RepoOption,
    config: Optional[str] = ConfigOption,
    format: Optional[str] = FormatOption,
) -> None:
    """Show commit history."""
    from gitgrove.git.queries import get_commit_history
    from gitgrove.output import terminal

    repo_root, cfg = _setup(repo, config, format)
    commits = _query(get_commit_history, repo_root, limit or cfg.log.limit, offset, cfg.git)
    _emit(commits, cfg, lambda c: terminal.render_log(commits, c))


# ── show ──────────────────────────────────────────────────────────────────────


@app.command()
def show(
    commit: str = typer.Argument("HEAD", help="Commit to show"),
    repo: Optional[Path] = RepoOption,
    config: Optional[str] = ConfigOption,
    format: Optional[str] = FormatOption,
) -> None:
    """Show a commit's metadata and changed files."""
    from gitgrove.git.queries import get_commit_diff
    from gitgrove.output import terminal

    repo_root, cfg = _setup(repo, config, format)
    diff = _query(get_commit_diff, repo_root, commit, cfg.git)
    _emit(
        diff,
        cfg,
        lambda c: terminal.render_commit_diff(diff, c, show_stats=cfg.output.show_stats),
    )


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    repo: Optional[Path] = RepoOption,
    config: Optional[str] = ConfigOption,
    format: Optional[str] = FormatOption,
) -> None:
    """Show uncommitted changes (staged, unstaged and untracked)."""
    from gitgrove.git.queries import get_working_diff
    from gitgrove.output import terminal

    repo_root, cfg = _setup(repo, config, format)
    working = _query(get_working_diff, repo_root, cfg.git)
    _emit(
        working,
        cfg,
        lambda c: terminal.render_working_diff(working, c, show_stats=cfg.output.show_stats),
    )


# ── branches ──────────────────────────────────────────────────────────────────


@app.command()
def branches(
    repo: Optional[Path] = RepoOption,
    config: Optional[str] = ConfigOption,
    format: Optional[str] = FormatOption,
) -> None:
    """List local and remote branches."""
    from gitgrove.git.queries import list_branches
    from gitgrove.output import terminal

    repo_root, cfg = _setup(repo, config, format)
    result = _query(list_branches, repo_root, cfg.git)
    _emit(result, cfg, lambda c: terminal.render_branches(result, c))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(repo: Optional[Path] = RepoOption) -> None:
    """Generate a starter .gitgrove.toml in the repo root."""
    from gitgrove.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    repo_root = _resolve_repo_root(repo)
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitgrove {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitgrove — structured views over git status, history and diffs."""
    from gitgrove.logging import configure_logging

    # defaults until the repo config is loaded
    configure_logging()
