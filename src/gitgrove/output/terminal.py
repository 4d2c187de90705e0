"""Rich terminal reporter — status counters, commit tables, coloured diffs."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitgrove.git.models import (
    BranchInfo,
    CommitDiff,
    CommitInfo,
    DiffStats,
    FileDiff,
    FileStatus,
    LineKind,
    WorkingDiff,
    WorktreeStatus,
)

_STATUS_STYLE = {
    FileStatus.ADDED: ("A", "bold green"),
    FileStatus.MODIFIED: ("M", "bold yellow"),
    FileStatus.DELETED: ("D", "bold red"),
    FileStatus.RENAMED: ("R", "bold cyan"),
}

_LINE_STYLE = {
    LineKind.ADDITION: "green",
    LineKind.DELETION: "red",
    LineKind.CONTEXT: "",
}


def _format_time(timestamp: int) -> str:
    if timestamp <= 0:
        return "-"
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


def _file_label(f: FileDiff) -> Text:
    letter, style = _STATUS_STYLE[f.status]
    label = Text(f"{letter} ", style=style)
    if f.old_path is not None:
        label.append(f"{f.old_path} → {f.path}")
    else:
        label.append(f.path)
    if f.binary:
        label.append(" (binary)", style="dim")
    return label


def render_status(status: WorktreeStatus, console: Optional[Console] = None) -> None:
    console = console or Console()
    if status.is_clean:
        console.print("[bold green]✓ Working tree clean[/bold green]")
        return
    console.print(f"[dim]Staged:[/dim]      {status.staged}")
    console.print(f"[dim]Modified:[/dim]    {status.modified}")
    console.print(f"[dim]Untracked:[/dim]   {status.untracked}")
    if status.conflicted:
        console.print(f"[bold red]Conflicted:[/bold red]  {status.conflicted}")


def render_log(commits: List[CommitInfo], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not commits:
        console.print("[dim]No commits.[/dim]")
        return

    table = Table(show_lines=False, border_style="dim")
    table.add_column("Commit", style="yellow", no_wrap=True)
    table.add_column("Date", style="green", no_wrap=True)
    table.add_column("Author", style="cyan")
    table.add_column("Summary")
    for c in commits:
        table.add_row(c.short_hash, _format_time(c.timestamp), c.author_name, c.summary)
    console.print(table)


def render_stats(stats: DiffStats, console: Console) -> None:
    console.print(
        f"[dim]{stats.files_changed} file(s) changed,[/dim] "
        f"[green]{stats.insertions} insertion(s)(+)[/green][dim],[/dim] "
        f"[red]{stats.deletions} deletion(s)(-)[/red]"
    )


def render_files(files: Iterable[FileDiff], console: Console) -> None:
    for f in files:
        console.print(_file_label(f))
        for hunk in f.hunks:
            console.print(Text(hunk.header, style="cyan"))
            for line in hunk.lines:
                console.print(
                    Text(line.kind.marker + line.content, style=_LINE_STYLE[line.kind]),
                    soft_wrap=True,
                )
        console.print()


def render_commit_diff(
    diff: CommitDiff,
    console: Optional[Console] = None,
    *,
    show_stats: bool = True,
) -> None:
    console = console or Console()
    commit = diff.commit
    console.print(f"[bold yellow]commit {commit.hash}[/bold yellow]")
    console.print(f"Author: {commit.author_name} <{commit.author_email}>")
    console.print(f"Date:   {_format_time(commit.timestamp)}")
    console.print()
    console.print(Text(commit.message or commit.summary))
    console.print()
    render_files(diff.files, console)
    if show_stats:
        render_stats(diff.stats, console)


def render_working_diff(
    diff: WorkingDiff,
    console: Optional[Console] = None,
    *,
    show_stats: bool = True,
) -> None:
    console = console or Console()
    if not diff.staged_files and not diff.unstaged_files:
        console.print("[dim]No uncommitted changes.[/dim]")
        return
    if diff.staged_files:
        console.print("[bold]Staged changes[/bold]")
        render_files(diff.staged_files, console)
    if diff.unstaged_files:
        console.print("[bold]Unstaged changes[/bold]")
        render_files(diff.unstaged_files, console)
    if show_stats:
        render_stats(diff.stats, console)


def render_branches(branches: List[BranchInfo], console: Optional[Console] = None) -> None:
    console = console or Console()
    for b in branches:
        marker = "*" if b.is_checked_out else " "
        style = "red" if b.is_remote else ("bold green" if b.is_checked_out else "")
        console.print(Text(f"{marker} {b.name}", style=style))
