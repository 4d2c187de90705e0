"""Read-only repository queries: run git through the adapter, parse the text.

These are the collaborators around the pure parsers. Each call runs one or
more git commands for a single path and returns owned model values.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import structlog

from gitgrove.config.schema import GitConfig
from gitgrove.git import adapter
from gitgrove.git.adapter import GitError
from gitgrove.git.branch_parser import parse_branch_list, parse_checked_out_branches
from gitgrove.git.diff_parser import parse_diff
from gitgrove.git.log_parser import parse_commit_log
from gitgrove.git.models import (
    BranchInfo,
    CommitDiff,
    CommitInfo,
    DiffStats,
    FileDiff,
    FileStatus,
    WorkingDiff,
    WorktreeStatus,
)
from gitgrove.git.status_parser import parse_status

log = structlog.get_logger(__name__)


def get_worktree_status(path: Path, git: Optional[GitConfig] = None) -> WorktreeStatus:
    git = git or GitConfig()
    return parse_status(adapter.get_status_text(path, timeout=git.timeout))


def get_commit_history(
    path: Path,
    limit: int,
    offset: int = 0,
    git: Optional[GitConfig] = None,
) -> List[CommitInfo]:
    """Up to *limit* commits starting *offset* commits back from HEAD."""
    git = git or GitConfig()
    text = adapter.get_log_text(path, limit, offset, timeout=git.timeout)
    return parse_commit_log(text)


def get_commit_diff(path: Path, commit_sha: str, git: Optional[GitConfig] = None) -> CommitDiff:
    """Commit metadata plus the files it changed. Raises GitError."""
    git = git or GitConfig()
    commits = parse_commit_log(adapter.get_commit_text(path, commit_sha, timeout=git.timeout))
    if not commits:
        raise GitError(f"Failed to parse commit info for {commit_sha}")

    files = parse_diff(adapter.get_commit_diff_text(
        path,
        commit_sha,
        context_lines=git.context_lines,
        find_renames=git.find_renames,
        timeout=git.timeout,
    ))
    log.debug("query.commit_diff", commit=commit_sha, files=len(files))
    return CommitDiff(commit=commits[0], files=tuple(files), stats=DiffStats.from_files(files))


def get_working_diff(path: Path, git: Optional[GitConfig] = None) -> WorkingDiff:
    """Staged and unstaged changes; untracked files count as added."""
    git = git or GitConfig()
    diff_kwargs = dict(
        context_lines=git.context_lines,
        find_renames=git.find_renames,
        timeout=git.timeout,
    )
    staged = parse_diff(adapter.get_staged_diff_text(path, **diff_kwargs))
    unstaged = parse_diff(adapter.get_unstaged_diff_text(path, **diff_kwargs))
    unstaged.extend(
        FileDiff(path=name, status=FileStatus.ADDED)
        for name in adapter.get_untracked_files(path, timeout=git.timeout)
    )

    return WorkingDiff(
        staged_files=tuple(staged),
        unstaged_files=tuple(unstaged),
        stats=DiffStats.from_files([*staged, *unstaged]),
    )


def list_branches(path: Path, git: Optional[GitConfig] = None) -> List[BranchInfo]:
    """Local and remote branches, flagging those checked out in a worktree."""
    git = git or GitConfig()
    checked_out = parse_checked_out_branches(
        adapter.get_worktree_list_text(path, timeout=git.timeout)
    )
    return parse_branch_list(
        adapter.get_branch_refs_text(path, timeout=git.timeout),
        checked_out=set(checked_out),
    )
