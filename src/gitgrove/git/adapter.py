"""Git subprocess wrapper — the only place gitgrove runs ``git``.

Every format string here is paired with a parser; changing one without the
other breaks parsing.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

import structlog

log = structlog.get_logger(__name__)

# Fields joined by 0x1F; log records end with 0x1E (see log_parser).
_COMMIT_FIELDS = "%H%x1f%h%x1f%an%x1f%ae%x1f%ct%x1f%s%x1f%B"

LOG_FORMAT = f"{_COMMIT_FIELDS}%x1e"
SHOW_FORMAT = _COMMIT_FIELDS

BRANCH_FORMAT = (
    "%(refname:short)%09"
    "%(if)%(upstream)%(then)local"
    "%(else)%(if:equals=refs/remotes)%(refname:rstrip=-2)%(then)remote%(else)local%(end)"
    "%(end)"
)


class GitError(Exception):
    """Raised when git is unavailable, times out, or exits non-zero."""


def _run_git(args: List[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    log.debug("git.run", args=args, cwd=str(cwd))
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        raise GitError(f"git {' '.join(args)} failed: {result.stderr.strip()}")
    return result.stdout


def _diff_args(context_lines: int, find_renames: bool) -> List[str]:
    args = [f"-U{context_lines}", "--no-color"]
    args.append("-M" if find_renames else "--no-renames")
    return args


def get_repo_root(cwd: Optional[Path] = None, timeout: int = 30) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    if not cwd.is_dir():
        raise GitError(f"not a directory: {cwd}")
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd, timeout=timeout)
    return Path(out.strip())


def get_status_text(path: Path, timeout: int = 30) -> str:
    """Porcelain status, one changed path per line."""
    return _run_git(["status", "--porcelain"], cwd=path, timeout=timeout)


def get_log_text(path: Path, limit: int, offset: int = 0, timeout: int = 30) -> str:
    """Commit history in LOG_FORMAT, newest first."""
    return _run_git(
        ["log", f"--format={LOG_FORMAT}", f"--skip={offset}", f"-n{limit}"],
        cwd=path,
        timeout=timeout,
    )


def get_commit_text(path: Path, commit_sha: str, timeout: int = 30) -> str:
    """A single commit record in SHOW_FORMAT."""
    return _run_git(
        ["log", "-1", f"--format={SHOW_FORMAT}", commit_sha],
        cwd=path,
        timeout=timeout,
    )


def get_commit_diff_text(
    path: Path,
    commit_sha: str,
    *,
    context_lines: int = 3,
    find_renames: bool = True,
    timeout: int = 30,
) -> str:
    """The patch introduced by *commit_sha*, without its log message."""
    return _run_git(
        ["show", commit_sha, "--format=", *_diff_args(context_lines, find_renames)],
        cwd=path,
        timeout=timeout,
    )


def get_staged_diff_text(
    path: Path,
    *,
    context_lines: int = 3,
    find_renames: bool = True,
    timeout: int = 30,
) -> str:
    """The unified diff of staged changes (--cached)."""
    return _run_git(
        ["diff", "--cached", *_diff_args(context_lines, find_renames)],
        cwd=path,
        timeout=timeout,
    )


def get_unstaged_diff_text(
    path: Path,
    *,
    context_lines: int = 3,
    find_renames: bool = True,
    timeout: int = 30,
) -> str:
    """The unified diff of unstaged worktree changes."""
    return _run_git(
        ["diff", *_diff_args(context_lines, find_renames)],
        cwd=path,
        timeout=timeout,
    )


def get_untracked_files(path: Path, timeout: int = 30) -> List[str]:
    """Untracked paths, honouring .gitignore."""
    output = _run_git(
        ["ls-files", "--others", "--exclude-standard"],
        cwd=path,
        timeout=timeout,
    )
    return [line for line in output.split("\n") if line]


def get_worktree_list_text(path: Path, timeout: int = 30) -> str:
    return _run_git(["worktree", "list", "--porcelain"], cwd=path, timeout=timeout)


def get_branch_refs_text(path: Path, timeout: int = 30) -> str:
    return _run_git(
        ["for-each-ref", f"--format={BRANCH_FORMAT}", "refs/heads", "refs/remotes"],
        cwd=path,
        timeout=timeout,
    )
