"""Git interface layer — parsers, models, adapter and queries."""

from gitgrove.git.adapter import GitError
from gitgrove.git.branch_parser import parse_branch_list, parse_checked_out_branches
from gitgrove.git.diff_parser import DiffParser, parse_diff, parse_hunk_header
from gitgrove.git.log_parser import FIELD_SEPARATOR, RECORD_SEPARATOR, parse_commit_log
from gitgrove.git.models import (
    BranchInfo,
    CommitDiff,
    CommitInfo,
    DiffHunk,
    DiffLine,
    DiffStats,
    FileDiff,
    FileStatus,
    HunkRange,
    LineKind,
    WorkingDiff,
    WorktreeStatus,
)
from gitgrove.git.status_parser import parse_status

__all__ = [
    "BranchInfo",
    "CommitDiff",
    "CommitInfo",
    "DiffHunk",
    "DiffLine",
    "DiffParser",
    "DiffStats",
    "FIELD_SEPARATOR",
    "FileDiff",
    "FileStatus",
    "GitError",
    "HunkRange",
    "LineKind",
    "RECORD_SEPARATOR",
    "WorkingDiff",
    "WorktreeStatus",
    "parse_branch_list",
    "parse_checked_out_branches",
    "parse_commit_log",
    "parse_diff",
    "parse_hunk_header",
    "parse_status",
]
