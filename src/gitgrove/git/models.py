"""Data models for parsed git output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple, Optional, Tuple


class FileStatus(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"


class LineKind(str, Enum):
    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"

    @property
    def marker(self) -> str:
        return _MARKERS[self]

    @classmethod
    def from_marker(cls, ch: str) -> Optional["LineKind"]:
        """Map a diff line's first character to its kind, or None."""
        for kind, marker in _MARKERS.items():
            if marker == ch:
                return kind
        return None


_MARKERS = {
    LineKind.CONTEXT: " ",
    LineKind.ADDITION: "+",
    LineKind.DELETION: "-",
}


class HunkRange(NamedTuple):
    """The four integers of a ``@@ -a,b +c,d @@`` header."""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int


@dataclass(frozen=True, slots=True)
class DiffLine:
    """A single line inside a hunk, marker stripped."""

    kind: LineKind
    content: str


@dataclass(frozen=True)
class DiffHunk:
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str
    lines: Tuple[DiffLine, ...] = ()


@dataclass(frozen=True)
class FileDiff:
    """One file section of a unified diff."""

    path: str
    status: FileStatus = FileStatus.MODIFIED
    old_path: Optional[str] = None  # set on renames only
    hunks: Tuple[DiffHunk, ...] = ()
    binary: bool = False

    def _count(self, kind: LineKind) -> int:
        return sum(1 for h in self.hunks for line in h.lines if line.kind is kind)

    @property
    def insertions(self) -> int:
        return self._count(LineKind.ADDITION)

    @property
    def deletions(self) -> int:
        return self._count(LineKind.DELETION)


@dataclass(frozen=True)
class DiffStats:
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0

    @classmethod
    def from_files(cls, files: Iterable[FileDiff]) -> "DiffStats":
        files_changed = insertions = deletions = 0
        for f in files:
            files_changed += 1
            insertions += f.insertions
            deletions += f.deletions
        return cls(files_changed=files_changed, insertions=insertions, deletions=deletions)


@dataclass(frozen=True)
class CommitInfo:
    hash: str
    short_hash: str
    author_name: str
    author_email: str
    timestamp: int  # unix seconds
    summary: str
    message: str = ""


@dataclass(frozen=True)
class WorktreeStatus:
    """Aggregate counters from ``git status --porcelain``."""

    modified: int = 0
    staged: int = 0
    untracked: int = 0
    conflicted: int = 0

    @property
    def is_clean(self) -> bool:
        return not (self.modified or self.staged or self.untracked or self.conflicted)


@dataclass(frozen=True)
class CommitDiff:
    commit: CommitInfo
    files: Tuple[FileDiff, ...]
    stats: DiffStats


@dataclass(frozen=True)
class WorkingDiff:
    """Uncommitted changes: staged, unstaged and untracked files."""

    staged_files: Tuple[FileDiff, ...]
    unstaged_files: Tuple[FileDiff, ...]
    stats: DiffStats


@dataclass(frozen=True)
class BranchInfo:
    name: str
    is_remote: bool = False
    is_checked_out: bool = False
