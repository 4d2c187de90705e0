"""Unified diff parser — ``git diff`` / ``git show`` text to FileDiff records.

A single linear pass holds at most one pending file and one pending hunk.
Opening a new section or hunk moves the pending value out into its parent
and replaces the slot, so nothing emitted is ever mutated afterwards.
Malformed input never raises: unparsable hunk headers are skipped and
unrecognised lines are ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import structlog

from gitgrove.git._text import split_lines
from gitgrove.git.models import (
    DiffHunk,
    DiffLine,
    FileDiff,
    FileStatus,
    HunkRange,
    LineKind,
)

log = structlog.get_logger(__name__)

_DIFF_HEADER = "diff --git "
_NEW_FILE = "new file mode"
_DELETED_FILE = "deleted file mode"
_RENAME_FROM = "rename from "
_BINARY = "Binary files"
_HUNK_HEADER = "@@ "

_RANGE_RE = re.compile(r"(\d+)(?:,(\d+))?", re.ASCII)


def _parse_range(token: str) -> Optional[Tuple[int, int]]:
    """Parse ``start[,count]``; a missing count means 1."""
    m = _RANGE_RE.fullmatch(token)
    if not m:
        return None
    start = int(m.group(1))
    count = int(m.group(2)) if m.group(2) is not None else 1
    return start, count


def parse_hunk_header(line: str) -> Optional[HunkRange]:
    """Parse ``@@ -a[,b] +c[,d] @@ [context]`` into a HunkRange.

    Returns None when the line does not hold two range tokens or either
    token is not numeric. Text after the closing ``@@`` is ignored.
    """
    body = line[len(_HUNK_HEADER):] if line.startswith(_HUNK_HEADER) else line
    tokens = body.split(" @@", 1)[0].split(" ")
    if len(tokens) < 2:
        return None

    old = _parse_range(tokens[0].lstrip("-"))
    new = _parse_range(tokens[1].lstrip("+"))
    if old is None or new is None:
        return None
    return HunkRange(old[0], old[1], new[0], new[1])


def _path_from_header(line: str) -> str:
    """Extract the new path from ``diff --git a/<old> b/<new>``."""
    _, sep, new_path = line.partition(" b/")
    if sep:
        return new_path
    _, sep, rest = line.partition(" a/")
    if sep:
        return rest.split(" ", 1)[0]
    return ""


@dataclass
class _PendingHunk:
    header: str
    bounds: HunkRange
    lines: List[DiffLine] = field(default_factory=list)

    def freeze(self) -> DiffHunk:
        return DiffHunk(
            old_start=self.bounds.old_start,
            old_lines=self.bounds.old_lines,
            new_start=self.bounds.new_start,
            new_lines=self.bounds.new_lines,
            header=self.header,
            lines=tuple(self.lines),
        )


@dataclass
class _PendingFile:
    path: str
    status: FileStatus = FileStatus.MODIFIED
    old_path: Optional[str] = None
    binary: bool = False
    hunks: List[DiffHunk] = field(default_factory=list)

    def freeze(self) -> FileDiff:
        renamed = self.status is FileStatus.RENAMED
        return FileDiff(
            path=self.path,
            status=self.status,
            old_path=self.old_path if renamed else None,
            hunks=() if self.binary else tuple(self.hunks),
            binary=self.binary,
        )


class DiffParser:
    """Parse unified diff text into an ordered list of FileDiff.

    Usage::

        files = DiffParser(diff_text).parse()
    """

    def __init__(self, diff_text: str) -> None:
        self._lines = split_lines(diff_text)
        self._files: List[FileDiff] = []
        self._file: Optional[_PendingFile] = None
        self._hunk: Optional[_PendingHunk] = None

    def parse(self) -> List[FileDiff]:
        """Run the scan and return the files in encountered order."""
        self._files = []
        self._file = None
        self._hunk = None

        for line in self._lines:
            self._feed(line)

        self._close_file()
        return self._files

    # --- state transitions ---

    def _close_hunk(self) -> None:
        hunk, self._hunk = self._hunk, None
        if hunk is not None and self._file is not None:
            self._file.hunks.append(hunk.freeze())

    def _close_file(self) -> None:
        self._close_hunk()
        pending, self._file = self._file, None
        if pending is not None:
            self._files.append(pending.freeze())

    def _feed(self, line: str) -> None:
        if line.startswith(_DIFF_HEADER):
            self._close_file()
            self._file = _PendingFile(path=_path_from_header(line))
            return

        if line.startswith(_BINARY):
            if self._file is not None:
                self._file.binary = True
            return

        if line.startswith(_NEW_FILE):
            if self._file is not None:
                self._file.status = FileStatus.ADDED
            return

        if line.startswith(_DELETED_FILE):
            if self._file is not None:
                self._file.status = FileStatus.DELETED
            return

        if line.startswith(_RENAME_FROM):
            if self._file is not None:
                self._file.old_path = line[len(_RENAME_FROM):]
                self._file.status = FileStatus.RENAMED
            return

        if line.startswith(_HUNK_HEADER):
            self._close_hunk()
            if self._file is None or self._file.binary:
                return
            bounds = parse_hunk_header(line)
            if bounds is None:
                log.debug("diff.hunk_header_skipped", header=line, path=self._file.path)
                return
            self._hunk = _PendingHunk(header=line, bounds=bounds)
            return

        if self._hunk is not None and line:
            kind = LineKind.from_marker(line[0])
            if kind is not None:
                self._hunk.lines.append(DiffLine(kind=kind, content=line[1:]))


def parse_diff(diff_text: str) -> List[FileDiff]:
    """Parse *diff_text* into FileDiff records."""
    return DiffParser(diff_text).parse()
