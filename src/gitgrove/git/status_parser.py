"""Porcelain status parser — ``git status --porcelain`` to WorktreeStatus."""

from __future__ import annotations

from gitgrove.git._text import split_lines
from gitgrove.git.models import WorktreeStatus

# Unmerged (index, worktree) pairs.
CONFLICT_PAIRS = frozenset({
    ("U", "U"),
    ("A", "A"),
    ("D", "D"),
    ("A", "U"),
    ("U", "A"),
    ("D", "U"),
    ("U", "D"),
})
UNTRACKED = "?"
STAGED_CODES = frozenset("MADRC")
MODIFIED_CODES = frozenset("MD")


def parse_status(text: str) -> WorktreeStatus:
    """Count changed paths by category.

    Each line is classified once, first match wins: conflicted, untracked,
    staged (index column), modified (worktree column). Anything else,
    including ignored entries and lines shorter than two characters,
    counts toward nothing.
    """
    modified = staged = untracked = conflicted = 0

    for line in split_lines(text):
        if len(line) < 2:
            continue
        index, worktree = line[0], line[1]

        if (index, worktree) in CONFLICT_PAIRS:
            conflicted += 1
        elif index == UNTRACKED and worktree == UNTRACKED:
            untracked += 1
        elif index in STAGED_CODES:
            staged += 1
        elif worktree in MODIFIED_CODES:
            modified += 1

    return WorktreeStatus(
        modified=modified,
        staged=staged,
        untracked=untracked,
        conflicted=conflicted,
    )
