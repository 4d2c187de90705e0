"""Branch listing parsers for ``for-each-ref`` and ``worktree list`` output."""

from __future__ import annotations

from typing import Collection, List

from gitgrove.git._text import split_lines, strip_ws
from gitgrove.git.models import BranchInfo

_BRANCH_PREFIX = "branch refs/heads/"


def parse_checked_out_branches(worktree_porcelain: str) -> List[str]:
    """Branch names checked out in any worktree (``worktree list --porcelain``)."""
    return [
        line[len(_BRANCH_PREFIX):]
        for line in split_lines(worktree_porcelain)
        if line.startswith(_BRANCH_PREFIX)
    ]


def parse_branch_list(text: str, checked_out: Collection[str] = ()) -> List[BranchInfo]:
    """Parse one ``<short refname>\\t<local|remote>`` line per ref.

    Remote ``HEAD`` aliases are skipped. Local branches sort before remote
    ones, alphabetically within each group.
    """
    branches: List[BranchInfo] = []
    for raw in split_lines(text):
        line = strip_ws(raw)
        if not line:
            continue
        name, _, kind = line.partition("\t")
        if name.endswith("/HEAD"):
            continue
        # no kind column: slashed names are remote
        is_remote = kind == "remote" if kind else "/" in name
        branches.append(BranchInfo(
            name=name,
            is_remote=is_remote,
            is_checked_out=not is_remote and name in checked_out,
        ))

    branches.sort(key=lambda b: (b.is_remote, b.name))
    return branches
