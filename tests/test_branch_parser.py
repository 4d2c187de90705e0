"""Tests for branch listing parsers."""

import textwrap

from gitgrove.git.branch_parser import parse_branch_list, parse_checked_out_branches
from gitgrove.git.models import BranchInfo


class TestCheckedOutBranches:
    def test_worktree_porcelain(self):
        text = textwrap.dedent("""\
            worktree /repo
            HEAD 1111111111111111111111111111111111111111
            branch refs/heads/main

            worktree /repo-feature
            HEAD 2222222222222222222222222222222222222222
            branch refs/heads/feature/login

            worktree /repo-detached
            HEAD 3333333333333333333333333333333333333333
            detached
        """)
        assert parse_checked_out_branches(text) == ["main", "feature/login"]

    def test_empty(self):
        assert parse_checked_out_branches("") == []


class TestBranchList:
    def test_local_before_remote_sorted(self):
        text = (
            "zeta\tlocal\n"
            "origin/main\tremote\n"
            "main\tlocal\n"
            "origin/HEAD\tremote\n"
            "\n"
        )
        result = parse_branch_list(text, checked_out={"main"})
        assert result == [
            BranchInfo(name="main", is_remote=False, is_checked_out=True),
            BranchInfo(name="zeta", is_remote=False, is_checked_out=False),
            BranchInfo(name="origin/main", is_remote=True, is_checked_out=False),
        ]

    def test_kind_column_identifies_slashed_local_branch(self):
        (b,) = parse_branch_list("feature/login\tlocal\n", checked_out=["feature/login"])
        assert b.is_remote is False
        assert b.is_checked_out is True

    def test_bare_names_use_slash(self):
        result = parse_branch_list("main\nupstream/dev\n")
        assert [(b.name, b.is_remote) for b in result] == [
            ("main", False),
            ("upstream/dev", True),
        ]

    def test_remote_never_checked_out(self):
        (b,) = parse_branch_list("origin/main\tremote\n", checked_out=["origin/main"])
        assert b.is_checked_out is False
