"""Shared test fixtures — sample git output and temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest

RS = "\x1e"
US = "\x1f"


def commit_record(*fields: str) -> str:
    """Join fields the way the adapter's log format does."""
    return US.join(fields) + RS


@pytest.fixture
def sample_diff_modified() -> str:
    """One modified file with a single hunk."""
    return textwrap.dedent("""\
        diff --git a/app.py b/app.py
        index 1234567..abcdef0 100644
        --- a/app.py
        +++ b/app.py
        @@ -10,3 +10,4 @@ def main():
             setup()
        -    run()
        +    run(debug=True)
        +    report()
             teardown()
    """)


@pytest.fixture
def sample_diff_added() -> str:
    return textwrap.dedent("""\
        diff --git a/hello.py b/hello.py
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/hello.py
        @@ -0,0 +1,3 @@
        +def greet(name):
        +    return f"Hello, {name}!"
        +
    """)


@pytest.fixture
def sample_diff_deleted() -> str:
    return textwrap.dedent("""\
        diff --git a/old.py b/old.py
        deleted file mode 100644
        index abc1234..0000000
        --- a/old.py
        +++ /dev/null
        @@ -1,3 +0,0 @@
        -line one
        -line two
        -line three
    """)


@pytest.fixture
def sample_diff_binary() -> str:
    return textwrap.dedent("""\
        diff --git a/image.png b/image.png
        new file mode 100644
        index 0000000..abc1234
        Binary files /dev/null and b/image.png differ
    """)


@pytest.fixture
def sample_diff_rename() -> str:
    return textwrap.dedent("""\
        diff --git a/old_name.py b/new_name.py
        similarity index 97%
        rename from old_name.py
        rename to new_name.py
        index abc1234..def5678 100644
        --- a/old_name.py
        +++ b/new_name.py
        @@ -1,2 +1,3 @@
         import os
        +# New line added after rename
         import sys
    """)


@pytest.fixture
def sample_diff_multi_hunk() -> str:
    return textwrap.dedent("""\
        diff --git a/f.py b/f.py
        index abc..def 100644
        --- a/f.py
        +++ b/f.py
        @@ -5,3 +5,4 @@
         a
        +b
         c
         d
        @@ -20,3 +21,2 @@ class Foo:
         x
        -y
         z
    """)


@pytest.fixture
def sample_diff_two_files(sample_diff_modified, sample_diff_added) -> str:
    return sample_diff_modified + sample_diff_added


@pytest.fixture
def sample_status() -> str:
    return (
        "M  staged.py\n"
        " M modified.py\n"
        "MM both.py\n"
        " D removed.py\n"
        "A  added.py\n"
        "R  old.py -> new.py\n"
        "UU conflict.py\n"
        "AA both_added.py\n"
        "?? untracked.txt\n"
        "?? other.txt\n"
        "!! ignored.log\n"
    )


@pytest.fixture
def sample_log() -> str:
    return (
        commit_record(
            "a" * 40, "aaaaaaa", "Ada Lovelace", "ada@example.com",
            "1700000000", "Add engine", "Add engine\n\nWith notes.\n",
        )
        + "\n"
        + commit_record(
            "b" * 40, "bbbbbbb", "Grace Hopper", "grace@example.com",
            "1690000000", "Initial commit", "Initial commit\n",
        )
        + "\n"
    )


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one commit."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    (tmp_path / "README.md").write_text("# Test\n")
    (tmp_path / "app.py").write_text("a = 1\nb = 2\nc = 3\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init", "-m", "First commit body.")
    return tmp_path


@pytest.fixture
def git(tmp_git_repo: Path):
    """Run git in the temp repo."""
    def run(*args: str) -> None:
        _git(tmp_git_repo, *args)
    return run
