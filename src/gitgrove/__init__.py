"""gitgrove — structured views over git worktree, log and diff output."""

__version__ = "0.1.0"
