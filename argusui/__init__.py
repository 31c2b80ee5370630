"""Terminal rendering components for tracking coding-agent tasks and their worktrees."""

__version__ = "0.1.0"