"""Git worktree discovery, cleanup and stale process handling."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import time

_KILL_POLLS = 20
_KILL_INTERVAL = 0.1


def dir_exists(path: str) -> bool:
    """True if path names an existing directory."""
    return os.path.isdir(path)


def discover_worktree(data_dir: str, project_name: str, task_name: str) -> str:
    """Return the worktree path for a task under ``data_dir``, or "" if absent."""
    if not project_name or not task_name:
        return ""
    wt_dir = os.path.join(data_dir, "worktrees", project_name, task_name)
    if os.path.exists(os.path.join(wt_dir, ".git")):
        return wt_dir
    return ""


def _alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


def kill_stale_process(pid: int) -> None:
    """Terminate a leftover process, escalating to SIGKILL after about two seconds."""
    if pid <= 0 or not _alive(pid):
        return
    try:
        os.kill(pid, signal.SIGTERM)
    except OSError:
        return
    for _ in range(_KILL_POLLS):
        time.sleep(_KILL_INTERVAL)
        if not _alive(pid):
            return
    try:
        os.kill(pid, getattr(signal, "SIGKILL", signal.SIGTERM))
    except OSError:
        pass


def _git(args: list[str], cwd: str) -> bool:
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def remove_worktree_and_branch(worktree_path: str, branch: str, repo_dir: str) -> None:
    """Remove a worktree and delete its local and remote branches."""
    remove_worktree(worktree_path, repo_dir)
    if not branch:
        return
    directory = repo_dir or os.path.dirname(worktree_path)
    delete_branch(directory, branch)
    delete_remote_branch(directory, branch)


def delete_remote_branch(repo_dir: str, branch: str) -> None:
    """Delete a branch on the origin remote."""
    if not branch or not repo_dir:
        return
    _git(["push", "origin", "--delete", branch], repo_dir)


def delete_branch(repo_dir: str, branch: str) -> None:
    """Force-delete a local branch."""
    if not branch or not repo_dir:
        return
    _git(["branch", "-D", branch], repo_dir)


def is_worktree_subdir(path: str) -> bool:
    """True if path lies inside a recognised worktree directory."""
    cleaned = os.path.normpath(path)
    sep = os.sep
    return (
        f"{sep}.argus{sep}worktrees{sep}" in cleaned
        or f"{sep}.claude{sep}worktrees{sep}" in cleaned
    )


def remove_worktree(worktree_path: str, repo_dir: str) -> None:
    """Remove a worktree via git, deleting the directory if git fails.

    Paths outside a recognised worktree directory are never touched.
    """
    if not dir_exists(worktree_path) or not is_worktree_subdir(worktree_path):
        return
    cwd = repo_dir or os.path.dirname(worktree_path)
    if not _git(["worktree", "remove", "--force", os.path.normpath(worktree_path)], cwd):
        shutil.rmtree(worktree_path, ignore_errors=True)