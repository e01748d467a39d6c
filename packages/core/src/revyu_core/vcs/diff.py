from __future__ import annotations

import logging
import subprocess

from revyu_core.errors import GitDiffError

logger = logging.getLogger(__name__)

ALL_FILES = "."


def git_diff_command(path: str = ALL_FILES) -> list[str]:
    if path == ALL_FILES:
        return ["git", "diff"]
    return ["git", "diff", path]


def get_git_diff(path: str = ALL_FILES) -> str:
    """Return the unstaged ``git diff`` for ``path`` (``.`` means every tracked file)."""
    cmd = git_diff_command(path)
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        raise GitDiffError("git diff failed: git is not installed or not on PATH")

    if result.returncode != 0:
        output = (result.stdout + result.stderr).strip()
        raise GitDiffError(f"git diff failed: exit status {result.returncode}\nOutput: {output}")

    return result.stdout
