"""Tests for the git diff collaborator."""

from unittest.mock import MagicMock, patch

import pytest

from revyu_core.errors import GitDiffError
from revyu_core.vcs.diff import get_git_diff, git_diff_command


class TestGitDiffCommand:
    def test_all_files(self):
        assert git_diff_command(".") == ["git", "diff"]

    def test_single_file(self):
        assert git_diff_command("src/app.py") == ["git", "diff", "src/app.py"]


class TestGetGitDiff:
    def test_returns_stdout(self):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0, stdout="diff --git a/x b/x\n", stderr="")
            assert get_git_diff() == "diff --git a/x b/x\n"
        assert mock_run.call_args.args[0] == ["git", "diff"]

    def test_non_zero_exit_raises_with_output(self):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=128, stdout="", stderr="fatal: not a git repository")
            with pytest.raises(GitDiffError, match="not a git repository"):
                get_git_diff("main.go")

    def test_missing_git_raises(self):
        with patch("subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(GitDiffError, match="not installed"):
                get_git_diff()
