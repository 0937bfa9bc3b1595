"""Tests for mdlinkcheck/api/config/find_repo_root.py."""

import subprocess
from pathlib import Path
from unittest.mock import patch

from mdlinkcheck.api.config.find_repo_root import find_repo_root


def test_returns_git_toplevel():
    with patch("subprocess.check_output", return_value=b"/work/repo\n") as mock_run:
        assert find_repo_root(Path("/work/repo/docs")) == Path("/work/repo")

    args, kwargs = mock_run.call_args
    assert args[0] == ["git", "rev-parse", "--show-toplevel"]
    assert kwargs["cwd"] == str(Path("/work/repo/docs"))


def test_outside_work_tree():
    error = subprocess.CalledProcessError(128, ["git", "rev-parse"])
    with patch("subprocess.check_output", side_effect=error):
        assert find_repo_root() is None


def test_git_not_installed():
    with patch("subprocess.check_output", side_effect=FileNotFoundError("git")):
        assert find_repo_root() is None


def test_empty_output():
    with patch("subprocess.check_output", return_value=b"\n"):
        assert find_repo_root() is None
