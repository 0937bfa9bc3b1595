"""Locate the enclosing git work tree."""

import subprocess
from pathlib import Path


def find_repo_root(cwd: Path | None = None) -> Path | None:
    """Return the top-level directory of the git work tree containing ``cwd``.

    Returns None when git is not installed or ``cwd`` is not inside a work tree.
    """
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--show-toplevel"],
            stderr=subprocess.DEVNULL,
            cwd=str(cwd) if cwd is not None else None,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    top = out.decode("utf-8", errors="ignore").strip()
    return Path(top) if top else None
