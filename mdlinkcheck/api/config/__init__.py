"""Run configuration domain."""

from .find_repo_root import find_repo_root
from .get_package_version import get_package_version
from .RunConfig import CONFIG_FILE_NAME, RunConfig

__all__ = [
    "CONFIG_FILE_NAME",
    "RunConfig",
    "find_repo_root",
    "get_package_version",
]
