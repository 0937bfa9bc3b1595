"""API module for mdlinkcheck.

Functions defined here are the single source of truth for the CLI and for
library callers embedding the checker (for example in other pre-commit hooks).
"""

__all__ = []
