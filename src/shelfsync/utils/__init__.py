"""Utility modules for shelfsync."""

from .console import console
from .subprocess_utils import git_output, run

__all__ = ["console", "git_output", "run"]
