"""Git operations for shelfsync."""

from .operations import COMMIT_MESSAGE, commit_document

__all__ = ["COMMIT_MESSAGE", "commit_document"]
