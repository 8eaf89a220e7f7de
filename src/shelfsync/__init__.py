"""shelfsync - keep a Goodreads shelf listing in sync inside a document."""

__version__ = "0.1.0"
