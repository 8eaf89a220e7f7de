"""Commit and push the synced document."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

from ..errors import PersistenceError
from ..utils import git_output, run
from ..utils.console import console

COMMIT_MESSAGE = "Synced and updated with user's goodreads book lists"
COMMITTER_USERNAME = "goodreads-books-bot"
COMMITTER_EMAIL = "goodreads-books-bot@example.com"


def _git(args: List[str]) -> None:
    command = ["git", *args]
    try:
        run(command)
    except (subprocess.CalledProcessError, OSError) as e:
        raise PersistenceError(f"Command failed: {' '.join(command)} ({e})") from e


def commit_document(path: Path) -> None:
    """Stage, commit and push `path` under the bot identity."""
    _git(["config", "--global", "user.email", COMMITTER_EMAIL])
    _git(["config", "--global", "user.name", COMMITTER_USERNAME])
    _git(["add", str(path)])
    _git(["commit", "-m", COMMIT_MESSAGE])
    try:
        sha = git_output(["rev-parse", "--short", "HEAD"])
    except (subprocess.CalledProcessError, OSError):
        sha = "HEAD"
    _git(["push"])
    console.print(
        f"✓ {path} updated successfully in the upstream repository ({sha})",
        style="green",
    )
