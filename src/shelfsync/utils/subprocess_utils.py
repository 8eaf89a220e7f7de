"""Subprocess utilities for running commands."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List, Optional


def run(command: List[str], cwd: Optional[Path] = None) -> None:
    """Run a command and stream output to stdout.

    Raises CalledProcessError when the command exits non-zero.
    """
    process = subprocess.Popen(
        command,
        cwd=str(cwd) if cwd else None,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )
    assert process.stdout is not None
    for line in process.stdout:
        sys.stdout.write(line)
    code = process.wait()
    if code:
        raise subprocess.CalledProcessError(code, command)


def git_output(args: List[str], cwd: Optional[Path] = None) -> str:
    """Run a git command and return its output."""
    return subprocess.check_output(
        ["git", *args], cwd=str(cwd) if cwd else None, text=True
    ).strip()
