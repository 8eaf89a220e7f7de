"""Shared rich console."""

from __future__ import annotations

from rich.console import Console

# paths and JSON records stay on one line
console = Console(soft_wrap=True)
