"""Change detection and the sync pipeline."""

from .gate import DocumentChange, detect_change
from .pipeline import (
    SyncOutcome,
    SyncResult,
    build_document,
    render_list,
    select_records,
    sync_shelf,
)

__all__ = [
    "DocumentChange",
    "SyncOutcome",
    "SyncResult",
    "build_document",
    "detect_change",
    "render_list",
    "select_records",
    "sync_shelf",
]
