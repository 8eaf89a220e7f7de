"""One sync run: normalize, sort, truncate, render, inject, gate, persist.

The steps run strictly in order. The full document is built before anything
is written, so a failure never leaves a partial document behind.
"""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from ..config.settings import SortKey, SyncSettings
from ..errors import ConfigurationError, PersistenceError
from ..feed.normalizer import Record, normalize_entries
from ..git import commit_document
from ..render import inject, render_record, sort_records
from ..utils.console import console
from .gate import detect_change

logger = logging.getLogger(__name__)


class SyncOutcome(enum.Enum):
    EMPTY = "empty"
    UNCHANGED = "unchanged"
    WRITTEN = "written"
    COMMITTED = "committed"


@dataclass
class SyncResult:
    outcome: SyncOutcome
    records: List[Record] = field(default_factory=list)
    previous: Optional[str] = None
    document: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.outcome in (SyncOutcome.WRITTEN, SyncOutcome.COMMITTED)


def select_records(
    records: Sequence[Record], sort_spec: Sequence[SortKey], max_count: int
) -> List[Record]:
    return sort_records(records, sort_spec)[:max_count]


def render_list(records: Sequence[Record], template: str) -> str:
    return "\n".join(render_record(template, record) for record in records)


def build_document(document: str, records: Sequence[Record], settings: SyncSettings) -> str:
    """Return `document` with its anchored region holding `records` rendered."""
    return inject(
        document,
        render_list(records, settings.template),
        settings.start_marker,
        settings.end_marker,
    )


def read_document(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read document {path}: {e}") from e


def write_document(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Cannot write document {path}: {e}") from e


def log_records(records: Sequence[Record]) -> None:
    console.print("New books found for update", style="bold")
    for record in records:
        console.print(
            json.dumps(record.as_dict(), ensure_ascii=False),
            markup=False,
            emoji=False,
            highlight=False,
        )


def sync_shelf(
    settings: SyncSettings,
    entries: Sequence[Any],
    *,
    commit: Callable[[Path], None] = commit_document,
    dry_run: bool = False,
) -> SyncResult:
    """Sync parsed feed `entries` into the configured document.

    With `dry_run` the result reports what would change but nothing is
    written or committed.
    """
    if not entries:
        logger.debug("Shelf '%s' has no items; nothing to do", settings.shelf)
        return SyncResult(outcome=SyncOutcome.EMPTY)

    records = select_records(
        normalize_entries(entries), settings.sort_spec, settings.max_count
    )
    logger.debug("Selected %d of %d records", len(records), len(entries))

    path = settings.document_path
    original = read_document(path)
    updated = build_document(original, records, settings)

    change = detect_change(original, updated, records)
    if change is None:
        return SyncResult(
            outcome=SyncOutcome.UNCHANGED,
            records=records,
            previous=original,
            document=original,
        )

    if dry_run:
        outcome = SyncOutcome.WRITTEN if settings.output_only else SyncOutcome.COMMITTED
        return SyncResult(outcome, change.records, original, change.document)

    console.print(f"Writing to {path}")
    log_records(change.records)
    write_document(path, change.document)

    if settings.output_only:
        return SyncResult(SyncOutcome.WRITTEN, change.records, original, change.document)

    commit(path)
    return SyncResult(SyncOutcome.COMMITTED, change.records, original, change.document)
