"""Exact-equality gate between the current and the regenerated document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..feed.normalizer import Record


@dataclass(frozen=True)
class DocumentChange:
    document: str
    records: List[Record]


def detect_change(
    original: str, updated: str, records: Sequence[Record]
) -> Optional[DocumentChange]:
    """Return a DocumentChange when the texts differ in any character, else None."""
    if original == updated:
        return None
    return DocumentChange(document=updated, records=list(records))
