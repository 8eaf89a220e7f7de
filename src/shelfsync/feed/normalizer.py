"""Map parsed Goodreads shelf feed entries into flat records."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

# Record field -> feedparser entry key. pubDate is exposed by feedparser as
# `published`; Goodreads' own elements keep their element names.
FIELD_SOURCES: Dict[str, str] = {
    "title": "title",
    "url": "link",
    "author": "author_name",
    "published_year": "book_published",
    "average_rating": "average_rating",
    "user_rating": "user_rating",
    "pubDate": "published",
    "user_read_at": "user_read_at",
    "user_date_added": "user_date_added",
    "user_date_created": "user_date_created",
}

DATE_FIELDS = frozenset(
    {"pubDate", "user_read_at", "user_date_added", "user_date_created"}
)

# feedparser bookkeeping keys that never hold a plain feed value
_SKIPPED_KEYS = {"links", "title_detail", "summary_detail", "guidislink", "id"}


class Record(Mapping[str, str]):
    """An immutable feed record.

    Lookups of unknown or empty fields return None through `get`; absent
    fields are simply not stored.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping[str, Any]] = None) -> None:
        cleaned: Dict[str, str] = {}
        for name, value in (fields or {}).items():
            if value is None:
                continue
            text = str(value).strip()
            if text:
                cleaned[name] = text
        self._fields = MappingProxyType(cleaned)

    def __getitem__(self, name: str) -> str:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Record({dict(self._fields)!r})"

    def as_dict(self) -> Dict[str, str]:
        return dict(self._fields)


def _scalar(value: Any) -> Optional[str]:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def normalize_entry(entry: Mapping[str, Any]) -> Record:
    """Flatten one feedparser entry into a Record.

    Raw scalar fields are kept under their feed names so sort specs can refer
    to any Goodreads element; the canonical fields are layered on top.
    """
    fields: Dict[str, str] = {}
    for key, value in entry.items():
        if key in _SKIPPED_KEYS or key.endswith(("_detail", "_parsed")):
            continue
        text = _scalar(value)
        if text is not None:
            fields[key] = text

    for name, source in FIELD_SOURCES.items():
        text = _scalar(entry.get(source))
        if text is not None:
            fields[name] = text

    return Record(fields)


def normalize_entries(entries: Iterable[Mapping[str, Any]]) -> List[Record]:
    return [normalize_entry(entry) for entry in entries]
