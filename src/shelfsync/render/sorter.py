"""Multi-key record ordering.

Values are compared numerically when both sides are numeric strings and as
case-insensitive, accent-insensitive text otherwise. Date fields are first
converted to epoch milliseconds; a missing or unparseable date becomes the
empty string, which orders before every timestamp.
"""

from __future__ import annotations

import math
import unicodedata
from datetime import datetime, timezone
from functools import cmp_to_key
from typing import List, Optional, Sequence, Tuple

from dateutil import parser as date_parser

from ..config.settings import Direction, SortKey
from ..feed.normalizer import DATE_FIELDS, Record

_DATE_DEFAULT = datetime(1970, 1, 1)


def _is_numeric(value: str) -> bool:
    if not value.strip():
        return False
    try:
        return math.isfinite(float(value))
    except ValueError:
        return False


def to_timestamp(value: Optional[str]) -> str:
    """Epoch milliseconds of a date string, or "" when it cannot be read.

    Naive dates are taken as UTC; missing date parts come from 1970-01-01,
    so "March 2020" is the first of March.
    """
    if not value:
        return ""
    try:
        parsed = date_parser.parse(value, default=_DATE_DEFAULT)
    except (ValueError, OverflowError):
        return ""
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return str(int(parsed.timestamp() * 1000))


def _collation_key(value: str) -> Tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), value


def compare_values(a: str, b: str) -> int:
    """Natural ascending comparison of two field values."""
    if _is_numeric(a) and _is_numeric(b):
        x, y = float(a), float(b)
        return (x > y) - (x < y)
    ka, kb = _collation_key(a), _collation_key(b)
    return (ka > kb) - (ka < kb)


def _sort_value(record: Record, field: str) -> str:
    value = record.get(field)
    if field in DATE_FIELDS:
        return to_timestamp(value)
    return value or ""


def compare_records(a: Record, b: Record, sort_spec: Sequence[SortKey]) -> int:
    for key in sort_spec:
        result = compare_values(_sort_value(a, key.field), _sort_value(b, key.field))
        if result:
            return result if key.direction is Direction.ASCENDING else -result
    return 0


def sort_records(records: Sequence[Record], sort_spec: Sequence[SortKey]) -> List[Record]:
    """Return a new list ordered by `sort_spec`.

    The sort is stable, so records tied on every key keep their input order.
    """
    if not sort_spec:
        return list(records)
    return sorted(records, key=cmp_to_key(lambda a, b: compare_records(a, b, sort_spec)))
