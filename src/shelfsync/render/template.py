"""Per-record line rendering with `$name` placeholders."""

from __future__ import annotations

import math
import re
from typing import Dict, Mapping, Optional

from ..feed.normalizer import Record

PLACEHOLDER_RE = re.compile(r"\$([a-zA-Z_]*)")
STAR = "⭐"
UNRATED = "unrated"
# Goodreads ratings run from 1 to 5 stars
MAX_STARS = 5


def rating_count(rating: Optional[str]) -> int:
    """Whole stars of a rating, clamped to MAX_STARS; 0 when unrated or unreadable."""
    if not rating:
        return 0
    try:
        value = float(rating)
    except ValueError:
        return 0
    if not math.isfinite(value) or value < 1:
        return 0
    return min(int(value), MAX_STARS)


def rating_stars(rating: Optional[str]) -> str:
    """One star per whole point of the user's rating, or "unrated"."""
    count = rating_count(rating)
    if not count:
        return UNRATED
    return STAR * count


def template_variables(record: Record) -> Dict[str, str]:
    variables = record.as_dict()
    rating = record.get("user_rating")
    if rating_count(rating):
        variables["my_rating"] = rating
    variables["my_rating_stars"] = rating_stars(rating)
    return variables


def substitute(template: str, variables: Mapping[str, str]) -> str:
    """Replace every placeholder; unknown or empty ones become ""."""
    return PLACEHOLDER_RE.sub(lambda m: variables.get(m.group(1)) or "", template)


def render_record(template: str, record: Record) -> str:
    return substitute(template, template_variables(record))
