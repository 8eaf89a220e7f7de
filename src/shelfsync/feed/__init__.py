"""Shelf feed retrieval and normalization."""

from .client import fetch_shelf, load_feed_file, parse_feed, shelf_url
from .normalizer import DATE_FIELDS, Record, normalize_entries, normalize_entry

__all__ = [
    "DATE_FIELDS",
    "Record",
    "fetch_shelf",
    "load_feed_file",
    "normalize_entries",
    "normalize_entry",
    "parse_feed",
    "shelf_url",
]
