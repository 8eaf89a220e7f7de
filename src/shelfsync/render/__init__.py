"""Sorting, templating and region injection of shelf records."""

from .region import inject
from .sorter import compare_values, sort_records, to_timestamp
from .template import rating_stars, render_record, substitute

__all__ = [
    "compare_values",
    "inject",
    "rating_stars",
    "render_record",
    "sort_records",
    "substitute",
    "to_timestamp",
]
