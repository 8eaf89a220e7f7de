"""Configuration management for shelfsync."""

from .settings import (
    DEFAULT_TEMPLATE,
    Direction,
    SortKey,
    SyncSettings,
    build_settings,
    load_settings_file,
    parse_bool,
    parse_sort_spec,
)

__all__ = [
    "DEFAULT_TEMPLATE",
    "Direction",
    "SortKey",
    "SyncSettings",
    "build_settings",
    "load_settings_file",
    "parse_bool",
    "parse_sort_spec",
]
