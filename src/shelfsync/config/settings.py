"""Sync settings.

Settings come from three places, highest priority first:
- explicit command line options (which also read `INPUT_<NAME>` environment
  variables, the way GitHub Actions passes inputs),
- the `goodreads:` section of an optional YAML settings file,
- the defaults below.

Everything is resolved once into an immutable `SyncSettings` value that is
passed down to the pipeline.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from ..errors import ConfigurationError

DEFAULT_SHELF = "currently-reading"
DEFAULT_MAX_COUNT = 10
DEFAULT_DOCUMENT_PATH = "README.md"
DEFAULT_TEMPLATE = "- [$title]($url) by $author (⭐️$average_rating)"
DEFAULT_TAG_NAME = "GOODREADS-LIST"

SETTINGS_SECTION = "goodreads"
SETTINGS_KEYS = (
    "user_id",
    "shelf",
    "max_count",
    "document_path",
    "output_only",
    "template",
    "sort_by",
    "tag_name",
)

_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off", ""}


class Direction(enum.Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class SortKey:
    """One (field, direction) entry of a sort spec."""

    field: str
    direction: Direction = Direction.DESCENDING


def parse_sort_spec(text: Optional[str]) -> Tuple[SortKey, ...]:
    """Parse `<field,>field,field` into sort keys.

    A token containing `<` sorts ascending, anything else descending. The `<`
    and `>` characters are stripped from the field name.
    """
    if not text:
        return ()
    keys = []
    for token in text.split(","):
        token = token.strip()
        name = token.replace("<", "").replace(">", "").strip()
        if not name:
            continue
        direction = Direction.ASCENDING if "<" in token else Direction.DESCENDING
        keys.append(SortKey(field=name, direction=direction))
    return tuple(keys)


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Expected a boolean value, got {value!r}")


@dataclass(frozen=True)
class SyncSettings:
    user_id: str
    shelf: str = DEFAULT_SHELF
    max_count: int = DEFAULT_MAX_COUNT
    document_path: Path = Path(DEFAULT_DOCUMENT_PATH)
    output_only: bool = False
    template: str = DEFAULT_TEMPLATE
    sort_spec: Tuple[SortKey, ...] = field(default_factory=tuple)
    tag_name: str = DEFAULT_TAG_NAME

    @property
    def start_marker(self) -> str:
        return f"<!-- {self.tag_name}:START -->"

    @property
    def end_marker(self) -> str:
        return f"<!-- {self.tag_name}:END -->"


def load_settings_file(path: Path) -> Dict[str, Any]:
    """Read the `goodreads` section of a YAML settings file."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a mapping")
    section = data.get(SETTINGS_SECTION, {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'{SETTINGS_SECTION}' in {path} must be a mapping of settings"
        )
    unknown = sorted(set(section) - set(SETTINGS_KEYS))
    if unknown:
        raise ConfigurationError(
            f"Unknown settings in {path}: {', '.join(str(k) for k in unknown)}"
        )
    return dict(section)


def build_settings(
    values: Dict[str, Any], file_values: Optional[Dict[str, Any]] = None
) -> SyncSettings:
    """Merge option values over file values and validate the result.

    `None` in `values` means "not given" and falls back to the file value,
    then to the default.
    """
    merged: Dict[str, Any] = dict(file_values or {})
    for key, value in values.items():
        if value is not None:
            merged[key] = value

    user_id = str(merged.get("user_id") or "").strip()
    if not user_id:
        raise ConfigurationError(
            "A Goodreads user id is required (--user-id or INPUT_GOODREADS_USER_ID)"
        )

    try:
        max_count = int(merged.get("max_count", DEFAULT_MAX_COUNT))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"max_count must be an integer, got {merged.get('max_count')!r}"
        ) from e
    if max_count < 0:
        raise ConfigurationError(f"max_count must not be negative, got {max_count}")

    return SyncSettings(
        user_id=user_id,
        shelf=str(merged.get("shelf") or DEFAULT_SHELF),
        max_count=max_count,
        document_path=Path(merged.get("document_path") or DEFAULT_DOCUMENT_PATH),
        output_only=parse_bool(merged.get("output_only", False)),
        template=str(merged.get("template") or DEFAULT_TEMPLATE),
        sort_spec=parse_sort_spec(merged.get("sort_by")),
        tag_name=str(merged.get("tag_name") or DEFAULT_TAG_NAME),
    )
