"""Goodreads shelf RSS retrieval."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

import feedparser
import requests

from ..errors import UpstreamError

logger = logging.getLogger(__name__)

GOODREADS_BASE = "https://www.goodreads.com"
DEFAULT_TIMEOUT = 30.0


def shelf_url(user_id: str) -> str:
    return f"{GOODREADS_BASE}/review/list_rss/{user_id}"


def parse_feed(content: bytes | str, source: str) -> List[Any]:
    """Parse an RSS document and return its entries.

    A document that is not a feed at all raises UpstreamError; a feed with no
    items returns an empty list.
    """
    parsed = feedparser.parse(content)
    if parsed.get("bozo") and not parsed.get("version") and not parsed.entries:
        reason = parsed.get("bozo_exception")
        raise UpstreamError(f"Could not parse shelf feed from {source}: {reason}")
    logger.debug("Parsed %d entries from %s", len(parsed.entries), source)
    return list(parsed.entries)


def fetch_shelf(
    user_id: str,
    shelf: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Any]:
    """Fetch the RSS listing of one user's shelf."""
    if session is None:
        with requests.Session() as own_session:
            return fetch_shelf(user_id, shelf, own_session, timeout)

    url = shelf_url(user_id)
    logger.debug("Fetching %s?shelf=%s", url, shelf)
    try:
        resp = session.get(url, params={"shelf": shelf}, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise UpstreamError(
            f"Failed to fetch shelf '{shelf}' for user {user_id}: {e}"
        ) from e
    return parse_feed(resp.content, url)


def load_feed_file(path: Path) -> List[Any]:
    """Parse a shelf feed saved on disk."""
    try:
        content = path.read_bytes()
    except OSError as e:
        raise UpstreamError(f"Cannot read feed file {path}: {e}") from e
    return parse_feed(content, str(path))
