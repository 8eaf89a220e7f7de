"""Replace the text between a document's anchor markers."""

from __future__ import annotations

from ..errors import ConfigurationError


def inject(document: str, content: str, start_marker: str, end_marker: str) -> str:
    """Return `document` with the region between the markers replaced.

    Only the first occurrence of each marker counts. The markers themselves
    are kept; the region becomes a newline, `content`, and a newline.
    """
    start = document.find(start_marker)
    end = document.find(end_marker)
    if start == -1 or end == -1:
        raise ConfigurationError(
            f"Cannot find the required comment tags ({start_marker} and "
            f"{end_marker}) to inject book titles."
        )
    region_start = start + len(start_marker)
    if end < region_start:
        raise ConfigurationError(
            f"{end_marker} must come after {start_marker} in the document."
        )
    return document[:region_start] + "\n" + content + "\n" + document[end:]
