from __future__ import annotations

import pytest

from shelfsync.errors import ConfigurationError
from shelfsync.render import inject

START = "<!-- GOODREADS-LIST:START -->"
END = "<!-- GOODREADS-LIST:END -->"


def test_replaces_region_between_markers() -> None:
    doc = f"intro\n{START}\nold line\n{END}\noutro\n"
    out = inject(doc, "- a\n- b", START, END)
    assert out == f"intro\n{START}\n- a\n- b\n{END}\noutro\n"


def test_markers_on_one_line() -> None:
    doc = f"{START}{END}"
    assert inject(doc, "x", START, END) == f"{START}\nx\n{END}"


def test_empty_content() -> None:
    doc = f"{START}\nstale\n{END}"
    assert inject(doc, "", START, END) == f"{START}\n\n{END}"


def test_only_first_markers_are_used() -> None:
    doc = f"{START}\none\n{END}\n{START}\ntwo\n{END}\n"
    out = inject(doc, "new", START, END)
    assert out == f"{START}\nnew\n{END}\n{START}\ntwo\n{END}\n"


def test_reinjecting_is_stable() -> None:
    doc = f"a\n{START}\n{END}\nb"
    once = inject(doc, "- x", START, END)
    assert inject(once, "- x", START, END) == once


@pytest.mark.parametrize(
    "doc",
    [
        "no markers at all",
        f"{START}\nonly start",
        f"only end\n{END}",
        f"{START.lower()}\n{END}",
    ],
)
def test_missing_marker_raises(doc: str) -> None:
    with pytest.raises(ConfigurationError, match="Cannot find the required comment tags"):
        inject(doc, "x", START, END)


def test_end_before_start_raises() -> None:
    with pytest.raises(ConfigurationError, match="must come after"):
        inject(f"{END}\n{START}", "x", START, END)
