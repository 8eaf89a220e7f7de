from __future__ import annotations

from shelfsync.feed import Record
from shelfsync.sync import DocumentChange, detect_change


def test_identical_text_is_no_change() -> None:
    assert detect_change("same\n", "same\n", [Record({"title": "x"})]) is None


def test_any_difference_is_a_change() -> None:
    records = [Record({"title": "x"})]
    change = detect_change("same\n", "same", records)
    assert change == DocumentChange(document="same", records=records)


def test_whitespace_only_difference_counts() -> None:
    assert detect_change("a  b", "a b", []) is not None
