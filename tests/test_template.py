from __future__ import annotations

from shelfsync.config import DEFAULT_TEMPLATE
from shelfsync.feed import Record
from shelfsync.render import rating_stars, render_record, substitute


def full_record() -> Record:
    return Record(
        {
            "title": "Dune",
            "url": "https://www.goodreads.com/book/dune",
            "author": "Frank Herbert",
            "published_year": "1965",
            "average_rating": "4.27",
            "user_rating": "4",
        }
    )


def test_default_template() -> None:
    assert render_record(DEFAULT_TEMPLATE, full_record()) == (
        "- [Dune](https://www.goodreads.com/book/dune) by Frank Herbert (⭐️4.27)"
    )


def test_every_placeholder() -> None:
    template = "$title|$url|$author|$published_year|$average_rating|$my_rating|$my_rating_stars"
    assert render_record(template, full_record()) == (
        "Dune|https://www.goodreads.com/book/dune|Frank Herbert|1965|4.27|4|⭐⭐⭐⭐"
    )


def test_missing_fields_render_empty() -> None:
    record = Record({"title": "Untitled draft", "author": ""})
    assert render_record("$title by $author ($published_year)", record) == (
        "Untitled draft by  ()"
    )


def test_unknown_placeholder_renders_empty() -> None:
    assert render_record("[$nope] $title", full_record()) == "[] Dune"


def test_lone_dollar_is_dropped() -> None:
    assert substitute("cost: $5", {}) == "cost: 5"


def test_unrated_book() -> None:
    record = Record({"title": "Hyperion"})
    assert render_record("$title $my_rating_stars", record) == "Hyperion unrated"
    assert render_record("$title $my_rating_stars", Record({"title": "Z", "user_rating": "0"})) == "Z unrated"


def test_rating_stars() -> None:
    assert rating_stars("4") == "⭐⭐⭐⭐"
    assert rating_stars("3.9") == "⭐⭐⭐"
    assert rating_stars(None) == "unrated"
    assert rating_stars("n/a") == "unrated"
    assert rating_stars("0") == "unrated"
    assert rating_stars("0.5") == "unrated"
    assert rating_stars("-3") == "unrated"
    # non-finite ratings never raise
    assert rating_stars("inf") == "unrated"
    assert rating_stars("Infinity") == "unrated"
    assert rating_stars("nan") == "unrated"
    # huge ratings are capped at five stars
    assert rating_stars("1e9") == "⭐⭐⭐⭐⭐"


def test_my_rating_empty_when_unrated() -> None:
    template = "$title [$my_rating] $my_rating_stars"
    assert render_record(template, Record({"title": "A", "user_rating": "0"})) == "A [] unrated"
    assert render_record(template, Record({"title": "B", "user_rating": "n/a"})) == "B [] unrated"
    assert render_record(template, Record({"title": "C", "user_rating": "3"})) == "C [3] ⭐⭐⭐"


def test_infinite_rating_renders_unrated() -> None:
    record = Record({"title": "Endless", "user_rating": "Infinity"})
    assert render_record("$title $my_rating_stars$my_rating", record) == "Endless unrated"


def test_render_is_pure() -> None:
    record = full_record()
    first = render_record(DEFAULT_TEMPLATE, record)
    assert render_record(DEFAULT_TEMPLATE, record) == first
    assert record.get("my_rating_stars") is None
