"""CLI interface for shelfsync - Goodreads shelf to document sync."""

from __future__ import annotations

import difflib
import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import click
from rich.logging import RichHandler

from .config import SyncSettings, build_settings, load_settings_file
from .errors import ShelfSyncError
from .feed import fetch_shelf, load_feed_file, normalize_entries
from .git import commit_document
from .sync import SyncOutcome, SyncResult, render_list, select_records, sync_shelf
from .utils import console


def shelf_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that reads a shelf."""
    options = [
        click.option("--user-id", envvar="INPUT_GOODREADS_USER_ID", help="Goodreads user id"),
        click.option("--shelf", envvar="INPUT_SHELF", help="Shelf to list (default: currently-reading)"),
        click.option("--max-count", type=int, envvar="INPUT_MAX_BOOKS_COUNT", help="Maximum number of books"),
        click.option("--template", envvar="INPUT_TEMPLATE", help="Line template with $placeholders"),
        click.option("--sort-by", envvar="INPUT_SORT_BY_FIELDS", help="Sort fields, e.g. '<user_read_at,title'"),
        click.option(
            "--config",
            "config_path",
            type=click.Path(dir_okay=False, path_type=Path),
            envvar="SHELFSYNC_CONFIG",
            help="YAML settings file with a 'goodreads' section",
        ),
        click.option(
            "--feed-file",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Read the shelf feed from a local RSS file instead of Goodreads",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_settings(config_path: Optional[Path], **values: Any) -> SyncSettings:
    file_values: Dict[str, Any] = {}
    if config_path is not None:
        file_values = load_settings_file(config_path)
    return build_settings(values, file_values)


def load_entries(settings: SyncSettings, feed_file: Optional[Path]) -> List[Any]:
    if feed_file is not None:
        return load_feed_file(feed_file)
    return fetch_shelf(settings.user_id, settings.shelf)


def write_github_output(name: str, value: str) -> None:
    gh_out = os.getenv("GITHUB_OUTPUT")
    if gh_out:
        with open(gh_out, "a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")


def print_diff(result: SyncResult, path: Path) -> None:
    diff = difflib.unified_diff(
        (result.previous or "").splitlines(keepends=True),
        (result.document or "").splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    for line in diff:
        click.echo(line, nl=not line.endswith("\n"))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Sync a Goodreads shelf into a marked region of a document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@cli.command("sync")
@shelf_options
@click.option("--document", "document_path", envvar="INPUT_README_FILE_PATH", help="Document to update (default: README.md)")
@click.option("--tag-name", envvar="INPUT_COMMENT_TAG_NAME", help="Anchor tag name (default: GOODREADS-LIST)")
@click.option(
    "--output-only/--commit",
    "output_only",
    default=None,
    envvar="INPUT_OUTPUT_ONLY",
    help="Only write the document and emit the books; do not commit",
)
@click.option("--dry-run", is_flag=True, help="Show the pending change without writing or committing")
def sync_cmd(
    user_id: Optional[str],
    shelf: Optional[str],
    max_count: Optional[int],
    template: Optional[str],
    sort_by: Optional[str],
    config_path: Optional[Path],
    feed_file: Optional[Path],
    document_path: Optional[str],
    tag_name: Optional[str],
    output_only: Optional[bool],
    dry_run: bool,
) -> None:
    """
    Update the document region between the anchor comments with the shelf.

    The region between `<!-- TAG:START -->` and `<!-- TAG:END -->` is
    replaced with one rendered line per book. The document is only written,
    and committed/pushed, when its content actually changes.
    """
    try:
        settings = resolve_settings(
            config_path,
            user_id=user_id,
            shelf=shelf,
            max_count=max_count,
            template=template,
            sort_by=sort_by,
            document_path=document_path,
            tag_name=tag_name,
            output_only=output_only,
        )
        entries = load_entries(settings, feed_file)
        result = sync_shelf(settings, entries, commit=commit_document, dry_run=dry_run)
    except ShelfSyncError as e:
        console.print(f"❌ {e}", style="bold red", markup=False)
        raise SystemExit(1)

    if result.outcome is SyncOutcome.EMPTY:
        console.print(f"No books found on shelf '{settings.shelf}'.", style="yellow")
        return
    if result.outcome is SyncOutcome.UNCHANGED:
        console.print(f"{settings.document_path} is already up to date.", style="yellow")
        return
    if dry_run:
        console.print(f"DRY RUN - {settings.document_path} would change:", style="bold")
        print_diff(result, settings.document_path)
        return
    if result.outcome is SyncOutcome.WRITTEN:
        books = json.dumps([r.as_dict() for r in result.records], ensure_ascii=False)
        click.echo(books)
        write_github_output("books", books)
        console.print(
            "OUTPUT_ONLY: set `books` output. Document not committed.", style="yellow"
        )


@cli.command("preview")
@shelf_options
def preview_cmd(
    user_id: Optional[str],
    shelf: Optional[str],
    max_count: Optional[int],
    template: Optional[str],
    sort_by: Optional[str],
    config_path: Optional[Path],
    feed_file: Optional[Path],
) -> None:
    """Print the rendered book lines without touching any document."""
    try:
        settings = resolve_settings(
            config_path,
            user_id=user_id,
            shelf=shelf,
            max_count=max_count,
            template=template,
            sort_by=sort_by,
        )
        entries = load_entries(settings, feed_file)
    except ShelfSyncError as e:
        console.print(f"❌ {e}", style="bold red", markup=False)
        raise SystemExit(1)

    records = select_records(
        normalize_entries(entries), settings.sort_spec, settings.max_count
    )
    if records:
        click.echo(render_list(records, settings.template))
