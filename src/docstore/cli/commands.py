"""CLI command implementations"""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, List, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.errors import DocumentStoreError
from docstore.core.models import Document, SearchRequest
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.seed import load_seed
from docstore.log import setup_logging


SeedOpt = Annotated[Optional[str], typer.Option("--seed-file", help="YAML file of documents to load")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="Output format: text or json")]
LogOpt = Annotated[Optional[str], typer.Option("--log-level", help="Logging level, e.g. DEBUG")]
DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _loaded_repo(settings: Settings) -> MemoryRepo:
    """Fresh store populated from the configured seed file."""
    repo = MemoryRepo()
    try:
        load_seed(repo, Path(settings.seed_file))
    except ValueError as e:
        _fail(str(e))
    return repo


def _echo_docs(docs: list[Document], output_format: str) -> None:
    if output_format == "json":
        typer.echo(json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False))
        return
    for d in docs:
        created = d.created.isoformat() if d.created else "-"
        author = d.author.id if d.author else "-"
        typer.echo(f"{d.id}  {created}  {author}  {d.title or ''}")


def load_cmd(seed: SeedOpt = None, log_level: LogOpt = None):
    """Load the seed file into a fresh store and report how many documents it holds."""
    settings = _settings(overrides={"seed_file": seed, "log_level": log_level})
    repo = _loaded_repo(settings)
    typer.echo(f"Loaded {len(repo)} document(s) from {settings.seed_file}")


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    seed: SeedOpt = None,
    output_format: FormatOpt = None,
    log_level: LogOpt = None,
    ):
    """Print the document with the given id."""
    settings = _settings(overrides={"seed_file": seed, "output_format": output_format, "log_level": log_level})
    repo = _loaded_repo(settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"Document {doc_id} not found")
    _echo_docs([doc], settings.output_format)


def search_cmd(
    title_prefix: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[List[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_id: Annotated[Optional[List[str]], typer.Option("--author-id", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", formats=DATE_FORMATS, help="Inclusive lower bound (UTC)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", formats=DATE_FORMATS, help="Inclusive upper bound (UTC)")] = None,
    seed: SeedOpt = None,
    output_format: FormatOpt = None,
    log_level: LogOpt = None,
    ):
    """Print documents matching every given filter, in load order."""
    settings = _settings(overrides={"seed_file": seed, "output_format": output_format, "log_level": log_level})
    repo = _loaded_repo(settings)
    request = SearchRequest(
        title_prefixes=set(title_prefix) if title_prefix else None,
        contains_contents=set(contains) if contains else None,
        author_ids=set(author_id) if author_id else None,
        created_from=created_from,
        created_to=created_to,
    )
    try:
        docs = repo.search(request)
    except DocumentStoreError as e:
        _fail("Search failed", e)
    _echo_docs(docs, settings.output_format)
