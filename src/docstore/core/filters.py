"""Search criteria: one predicate per SearchRequest field, combined with AND"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from docstore.core.errors import MissingFieldError
from docstore.core.models import Document, SearchRequest


def _require(doc: Document, field: str) -> Any:
    """Return doc.<field>, raising MissingFieldError when it is unset."""
    value = getattr(doc, field)
    if value is None:
        raise MissingFieldError(doc.id, field)
    return value


def title_matches(doc: Document, prefixes: set[str]) -> bool:
    title = _require(doc, "title")
    return any(title.startswith(p) for p in prefixes)


def content_matches(doc: Document, needles: set[str]) -> bool:
    content = _require(doc, "content")
    return any(n in content for n in needles)


def author_matches(doc: Document, author_ids: set[str]) -> bool:
    return _require(doc, "author").id in author_ids


def created_within(doc: Document, start: datetime | None, end: datetime | None) -> bool:
    """Inclusive on both ends; a None bound is open."""
    created = _require(doc, "created")
    if start is not None and created < start:
        return False
    if end is not None and created > end:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """True when doc passes every active criterion of request."""
    if request.title_prefixes and not title_matches(doc, request.title_prefixes):
        return False
    if request.contains_contents and not content_matches(doc, request.contains_contents):
        return False
    if request.author_ids and not author_matches(doc, request.author_ids):
        return False
    if request.created_from is not None or request.created_to is not None:
        return created_within(doc, request.created_from, request.created_to)
    return True
