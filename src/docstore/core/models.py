"""Document, author and search request models"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _assume_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Identity and display name of a document's author"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored unit of content; id and created are assigned on first save"""
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: datetime | None) -> datetime | None:
        return _assume_utc(v)


class SearchRequest(BaseModel):
    """Conjunctive filter over documents; absent or empty fields do not constrain"""
    title_prefixes: set[str] | None = None
    contains_contents: set[str] | None = None
    author_ids: set[str] | None = None
    created_from: datetime | None = None   # inclusive
    created_to: datetime | None = None     # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: datetime | None) -> datetime | None:
        return _assume_utc(v)


def patch_document(document: Document, **changes: Any) -> Document:
    """Return a copy of document with the named fields replaced.

    Use this to merge a fetched document with partial changes before calling
    save, which stores update payloads verbatim.
    """
    unknown = set(changes) - set(Document.model_fields)
    if unknown:
        raise ValueError(f"Unknown document field(s): {', '.join(sorted(unknown))}")
    return Document.model_validate({**document.model_dump(), **changes})
