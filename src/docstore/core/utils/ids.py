"""Identifier and clock collaborators for the document store"""

from datetime import datetime, timezone
from uuid import uuid4


def new_document_id() -> str:
    """Return a random 128-bit identifier as a UUID4 string."""
    return str(uuid4())


def utcnow() -> datetime:
    """Return the current wall-clock time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
