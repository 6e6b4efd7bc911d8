"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import MemoryRepo


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: each call returns T0 + n seconds."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.start = start
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture(name="clock")
def clock_fixture():
    return StepClock()


@pytest.fixture(name="repo")
def repo_fixture(clock):
    """Empty store with sequential ids (doc-1, doc-2, ...) and a stepping clock."""
    ids = count(1)
    return MemoryRepo(id_factory=lambda: f"doc-{next(ids)}", clock=clock)


@pytest.fixture(name="ann")
def ann_fixture():
    return Author(id="a1", name="Ann")


@pytest.fixture(name="bob")
def bob_fixture():
    return Author(id="a2", name="Bob")


@pytest.fixture(name="make_doc")
def make_doc_fixture(ann):
    """Factory for unsaved documents with sensible defaults."""
    def _make(title: str = "Title", content: str = "content", author: Author = None, **kw) -> Document:
        return Document(title=title, content=content, author=author or ann, **kw)
    return _make
