"""Exceptions raised by the document store"""


class DocumentStoreError(Exception):
    """Base class for document store failures."""


class InvalidArgumentError(DocumentStoreError, ValueError):
    """An operation was called with an argument it cannot act on."""


class MissingFieldError(DocumentStoreError, ValueError):
    """A stored document lacks a field that an active search criterion reads."""

    def __init__(self, doc_id: str | None, field: str):
        self.doc_id = doc_id
        self.field = field
        super().__init__(f"Document {doc_id!r} has no {field!r}; cannot apply filter")
