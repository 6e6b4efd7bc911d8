import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from docstore.core.errors import InvalidArgumentError
from docstore.core.filters import matches
from docstore.core.models import Document, SearchRequest, patch_document
from docstore.core.utils.ids import new_document_id, utcnow
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Ordered in-process document store. Not safe for concurrent use.

    Documents are copied on the way in and out, so callers never hold a
    reference to a stored entry.
    """
    id_factory: Callable[[], str] = new_document_id
    clock: Callable[[], datetime] = utcnow
    _docs: list[Document] = field(default_factory=list)

    def save(self, doc: Document) -> Document:
        if doc.id:
            doc = doc.model_copy(deep=True)
        else:
            doc = patch_document(doc, id=self.id_factory(), created=self.clock())
            logger.debug("Assigned id %s to new document", doc.id)

        before = len(self._docs)
        self._docs = [d for d in self._docs if d.id != doc.id]
        self._docs.append(doc)
        logger.debug("%s document %s", "Replaced" if len(self._docs) == before else "Inserted", doc.id)
        return doc.model_copy(deep=True)

    def find_by_id(self, doc_id: str) -> Document | None:
        if doc_id is None:
            raise InvalidArgumentError("find_by_id requires a document id, got None")
        found = next((d for d in self._docs if d.id == doc_id), None)
        return found.model_copy(deep=True) if found else None

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        docs = self._docs if request is None else [d for d in self._docs if matches(d, request)]
        return [d.model_copy(deep=True) for d in docs]

    def all(self) -> list[Document]:
        return [d.model_copy(deep=True) for d in self._docs]

    def __len__(self) -> int:
        return len(self._docs)
