"""Seed-file loading: read documents from YAML and save them into a repo"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def read_seed(path: Path) -> list[Document]:
    """Parse a seed file of the form ``documents: [ {title, content, author, ...}, ... ]``."""
    if not path.exists():
        raise ValueError(f"Seed file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")

    entries = data.get("documents") or []
    if not isinstance(entries, list):
        raise ValueError(f"Invalid {path.name}: 'documents' must be a list")
    try:
        return [Document.model_validate(e) for e in entries]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path.name}: {e}") from e


def load_seed(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every document from path into repo in file order; return the stored documents."""
    saved = [repo.save(doc) for doc in read_seed(path)]
    logger.info("Loaded %d document(s) from %s", len(saved), path)
    return saved
