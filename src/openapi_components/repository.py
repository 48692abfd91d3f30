"""Shared in-memory document store used by the REST and GraphQL surfaces."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from .config import ServerConfig
from .document import OpenApiDocument
from .models import COMPONENT_TYPES
from .serialization import DocumentSerializer

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Hold one :class:`OpenApiDocument` and expose component edits.

    The repository is built once per process (see :func:`get_repository`).
    FastAPI serves sync endpoints from a thread pool while GraphQL mutations
    run on the event loop, so every write goes through one lock.

    Args:
        document_path: Optional JSON document to load. When missing or
            unreadable an empty document is used and ``metadata["source"]``
            is set to ``"empty"``.
    """

    def __init__(self, document_path: Optional[Path] = None) -> None:
        self.serializer = DocumentSerializer()
        self.document = OpenApiDocument(info={"title": "Untitled", "version": "0.0.0"})
        self._lock = threading.Lock()
        source = "empty"
        if document_path is not None:
            path = Path(document_path)
            if path.exists():
                self.document = self.serializer.load_document(path)
                source = str(path)
            else:
                logger.warning(f"Document {path} not found, starting with an empty document")
        self.metadata: Dict[str, Any] = {
            "source": source,
            "loaded_at": datetime.now().isoformat(),
        }

    def replace_document(self, data: Dict[str, Any]) -> OpenApiDocument:
        """Replace the held document with one parsed from ``data``."""
        document = self.serializer.dict_to_document(data)
        with self._lock:
            self.document = document
            self.metadata.update(
                {"source": "upload", "loaded_at": datetime.now().isoformat()}
            )
        return document

    def set_component(
        self, kind: str, name: str, value: Optional[Dict[str, Any]]
    ) -> Optional[Any]:
        """Store the dictionary form of a component; ``None`` removes it.

        Returns:
            The stored payload object, or None when the entry was removed.

        Raises:
            ValueError: For an unknown kind or a malformed payload.
        """
        with self._lock:
            components = self.document.components
            components.collection(kind)
            payload = None if value is None else COMPONENT_TYPES[kind].from_dict(value)
            components.set_component(kind, name, payload)
        return payload

    def remove_component(self, kind: str, name: str) -> bool:
        """Remove one entry; False when it was already absent."""
        with self._lock:
            return self.document.components.remove_component(kind, name)

    def owner_label(self, kind: str) -> Optional[str]:
        """Describe the back-reference target of ``kind`` for API responses."""
        owner = self.document.components.owner_of(kind)
        if owner is None:
            return None
        if owner is self.document:
            return "document"
        return "components"


@lru_cache(maxsize=1)
def get_repository() -> DocumentRepository:
    config = ServerConfig.from_env()
    return DocumentRepository(config.document_path)
