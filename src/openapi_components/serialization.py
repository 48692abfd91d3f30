"""OpenAPI document serialization utilities.

This module supplies helpers for converting between:
* In-memory :class:`OpenApiDocument` / :class:`Components` object models
* Plain dictionaries suitable for JSON encoding or API payloads
* JSON files on disk

Use cases:
        1. Load an existing API description and edit its reusable components
        2. Serve the components section over REST / GraphQL
        3. Write the edited document back to disk

Example round-trip:
        from pathlib import Path
        from openapi_components.serialization import DocumentSerializer

        serializer = DocumentSerializer()
        doc = serializer.load_document(Path("openapi.json"))
        doc.components.schemas["Legacy"] = None     # drop a schema
        serializer.save_document(doc, Path("openapi.json"))

Design notes:
* Every ``components`` entry is stored through
    :meth:`Components.set_component`, so a JSON ``null`` entry is dropped on
    load exactly as a null assignment would be.
* Properties of ``components`` that are not component kinds are preserved
    as the container's ``extension_data``.
* Only JSON is supported; YAML documents can be converted upstream.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from .components import COMPONENT_KINDS, Components
from .document import OpenApiDocument
from .models import COMPONENT_TYPES

logger = logging.getLogger(__name__)

# Top-level document properties with a dedicated attribute.
_DOCUMENT_FIELDS = {
    "openapi": "openapi",
    "info": "info",
    "servers": "servers",
    "paths": "paths",
    "security": "security",
    "tags": "tags",
    "externalDocs": "external_docs",
}

# JSON shape each top-level property must have.
_FIELD_SHAPES = {
    "openapi": (str, "a string"),
    "info": (dict, "an object"),
    "servers": (list, "an array"),
    "paths": (dict, "an object"),
    "security": (list, "an array"),
    "tags": (list, "an array"),
    "externalDocs": (dict, "an object"),
}


class DocumentSerializer:
    """Serialize / deserialize OpenAPI documents and their components.

    Args:
        indent: Indentation used by :meth:`to_json` and :meth:`save_document`.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def document_to_dict(self, document: OpenApiDocument) -> Dict[str, Any]:
        """Serialize a document into an API-friendly dictionary structure."""
        return document.to_dict()

    def dict_to_document(self, data: Dict[str, Any]) -> OpenApiDocument:
        """Deserialize a document dictionary back into an object model.

        Raises:
            ValueError: If ``data`` (or its ``components``) is not an object,
                or a top-level property such as ``info`` has the wrong shape.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"OpenAPI document must be a JSON object, got {type(data).__name__}"
            )
        for key, (expected, label) in _FIELD_SHAPES.items():
            if key in data and not isinstance(data[key], expected):
                raise ValueError(
                    f"{key} must be {label}, got {type(data[key]).__name__}"
                )
        document = OpenApiDocument(openapi=data.get("openapi", "3.0.0"))
        for key, value in data.items():
            if key == "components":
                continue
            if key in _DOCUMENT_FIELDS:
                setattr(document, _DOCUMENT_FIELDS[key], value)
            else:
                document.extension_data[key] = value

        components = data.get("components")
        if components is not None:
            self.populate_components(document.components, components)
        return document

    def populate_components(
        self, components: Components, data: Dict[str, Any]
    ) -> Components:
        """Load a ``components`` object into an existing container.

        Args:
            components: Target container (its collections are updated in place).
            data: ``components`` object keyed by OpenAPI property name.

        Returns:
            The updated container.

        Raises:
            ValueError: If ``data`` or one of its collections is not an object.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"components must be a JSON object, got {type(data).__name__}"
            )
        for kind, entries in data.items():
            if kind not in COMPONENT_KINDS:
                components.extension_data[kind] = entries
                continue
            if entries is None:
                continue
            if not isinstance(entries, dict):
                raise ValueError(
                    f"components.{kind} must be a JSON object, got {type(entries).__name__}"
                )
            payload_type = COMPONENT_TYPES[kind]
            for name, entry in entries.items():
                value = None if entry is None else payload_type.from_dict(entry)
                components.set_component(kind, name, value)
        logger.debug(f"Loaded components: {components!r}")
        return components

    def to_json(self, document: OpenApiDocument) -> str:
        return json.dumps(self.document_to_dict(document), indent=self.indent)

    def from_json(self, text: str) -> OpenApiDocument:
        return self.dict_to_document(json.loads(text))

    def save_document(self, document: OpenApiDocument, file_path: Union[str, Path]) -> None:
        """Persist a document as formatted JSON."""
        path = Path(file_path)
        path.write_text(self.to_json(document) + "\n", encoding="utf-8")
        logger.info(f"Saved OpenAPI document to {path}")

    def load_document(self, file_path: Union[str, Path]) -> OpenApiDocument:
        """Load a JSON OpenAPI document from disk."""
        path = Path(file_path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        document = self.dict_to_document(data)
        logger.info(f"Loaded OpenAPI document from {path}")
        return document
