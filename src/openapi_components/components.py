"""Container for the reusable components of an OpenAPI document.

``Components`` composes one collection per component kind. Five of them are
:class:`~openapi_components.parent_linked.ParentLinkedDict` instances that keep
their values' ``parent`` pointer current; the remaining four are plain dicts
whose values receive no back-reference at this layer.

Owner policy per collection:

    ===================  ===============  =====================
    attribute            JSON name        ``parent`` of values
    ===================  ===============  =====================
    ``schemas``          schemas          the Components
    ``request_bodies``   requestBodies    the document
    ``responses``        responses        the document
    ``parameters``       parameters       the document
    ``examples``         examples         (plain dict)
    ``headers``          headers          the Components
    ``security_schemes`` securitySchemes  (plain dict)
    ``links``            links            (plain dict)
    ``callbacks``        callbacks        (plain dict)
    ===================  ===============  =====================

Schemas and headers resolve relative context against the components section
itself, while request bodies, responses and parameters need the whole
document (for example to reach global security requirements). Headers are
deliberately self-owned even though parameters share their payload type.

Example::

    from openapi_components.document import OpenApiDocument
    from openapi_components.models import Parameter, Schema

    doc = OpenApiDocument()
    doc.components.schemas["Pet"] = Schema(type="object")
    doc.components.parameters["limit"] = Parameter(name="limit", location="query")

    assert doc.components.schemas["Pet"].parent is doc.components
    assert doc.components.parameters["limit"].parent is doc
    doc.components.to_dict()
    # {'schemas': {'Pet': {...}}, 'parameters': {'limit': {...}}}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, MutableMapping, Tuple

from .models import Callback, Example, Link, SecurityScheme
from .parent_linked import ParentLinkedDict

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from .document import OpenApiDocument  # noqa: F401

logger = logging.getLogger(__name__)

# JSON property name -> attribute name, in serialization order.
_KIND_ATTRIBUTES: Dict[str, str] = {
    "schemas": "schemas",
    "requestBodies": "request_bodies",
    "responses": "responses",
    "parameters": "parameters",
    "examples": "examples",
    "headers": "headers",
    "securitySchemes": "security_schemes",
    "links": "links",
    "callbacks": "callbacks",
}

COMPONENT_KINDS: Tuple[str, ...] = tuple(_KIND_ATTRIBUTES)


class Components:
    """Reusable component definitions owned by exactly one document.

    Args:
        document: Root document that owns this container. Fixed at
            construction and used as the owner of document-owned collections.

    Raises:
        ValueError: If ``document`` is ``None``.
    """

    def __init__(self, document: "OpenApiDocument"):
        if document is None:
            raise ValueError("Components must be created by a document")
        self._document = document

        self._schemas = ParentLinkedDict(self)
        self._request_bodies = ParentLinkedDict(document)
        self._responses = ParentLinkedDict(document)
        self._parameters = ParentLinkedDict(document)
        self._headers = ParentLinkedDict(self)

        self.examples: Dict[str, Example] = {}
        self.security_schemes: Dict[str, SecurityScheme] = {}
        self.links: Dict[str, Link] = {}
        self.callbacks: Dict[str, Callback] = {}

        self.extension_data: Dict[str, Any] = {}

    @property
    def document(self) -> "OpenApiDocument":
        return self._document

    @property
    def schemas(self) -> ParentLinkedDict:
        return self._schemas

    @property
    def request_bodies(self) -> ParentLinkedDict:
        return self._request_bodies

    @property
    def responses(self) -> ParentLinkedDict:
        return self._responses

    @property
    def parameters(self) -> ParentLinkedDict:
        return self._parameters

    @property
    def headers(self) -> ParentLinkedDict:
        return self._headers

    def collection(self, kind: str) -> MutableMapping[str, Any]:
        """Return the collection stored under the JSON property ``kind``.

        Raises:
            ValueError: If ``kind`` is not one of :data:`COMPONENT_KINDS`.
        """
        try:
            attribute = _KIND_ATTRIBUTES[kind]
        except KeyError:
            raise ValueError(
                f"Unknown component kind '{kind}'; expected one of: {', '.join(COMPONENT_KINDS)}"
            ) from None
        return getattr(self, attribute)

    def set_component(self, kind: str, name: str, value: Any) -> None:
        """Store ``value`` under ``name``; ``None`` removes the entry.

        Plain collections follow the same null-as-removal rule so callers get
        one write path regardless of the collection flavour.
        """
        collection = self.collection(kind)
        if isinstance(collection, ParentLinkedDict):
            collection.set(name, value)
        elif value is None:
            collection.pop(name, None)
        else:
            collection[name] = value
        logger.debug(f"Set component {kind}/{name} (present={name in collection})")

    def remove_component(self, kind: str, name: str) -> bool:
        """Remove ``name`` from ``kind``; returns False when it was absent."""
        collection = self.collection(kind)
        if isinstance(collection, ParentLinkedDict):
            return collection.remove(name)
        return collection.pop(name, None) is not None

    def _present(self, kind: str) -> List[Tuple[str, Any]]:
        # plain dicts are public and may hold None written directly
        return [
            (name, value)
            for name, value in list(self.collection(kind).items())
            if value is not None
        ]

    def iter_components(self) -> List[Tuple[str, str, Any]]:
        """Snapshot of ``(kind, name, value)`` triples in serialization order."""
        triples: List[Tuple[str, str, Any]] = []
        for kind in COMPONENT_KINDS:
            for name, value in self._present(kind):
                triples.append((kind, name, value))
        return triples

    def owner_of(self, kind: str) -> Any:
        """Back-reference target for ``kind`` (None for plain collections)."""
        collection = self.collection(kind)
        if isinstance(collection, ParentLinkedDict):
            return collection.owner
        return None

    def is_empty(self) -> bool:
        return not self.extension_data and all(
            not self._present(kind) for kind in COMPONENT_KINDS
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the OpenAPI ``components`` object.

        Only non-empty collections are emitted, under their exact OpenAPI
        names and in :data:`COMPONENT_KINDS` order; ``extension_data`` is
        appended last. ``None`` entries left in the plain collections are
        skipped. An all-empty container yields ``{}``.
        """
        data: Dict[str, Any] = {}
        for kind in COMPONENT_KINDS:
            entries = self._present(kind)
            if entries:
                data[kind] = {name: value.to_dict() for name, value in entries}
        data.update(self.extension_data)
        return data

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{kind}={len(self._present(kind))}"
            for kind in COMPONENT_KINDS
            if self._present(kind)
        )
        return f"Components({counts})"
