"""Root OpenAPI document owning the components container."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .components import Components


class OpenApiDocument:
    """Top-level OpenAPI object.

    The document creates its :class:`Components` once, at construction time,
    and never replaces it. Everything except the components section is kept
    as plain JSON values.

    Args:
        openapi: OpenAPI version string written to the ``openapi`` property.
        info: ``info`` object (title, version, ...).
        servers: ``servers`` list.
        paths: ``paths`` object.
        security: Global security requirements.
        tags: ``tags`` list.
        external_docs: ``externalDocs`` object.
    """

    def __init__(
        self,
        openapi: str = "3.0.0",
        info: Optional[Dict[str, Any]] = None,
        servers: Optional[List[Dict[str, Any]]] = None,
        paths: Optional[Dict[str, Any]] = None,
        security: Optional[List[Dict[str, Any]]] = None,
        tags: Optional[List[Dict[str, Any]]] = None,
        external_docs: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.openapi = openapi
        self.info: Dict[str, Any] = info if info is not None else {}
        self.servers: List[Dict[str, Any]] = servers or []
        self.paths: Dict[str, Any] = paths or {}
        self.security: List[Dict[str, Any]] = security or []
        self.tags: List[Dict[str, Any]] = tags or []
        self.external_docs: Optional[Dict[str, Any]] = external_docs
        self.extension_data: Dict[str, Any] = {}
        self._components = Components(self)

    @property
    def components(self) -> Components:
        return self._components

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the document; empty optional sections are omitted.

        ``components`` is only emitted when at least one of its collections
        (or its extension data) is non-empty.
        """
        data: Dict[str, Any] = {"openapi": self.openapi, "info": self.info}
        if self.servers:
            data["servers"] = self.servers
        data["paths"] = self.paths
        if not self._components.is_empty():
            data["components"] = self._components.to_dict()
        if self.security:
            data["security"] = self.security
        if self.tags:
            data["tags"] = self.tags
        if self.external_docs:
            data["externalDocs"] = self.external_docs
        data.update(self.extension_data)
        return data

    def __repr__(self) -> str:
        title = self.info.get("title", "")
        return f"OpenApiDocument(openapi={self.openapi!r}, title={title!r}, {self._components!r})"
