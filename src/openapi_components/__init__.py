"""In-memory object model for the reusable components of OpenAPI documents.

Overview
--------
The package models the ``components`` section of an OpenAPI document as a set
of named collections whose entries always know their owning context:

* ``parent_linked`` – :class:`ParentLinkedDict`, the ordered mapping that sets
    each value's ``parent`` on every mutation and treats ``None`` as removal.
* ``components`` – :class:`Components`, nine collections (five parent-linked,
    four plain) plus the omit-empty serialization contract.
* ``document`` – :class:`OpenApiDocument`, the root that owns one container.
* ``serialization`` – JSON conversion and file persistence.
* ``app`` / ``graphql_schema`` – REST and GraphQL editing surfaces (FastAPI,
    Strawberry).
* ``cli`` – ``openapi-components`` command line tool.

Minimal quick start
-------------------
>>> from openapi_components import OpenApiDocument, Schema
>>> doc = OpenApiDocument(info={"title": "Pets", "version": "1.0"})
>>> doc.components.schemas["Pet"] = Schema(type="object")
>>> doc.components.schemas["Pet"].parent is doc.components
True
>>> doc.components.schemas["Pet"] = None
>>> doc.components.to_dict()
{}

FastAPI application instance (for ASGI servers like uvicorn):
>>> from openapi_components.app import app  # noqa: F401

Public surface
--------------
Only the object model is exported at the package level; the web surfaces
are imported explicitly so the model stays importable without them.
"""

__version__ = "0.1.0"

from .components import COMPONENT_KINDS, Components
from .document import OpenApiDocument
from .models import (
    Callback,
    Example,
    Link,
    Parameter,
    RequestBody,
    Response,
    Schema,
    SecurityScheme,
)
from .parent_linked import ParentLinkedDict
from .serialization import DocumentSerializer

__all__ = [
    "COMPONENT_KINDS",
    "Callback",
    "Components",
    "DocumentSerializer",
    "Example",
    "Link",
    "OpenApiDocument",
    "Parameter",
    "ParentLinkedDict",
    "RequestBody",
    "Response",
    "Schema",
    "SecurityScheme",
]
