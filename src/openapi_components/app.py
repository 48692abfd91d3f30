"""FastAPI application exposing the components of an OpenAPI document.

This module provides REST + GraphQL access to one in-memory OpenAPI
document, focused on editing its reusable ``components`` section while
keeping every entry's parent back-reference current.

Quick start (run the server)::

    OPENAPI_COMPONENTS_DOCUMENT=openapi.json uvicorn openapi_components.app:app --reload

Core endpoints (REST):

    GET    /health                        Basic health probe
    GET    /document                      Whole document
    PUT    /document                      Replace the document
    GET    /components                    Components object (empty kinds omitted)
    GET    /components/{kind}             One collection, e.g. /components/schemas
    GET    /components/{kind}/{name}      One entry
    PUT    /components/{kind}/{name}      Store an entry; {"value": null} removes it
    DELETE /components/{kind}/{name}      Remove an entry (idempotent)

Example: add a schema, then remove it by assigning null::

    curl -X PUT http://localhost:8000/components/schemas/Pet \
         -H "Content-Type: application/json" \
         -d '{"value": {"type": "object", "required": ["id"]}}'

    curl -X PUT http://localhost:8000/components/schemas/Pet \
         -H "Content-Type: application/json" \
         -d '{"value": null}'

GraphQL endpoint (mounted at /graphql):

    curl -X POST http://localhost:8000/graphql \
         -H "Content-Type: application/json" \
         -d '{"query": "{ components { kind owner names } }"}'

Error handling:
    * Unknown component kinds and names produce 404; malformed payloads 400.
    * 404 and 500 are wrapped with JSON payloads for more consistent client UX.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .components import COMPONENT_KINDS
from .graphql_schema import graphql_router
from .repository import DocumentRepository, get_repository

logger = logging.getLogger(__name__)

app = FastAPI(
    title="OpenAPI Components API",
    version=__version__,
    description="Edit the reusable components of an OpenAPI document over REST and GraphQL",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include GraphQL router
app.include_router(graphql_router, tags=["GraphQL"])


class ComponentWriteRequest(BaseModel):
    """Request model for storing a component entry."""

    value: Optional[Dict[str, Any]] = Field(
        None, description="Component object; null removes the entry"
    )


class ComponentWriteResponse(BaseModel):
    """Response model describing an entry after a write."""

    kind: str = Field(..., description="Component kind (OpenAPI property name)")
    name: str = Field(..., description="Component name")
    present: bool = Field(..., description="Whether the entry exists after the write")
    parent: Optional[str] = Field(
        None, description="Back-reference target: 'components', 'document' or null"
    )


class ComponentRemoveResponse(BaseModel):
    """Response model for removals."""

    kind: str
    name: str
    removed: bool = Field(..., description="False when the entry was already absent")


def _require_kind(kind: str) -> None:
    if kind not in COMPONENT_KINDS:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown component kind '{kind}'; expected one of: {', '.join(COMPONENT_KINDS)}",
        )


@app.get("/health")
def health(repo: DocumentRepository = Depends(get_repository)) -> Dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "source": repo.metadata.get("source"),
    }


@app.get("/document")
def get_document(repo: DocumentRepository = Depends(get_repository)) -> Dict[str, Any]:
    return repo.document.to_dict()


@app.put("/document")
def put_document(
    body: Dict[str, Any], repo: DocumentRepository = Depends(get_repository)
) -> Dict[str, Any]:
    """Replace the held document with the posted OpenAPI object."""
    try:
        document = repo.replace_document(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Document replaced: {document!r}")
    return document.to_dict()


@app.get("/components")
def get_components(
    repo: DocumentRepository = Depends(get_repository),
) -> Dict[str, Any]:
    """Return the components object; empty collections are omitted."""
    return repo.document.components.to_dict()


@app.get("/components/{kind}")
def get_collection(
    kind: str, repo: DocumentRepository = Depends(get_repository)
) -> Dict[str, Any]:
    """Return every entry of one collection, in insertion order."""
    _require_kind(kind)
    collection = repo.document.components.collection(kind)
    return {name: value.to_dict() for name, value in list(collection.items())}


@app.get("/components/{kind}/{name}")
def get_component(
    kind: str, name: str, repo: DocumentRepository = Depends(get_repository)
) -> Dict[str, Any]:
    _require_kind(kind)
    value = repo.document.components.collection(kind).get(name)
    if value is None:
        raise HTTPException(status_code=404, detail=f"Component not found: {kind}/{name}")
    return value.to_dict()


@app.put("/components/{kind}/{name}", response_model=ComponentWriteResponse)
def put_component(
    kind: str,
    name: str,
    request: ComponentWriteRequest,
    repo: DocumentRepository = Depends(get_repository),
) -> ComponentWriteResponse:
    """Store an entry; a null ``value`` removes it.

    Example::

        curl -X PUT http://localhost:8000/components/parameters/limit \
             -H "Content-Type: application/json" \
             -d '{"value": {"name": "limit", "in": "query"}}'
    """
    _require_kind(kind)
    try:
        payload = repo.set_component(kind, name, request.value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    present = payload is not None
    return ComponentWriteResponse(
        kind=kind,
        name=name,
        present=present,
        parent=repo.owner_label(kind) if present else None,
    )


@app.delete("/components/{kind}/{name}", response_model=ComponentRemoveResponse)
def delete_component(
    kind: str, name: str, repo: DocumentRepository = Depends(get_repository)
) -> ComponentRemoveResponse:
    """Remove an entry; removing an absent entry is not an error."""
    _require_kind(kind)
    removed = repo.remove_component(kind, name)
    return ComponentRemoveResponse(kind=kind, name=name, removed=removed)


@app.exception_handler(404)
async def not_found_handler(request, exc):
    """Custom 404 handler with more helpful error messages."""
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not Found",
            "detail": (
                str(exc.detail)
                if hasattr(exc, "detail")
                else "The requested resource was not found"
            ),
            "path": str(request.url.path),
        },
    )


@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Custom 500 handler for internal errors."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred processing your request",
        },
    )
