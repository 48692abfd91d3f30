"""GraphQL schema definition for the OpenAPI Components API.

Overview
========
This module defines a Strawberry GraphQL schema that mirrors the component
endpoints of the REST surface. Resolvers read the same
:class:`~openapi_components.repository.DocumentRepository` as the REST
endpoints; the repository is injected through the router context so that
FastAPI dependency overrides apply to both surfaces.

Example Queries (GraphiQL / curl)
---------------------------------
Per-kind summary (only non-empty kinds are listed)::

        query {
            health
            components { kind owner names }
        }

Fetch one entry as JSON text::

        query {
            component(kind: "schemas", name: "Pet") { kind name json }
        }

Example Mutations::

        mutation {
            setComponent(kind: "schemas", name: "Pet", json: "{\\"type\\": \\"object\\"}")
        }

        mutation {
            setComponent(kind: "schemas", name: "Pet", json: null)   # removes Pet
        }

        mutation {
            removeComponent(kind: "parameters", name: "limit")
        }

Depth Limiting & Safety
-----------------------
``QueryDepthLimiter`` is applied with ``max_depth=10``. Component bodies are
returned as JSON strings, so query depth does not grow with schema nesting.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

import strawberry
from fastapi import Depends
from strawberry.extensions import QueryDepthLimiter
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from .components import COMPONENT_KINDS
from .repository import DocumentRepository, get_repository

logger = logging.getLogger(__name__)


@strawberry.type
class ComponentKindSummary:
    """Names stored under one component kind."""

    kind: str
    owner: Optional[str] = None
    names: List[str] = strawberry.field(default_factory=list)


@strawberry.type
class ComponentEntry:
    """One component entry with its body serialized as JSON text."""

    kind: str
    name: str
    json: str


def _repository(info: Info) -> DocumentRepository:
    return info.context["repository"]


def _check_kind(kind: str) -> None:
    if kind not in COMPONENT_KINDS:
        raise ValueError(
            f"Unknown component kind '{kind}'; expected one of: {', '.join(COMPONENT_KINDS)}"
        )


@strawberry.type
class Query:
    """Root query type for read operations."""

    @strawberry.field
    async def health(self) -> str:
        return "healthy"

    @strawberry.field
    async def components(self, info: Info) -> List[ComponentKindSummary]:
        """Summaries for every non-empty component kind, in serialization order."""
        repo = _repository(info)
        components = repo.document.components
        result = []
        for kind in COMPONENT_KINDS:
            names = list(components.collection(kind))
            if names:
                result.append(
                    ComponentKindSummary(
                        kind=kind, owner=repo.owner_label(kind), names=names
                    )
                )
        return result

    @strawberry.field
    async def component(
        self, info: Info, kind: str, name: str
    ) -> Optional[ComponentEntry]:
        """Return one entry, or null when it does not exist."""
        _check_kind(kind)
        value = _repository(info).document.components.collection(kind).get(name)
        if value is None:
            return None
        return ComponentEntry(kind=kind, name=name, json=json.dumps(value.to_dict()))


@strawberry.type
class Mutation:
    """Root mutation type for component edits."""

    @strawberry.mutation
    async def set_component(
        self, info: Info, kind: str, name: str, json: Optional[str] = None
    ) -> bool:
        """Store an entry from JSON text; null removes it. Returns presence."""
        _check_kind(kind)
        value = None if json is None else _load_json(json)
        payload = _repository(info).set_component(kind, name, value)
        logger.debug(f"GraphQL setComponent {kind}/{name} present={payload is not None}")
        return payload is not None

    @strawberry.mutation
    async def remove_component(self, info: Info, kind: str, name: str) -> bool:
        """Remove an entry; returns False when it was already absent."""
        _check_kind(kind)
        return _repository(info).remove_component(kind, name)


def _load_json(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid component JSON: {e}") from e


async def get_context(repository: DocumentRepository = Depends(get_repository)):
    return {"repository": repository}


# Create the GraphQL schema with extensions
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[
        QueryDepthLimiter(max_depth=10),  # Limit query depth
    ],
)


# Create the GraphQL router with GraphiQL interface
graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql",
    path="/graphql",
)
