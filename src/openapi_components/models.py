"""Payload types stored in the components section of an OpenAPI document.

These lightweight dataclasses are produced by the serializer (or by client
code building a document by hand) and stored in the collections of
:class:`~openapi_components.components.Components`. They intentionally keep
nested content (media types, nested schemas, path items) as plain JSON values
so that they can be serialized, copied, or transported easily.

Overview:
        * Every payload carries a ``parent`` back-reference. It is a
            non-owning pointer that parent-linked collections set on insertion;
            it is excluded from ``repr``, equality and serialization.
        * Properties the model does not name (``x-*`` vendor extensions and
            anything newer than the modelled fields) are kept in
            ``extension_data`` and written back after the modelled fields.

Typical construction (simplified)::

        from openapi_components.models import Parameter, Schema

        pet = Schema(
                type="object",
                required=["id"],
                properties={"id": {"type": "integer", "format": "int64"}},
        )

        limit = Parameter(
                name="limit",
                location="query",
                schema={"type": "integer"},
        )

        payload = pet.to_dict()
        # {'type': 'object', 'required': ['id'], 'properties': {...}}

Design notes:
        * Field order in each dataclass is the order properties are emitted in,
            which keeps serialized output deterministic.
        * ``None`` and empty containers are omitted on output; ``False`` is kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Type, TypeVar

T = TypeVar("T", bound="ComponentObject")


def _json(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field serialized under the OpenAPI name ``name``."""
    return field(metadata={"json": name}, **kwargs)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list)) and not value)


@dataclass
class ComponentObject:
    """Base for component payloads.

    Attributes:
        extension_data: Properties that are not modelled as fields.
        parent: Object that logically contains this payload (non-owning).
    """

    extension_data: Dict[str, Any] = field(
        default_factory=dict, kw_only=True, metadata={"json": None}
    )
    parent: Optional[Any] = field(
        default=None, repr=False, compare=False, kw_only=True, metadata={"json": None}
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the payload into a JSON-serializable dictionary.

        Returns:
            dict: OpenAPI property names mapped to primitive values; empty
            properties are omitted and ``extension_data`` comes last.

        Example:
            >>> Example(summary="A cat", value={"name": "Tom"}).to_dict()
            {'summary': 'A cat', 'value': {'name': 'Tom'}}
        """
        data: Dict[str, Any] = {}
        for f in fields(self):
            json_name = f.metadata.get("json")
            if json_name is None:
                continue
            value = getattr(self, f.name)
            if not _is_empty(value):
                data[json_name] = value
        data.update(self.extension_data)
        return data

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Build a payload from its OpenAPI dictionary form.

        Args:
            data: Mapping using OpenAPI property names.

        Returns:
            New payload instance; unknown properties land in ``extension_data``.

        Raises:
            ValueError: If ``data`` is not a mapping.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"{cls.__name__} must be a JSON object, got {type(data).__name__}"
            )
        by_json_name = {
            f.metadata["json"]: f.name for f in fields(cls) if f.metadata.get("json")
        }
        kwargs: Dict[str, Any] = {}
        extension_data: Dict[str, Any] = {}
        for key, value in data.items():
            if key in by_json_name:
                kwargs[by_json_name[key]] = value
            else:
                extension_data[key] = value
        return cls(extension_data=extension_data, **kwargs)


@dataclass
class Schema(ComponentObject):
    """JSON schema definition reused across request and response bodies."""

    ref: Optional[str] = _json("$ref", default=None)
    type: Optional[str] = _json("type", default=None)
    format: Optional[str] = _json("format", default=None)
    title: Optional[str] = _json("title", default=None)
    description: Optional[str] = _json("description", default=None)
    default: Optional[Any] = _json("default", default=None)
    enum: List[Any] = _json("enum", default_factory=list)
    required: List[str] = _json("required", default_factory=list)
    properties: Dict[str, Any] = _json("properties", default_factory=dict)
    items: Optional[Dict[str, Any]] = _json("items", default=None)
    additional_properties: Optional[Any] = _json("additionalProperties", default=None)
    all_of: List[Dict[str, Any]] = _json("allOf", default_factory=list)
    one_of: List[Dict[str, Any]] = _json("oneOf", default_factory=list)
    any_of: List[Dict[str, Any]] = _json("anyOf", default_factory=list)
    nullable: Optional[bool] = _json("nullable", default=None)
    read_only: Optional[bool] = _json("readOnly", default=None)
    write_only: Optional[bool] = _json("writeOnly", default=None)
    deprecated: Optional[bool] = _json("deprecated", default=None)
    example: Optional[Any] = _json("example", default=None)


@dataclass
class Parameter(ComponentObject):
    """Operation parameter; also used for reusable response headers."""

    name: Optional[str] = _json("name", default=None)
    location: Optional[str] = _json("in", default=None)
    description: Optional[str] = _json("description", default=None)
    required: Optional[bool] = _json("required", default=None)
    deprecated: Optional[bool] = _json("deprecated", default=None)
    allow_empty_value: Optional[bool] = _json("allowEmptyValue", default=None)
    style: Optional[str] = _json("style", default=None)
    explode: Optional[bool] = _json("explode", default=None)
    schema: Optional[Dict[str, Any]] = _json("schema", default=None)
    example: Optional[Any] = _json("example", default=None)
    examples: Dict[str, Any] = _json("examples", default_factory=dict)
    content: Dict[str, Any] = _json("content", default_factory=dict)


@dataclass
class RequestBody(ComponentObject):
    description: Optional[str] = _json("description", default=None)
    content: Dict[str, Any] = _json("content", default_factory=dict)
    required: Optional[bool] = _json("required", default=None)


@dataclass
class Response(ComponentObject):
    description: Optional[str] = _json("description", default=None)
    headers: Dict[str, Any] = _json("headers", default_factory=dict)
    content: Dict[str, Any] = _json("content", default_factory=dict)
    links: Dict[str, Any] = _json("links", default_factory=dict)


@dataclass
class Example(ComponentObject):
    summary: Optional[str] = _json("summary", default=None)
    description: Optional[str] = _json("description", default=None)
    value: Optional[Any] = _json("value", default=None)
    external_value: Optional[str] = _json("externalValue", default=None)


@dataclass
class SecurityScheme(ComponentObject):
    """Security scheme (apiKey, http, oauth2 or openIdConnect)."""

    type: Optional[str] = _json("type", default=None)
    description: Optional[str] = _json("description", default=None)
    name: Optional[str] = _json("name", default=None)
    location: Optional[str] = _json("in", default=None)
    scheme: Optional[str] = _json("scheme", default=None)
    bearer_format: Optional[str] = _json("bearerFormat", default=None)
    flows: Dict[str, Any] = _json("flows", default_factory=dict)
    open_id_connect_url: Optional[str] = _json("openIdConnectUrl", default=None)


@dataclass
class Link(ComponentObject):
    operation_ref: Optional[str] = _json("operationRef", default=None)
    operation_id: Optional[str] = _json("operationId", default=None)
    parameters: Dict[str, Any] = _json("parameters", default_factory=dict)
    request_body: Optional[Any] = _json("requestBody", default=None)
    description: Optional[str] = _json("description", default=None)
    server: Optional[Dict[str, Any]] = _json("server", default=None)


@dataclass
class Callback(ComponentObject):
    """Map of runtime expressions to path items.

    A callback has no fixed properties: every expression key is stored in
    ``paths`` and the dictionary form is that map itself.

    Example:
        >>> cb = Callback.from_dict({"{$request.body#/url}": {"post": {}}})
        >>> list(cb.paths)
        ['{$request.body#/url}']
    """

    paths: Dict[str, Any] = field(default_factory=dict, metadata={"json": None})

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.paths)
        data.update(self.extension_data)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Callback":
        if not isinstance(data, dict):
            raise ValueError(
                f"Callback must be a JSON object, got {type(data).__name__}"
            )
        paths = {k: v for k, v in data.items() if not k.startswith("x-")}
        extension_data = {k: v for k, v in data.items() if k.startswith("x-")}
        return cls(paths=paths, extension_data=extension_data)


# Payload type per components property, used when loading documents.
COMPONENT_TYPES: Dict[str, Type[ComponentObject]] = {
    "schemas": Schema,
    "requestBodies": RequestBody,
    "responses": Response,
    "parameters": Parameter,
    "examples": Example,
    "headers": Parameter,
    "securitySchemes": SecurityScheme,
    "links": Link,
    "callbacks": Callback,
}
