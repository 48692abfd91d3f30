"""Tests for document serialization and persistence."""
import json

import pytest

from openapi_components.document import OpenApiDocument
from openapi_components.models import Parameter, Schema
from openapi_components.serialization import DocumentSerializer


def _expected_fixture(fixture_path):
    data = json.loads(fixture_path.read_text())
    del data["components"]["schemas"]["Legacy"]
    return data


def test_load_document_links_entries(fixture_path):
    document = DocumentSerializer().load_document(fixture_path)
    components = document.components

    assert document.openapi == "3.0.3"
    assert document.info["title"] == "Swagger Petstore"
    assert list(components.schemas) == ["Pet", "Error"]
    assert components.schemas["Pet"].parent is components
    assert components.headers["x-next"].parent is components
    assert components.parameters["limit"].parent is document
    assert components.responses["NotFound"].parent is document
    assert components.request_bodies["PetBody"].parent is document
    assert components.security_schemes["api_key"].location == "header"


def test_null_entries_are_dropped_on_load(fixture_path):
    document = DocumentSerializer().load_document(fixture_path)
    assert "Legacy" not in document.components.schemas


def test_component_extension_data_is_preserved(fixture_path):
    document = DocumentSerializer().load_document(fixture_path)
    assert document.components.extension_data == {"x-generator": "hand-written"}
    assert document.components.schemas["Error"].extension_data == {"x-internal": True}


def test_document_round_trip(fixture_path):
    serializer = DocumentSerializer()
    document = serializer.load_document(fixture_path)

    assert serializer.document_to_dict(document) == _expected_fixture(fixture_path)


def test_save_and_load(tmp_path, fixture_path):
    serializer = DocumentSerializer()
    document = serializer.load_document(fixture_path)
    document.components.schemas["Tag"] = Schema(type="string")

    target = tmp_path / "out.json"
    serializer.save_document(document, target)
    reloaded = serializer.load_document(target)

    assert list(reloaded.components.schemas) == ["Pet", "Error", "Tag"]
    assert reloaded.components.schemas["Tag"].parent is reloaded.components


def test_empty_components_are_omitted_from_document():
    document = OpenApiDocument(info={"title": "Empty", "version": "1"})
    data = DocumentSerializer().document_to_dict(document)
    assert data == {"openapi": "3.0.0", "info": {"title": "Empty", "version": "1"}, "paths": {}}


def test_components_with_two_kinds(document):
    document.components.schemas["Pet"] = Schema(type="object")
    document.components.parameters["limit"] = Parameter(name="limit", location="query")

    data = json.loads(DocumentSerializer().to_json(document))

    assert set(data["components"]) == {"schemas", "parameters"}


def test_from_json_unknown_top_level_properties():
    text = json.dumps({"openapi": "3.1.0", "info": {}, "x-audience": "internal"})
    document = DocumentSerializer().from_json(text)
    assert document.extension_data == {"x-audience": "internal"}
    assert document.to_dict()["x-audience"] == "internal"


def test_populate_components_into_existing_container(document):
    serializer = DocumentSerializer()
    document.components.schemas["Keep"] = Schema()

    serializer.populate_components(
        document.components,
        {"schemas": {"Pet": {"type": "object"}, "Keep": None}, "links": None},
    )

    assert list(document.components.schemas) == ["Pet"]
    assert document.components.schemas["Pet"].parent is document.components


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"openapi": "3.0.0", "components": []},
        {"openapi": "3.0.0", "components": {"schemas": ["Pet"]}},
        {"openapi": "3.0.0", "components": {"schemas": {"Pet": "object"}}},
    ],
)
def test_malformed_documents_raise_value_error(data):
    with pytest.raises(ValueError):
        DocumentSerializer().dict_to_document(data)


@pytest.mark.parametrize(
    "data",
    [
        {"openapi": "3.0.0", "info": None, "paths": {}},
        {"openapi": "3.0.0", "info": "Pets"},
        {"openapi": 3, "info": {}},
        {"openapi": "3.0.0", "info": {}, "servers": {"url": "/"}},
        {"openapi": "3.0.0", "info": {}, "paths": []},
        {"openapi": "3.0.0", "info": {}, "security": {}},
        {"openapi": "3.0.0", "info": {}, "tags": "pets"},
        {"openapi": "3.0.0", "info": {}, "externalDocs": "https://example.com"},
    ],
)
def test_wrongly_shaped_top_level_properties_raise_value_error(data):
    with pytest.raises(ValueError):
        DocumentSerializer().dict_to_document(data)
