"""Pytest configuration and shared fixtures."""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from openapi_components.app import app
from openapi_components.document import OpenApiDocument
from openapi_components.repository import DocumentRepository, get_repository

FIXTURE_DOCUMENT = Path(__file__).resolve().parent / "fixtures" / "documents" / "petstore.json"


@pytest.fixture
def fixture_path():
    """Path to the sample Petstore document."""
    return FIXTURE_DOCUMENT


@pytest.fixture
def document():
    """Provide an empty document."""
    return OpenApiDocument(info={"title": "Test API", "version": "1.0.0"})


@pytest.fixture
def repository():
    """Provide a repository loaded from the Petstore fixture."""
    return DocumentRepository(FIXTURE_DOCUMENT)


@pytest.fixture
def client(repository):
    """Test client whose REST and GraphQL surfaces share ``repository``."""
    app.dependency_overrides[get_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
