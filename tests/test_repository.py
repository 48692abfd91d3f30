"""Tests for the shared document repository."""
from concurrent.futures import ThreadPoolExecutor

import pytest


def test_remove_component_is_idempotent(repository):
    assert repository.remove_component("schemas", "Pet") is True
    assert repository.remove_component("schemas", "Pet") is False
    assert "Pet" not in repository.document.components.schemas


def test_remove_component_unknown_kind(repository):
    with pytest.raises(ValueError):
        repository.remove_component("widgets", "Pet")


def test_concurrent_writes_keep_back_references(repository):
    components = repository.document.components

    def write(step):
        key = f"S{step % 3}"
        if step % 4 == 0:
            return repository.remove_component("schemas", key)
        value = None if step % 2 else {"type": "object"}
        return repository.set_component("schemas", key, value)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(write, range(400)))

    for _, value in components.schemas.entries():
        assert value is not None
        assert value.parent is components


def test_replace_document_rejects_null_info_and_keeps_document(repository):
    before = repository.document

    with pytest.raises(ValueError):
        repository.replace_document({"openapi": "3.0.0", "info": None, "paths": {}})

    assert repository.document is before
    assert repository.metadata["source"] != "upload"
