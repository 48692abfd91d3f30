"""Tests for the parent-linked named collection."""
import random

import pytest

from openapi_components.models import Schema
from openapi_components.parent_linked import ParentLinkedDict


class Owner:
    """Stand-in for a components container or document."""


def test_set_assigns_parent():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema(type="object")

    schemas.set("Pet", pet)

    assert schemas.get("Pet") is pet
    assert pet.parent is owner


def test_item_assignment_assigns_parent():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema(type="object")

    schemas["Pet"] = pet

    assert pet.parent is owner


def test_owner_is_required():
    with pytest.raises(ValueError):
        ParentLinkedDict(None)


def test_owner_is_read_only():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    assert schemas.owner is owner
    with pytest.raises(AttributeError):
        schemas.owner = Owner()


def test_initial_items_are_linked():
    owner = Owner()
    pet, error = Schema(), Schema()

    schemas = ParentLinkedDict(owner, {"Pet": pet, "Error": error, "Gone": None})

    assert list(schemas) == ["Pet", "Error"]
    assert pet.parent is owner
    assert error.parent is owner


def test_null_assignment_removes_key():
    schemas = ParentLinkedDict(Owner())
    schemas.set("k", Schema())

    schemas.set("k", None)
    assert "k" not in schemas
    assert schemas.get("k") is None

    # Repeating the null assignment is a no-op
    schemas.set("k", None)
    schemas["k"] = None
    assert len(schemas) == 0


def test_null_assignment_of_absent_key_does_not_raise():
    schemas = ParentLinkedDict(Owner())
    schemas["never"] = None
    assert len(schemas) == 0


def test_null_assignment_matches_remove():
    by_null = ParentLinkedDict(Owner())
    by_remove = ParentLinkedDict(Owner())
    for schemas in (by_null, by_remove):
        schemas["a"] = Schema(title="a")
        schemas["b"] = Schema(title="b")

    by_null["a"] = None
    by_remove.remove("a")

    assert list(by_null.entries()) == list(by_remove.entries())


def test_remove_is_idempotent():
    schemas = ParentLinkedDict(Owner())
    schemas["a"] = Schema(title="a")

    assert schemas.remove("a") is True
    assert schemas.remove("a") is False
    assert schemas.remove("missing") is False
    assert len(schemas) == 0


def test_del_absent_key_raises_key_error():
    schemas = ParentLinkedDict(Owner())
    with pytest.raises(KeyError):
        del schemas["missing"]


def test_entries_follow_insertion_order():
    schemas = ParentLinkedDict(Owner())
    x, y, z = Schema(title="x"), Schema(title="y"), Schema(title="z")
    schemas.set("a", x)
    schemas.set("b", y)
    schemas.set("c", z)

    assert list(schemas.entries()) == [("a", x), ("b", y), ("c", z)]

    schemas.remove("b")
    assert list(schemas.entries()) == [("a", x), ("c", z)]


def test_replacing_keeps_position_and_links_new_value():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    schemas["a"] = Schema(title="a")
    schemas["b"] = Schema(title="b")
    replacement = Schema(title="a2")

    schemas["a"] = replacement

    assert list(schemas) == ["a", "b"]
    assert schemas["a"] is replacement
    assert replacement.parent is owner


def test_entries_is_a_snapshot():
    schemas = ParentLinkedDict(Owner())
    for key in "abc":
        schemas[key] = Schema(title=key)

    for key, _ in schemas.entries():
        schemas.remove(key)
        schemas[key + "2"] = Schema()

    assert list(schemas) == ["a2", "b2", "c2"]


def test_key_iteration_is_a_snapshot():
    schemas = ParentLinkedDict(Owner())
    schemas["a"] = Schema()
    schemas["b"] = Schema()

    for key in schemas:
        del schemas[key]

    assert len(schemas) == 0


def test_non_string_key_fails_loudly():
    schemas = ParentLinkedDict(Owner())
    with pytest.raises(TypeError):
        schemas[1] = Schema()
    with pytest.raises(TypeError):
        schemas.set(None, Schema())
    with pytest.raises(TypeError):
        schemas.update({"ok": Schema(), 2: Schema()})
    assert len(schemas) == 0


def test_bulk_update_links_and_drops_nulls():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    schemas["keep"] = Schema()
    pet = Schema()

    schemas.update({"Pet": pet, "keep": None, "Gone": None})

    assert list(schemas) == ["Pet"]
    assert pet.parent is owner


def test_mutation_heals_every_entry():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema()
    schemas["Pet"] = pet

    # Something outside the collection re-parents the value
    pet.parent = Owner()
    schemas["Other"] = Schema()

    assert pet.parent is owner


def test_relink_on_empty_collection_is_noop():
    schemas = ParentLinkedDict(Owner())
    schemas.relink()
    schemas.relink()
    assert len(schemas) == 0


def test_relink_is_idempotent():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema()
    schemas["Pet"] = pet

    schemas.relink()
    schemas.relink()

    assert list(schemas.entries()) == [("Pet", pet)]
    assert pet.parent is owner


def test_clear_removes_everything():
    schemas = ParentLinkedDict(Owner())
    schemas["a"] = Schema()
    schemas.clear()
    assert len(schemas) == 0
    assert list(schemas.entries()) == []


def test_mutable_mapping_helpers_keep_invariant():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema()

    assert schemas.setdefault("Pet", pet) is pet
    assert pet.parent is owner
    assert schemas.pop("Pet") is pet
    assert schemas.pop("Pet", None) is None


def test_random_operation_sequences_keep_back_references():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    rng = random.Random(1234)
    keys = ["a", "b", "c", "d", "e"]

    for _ in range(500):
        key = rng.choice(keys)
        op = rng.random()
        if op < 0.5:
            schemas.set(key, Schema(title=key))
        elif op < 0.75:
            schemas.set(key, None)
        else:
            schemas.remove(key)

        assert all(value is not None for _, value in schemas.entries())
        assert all(value.parent is owner for _, value in schemas.entries())


def test_value_without_parent_is_rejected_before_storing():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema()
    schemas["Pet"] = pet

    with pytest.raises(TypeError):
        schemas["bad"] = "not-a-payload"

    assert list(schemas) == ["Pet"]
    assert list(schemas.entries()) == [("Pet", pet)]

    error = Schema()
    schemas["Error"] = error
    assert error.parent is owner
    assert schemas.remove("Pet") is True


def test_bulk_update_with_bad_value_changes_nothing():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema()

    with pytest.raises(TypeError):
        schemas.update({"Pet": pet, "bad": {"type": "object"}})

    assert len(schemas) == 0
    assert pet.parent is None


class _StaleSnapshot(dict):
    """Dict whose items() still lists a null entry another writer already dropped."""

    def items(self):
        return list(super().items()) + [("gone", None)]


def test_relink_tolerates_null_entry_already_dropped():
    owner = Owner()
    schemas = ParentLinkedDict(owner)
    pet = Schema()
    schemas._data = _StaleSnapshot(Pet=pet)

    schemas.relink()

    assert list(schemas) == ["Pet"]
    assert pet.parent is owner
