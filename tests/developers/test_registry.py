"""Tests for the developer registry."""

from unittest.mock import patch

import pytest

from devfeedback.developers import Developer, DeveloperRegistry
from devfeedback.errors import DuplicateDeveloperError, StoreError


@pytest.fixture
def registry(store):
    return DeveloperRegistry(store)


def test_empty_registry(registry):
    assert len(registry) == 0
    assert registry.display_developers() == ["No developers found."]
    assert registry.search_developer("D1") is None


def test_display_follows_insertion_order(registry):
    registry.add_developer("D1", "Alice", "Orion")
    registry.add_developer("D2", "Bob", "Orion")

    assert registry.display_developers() == [
        "Developer ID: D1 | Name: Alice | Project: Orion",
        "Developer ID: D2 | Name: Bob | Project: Orion",
    ]


def test_add_persists_to_store(store, registry):
    developer = registry.add_developer("D1", "Alice", "Orion")

    assert developer == Developer(dev_id="D1", name="Alice", project="Orion")
    assert store.collection("developers").find() == [
        {"devId": "D1", "name": "Alice", "project": "Orion"}
    ]


def test_search_returns_first_of_duplicates(registry):
    registry.add_developer("D1", "Alice", "Orion")
    registry.add_developer("D1", "Alicia", "Vega")

    found = registry.search_developer("D1")

    assert found.name == "Alice"
    assert found.project == "Orion"
    assert len(registry) == 2


def test_search_is_exact_match(registry):
    registry.add_developer("D1", "Alice", "Orion")

    assert registry.search_developer("d1") is None
    assert registry.search_developer("D") is None
    assert "D1" in registry
    assert "D9" not in registry


def test_reject_duplicates(store):
    registry = DeveloperRegistry(store, reject_duplicates=True)
    registry.add_developer("D1", "Alice", "Orion")

    with pytest.raises(DuplicateDeveloperError) as exc_info:
        registry.add_developer("D1", "Alicia", "Vega")

    assert exc_info.value.dev_id == "D1"
    assert len(registry) == 1
    assert len(store.collection("developers").find()) == 1


def test_hydrate_reproduces_stored_sequence(store):
    first = DeveloperRegistry(store)
    first.add_developer("D2", "Bob", "Orion")
    first.add_developer("D1", "Alice", "Orion")
    first.add_developer("D3", "Carol", "Lyra")

    second = DeveloperRegistry(store)

    assert list(second) == list(first)
    assert second.display_developers() == first.display_developers()


def test_hydrate_does_not_write(store):
    store.collection("developers").insert_one({"devId": "D1", "name": "Alice", "project": "Orion"})

    DeveloperRegistry(store)
    DeveloperRegistry(store)

    assert store.collection("developers").count() == 1


def test_hydrate_defaults_missing_fields(store):
    store.collection("developers").insert_one({"devId": "D1"})

    registry = DeveloperRegistry(store)

    assert registry.search_developer("D1") == Developer(dev_id="D1", name="", project="")


def test_failed_write_does_not_append(registry):
    with patch.object(registry.collection, "insert_one", side_effect=StoreError("down")):
        with pytest.raises(StoreError):
            registry.add_developer("D1", "Alice", "Orion")

    assert len(registry) == 0


def test_developer_is_immutable():
    developer = Developer(dev_id="D1", name="Alice", project="Orion")
    with pytest.raises(AttributeError):
        developer.name = "Bob"
