from __future__ import annotations

import pytest
from bson import ObjectId

from flairfolio.models.flair import FlairDocument
from flairfolio.repositories.exceptions import NotFoundRepositoryError
from flairfolio.repositories.store import DocumentStore


@pytest.fixture
def store(database) -> DocumentStore[FlairDocument]:
    return DocumentStore(database["scratch"], FlairDocument, type_name="Scratch")


def test_insert_assigns_object_id(store) -> None:
    doc_id = store.insert({"name": "alpha"})

    assert isinstance(doc_id, ObjectId)
    assert store.collection.find_one({"_id": doc_id})["name"] == "alpha"


def test_find_doc_by_id_hex_or_name(store) -> None:
    doc_id = store.insert({"name": "alpha", "description": "first"})

    assert store.find_doc(doc_id).description == "first"
    assert store.find_doc(str(doc_id)).id == doc_id
    assert store.find_doc("alpha").id == doc_id


def test_find_doc_missing(store) -> None:
    with pytest.raises(NotFoundRepositoryError, match="beta is not a defined Scratch"):
        store.find_doc("beta")


def test_is_defined_and_assert_defined(store) -> None:
    doc_id = store.insert({"name": "alpha"})

    assert store.is_defined(doc_id)
    assert store.is_defined("alpha")
    assert not store.is_defined(ObjectId())
    assert not store.is_defined(None)

    store.assert_defined(doc_id)
    with pytest.raises(NotFoundRepositoryError, match="is not a valid Scratch"):
        store.assert_defined(None)


def test_find_and_count(store) -> None:
    store.insert({"name": "alpha"})
    store.insert({"name": "beta"})
    store.insert({"name": "gamma", "description": "third"})

    assert store.count() == 3
    assert store.count({"name": "beta"}) == 1
    assert [doc.name for doc in store.find_all()] == ["alpha", "beta", "gamma"]
    assert [doc.name for doc in store.find({"description": "third"})] == ["gamma"]


def test_name_fields_control_lookup(database) -> None:
    store = DocumentStore(database["scratch"], FlairDocument, type_name="Scratch", name_fields=())
    store.insert({"name": "alpha"})

    assert not store.is_defined("alpha")
