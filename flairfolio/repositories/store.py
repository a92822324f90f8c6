"""Generic document storage shared by every repository."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, Mapping, Optional, Sequence, TypeVar

from bson import ObjectId
from pydantic import BaseModel
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from ..models.identifiers import DocumentKey, as_object_id
from .exceptions import DuplicateKeyRepositoryError, NotFoundRepositoryError

LOGGER = logging.getLogger("flairfolio")

DocumentT = TypeVar("DocumentT", bound=BaseModel)


class DocumentStore(Generic[DocumentT]):
    """Typed access to one MongoDB collection.

    Documents are returned as ``model`` instances. ``find_doc`` resolves a key
    first as a docID (an ``ObjectId`` or its hex string), then against each of
    ``name_fields`` in order, so callers can pass either an id or a name.
    """

    def __init__(
        self,
        collection: Collection,
        model: type[DocumentT],
        *,
        type_name: str,
        name_fields: Sequence[str] = ("name",),
    ) -> None:
        self._collection = collection
        self._model = model
        self._type_name = type_name
        self._name_fields = tuple(name_fields)

    @property
    def collection(self) -> Collection:
        return self._collection

    @property
    def type_name(self) -> str:
        return self._type_name

    def find(self, query: Optional[Mapping[str, Any]] = None) -> Iterator[DocumentT]:
        cursor = self._collection.find(dict(query or {})).sort("_id", ASCENDING)
        for doc in cursor:
            yield self._model(**doc)

    def find_all(self) -> list[DocumentT]:
        return list(self.find())

    def count(self, query: Optional[Mapping[str, Any]] = None) -> int:
        return self._collection.count_documents(dict(query or {}))

    def _lookup(self, key: DocumentKey) -> Optional[dict]:
        object_id = as_object_id(key)
        if object_id is not None:
            doc = self._collection.find_one({"_id": object_id})
            if doc:
                return doc
        if isinstance(key, str):
            for field in self._name_fields:
                doc = self._collection.find_one({field: key})
                if doc:
                    return doc
        return None

    def find_doc(self, key: DocumentKey) -> DocumentT:
        doc = self._lookup(key)
        if doc is None:
            raise NotFoundRepositoryError(f"{key} is not a defined {self._type_name}")
        return self._model(**doc)

    def is_defined(self, key: Optional[DocumentKey]) -> bool:
        if key is None:
            return False
        return self._lookup(key) is not None

    def assert_defined(self, key: Optional[DocumentKey]) -> None:
        if not self.is_defined(key):
            raise NotFoundRepositoryError(f"{key} is not a valid {self._type_name}")

    def insert(self, record: Mapping[str, Any]) -> ObjectId:
        """Insert ``record`` under a fresh docID and return the id."""

        doc = {"_id": ObjectId(), **record}
        try:
            self._collection.insert_one(doc)
        except DuplicateKeyError as exc:
            LOGGER.debug("Duplicate %s insertion rejected by unique index", self._type_name)
            raise DuplicateKeyRepositoryError(
                f"{self._type_name} violates a unique index: {exc.details or exc}"
            ) from exc
        return doc["_id"]

    def dump_all(self, dump_one: Callable[[ObjectId], dict]) -> dict:
        return {
            "name": self._type_name,
            "contents": [dump_one(doc.id) for doc in self.find()],
        }


__all__ = ["DocumentStore", "DocumentT"]
