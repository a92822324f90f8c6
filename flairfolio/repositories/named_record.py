"""Shared behaviour for collections of uniquely named records."""

from __future__ import annotations

import logging
from typing import ClassVar, Generic, Iterable, Optional, TypeVar

from bson import ObjectId
from pydantic import ValidationError
from pymongo.database import Database

from ..models.identifiers import DocumentKey
from ..models.named_record import NamedRecordDefinition, NamedRecordDocument
from .exceptions import DuplicateKeyRepositoryError, ValidationRepositoryError
from .store import DocumentStore

LOGGER = logging.getLogger("flairfolio")

DefinitionT = TypeVar("DefinitionT", bound=NamedRecordDefinition)
NamedDocumentT = TypeVar("NamedDocumentT", bound=NamedRecordDocument)


class NamedRecordRepository(Generic[DefinitionT, NamedDocumentT]):
    """Stores ``{name, description}`` records whose names are unique.

    Subclasses bind the collection, the models and the type name used in
    error messages.
    """

    collection_name: ClassVar[str]
    type_name: ClassVar[str]
    definition_model: ClassVar[type[NamedRecordDefinition]]
    document_model: ClassVar[type[NamedRecordDocument]]

    def __init__(self, database: Database) -> None:
        self._database = database
        self._store: DocumentStore[NamedDocumentT] = DocumentStore(
            database[self.collection_name],
            self.document_model,
            type_name=self.type_name,
            name_fields=("name",),
        )

    @property
    def store(self) -> DocumentStore[NamedDocumentT]:
        return self._store

    def define(self, name: str, description: Optional[str] = None) -> ObjectId:
        """Insert a new record and return its docID.

        Raises DuplicateKeyRepositoryError if ``name`` is already defined.
        """

        try:
            definition = self.definition_model(name=name, description=description)
        except ValidationError as exc:
            raise ValidationRepositoryError(f"Invalid {self.type_name} definition: {exc}") from exc

        if self._store.count({"name": definition.name}) > 0:
            LOGGER.debug("Rejected %s define: name=%s already exists", self.type_name, name)
            raise DuplicateKeyRepositoryError(
                f"{name} is previously defined in another {self.type_name}"
            )

        doc_id = self._store.insert(definition.model_dump(exclude_none=True))
        LOGGER.debug("Defined %s name=%s id=%s", self.type_name, name, doc_id)
        return doc_id

    def find_doc(self, key: DocumentKey) -> NamedDocumentT:
        return self._store.find_doc(key)

    def find_name(self, doc_id: DocumentKey) -> str:
        self._store.assert_defined(doc_id)
        return self._store.find_doc(doc_id).name

    def find_names(self, doc_ids: Iterable[DocumentKey]) -> list[str]:
        return [self.find_name(doc_id) for doc_id in doc_ids]

    def assert_name(self, name: str) -> None:
        self._store.find_doc(name)

    def assert_names(self, names: Optional[Iterable[str]]) -> None:
        for name in names or ():
            self.assert_name(name)

    def find_id(self, name: str) -> ObjectId:
        return self._store.find_doc(name).id

    def find_ids(self, names: Optional[Iterable[str]]) -> list[ObjectId]:
        if not names:
            return []
        return [self.find_id(name) for name in names]

    def dump_one(self, doc_id: DocumentKey) -> dict:
        """Return the record in the keyword form accepted by ``define``."""

        doc = self._store.find_doc(doc_id)
        return {"name": doc.name, "description": doc.description}

    def dump_all(self) -> dict:
        return self._store.dump_all(self.dump_one)

    def count(self) -> int:
        return self._store.count()

    def is_defined(self, key: Optional[DocumentKey]) -> bool:
        return self._store.is_defined(key)

    def assert_defined(self, key: Optional[DocumentKey]) -> None:
        self._store.assert_defined(key)


__all__ = ["NamedRecordRepository"]
