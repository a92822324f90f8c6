"""Repository helpers for user profile persistence."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Protocol, Union

from bson import ObjectId
from pydantic import ValidationError
from pymongo.database import Database

from ..db.collections import PROFILES_COLLECTION
from ..models.identifiers import DocumentKey
from ..models.profile import ProfileDefinition, ProfileDocument
from .exceptions import DuplicateKeyRepositoryError, ValidationRepositoryError
from .store import DocumentStore

LOGGER = logging.getLogger("flairfolio")


class NameAsserter(Protocol):
    """Anything that can reject names it does not define."""

    def assert_names(self, names: Optional[Iterable[str]]) -> None: ...


def _assert_unique(names: list[str]) -> None:
    if len(names) != len(set(names)):
        raise ValidationRepositoryError(f"{names} contains duplicates")


def _by_alias(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Rename attribute-name keys (``first_name``) to their stored alias (``firstName``)."""

    renamed: dict[str, Any] = {}
    for key, value in fields.items():
        field = ProfileDefinition.model_fields.get(key)
        renamed[field.alias if field is not None and field.alias else key] = value
    return renamed


class ProfileRepository:
    """Portfolio data for users, referencing interests and flairs by name."""

    type_name = "Profile"

    def __init__(
        self,
        database: Database,
        *,
        interests: NameAsserter,
        flairs: NameAsserter,
    ) -> None:
        self._database = database
        self._interests = interests
        self._flairs = flairs
        self._store: DocumentStore[ProfileDocument] = DocumentStore(
            database[PROFILES_COLLECTION],
            ProfileDocument,
            type_name=self.type_name,
            name_fields=("username",),
        )

    @property
    def store(self) -> DocumentStore[ProfileDocument]:
        return self._store

    def define(
        self,
        definition: Union[ProfileDefinition, Mapping[str, Any], None] = None,
        **fields: Any,
    ) -> ObjectId:
        """Insert a new profile and return its docID.

        ``definition`` and ``fields`` accept either the stored camelCase keys
        (``firstName``) or the attribute names (``first_name``). Missing string
        fields default to ``""`` and missing lists to ``[]``.

        Checks run in this order and all pass before anything is written:
        the username is new, every interest is defined, interests are not
        repeated, every flair is defined, flairs are not repeated.
        """

        if isinstance(definition, ProfileDefinition):
            payload: dict[str, Any] = definition.model_dump(by_alias=True)
        else:
            payload = _by_alias(definition or {})
        payload.update(_by_alias(fields))

        try:
            profile = ProfileDefinition.model_validate(payload)
        except ValidationError as exc:
            raise ValidationRepositoryError(f"Invalid {self.type_name} definition: {exc}") from exc

        if self._store.count({"username": profile.username}) > 0:
            LOGGER.debug("Rejected profile define: username=%s already exists", profile.username)
            raise DuplicateKeyRepositoryError(
                f"{profile.username} is previously defined in another {self.type_name}"
            )

        self._interests.assert_names(profile.interests)
        _assert_unique(profile.interests)

        self._flairs.assert_names(profile.flairs)
        _assert_unique(profile.flairs)

        doc_id = self._store.insert(profile.model_dump(by_alias=True))
        LOGGER.debug("Defined profile username=%s id=%s", profile.username, doc_id)
        return doc_id

    def find_doc(self, key: DocumentKey) -> ProfileDocument:
        return self._store.find_doc(key)

    def find_username(self, profile_id: DocumentKey) -> str:
        self._store.assert_defined(profile_id)
        return self._store.find_doc(profile_id).username

    def dump_one(self, profile_id: DocumentKey) -> dict:
        """Return the profile in the form accepted by ``define``."""

        doc = self._store.find_doc(profile_id)
        return doc.model_dump(by_alias=True, exclude={"id"})

    def dump_all(self) -> dict:
        return self._store.dump_all(self.dump_one)

    def count(self) -> int:
        return self._store.count()

    def is_defined(self, key: Optional[DocumentKey]) -> bool:
        return self._store.is_defined(key)

    def assert_defined(self, key: Optional[DocumentKey]) -> None:
        self._store.assert_defined(key)


__all__ = ["NameAsserter", "ProfileRepository"]
