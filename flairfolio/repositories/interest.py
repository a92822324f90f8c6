"""Repository for interests, the topic names profiles refer to."""

from __future__ import annotations

from ..db.collections import INTERESTS_COLLECTION
from ..models.interest import InterestDefinition, InterestDocument
from .named_record import NamedRecordRepository


class InterestRepository(NamedRecordRepository[InterestDefinition, InterestDocument]):
    """MongoDB access layer for interest documents."""

    collection_name = INTERESTS_COLLECTION
    type_name = "Interest"
    definition_model = InterestDefinition
    document_model = InterestDocument


__all__ = ["InterestRepository"]
