"""Repository for flairs: short named labels shown on a profile."""

from __future__ import annotations

from ..db.collections import FLAIRS_COLLECTION
from ..models.flair import FlairDefinition, FlairDocument
from .named_record import NamedRecordRepository


class FlairRepository(NamedRecordRepository[FlairDefinition, FlairDocument]):
    """MongoDB access layer for flair documents.

    Example::

        flairs.define(name="Mentor", description="Happy to pair with newcomers")
    """

    collection_name = FLAIRS_COLLECTION
    type_name = "Flair"
    definition_model = FlairDefinition
    document_model = FlairDocument


__all__ = ["FlairRepository"]
