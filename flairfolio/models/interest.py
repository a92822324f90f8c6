from .named_record import NamedRecordDefinition, NamedRecordDocument


class InterestDefinition(NamedRecordDefinition):
    """Payload for defining an interest, e.g. ``{"name": "Software Engineering"}``."""


class InterestDocument(NamedRecordDocument):
    """Canonical representation of an interest document stored in MongoDB."""


__all__ = ["InterestDefinition", "InterestDocument"]
