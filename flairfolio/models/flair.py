from .named_record import NamedRecordDefinition, NamedRecordDocument


class FlairDefinition(NamedRecordDefinition):
    """Payload for defining a flair, e.g. ``{"name": "Mentor"}``."""


class FlairDocument(NamedRecordDocument):
    """Canonical representation of a flair document stored in MongoDB."""


__all__ = ["FlairDefinition", "FlairDocument"]
