from .flair import FlairDefinition, FlairDocument
from .identifiers import DocumentKey, PyObjectId
from .interest import InterestDefinition, InterestDocument
from .profile import ProfileDefinition, ProfileDocument

__all__ = [
    "DocumentKey",
    "FlairDefinition",
    "FlairDocument",
    "InterestDefinition",
    "InterestDocument",
    "ProfileDefinition",
    "ProfileDocument",
    "PyObjectId",
]
