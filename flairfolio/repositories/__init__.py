"""Repository layer to abstract MongoDB access patterns."""

from .flair import FlairRepository
from .interest import InterestRepository
from .profile import ProfileRepository
from .store import DocumentStore

__all__ = ["DocumentStore", "FlairRepository", "InterestRepository", "ProfileRepository"]
