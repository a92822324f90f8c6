"""MongoDB collection names used by flairfolio."""

from __future__ import annotations

FLAIRS_COLLECTION = "flairs"
INTERESTS_COLLECTION = "interests"
PROFILES_COLLECTION = "profiles"

__all__ = [
    "FLAIRS_COLLECTION",
    "INTERESTS_COLLECTION",
    "PROFILES_COLLECTION",
]
