"""Custom exceptions for the repository layer."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base exception raised when a repository operation fails."""


class DuplicateKeyRepositoryError(RepositoryError):
    """Raised when a define would repeat a name or username that must be unique."""


class NotFoundRepositoryError(RepositoryError):
    """Raised when an expected document is missing."""


class ValidationRepositoryError(RepositoryError):
    """Raised when a definition fails schema checks or repeats a reference."""


__all__ = [
    "DuplicateKeyRepositoryError",
    "NotFoundRepositoryError",
    "RepositoryError",
    "ValidationRepositoryError",
]
