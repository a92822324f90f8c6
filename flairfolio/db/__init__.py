import logging
import os
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from ..config import get_settings
from .collections import (
    FLAIRS_COLLECTION,
    INTERESTS_COLLECTION,
    PROFILES_COLLECTION,
)

_client: Optional[MongoClient] = None
_db: Optional[Database] = None

# Field each collection is looked up (and deduplicated) by.
_KEY_FIELDS = (
    (FLAIRS_COLLECTION, "name"),
    (INTERESTS_COLLECTION, "name"),
    (PROFILES_COLLECTION, "username"),
)


def _ensure_indexes(db: Database, *, unique: bool) -> None:
    logger = logging.getLogger("flairfolio")
    for collection_name, field in _KEY_FIELDS:
        try:
            db[collection_name].create_index(
                [(field, ASCENDING)],
                name=f"{collection_name}_{field}_idx",
                unique=unique,
            )
        except Exception as exc:  # pragma: no cover - best-effort logging
            logger.error("Failed to ensure index on %s.%s: %s", collection_name, field, exc)
            continue
        logger.info(
            "Ensured %s index on %s.%s",
            "unique" if unique else "lookup",
            collection_name,
            field,
        )


def connect_to_mongo() -> None:
    """Initialise the shared MongoDB client and application database."""

    global _client, _db

    settings = get_settings()
    if not settings.mongo_uri and not settings.mongo_alt_uri:
        raise RuntimeError("Missing MONGO_URI env var for flairfolio")

    logger = logging.getLogger("flairfolio")
    logger.setLevel(settings.log_level)

    sel_timeout_ms = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "3000"))
    conn_timeout_ms = int(os.getenv("MONGO_CONNECT_TIMEOUT_MS", "3000"))
    sock_timeout_ms = int(os.getenv("MONGO_SOCKET_TIMEOUT_MS", "5000"))

    def _try_connect(uri: str) -> tuple[MongoClient, Database]:
        client = MongoClient(
            uri,
            maxPoolSize=20,
            serverSelectionTimeoutMS=sel_timeout_ms,
            connectTimeoutMS=conn_timeout_ms,
            socketTimeoutMS=sock_timeout_ms,
            **({"directConnection": True} if settings.mongo_direct else {}),
        )
        db = client[settings.mongo_db]
        client.admin.command("ping")
        _ensure_indexes(db, unique=settings.mongo_unique_indexes)
        return client, db

    primary_error: Optional[Exception] = None

    if settings.mongo_uri:
        try:
            _client, _db = _try_connect(settings.mongo_uri)
            logger.info("MongoDB connected: db=%s", settings.mongo_db)
            return
        except Exception as exc:
            primary_error = exc
            logger.error("Mongo primary URI failed: %s", exc)

    # Fallback: alternate direct URI when SRV DNS fails or if provided
    if settings.mongo_alt_uri:
        try:
            _client, _db = _try_connect(settings.mongo_alt_uri)
            logger.info("MongoDB connected via ALT URI: db=%s", settings.mongo_db)
            return
        except Exception as exc:
            logger.error("Mongo ALT URI failed: %s", exc)
            primary_error = primary_error or exc

    raise primary_error or RuntimeError("Mongo connection failed")


def close_mongo_connection() -> None:
    """Close the MongoDB client if it is initialised."""

    global _client, _db
    if _client:
        try:
            _client.close()
        finally:
            logging.getLogger("flairfolio").info("MongoDB connection closed")
        _client = None
        _db = None


def get_db() -> Database:
    if _db is None:
        raise RuntimeError("MongoDB not connected. Did you call connect_to_mongo()?")
    return _db


def get_client() -> MongoClient:
    if _client is None:
        raise RuntimeError("Mongo client not initialised. Did you call connect_to_mongo()?")
    return _client


__all__ = [
    "connect_to_mongo",
    "close_mongo_connection",
    "get_db",
    "get_client",
]
