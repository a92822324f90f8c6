from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pymongo.database import Database

from ..config import get_settings
from ..db import get_db
from ..repositories.flair import FlairRepository
from ..repositories.interest import InterestRepository
from ..repositories.profile import ProfileRepository

LOGGER = logging.getLogger("flairfolio")


class PortfolioService:
    """Owns the flair, interest and profile repositories and moves data in and out of them."""

    def __init__(
        self,
        *,
        flairs: FlairRepository,
        interests: InterestRepository,
        profiles: ProfileRepository,
    ) -> None:
        self._flairs = flairs
        self._interests = interests
        self._profiles = profiles

    @property
    def flairs(self) -> FlairRepository:
        return self._flairs

    @property
    def interests(self) -> InterestRepository:
        return self._interests

    @property
    def profiles(self) -> ProfileRepository:
        return self._profiles

    def dump_all(self) -> dict[str, list[dict]]:
        """Snapshot every collection in the format ``load`` accepts."""

        return {
            "flairs": self._flairs.dump_all()["contents"],
            "interests": self._interests.dump_all()["contents"],
            "profiles": self._profiles.dump_all()["contents"],
        }

    def load(self, data: Mapping[str, Any]) -> dict[str, int]:
        # Profiles refer to flairs and interests by name, so those go first.
        counts = {"flairs": 0, "interests": 0, "profiles": 0}
        for record in data.get("flairs") or []:
            self._flairs.define(**record)
            counts["flairs"] += 1
        for record in data.get("interests") or []:
            self._interests.define(**record)
            counts["interests"] += 1
        for record in data.get("profiles") or []:
            self._profiles.define(record)
            counts["profiles"] += 1
        LOGGER.info(
            "Loaded %s flairs, %s interests, %s profiles",
            counts["flairs"],
            counts["interests"],
            counts["profiles"],
        )
        return counts

    def load_default_data(self, path: Optional[Union[str, Path]] = None) -> dict[str, int]:
        """Populate an empty database from a JSON file on first start."""

        empty = {"flairs": 0, "interests": 0, "profiles": 0}
        existing = {
            "flairs": self._flairs.count(),
            "interests": self._interests.count(),
            "profiles": self._profiles.count(),
        }
        if any(existing.values()):
            LOGGER.info(
                "Database not empty (%s flairs, %s interests, %s profiles); skipping default data",
                existing["flairs"],
                existing["interests"],
                existing["profiles"],
            )
            return empty

        source = path or get_settings().default_data_path
        if not source:
            LOGGER.info("No default data path configured; starting with empty collections")
            return empty

        LOGGER.info("Loading default data from %s", source)
        with Path(source).open(encoding="utf-8") as handle:
            data = json.load(handle)
        return self.load(data)


def get_portfolio_service(database: Optional[Database] = None) -> PortfolioService:
    db = database if database is not None else get_db()
    flairs = FlairRepository(db)
    interests = InterestRepository(db)
    profiles = ProfileRepository(db, interests=interests, flairs=flairs)
    return PortfolioService(flairs=flairs, interests=interests, profiles=profiles)


__all__ = ["PortfolioService", "get_portfolio_service"]
