from __future__ import annotations

import json

import pytest

from flairfolio.config import get_settings
from flairfolio.repositories.exceptions import NotFoundRepositoryError
from flairfolio.services import get_portfolio_service

DEFAULT_DATA = {
    "flairs": [{"name": "Mentor", "description": "Pairs with newcomers"}],
    "interests": [
        {"name": "Software Engineering"},
        {"name": "Databases", "description": "Storage and query systems"},
    ],
    "profiles": [
        {
            "username": "johnson",
            "firstName": "Philip",
            "interests": ["Software Engineering", "Databases"],
            "flairs": ["Mentor"],
            "github": "https://github.com/philipmjohnson",
        }
    ],
}


def test_load_defines_in_dependency_order(service) -> None:
    counts = service.load(DEFAULT_DATA)

    assert counts == {"flairs": 1, "interests": 2, "profiles": 1}
    assert service.profiles.find_doc("johnson").interests == ["Software Engineering", "Databases"]


def test_dump_all_reloads_into_fresh_database(service, mongo_client) -> None:
    service.load(DEFAULT_DATA)
    snapshot = service.dump_all()

    assert [flair["name"] for flair in snapshot["flairs"]] == ["Mentor"]
    assert snapshot["profiles"][0]["firstName"] == "Philip"

    other = get_portfolio_service(mongo_client["flairfolio-copy"])
    other.load(json.loads(json.dumps(snapshot)))

    assert other.dump_all() == snapshot


def test_load_propagates_errors(service) -> None:
    bad = {"profiles": [{"username": "jdoe", "flairs": ["Unknown"]}]}

    with pytest.raises(NotFoundRepositoryError):
        service.load(bad)

    assert service.profiles.count() == 0


def test_load_default_data_from_settings(service, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    data_file = tmp_path / "default-data.json"
    data_file.write_text(json.dumps(DEFAULT_DATA), encoding="utf-8")
    monkeypatch.setenv("DEFAULT_DATA_PATH", str(data_file))
    get_settings.cache_clear()  # type: ignore[attr-defined]

    assert service.load_default_data() == {"flairs": 1, "interests": 2, "profiles": 1}

    # Second start sees existing profiles and leaves the data alone.
    assert service.load_default_data() == {"flairs": 0, "interests": 0, "profiles": 0}
    assert service.flairs.count() == 1


def test_load_default_data_explicit_path(service, tmp_path) -> None:
    data_file = tmp_path / "seed.json"
    data_file.write_text(json.dumps({"flairs": [{"name": "Speaker"}]}), encoding="utf-8")

    assert service.load_default_data(data_file)["flairs"] == 1
    assert service.flairs.find_names(service.flairs.find_ids(["Speaker"])) == ["Speaker"]


def test_load_default_data_without_path(service) -> None:
    assert service.load_default_data() == {"flairs": 0, "interests": 0, "profiles": 0}
    assert service.flairs.count() == 0


def test_load_default_data_skips_when_only_flairs_exist(service, tmp_path) -> None:
    service.flairs.define(name="Mentor")
    data_file = tmp_path / "seed.json"
    data_file.write_text(json.dumps({"flairs": [{"name": "Mentor"}]}), encoding="utf-8")

    assert service.load_default_data(data_file) == {"flairs": 0, "interests": 0, "profiles": 0}
    assert service.flairs.count() == 1


def test_load_default_data_after_partial_load(service, tmp_path) -> None:
    data_file = tmp_path / "seed.json"
    data_file.write_text(
        json.dumps(
            {
                "flairs": [{"name": "Mentor"}],
                "profiles": [{"username": "jdoe", "flairs": ["Unknown"]}],
            }
        ),
        encoding="utf-8",
    )

    with pytest.raises(NotFoundRepositoryError):
        service.load_default_data(data_file)
    assert service.flairs.count() == 1

    # A restart must not trip over the flair left behind by the failed load.
    assert service.load_default_data(data_file) == {"flairs": 0, "interests": 0, "profiles": 0}
    assert service.profiles.count() == 0
