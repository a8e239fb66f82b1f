import json

import pytest

from wins_pool.config import AppConfig
from wins_pool.espn_client import FetchError
from wins_pool.ownership import (
    DEFAULT_TIMEZONE,
    UNOWNED,
    MissingConfiguration,
    OwnershipConfig,
    build_team_to_owner,
    load_ownership,
)

from .conftest import CONFIG_URL, FakeESPNClient


def test_explicit_owner_beats_unowned():
    config = OwnershipConfig.from_dict({"owners": {"Alice": ["Ravens"]}, "unowned": ["Ravens", "Bears"]})
    mapping = build_team_to_owner(config)
    assert mapping == {"Ravens": "Alice", "Bears": UNOWNED}


def test_from_dict_coerces_odd_shapes():
    config = OwnershipConfig.from_dict({"owners": {"Alice": "Ravens", "Bob": ["Bears", 7]}, "unowned": None})
    assert config.owners == {"Alice": (), "Bob": ("Bears",)}
    assert config.unowned == ()
    assert config.season is None
    assert config.timezone == DEFAULT_TIMEZONE


def test_from_dict_keeps_owner_order():
    config = OwnershipConfig.from_dict({"season": 2025, "owners": {"Zed": [], "Amy": []}})
    assert list(config.owners) == ["Zed", "Amy"]
    assert config.season == 2025


def test_load_from_url(pool_config):
    client = FakeESPNClient(root={}, config=pool_config)
    config = load_ownership(AppConfig(config_url=CONFIG_URL, config_path=None), client)
    assert config.owners["Alice"] == ("Ravens", "Bills")
    assert client.calls == [("config", CONFIG_URL)]


def test_load_from_url_failure_propagates():
    client = FakeESPNClient(root={}, config=None)
    with pytest.raises(FetchError):
        load_ownership(AppConfig(config_url=CONFIG_URL, config_path=None), client)


def test_load_from_path(tmp_path, pool_config):
    path = tmp_path / "pool-config.json"
    path.write_text(json.dumps(pool_config), encoding="utf-8")
    config = load_ownership(AppConfig(config_url=None, config_path=str(path)), FakeESPNClient(root={}))
    assert config.unowned == ("Bears", "Jets", "Dolphins")


def test_missing_configuration():
    with pytest.raises(MissingConfiguration):
        load_ownership(AppConfig(config_url=None, config_path=None), FakeESPNClient(root={}))
