import json

import pytest

from shortcutsync.steam_settings import SteamSettings


def test_defaults_are_off():
    settings = SteamSettings()
    assert settings.location is None
    assert not any(
        [
            settings.create_collections,
            settings.optimize_for_big_picture,
            settings.stop_steam,
            settings.start_steam,
        ]
    )


def test_round_trip_through_json():
    settings = SteamSettings(
        location="/opt/steam", create_collections=True, stop_steam=True
    )
    restored = SteamSettings.from_dict(json.loads(json.dumps(settings.to_dict())))
    assert restored == settings


def test_to_dict_keeps_null_location():
    data = SteamSettings().to_dict()
    assert "location" in data
    assert data["location"] is None


def test_location_may_be_missing():
    data = SteamSettings(start_steam=True).to_dict()
    del data["location"]
    restored = SteamSettings.from_dict(data)
    assert restored.location is None
    assert restored.start_steam is True


def test_missing_flag_is_an_error():
    data = SteamSettings().to_dict()
    del data["stop_steam"]
    with pytest.raises(ValueError, match="stop_steam"):
        SteamSettings.from_dict(data)


def test_flag_of_wrong_type_is_an_error():
    data = SteamSettings().to_dict()
    data["start_steam"] = "yes"
    with pytest.raises(ValueError):
        SteamSettings.from_dict(data)


def test_unknown_fields_are_ignored():
    data = SteamSettings(create_collections=True).to_dict()
    data["extra"] = 1
    assert SteamSettings.from_dict(data).create_collections is True