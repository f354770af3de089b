from shortcutsync.griddb_settings import SteamGridDbSettings
from shortcutsync.image_type import ImageType


def test_nothing_banned_by_default():
    settings = SteamGridDbSettings()
    assert not any(settings.is_image_banned(t, 10) for t in ImageType)


def test_ban_records_id_with_display_name():
    settings = SteamGridDbSettings()
    settings.set_image_banned(ImageType.WIDE_GRID, 42, True)
    assert settings.banned_images == ["42-Wide Grid"]
    assert settings.is_image_banned(ImageType.WIDE_GRID, 42)


def test_ban_is_specific_to_type_and_app():
    settings = SteamGridDbSettings()
    settings.set_image_banned(ImageType.HERO, 1, True)
    assert not settings.is_image_banned(ImageType.LOGO, 1)
    assert not settings.is_image_banned(ImageType.HERO, 2)


def test_banning_twice_keeps_one_entry():
    settings = SteamGridDbSettings()
    settings.set_image_banned(ImageType.ICON, 5, True)
    settings.set_image_banned(ImageType.ICON, 5, True)
    assert len(settings.banned_images) == 1


def test_unban_removes_entry_and_keeps_others():
    settings = SteamGridDbSettings()
    settings.set_image_banned(ImageType.ICON, 5, True)
    settings.set_image_banned(ImageType.GRID, 5, True)
    settings.set_image_banned(ImageType.ICON, 5, False)
    assert not settings.is_image_banned(ImageType.ICON, 5)
    assert settings.is_image_banned(ImageType.GRID, 5)
    assert len(settings.banned_images) == 1


def test_unban_when_not_banned_changes_nothing():
    settings = SteamGridDbSettings(banned_images=["other"])
    settings.set_image_banned(ImageType.HERO, 3, False)
    assert settings.banned_images == ["other"]