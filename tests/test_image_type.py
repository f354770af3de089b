from shortcutsync.image_type import ImageType, all_types


def test_all_types_covers_every_member_once():
    types = all_types()
    assert len(types) == len(set(types))
    assert set(types) == set(ImageType)
    assert types[0] is ImageType.HERO
    assert types[-1] is ImageType.ICON


def test_display_names():
    names = {t: t.display_name for t in all_types()}
    assert names[ImageType.WIDE_GRID] == "Wide Grid"
    assert names[ImageType.BIG_PICTURE] == "Big Picture"


def test_pinned_file_names():
    assert ImageType.HERO.file_name_no_extension(42) == "42_hero"
    assert ImageType.GRID.file_name_no_extension(42) == "42p"
    assert ImageType.WIDE_GRID.file_name_no_extension(42) == "42"


def test_file_name_appends_extension():
    for image_type in all_types():
        assert image_type.file_name(7, "png") == image_type.file_name_no_extension(7) + ".png"


def test_file_names_are_distinct_per_type():
    types = all_types()
    names = {t.file_name_no_extension(1234) for t in types}
    assert len(names) == len(types)


def test_file_names_start_with_app_id():
    assert all(t.file_name_no_extension(99).startswith("99") for t in all_types())


def test_steam_url_shape():
    for image_type in all_types():
        if image_type is ImageType.ICON:
            continue
        url = image_type.steam_url("570", 123)
        assert url.startswith("https://cdn.cloudflare.steamstatic.com/steam/apps/570/")
        assert url.endswith("?t=123")


def test_steam_url_for_hero_and_logo():
    assert "library_hero.jpg" in ImageType.HERO.steam_url("1", 2)
    assert "logo.png" in ImageType.LOGO.steam_url("1", 2)


def test_wide_grid_and_big_picture_share_header():
    assert ImageType.WIDE_GRID.steam_url("5", 6) == ImageType.BIG_PICTURE.steam_url("5", 6)


def test_icon_has_no_steam_url():
    assert ImageType.ICON.steam_url("570", 1) == ""