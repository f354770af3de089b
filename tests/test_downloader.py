from pathlib import Path

import pytest

from shortcutsync.downloader import (
    ToDownload,
    download_to_download,
    get_image_extension,
    icon_url,
    image_types_to_download,
    images_needed,
    remove_failed_downloads,
    shortcuts_needing_images,
    steam_icon_url_from_response,
    steam_image_url_from_response,
)
from shortcutsync.image_type import ImageType
from shortcutsync.shortcuts import Shortcut


def _response(mtime=1647763452, clienticon="abc"):
    return {
        "success": True,
        "data": {
            "platforms": {
                "steam": {
                    "id": "763890",
                    "metadata": {"store_asset_mtime": mtime, "clienticon": clienticon},
                }
            }
        },
    }


@pytest.mark.parametrize(
    "mime,ext",
    [
        ("image/jpeg", "jpg"),
        ("image/png", "png"),
        ("image/webp", "webp"),
        ("image/vnd.microsoft.icon", "ico"),
    ],
)
def test_get_image_extension(mime, ext):
    assert get_image_extension(mime) == ext


def test_get_image_extension_unknown():
    with pytest.raises(ValueError):
        get_image_extension("text/plain")


def test_icon_url():
    assert (
        icon_url("763890", "abc")
        == "https://cdn.cloudflare.steamstatic.com/steamcommunity/public/images/apps/763890/abc.ico"
    )


def test_steam_image_url_from_response():
    url = steam_image_url_from_response(_response(), ImageType.HERO)
    assert url == ImageType.HERO.steam_url("763890", 1647763452)


def test_steam_image_url_missing_mtime():
    assert steam_image_url_from_response(_response(mtime=None), ImageType.GRID) is None


def test_steam_image_url_invalid_response():
    assert steam_image_url_from_response({"data": None}, ImageType.GRID) is None
    bad = _response()
    bad["data"]["platforms"]["steam"]["id"] = 5
    assert steam_image_url_from_response(bad, ImageType.GRID) is None


def test_steam_icon_url_from_response():
    assert steam_icon_url_from_response(_response()) == icon_url("763890", "abc")
    assert steam_icon_url_from_response(_response(clienticon=None)) is None


def test_image_types_to_download():
    assert image_types_to_download(False) == [
        ImageType.LOGO,
        ImageType.HERO,
        ImageType.GRID,
        ImageType.WIDE_GRID,
        ImageType.ICON,
    ]
    with_big = image_types_to_download(True)
    assert with_big[-1] is ImageType.BIG_PICTURE
    assert len(with_big) == 6


def test_shortcuts_needing_images():
    types = image_types_to_download(False)
    complete = Shortcut(app_id=1, app_name="Done", dev_kit_game_id="boilr")
    known = [t.file_name_no_extension(1) for t in types]
    missing = Shortcut(app_id=2, app_name="Missing", dev_kit_game_id="boilr")
    nameless = Shortcut(app_id=3, app_name="")
    foreign = Shortcut(app_id=4, app_name="Foreign")
    shortcuts = [complete, missing, nameless, foreign]
    assert shortcuts_needing_images(shortcuts, known, types, False) == [missing, foreign]
    assert shortcuts_needing_images(shortcuts, known, types, True) == [missing]


def test_images_needed():
    a = Shortcut(app_id=1, app_name="A")
    b = Shortcut(app_id=2, app_name="B")
    c = Shortcut(app_id=3, app_name="C")
    d = Shortcut(app_id=4, app_name="D")
    results = {1: 100, 2: 200, 4: 400}
    known = [ImageType.GRID.file_name_no_extension(4)]

    def banned(image_type, app_id):
        return app_id == 2

    needed = images_needed([a, b, c, d], results, known, ImageType.GRID, banned)
    assert needed == [(a, 100)]


def test_download_round_trip(tmp_path):
    source = tmp_path / "source.png"
    source.write_bytes(b"\x89PNG data")
    target = tmp_path / "1p.png"
    job = ToDownload(path=target, url=source.as_uri(), app_name="A", image_type=ImageType.GRID)
    download_to_download(job)
    assert target.read_bytes() == b"\x89PNG data"


def test_download_failure_raises(tmp_path):
    job = ToDownload(
        path=tmp_path / "x.png",
        url=(tmp_path / "missing.png").as_uri(),
        app_name="A",
        image_type=ImageType.GRID,
    )
    with pytest.raises(OSError):
        download_to_download(job)


def test_remove_failed_downloads(tmp_path):
    good = tmp_path / "good.png"
    good.write_bytes(b"ok data")
    tiny = tmp_path / "tiny.png"
    tiny.write_bytes(b"x")
    absent = tmp_path / "absent.png"
    jobs = [
        ToDownload(path=p, url="", app_name="A", image_type=ImageType.LOGO)
        for p in (good, tiny, absent)
    ]
    removed = remove_failed_downloads(jobs)
    assert removed == [tiny, absent]
    assert good.exists()
    assert not tiny.exists()
    assert isinstance(removed[0], Path) and removed[0].name == "tiny.png"