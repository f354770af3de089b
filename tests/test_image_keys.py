from pathlib import Path

from shortcutsync.image_keys import (
    POSSIBLE_EXTENSIONS,
    GameEntry,
    GameMode,
    clear_images,
    image_key,
)
from shortcutsync.image_type import ImageType


def test_game_mode_labels():
    assert GameMode.SHORTCUTS.label() == "Images for shortcuts"
    assert GameMode.STEAM_GAMES.label() == "Images for steam games"


def test_game_mode_is_shortcuts():
    assert GameMode.SHORTCUTS.is_shortcuts()
    assert not GameMode.STEAM_GAMES.is_shortcuts()


def test_key_defaults_to_first_extension(tmp_path: Path):
    path, key = image_key(5, ImageType.GRID, tmp_path)
    expected = tmp_path / "config" / "grid" / ImageType.GRID.file_name(5, POSSIBLE_EXTENSIONS[0])
    assert path == expected
    assert key == str(expected)


def test_key_finds_existing(tmp_path: Path):
    grid = tmp_path / "config" / "grid"
    grid.mkdir(parents=True)
    existing = grid / ImageType.HERO.file_name(5, "webp")
    existing.write_bytes(b"x")
    path, key = image_key(5, ImageType.HERO, tmp_path)
    assert path == existing
    assert key == str(existing)


def test_game_entry_key_matches(tmp_path: Path):
    entry = GameEntry(9, "Game")
    assert entry.key(ImageType.LOGO, tmp_path) == image_key(9, ImageType.LOGO, tmp_path)


def test_clear_images(tmp_path: Path):
    grid = tmp_path / "config" / "grid"
    grid.mkdir(parents=True)
    for ext in ("png", "jpg"):
        (grid / ImageType.ICON.file_name(3, ext)).write_bytes(b"x")
    keep = grid / ImageType.GRID.file_name(3, "png")
    keep.write_bytes(b"x")
    removed = clear_images(3, ImageType.ICON, tmp_path)
    assert len(removed) == 2
    assert not any(p.exists() for p in removed)
    assert keep.exists()


def test_clear_images_nothing(tmp_path: Path):
    assert clear_images(3, ImageType.ICON, tmp_path) == []