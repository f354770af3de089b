"""Locating a game's artwork files in a user's grid folder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from .image_type import ImageType

POSSIBLE_EXTENSIONS = ("png", "jpg", "ico", "webp")
MAX_WIDTH = 300.0


class GameMode(Enum):
    """Whether artwork is managed for shortcuts or for Steam's own games."""

    SHORTCUTS = "shortcuts"
    STEAM_GAMES = "steam_games"

    def is_shortcuts(self) -> bool:
        return self is GameMode.SHORTCUTS

    def label(self) -> str:
        if self is GameMode.SHORTCUTS:
            return "Images for shortcuts"
        return "Images for steam games"


def _image_path(app_id: int, image_type: ImageType, user_path: Path, extension: str) -> Path:
    return user_path / "config" / "grid" / image_type.file_name(app_id, extension)


def image_key(
    app_id: int, image_type: ImageType, user_path: Union[str, Path]
) -> tuple[Path, str]:
    """Path of the existing image of this type, or of the default one, with its key."""
    user_path = Path(user_path)
    candidates = [
        _image_path(app_id, image_type, user_path, ext) for ext in POSSIBLE_EXTENSIONS
    ]
    path = next((p for p in candidates if p.exists()), candidates[0])
    return path, str(path)


def clear_images(
    app_id: int, image_type: ImageType, user_path: Union[str, Path]
) -> list[Path]:
    """Delete every image of this type for the app; return the removed paths."""
    removed = []
    for ext in POSSIBLE_EXTENSIONS:
        path = _image_path(app_id, image_type, Path(user_path), ext)
        if path.exists():
            try:
                path.unlink()
            except OSError:
                continue
            removed.append(path)
    return removed


@dataclass(frozen=True)
class GameEntry:
    """A shortcut or installed Steam game whose artwork can be picked."""

    app_id: int
    name: str

    def key(self, image_type: ImageType, user_path: Union[str, Path]) -> tuple[Path, str]:
        """Path and unique key of this game's image of the given type."""
        return image_key(self.app_id, image_type, user_path)