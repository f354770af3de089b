"""Locating the Steam installation and its per-user data folders."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .steam_settings import SteamSettings


class SteamPathError(Exception):
    """Raised when a Steam folder cannot be found."""


@dataclass(frozen=True)
class SteamUsersInfo:
    """A Steam user's data folder and, if present, their shortcuts file."""

    steam_user_data_folder: str
    shortcut_path: Optional[str]
    user_id: str


def _env(name: str) -> str:
    value = os.environ.get(name)
    if value is None:
        raise SteamPathError(f"Environment variable {name} is not set")
    return value


def get_default_location() -> str:
    """The usual Steam folder for this platform."""
    if sys.platform == "win32":
        return str(Path(_env("PROGRAMFILES(X86)")) / "Steam")
    home = Path(_env("HOME"))
    if sys.platform == "darwin":
        return str(home / "Library" / "Application Support" / "Steam")
    default_path = home / ".steam" / "steam"
    if default_path.exists():
        return str(default_path)
    return str(home / ".var" / "app" / "com.valvesoftware.Steam" / ".steam" / "steam")


def get_steam_path(settings: SteamSettings) -> str:
    """The configured Steam folder, or the platform default."""
    if settings.location is not None:
        return settings.location
    return get_default_location()


def get_shortcuts_paths(settings: SteamSettings) -> list[SteamUsersInfo]:
    """One entry per Steam user folder, with the shortcuts file if it exists."""
    steam_path = Path(get_steam_path(settings))
    if not steam_path.exists():
        raise SteamPathError(f"Steam folder not found at: {steam_path}")
    user_data_path = steam_path / "userdata"
    if not user_data_path.exists():
        raise SteamPathError(f"Steam user data folder not found at: {user_data_path}")

    users = []
    with os.scandir(user_data_path) as entries:
        folders = sorted(
            (e for e in entries if e.is_dir(follow_symlinks=False)),
            key=lambda e: e.name,
        )
    for folder in folders:
        if folder.name == "0":
            continue
        shortcuts_path = Path(folder.path) / "config" / "shortcuts.vdf"
        users.append(
            SteamUsersInfo(
                steam_user_data_folder=folder.path,
                shortcut_path=str(shortcuts_path) if shortcuts_path.exists() else None,
                user_id=folder.name,
            )
        )
    return users


def get_users_images(data_folder: str) -> list[str]:
    """File stems of the images in a user's grid folder, creating it if needed."""
    grid_folder = Path(data_folder) / "config" / "grid"
    grid_folder.mkdir(parents=True, exist_ok=True)
    return [Path(name).stem for name in sorted(os.listdir(grid_folder))]