"""Backing up and restoring users' shortcuts files."""

from __future__ import annotations

import shutil
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from .steam_paths import SteamPathError, get_shortcuts_paths
from .steam_settings import SteamSettings

_DATE_FORMAT = "%Y-%m-%d-%H-%M-%S"


def load_backups(backup_folder: Union[str, Path]) -> list[Path]:
    """The ``.vdf`` backups in a folder, newest name first."""
    try:
        files = [p for p in Path(backup_folder).iterdir() if p.suffix == ".vdf"]
    except OSError:
        return []
    return sorted(files, reverse=True)


def backup_shortcuts(
    steam_settings: SteamSettings, backup_folder: Union[str, Path]
) -> list[Path]:
    """Copy every user's shortcuts file into the backup folder; return the copies."""
    try:
        users = get_shortcuts_paths(steam_settings)
    except (SteamPathError, OSError):
        return []
    backup_folder = Path(backup_folder)
    backup_folder.mkdir(parents=True, exist_ok=True)
    date_string = datetime.now(timezone.utc).strftime(_DATE_FORMAT)
    created = []
    for user in users:
        if user.shortcut_path is None:
            continue
        new_path = backup_folder / f"{user.user_id}-{date_string}-shortcuts.vdf"
        try:
            shutil.copyfile(user.shortcut_path, new_path)
        except OSError as error:
            print(f"Failed to backup shortcut at: {new_path}, error: {error!r}", file=sys.stderr)
            continue
        print(f"Backed up shortcut at: {new_path}")
        created.append(new_path)
    return created


def restore_backup(steam_settings: SteamSettings, shortcut_path: Union[str, Path]) -> bool:
    """Copy a backup over the shortcuts file of the user it belongs to."""
    shortcut_path = Path(shortcut_path)
    file_name = shortcut_path.name
    if not file_name:
        return False
    try:
        users = get_shortcuts_paths(steam_settings)
    except (SteamPathError, OSError):
        return False
    for user in users:
        if user.shortcut_path is None or not file_name.startswith(user.user_id):
            continue
        try:
            shutil.copyfile(shortcut_path, user.shortcut_path)
        except OSError as error:
            print(
                f"Failed to restored shortcut to path : {user.shortcut_path} gave error: {error!r}",
                file=sys.stderr,
            )
        else:
            print(f"Restored shortcut to path : {user.shortcut_path}")
        return True
    return False