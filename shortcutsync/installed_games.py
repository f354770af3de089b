"""Discovery of games installed through Steam itself."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .steam_paths import SteamPathError, get_steam_path
from .steam_settings import SteamSettings

_UNSIGNED_32 = re.compile(r"\+?[0-9]+")
_MAX_U32 = 0xFFFFFFFF


@dataclass(frozen=True)
class SteamGameInfo:
    """An installed Steam game."""

    appid: int
    name: str


def _lines(text: str) -> Iterator[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def _quoted_value(line: str, start: int) -> Optional[str]:
    end = len(line) - 1
    if end < start:
        return None
    return line[start:end]


def _parse_u32(text: Optional[str]) -> Optional[int]:
    if text is None or not _UNSIGNED_32.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_U32 else None


def parse_manifest_string(text: str) -> Optional[SteamGameInfo]:
    """Read app id and name from an app manifest; None if either is missing."""
    lines = _lines(text)
    appid = None
    for line in lines:
        if '"appid"' in line:
            appid = _parse_u32(_quoted_value(line, 11))
            break
    name = None
    for line in lines:
        if '"name"' in line:
            name = _quoted_value(line, 10)
            break
    if appid is None or name is None:
        return None
    return SteamGameInfo(appid=appid, name=name)


def parse_manifest_file(path: Path) -> Optional[SteamGameInfo]:
    """Parse an ``.acf`` manifest file; other files and unreadable ones give None."""
    path = Path(path)
    if path.suffix != ".acf":
        return None
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return parse_manifest_string(content)


def get_install_folders(settings: SteamSettings) -> list[Path]:
    """The ``steamapps`` folders of every Steam library."""
    try:
        steam_path = Path(get_steam_path(settings))
    except SteamPathError:
        return []
    vdf_path = steam_path / "steamapps" / "libraryfolders.vdf"
    if not vdf_path.exists():
        return [steam_path / "steamapps"]
    try:
        content = vdf_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    folders = []
    for line in _lines(content):
        if '"path"' in line:
            library = _quoted_value(line, 11)
            if library is not None:
                folders.append(Path(library) / "steamapps")
    return folders


def get_installed_games(settings: SteamSettings) -> list[SteamGameInfo]:
    """All installed Steam games, sorted by name."""
    games = []
    for folder in get_install_folders(settings):
        try:
            entries = sorted(folder.iterdir())
        except OSError:
            continue
        for entry in entries:
            info = parse_manifest_file(entry)
            if info is not None:
                games.append(info)
    games.sort(key=lambda game: game.name)
    return games