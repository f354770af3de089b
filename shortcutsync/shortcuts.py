"""Steam shortcuts managed by this tool and the steps of a synchronization."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence, Union

from .collections import BOILR_TAG, Collection
from .image_type import ImageType

_ICON_EXTENSIONS = ("ico", "png", "jpg", "webp")

PlatformShortcuts = Iterable[tuple[str, Sequence["Shortcut"]]]


@dataclass
class Shortcut:
    """A non-Steam game entry in a user's shortcuts file."""

    app_id: int
    app_name: str
    exe: str = ""
    start_dir: str = ""
    icon: str = ""
    shortcut_path: str = ""
    launch_options: str = ""
    tags: list[str] = field(default_factory=list)
    dev_kit_game_id: str = ""

    def is_boilr_shortcut(self) -> bool:
        """True if this shortcut was created by this tool."""
        return BOILR_TAG in self.tags or self.dev_kit_game_id.startswith(BOILR_TAG)


@dataclass(frozen=True)
class SyncProgress:
    """How far a synchronization has come."""

    class Stage(Enum):
        NOT_STARTED = "not_started"
        STARTING = "starting"
        FOUND_GAMES = "found_games"
        FINDING_IMAGES = "finding_images"
        DOWNLOADING_IMAGES = "downloading_images"
        DONE = "done"

    stage: "SyncProgress.Stage"
    count: int = 0

    @property
    def is_syncing(self) -> bool:
        """True while work is still going on."""
        return self.stage not in (SyncProgress.Stage.NOT_STARTED, SyncProgress.Stage.DONE)

    @property
    def message(self) -> str:
        """A short status line for display."""
        stage = self.stage
        if stage is SyncProgress.Stage.STARTING:
            return "Starting Import"
        if stage is SyncProgress.Stage.FOUND_GAMES:
            return f"Found {self.count} games to  import"
        if stage is SyncProgress.Stage.FINDING_IMAGES:
            return "Searching for images"
        if stage is SyncProgress.Stage.DOWNLOADING_IMAGES:
            return f"Downloading {self.count} images "
        if stage is SyncProgress.Stage.DONE:
            return "Done importing games"
        return ""


def remove_old_shortcuts(shortcuts: Iterable[Shortcut]) -> list[Shortcut]:
    """The shortcuts that this tool did not create."""
    return [s for s in shortcuts if not s.is_boilr_shortcut()]


def remove_shortcuts_with_same_appid(
    shortcuts: Iterable[Shortcut], new_shortcuts: Iterable[Shortcut]
) -> list[Shortcut]:
    """The shortcuts whose app id is not taken by one of the new shortcuts."""
    taken = {s.app_id for s in new_shortcuts}
    return [s for s in shortcuts if s.app_id not in taken]


def prepare_platform_shortcuts(
    platform_shortcuts: PlatformShortcuts, blacklisted_games: Iterable[int]
) -> list[Shortcut]:
    """All platform shortcuts not blacklisted, marked as created by this tool."""
    blacklist = set(blacklisted_games)
    return [
        replace(shortcut, tags=list(shortcut.tags), dev_kit_game_id=BOILR_TAG)
        for _name, shortcuts in platform_shortcuts
        for shortcut in shortcuts
        if shortcut.app_id not in blacklist
    ]


def merge_shortcuts(
    existing: Iterable[Shortcut], new_shortcuts: Sequence[Shortcut]
) -> list[Shortcut]:
    """Replace our old shortcuts and any clashing app ids with the new ones."""
    kept = remove_shortcuts_with_same_appid(remove_old_shortcuts(existing), new_shortcuts)
    kept.extend(new_shortcuts)
    return kept


def disconnect(shortcuts: Iterable[Shortcut], app_id: int) -> list[Shortcut]:
    """Release the shortcut with this app id from this tool's control."""
    return [
        replace(
            shortcut,
            dev_kit_game_id="",
            tags=[tag for tag in shortcut.tags if tag != BOILR_TAG],
        )
        if shortcut.app_id == app_id
        else shortcut
        for shortcut in shortcuts
    ]


def fix_shortcut_icons(
    user_data_folder: Union[str, Path],
    shortcuts: Iterable[Shortcut],
    big_picture_mode: bool,
) -> bool:
    """Point missing shortcut icons at downloaded artwork; True if any changed."""
    image_folder = Path(user_data_folder) / "config" / "grid"
    image_type = ImageType.BIG_PICTURE if big_picture_mode else ImageType.ICON
    has_changes = False
    for shortcut in shortcuts:
        if shortcut.icon and Path(shortcut.icon).exists():
            continue
        for extension in _ICON_EXTENSIONS:
            path = image_folder / image_type.file_name(shortcut.app_id, extension)
            if path.exists():
                shortcut.icon = str(path)
                has_changes = True
                break
    return has_changes


def platform_collections(platform_shortcuts: PlatformShortcuts) -> list[Collection]:
    """One collection per platform holding its shortcuts' app ids."""
    return [
        Collection(name=name, game_ids=[s.app_id for s in shortcuts])
        for name, shortcuts in platform_shortcuts
    ]