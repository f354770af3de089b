"""Choosing which artwork to fetch and downloading it into the grid folder."""

from __future__ import annotations

import sys
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Collection, Iterable, Mapping, Optional, Sequence

from .image_type import ImageType
from .shortcuts import Shortcut

CONCURRENT_REQUESTS = 10

_MIME_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/vnd.microsoft.icon": "ico",
}

_ICON_CDN = "https://cdn.cloudflare.steamstatic.com/steamcommunity/public/images/apps"


@dataclass(frozen=True)
class ToDownload:
    """An image to fetch from a URL and store at a path."""

    path: Path
    url: str
    app_name: str
    image_type: ImageType


def get_image_extension(mime: str) -> str:
    """File extension for a SteamGridDB image MIME type."""
    try:
        return _MIME_EXTENSIONS[mime]
    except KeyError:
        raise ValueError(f"unknown image mime type: {mime!r}") from None


def icon_url(steam_app_id: str, icon_id: str) -> str:
    """URL of a Steam game's client icon."""
    return f"{_ICON_CDN}/{steam_app_id}/{icon_id}.ico"


def _is_u64(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < 2**64


def _steam_platform(response: Any) -> Optional[Mapping[str, Any]]:
    """The validated ``steam`` platform entry of a public game response."""
    if not isinstance(response, Mapping) or not isinstance(response.get("success"), bool):
        return None
    data = response.get("data")
    if data is None or not isinstance(data, Mapping):
        return None
    platforms = data.get("platforms")
    if platforms is None or not isinstance(platforms, Mapping):
        return None
    steam = platforms.get("steam")
    if steam is None or not isinstance(steam, Mapping):
        return None
    if not isinstance(steam.get("id"), str):
        return None
    metadata = steam.get("metadata")
    if metadata is not None:
        if not isinstance(metadata, Mapping):
            return None
        mtime = metadata.get("store_asset_mtime")
        if mtime is not None and not _is_u64(mtime):
            return None
        clienticon = metadata.get("clienticon")
        if clienticon is not None and not isinstance(clienticon, str):
            return None
    return steam


def steam_image_url_from_response(
    response: Mapping[str, Any], image_type: ImageType
) -> Optional[str]:
    """Steam's own artwork URL from a SteamGridDB public game response."""
    steam = _steam_platform(response)
    if steam is None:
        return None
    metadata = steam.get("metadata") or {}
    mtime = metadata.get("store_asset_mtime")
    if mtime is None:
        return None
    return image_type.steam_url(steam["id"], mtime)


def steam_icon_url_from_response(response: Mapping[str, Any]) -> Optional[str]:
    """Steam's client icon URL from a SteamGridDB public game response."""
    steam = _steam_platform(response)
    if steam is None:
        return None
    metadata = steam.get("metadata") or {}
    clienticon = metadata.get("clienticon")
    if clienticon is None:
        return None
    return icon_url(steam["id"], clienticon)


def image_types_to_download(big_picture: bool) -> list[ImageType]:
    """The image types to look for, in search order."""
    types = [
        ImageType.LOGO,
        ImageType.HERO,
        ImageType.GRID,
        ImageType.WIDE_GRID,
        ImageType.ICON,
    ]
    if big_picture:
        types.append(ImageType.BIG_PICTURE)
    return types


def shortcuts_needing_images(
    shortcuts: Iterable[Shortcut],
    known_images: Collection[str],
    types: Sequence[ImageType],
    only_boilr: bool,
) -> list[Shortcut]:
    """Named shortcuts that lack at least one of the image types."""
    return [
        shortcut
        for shortcut in shortcuts
        if (not only_boilr or shortcut.is_boilr_shortcut())
        and shortcut.app_name
        and any(
            t.file_name_no_extension(shortcut.app_id) not in known_images for t in types
        )
    ]


def images_needed(
    shortcuts: Iterable[Shortcut],
    search_results: Mapping[int, int],
    known_images: Collection[str],
    image_type: ImageType,
    is_banned: Callable[[ImageType, int], bool],
) -> list[tuple[Shortcut, int]]:
    """Shortcuts still missing this image type, paired with their grid ids."""
    return [
        (shortcut, search_results[shortcut.app_id])
        for shortcut in shortcuts
        if shortcut.app_id in search_results
        and not is_banned(image_type, shortcut.app_id)
        and image_type.file_name_no_extension(shortcut.app_id) not in known_images
    ]


def download_to_download(to_download: ToDownload) -> None:
    """Fetch the image and write it to its path."""
    print(
        f"Downloading {to_download.image_type.display_name} for "
        f"{to_download.app_name} to {to_download.path}"
    )
    with open(to_download.path, "wb") as file:
        with urllib.request.urlopen(to_download.url) as response:
            file.write(response.read())


def remove_failed_downloads(to_downloads: Iterable[ToDownload]) -> list[Path]:
    """Delete downloaded files too small to be images; return their paths."""
    removed = []
    for to_download in to_downloads:
        path = Path(to_download.path)
        try:
            size = path.stat().st_size
        except OSError:
            size = 0
        if size < 2:
            try:
                path.unlink()
            except FileNotFoundError:
                pass
            except OSError as error:
                print(f"Could not remove {path}: {error!r}", file=sys.stderr)
                continue
            removed.append(path)
    return removed