"""The kinds of artwork Steam shows for a game and how they are named."""

from __future__ import annotations

from enum import Enum

_STEAM_CDN = "https://cdn.cloudflare.steamstatic.com/steam/apps"


class ImageType(Enum):
    """An artwork kind; the value is its display name."""

    HERO = "Hero"
    GRID = "Grid"
    WIDE_GRID = "Wide Grid"
    LOGO = "Logo"
    BIG_PICTURE = "Big Picture"
    ICON = "Icon"

    @property
    def display_name(self) -> str:
        return self.value

    def file_name_no_extension(self, app_id: int) -> str:
        """File name Steam expects in the grid folder, without extension."""
        suffixes = {
            ImageType.HERO: "_hero",
            ImageType.GRID: "p",
            ImageType.WIDE_GRID: "",
            ImageType.LOGO: "_logo",
            ImageType.BIG_PICTURE: "_bigpicture",
            ImageType.ICON: "-icon",
        }
        return f"{app_id}{suffixes[self]}"

    def file_name(self, app_id: int, extension: str) -> str:
        """File name Steam expects in the grid folder."""
        return f"{self.file_name_no_extension(app_id)}.{extension}"

    def steam_url(self, steam_app_id: str, mtime: int) -> str:
        """URL of Steam's own artwork of this kind; empty for icons."""
        assets = {
            ImageType.HERO: "library_hero.jpg",
            ImageType.GRID: "library_600x900_2x.jpg",
            ImageType.WIDE_GRID: "header.jpg",
            ImageType.LOGO: "logo.png",
            ImageType.BIG_PICTURE: "header.jpg",
        }
        asset = assets.get(self)
        if asset is None:
            return ""
        return f"{_STEAM_CDN}/{steam_app_id}/{asset}?t={mtime}"


def all_types() -> tuple[ImageType, ...]:
    """Every image type, in the canonical order."""
    return (
        ImageType.HERO,
        ImageType.GRID,
        ImageType.WIDE_GRID,
        ImageType.LOGO,
        ImageType.BIG_PICTURE,
        ImageType.ICON,
    )