"""Settings for fetching artwork from SteamGridDB."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .image_type import ImageType


def _ban_id(image_type: ImageType, app_id: int) -> str:
    return f"{app_id}-{image_type.display_name}"


@dataclass
class SteamGridDbSettings:
    """What to download from SteamGridDB and which images never to fetch."""

    enabled: bool = False
    auth_key: Optional[str] = None
    prefer_animated: bool = False
    banned_images: list[str] = field(default_factory=list)
    only_download_boilr_images: bool = False
    allow_nsfw: bool = False

    def is_image_banned(self, image_type: ImageType, app_id: int) -> bool:
        """True if this kind of image must not be downloaded for the app."""
        return _ban_id(image_type, app_id) in self.banned_images

    def set_image_banned(
        self, image_type: ImageType, app_id: int, should_ban: bool
    ) -> None:
        """Add or remove the ban for this kind of image on the app."""
        ban_id = _ban_id(image_type, app_id)
        is_banned = ban_id in self.banned_images
        if is_banned and not should_ban:
            self.banned_images = [b for b in self.banned_images if b != ban_id]
        elif should_ban and not is_banned:
            self.banned_images.append(ban_id)