"""Settings that control how shortcuts are written into Steam."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

_FLAG_FIELDS = (
    "create_collections",
    "optimize_for_big_picture",
    "stop_steam",
    "start_steam",
)


@dataclass
class SteamSettings:
    """Where Steam lives and what to do with it during a synchronization."""

    location: Optional[str] = None
    create_collections: bool = False
    optimize_for_big_picture: bool = False
    stop_steam: bool = False
    start_steam: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a plain, JSON-ready dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SteamSettings":
        """Build settings from a mapping; every flag must be present and boolean."""
        location = data.get("location")
        if location is not None and not isinstance(location, str):
            raise ValueError("field `location` must be a string or null")
        flags: dict[str, bool] = {}
        for name in _FLAG_FIELDS:
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            value = data[name]
            if not isinstance(value, bool):
                raise ValueError(f"field `{name}` must be a boolean")
            flags[name] = value
        return cls(location=location, **flags)