"""A persistent cache of SteamGridDB game ids found by name search."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence, Union

_MAX_U32 = 0xFFFFFFFF


class _SearchClient(Protocol):
    def search(self, query: str) -> Sequence[Any]: ...


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _load(path: Path) -> dict[int, tuple[str, int]]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    result: dict[int, tuple[str, int]] = {}
    for key, value in data.items():
        if not key.isdigit() or int(key) > _MAX_U32:
            return {}
        if (
            not isinstance(value, list)
            or len(value) != 2
            or not isinstance(value[0], str)
            or not _is_uint(value[1])
        ):
            return {}
        result[int(key)] = (value[0], value[1])
    return result


class CachedSearch:
    """Maps app ids to SteamGridDB game ids, remembering results in a file."""

    def __init__(self, client: _SearchClient, cache_file: Union[str, Path]) -> None:
        self._client = client
        self._cache_file = Path(cache_file)
        self._search_map = _load(self._cache_file)

    def save(self) -> None:
        """Write the cache to its file; failures are reported, not raised."""
        content = json.dumps(
            {str(app_id): [name, grid_id] for app_id, (name, grid_id) in self._search_map.items()},
            separators=(",", ":"),
            ensure_ascii=False,
        )
        try:
            self._cache_file.write_text(content, encoding="utf-8")
        except OSError as error:
            print(f"Failed saving searchmap : {error!r}", file=sys.stderr)

    def set_cache(self, app_id: int, name: str, grid_id: int) -> None:
        """Record the grid id for an app and save immediately."""
        self._search_map[app_id] = (name, grid_id)
        self.save()

    def search(self, app_id: int, query: str) -> Optional[int]:
        """The grid id for an app, searching by name if it is not cached."""
        cached = self._search_map.get(app_id)
        if cached is not None:
            return cached[1]
        print(f"Searching for {query}")
        results = self._client.search(query)
        if not results:
            return None
        first = results[0]
        grid_id = first["id"] if isinstance(first, dict) else first.id
        self._search_map[app_id] = (query, grid_id)
        return grid_id