"""Steam library collections: the cloud-storage category format and the VDF copy."""

from __future__ import annotations

import base64
import json
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

BOILR_TAG = "boilr"
_CATEGORY_PREFIX = "\x01"
_USER_COLLECTIONS = "user-collections."
_VDF_KEY = '\t"user-collections"\t\t'
_MAX_U64 = 2**64 - 1


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _is_uint(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= _MAX_U64
    )


def _require(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise ValueError(f"missing field `{name}`")
    return data[name]


def _require_str(data: Mapping[str, Any], name: str) -> str:
    value = _require(data, name)
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


def _require_uint(data: Mapping[str, Any], name: str) -> int:
    value = _require(data, name)
    if not _is_uint(value):
        raise ValueError(f"field `{name}` must be a non-negative integer")
    return value


def _optional_str(data: Mapping[str, Any], name: str) -> Optional[str]:
    value = data.get(name)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string or null")
    return value


def _require_uint_list(data: Mapping[str, Any], name: str) -> list[int]:
    value = _require(data, name)
    if not isinstance(value, list) or not all(_is_uint(v) for v in value):
        raise ValueError(f"field `{name}` must be a list of non-negative integers")
    return list(value)


@dataclass
class Collection:
    """A named group of game ids to show as a Steam collection."""

    name: str
    game_ids: list[int] = field(default_factory=list)


@dataclass
class ValueCollection:
    """The inner value stored for a custom collection."""

    id: str
    name: str
    added: list[int]
    removed: list[int] = field(default_factory=list)


@dataclass
class SteamCollection:
    """A live collection entry in a Steam cloud-storage category."""

    key: str
    timestamp: int
    value: str
    conflict_resolution_method: Optional[str] = None
    str_method_id: Optional[str] = None
    version: Optional[str] = None

    def is_boilr_collection(self) -> bool:
        """True if this collection was created by this tool."""
        return f"{_USER_COLLECTIONS}{BOILR_TAG}" in self.key

    def _as_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "key": self.key,
            "timestamp": self.timestamp,
            "value": self.value,
        }
        if self.conflict_resolution_method is not None:
            result["conflictResolutionMethod"] = self.conflict_resolution_method
        if self.str_method_id is not None:
            result["strMethodId"] = self.str_method_id
        if self.version is not None:
            result["version"] = self.version
        return result

    def to_json(self) -> str:
        """Compact JSON as Steam stores it."""
        return _compact(self._as_dict())

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "SteamCollection":
        return cls(
            key=_require_str(data, "key"),
            timestamp=_require_uint(data, "timestamp"),
            value=_require_str(data, "value"),
            conflict_resolution_method=_optional_str(data, "conflictResolutionMethod"),
            str_method_id=_optional_str(data, "strMethodId"),
            version=_optional_str(data, "version"),
        )


@dataclass
class DeletedCollection:
    """A tombstone left behind for a deleted collection."""

    key: str
    timestamp: int
    is_deleted: bool
    version: str

    def is_boilr_collection(self) -> bool:
        """Deleted collections are never treated as ours."""
        return False

    def _as_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "timestamp": self.timestamp,
            "is_deleted": self.is_deleted,
            "version": self.version,
        }

    def to_json(self) -> str:
        """Compact JSON as Steam stores it."""
        return _compact(self._as_dict())

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "DeletedCollection":
        is_deleted = _require(data, "is_deleted")
        if not isinstance(is_deleted, bool):
            raise ValueError("field `is_deleted` must be a boolean")
        return cls(
            key=_require_str(data, "key"),
            timestamp=_require_uint(data, "timestamp"),
            is_deleted=is_deleted,
            version=_require_str(data, "version"),
        )


AnyCollection = Union[SteamCollection, DeletedCollection]
Category = list[tuple[str, AnyCollection]]


@dataclass
class VdfCollection:
    """A collection as mirrored in the user's ``localconfig.vdf``."""

    id: str
    added: list[int]
    removed: list[int] = field(default_factory=list)


def name_to_key(name: str) -> str:
    """Stable collection id derived from a collection name."""
    encoded = base64.b64encode(name.encode("utf-8")).decode("ascii").rstrip("=")
    return f"{BOILR_TAG}-{encoded}"


def serialize_collection_value(name: str, game_ids: Sequence[int]) -> str:
    """The JSON value string stored inside a custom collection."""
    value = ValueCollection(
        id=name_to_key(name), name=name, added=list(game_ids), removed=[]
    )
    return _compact(asdict(value))


def new_steam_collection(
    name: str, game_ids: Sequence[int], timestamp: Optional[int] = None
) -> SteamCollection:
    """A fresh custom collection; the timestamp defaults to now."""
    if timestamp is None:
        timestamp = int(time.time())
    return SteamCollection(
        key=f"{_USER_COLLECTIONS}{name_to_key(name)}",
        timestamp=timestamp,
        value=serialize_collection_value(name, game_ids),
        conflict_resolution_method="custom",
        str_method_id="union-collections",
    )


def _parse_collection(data: Any) -> AnyCollection:
    if isinstance(data, dict):
        for kind in (SteamCollection, DeletedCollection):
            try:
                return kind._from_dict(data)
            except ValueError:
                continue
    raise ValueError("data did not match any variant of a steam collection")


def parse_steam_collections(text: str) -> Category:
    """Parse a stored category: a list of ``[key, collection]`` pairs."""
    if text.startswith(_CATEGORY_PREFIX):
        text = text[len(_CATEGORY_PREFIX):]
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("a category must be a JSON array")
    result: Category = []
    for entry in data:
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError("a category entry must be a pair")
        key, value = entry
        if not isinstance(key, str):
            raise ValueError("a category key must be a string")
        result.append((key, _parse_collection(value)))
    return result


def dump_category(collections: Iterable[tuple[str, AnyCollection]]) -> str:
    """Serialize a category the way Steam stores it, with its prefix byte."""
    body = _compact([[key, collection._as_dict()] for key, collection in collections])
    return f"{_CATEGORY_PREFIX}{body}"


def merge_category(
    collections: Iterable[tuple[str, AnyCollection]],
    new_collections: Iterable[SteamCollection],
) -> Category:
    """Drop our old collections from a category and append the new ones."""
    merged: Category = [
        (key, collection)
        for key, collection in collections
        if not collection.is_boilr_collection()
    ]
    merged.extend((collection.key, collection) for collection in new_collections)
    return merged


def get_steam_user_prefix(steamid: str) -> str:
    """Database key prefix of a user's cloud-storage namespaces."""
    return (
        "_https://steamloopback.host\x00\x01U"
        f"{steamid}-cloud-storage-namespace"
    )


def _is_i32(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and -(2**31) <= value < 2**31
    )


def namespace_keys(
    steamid: str, namespaces_value: Union[str, bytes, None]
) -> set[str]:
    """Database keys of the collection categories listed in a namespaces value."""
    if namespaces_value is None:
        return set()
    if isinstance(namespaces_value, bytes):
        namespaces_value = namespaces_value.decode("utf-8", errors="replace")
    if not namespaces_value or len(namespaces_value[0].encode("utf-8")) != 1:
        return set()
    try:
        namespaces = json.loads(namespaces_value[1:])
    except ValueError:
        return set()
    if not isinstance(namespaces, list):
        return set()
    ids = []
    for entry in namespaces:
        if (
            not isinstance(entry, list)
            or len(entry) != 2
            or not _is_i32(entry[0])
            or not isinstance(entry[1], str)
        ):
            return set()
        ids.append(entry[0])
    prefix = get_steam_user_prefix(steamid)
    return {f"{prefix}-{namespace_id}" for namespace_id in ids}


def parse_vdf_collection(text: str) -> Optional[dict[str, VdfCollection]]:
    """Parse the collections JSON held in ``localconfig.vdf``; None if invalid."""
    try:
        data = json.loads(text)
        if not isinstance(data, dict):
            return None
        result = {}
        for key, value in data.items():
            if not isinstance(value, dict):
                return None
            result[key] = VdfCollection(
                id=_require_str(value, "id"),
                added=_require_uint_list(value, "added"),
                removed=_require_uint_list(value, "removed"),
            )
        return result
    except ValueError:
        return None


def replace_boilr_vdf_collections(
    vdf_collections: Mapping[str, VdfCollection], collections: Iterable[Collection]
) -> dict[str, VdfCollection]:
    """Remove our old VDF collections and add one per given collection."""
    result = {
        key: value for key, value in vdf_collections.items() if BOILR_TAG not in key
    }
    for collection in collections:
        key = name_to_key(collection.name)
        result[key] = VdfCollection(id=key, added=list(collection.game_ids), removed=[])
    return result


def write_vdf_collection_to_string(
    text: str, vdf: Mapping[str, VdfCollection]
) -> Optional[str]:
    """Replace the user-collections line of a VDF text; None if it is absent."""
    serialized = _compact({key: asdict(value) for key, value in vdf.items()})
    encoded = '"' + serialized.replace("\\", '\\"') + '"'
    start = text.find(_VDF_KEY)
    if start < 0:
        return None
    value_start = start + len(_VDF_KEY)
    line_end = text.find("\n", value_start)
    if line_end < 0:
        return None
    return f"{text[:value_start]}{encoded}{text[line_end:]}"