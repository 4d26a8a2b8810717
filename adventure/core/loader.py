from __future__ import annotations

import json
import logging
from pathlib import Path as FilePath
from typing import Any

from adventure.core.models import Character, Item, ItemList, Path, Room, UseEffect, World


logger = logging.getLogger(__name__)


class WorldError(ValueError):
    """Raised when a world description is structurally invalid."""


def _load_json(path: FilePath) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _require(record: Any, key: str, where: str) -> Any:
    if not isinstance(record, dict):
        raise WorldError(f"{where} must be an object")
    if key not in record:
        raise WorldError(f"{where} is missing '{key}'")
    return record[key]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_str(record: Any, key: str, where: str) -> str:
    value = _require(record, key, where)
    if not isinstance(value, str):
        raise WorldError(f"{where} '{key}' must be a string")
    return value


def _optional(record: dict[str, Any], key: str, kind: type, where: str) -> None:
    value = record.get(key)
    if value is not None and not isinstance(value, kind):
        raise WorldError(f"{where} '{key}' must be of type {kind.__name__}")


def validate_world(world_data: Any) -> None:
    if not isinstance(world_data, dict):
        raise WorldError("world description must be an object")

    start_room = _require(world_data, "startingRoom", "world")
    if not _is_int(start_room):
        raise WorldError("startingRoom must be an integer")

    rooms = _require(world_data, "rooms", "world")
    if not isinstance(rooms, list):
        raise WorldError("rooms must be a list")

    room_ids: set[int] = set()
    for index, room in enumerate(rooms):
        room_id = _require(room, "id", f"room #{index}")
        if not _is_int(room_id):
            raise WorldError(f"room #{index} id must be an integer")
        if room_id in room_ids:
            raise WorldError(f"duplicate room id {room_id}")
        room_ids.add(room_id)
        _require_str(room, "description", f"room {room_id}")

    if start_room not in room_ids:
        raise WorldError(f"startingRoom {start_room} does not exist")

    for room in rooms:
        room_id = room["id"]

        paths = room.get("paths", {})
        if not isinstance(paths, dict):
            raise WorldError(f"paths in room {room_id} must be an object")
        for direction, path in paths.items():
            where = f"path {direction} in room {room_id}"
            target = _require(path, "roomID", where)
            if not _is_int(target):
                raise WorldError(f"{where} 'roomID' must be an integer")
            if target not in room_ids:
                raise WorldError(f"{where} points to unknown room {target}")
            _optional(path, "isLocked", bool, where)

        items = room.get("items", [])
        if not isinstance(items, list):
            raise WorldError(f"items in room {room_id} must be a list")
        for item in items:
            name = _require_str(item, "name", f"item in room {room_id}")
            _optional(item, "description", str, f"item {name}")
            effects = item.get("useEffects")
            if effects is None:
                continue
            if not isinstance(effects, dict):
                raise WorldError(f"useEffects of {name} in room {room_id} must be an object")
            for key, effect in effects.items():
                where = f"effect {key} of {name}"
                _require_str(effect, "target", where)
                _require_str(effect, "action", where)
                _optional(effect, "message", str, where)
                origin = effect.get("originatingRoomID")
                if origin is None:
                    continue
                if not _is_int(origin):
                    raise WorldError(f"{where} 'originatingRoomID' must be an integer")
                if origin not in room_ids:
                    logger.warning("%s is bound to unknown room %s and will never fire", where, origin)

        characters = room.get("characters") or []
        if not isinstance(characters, list):
            raise WorldError(f"characters in room {room_id} must be a list")
        for character in characters:
            name = _require_str(character, "name", f"character in room {room_id}")
            _optional(character, "dialogue", str, f"character {name}")


def _parse_item(item: dict[str, Any]) -> Item:
    effects = item.get("useEffects")
    use_effects = None
    if effects is not None:
        use_effects = {
            key: UseEffect(
                target=e["target"],
                action=e["action"],
                message=e.get("message") or "",
                originating_room=e.get("originatingRoomID"),
            )
            for key, e in effects.items()
        }
    return Item(
        name=item["name"],
        description=item.get("description") or "",
        use_effects=use_effects,
    )


def parse_world(data: dict[str, Any]) -> World:
    validate_world(data)

    rooms: dict[int, Room] = {}
    for room in data["rooms"]:
        rooms[room["id"]] = Room(
            room_id=room["id"],
            description=room["description"],
            paths={
                direction: Path(room_id=p["roomID"], locked=p.get("isLocked") is True)
                for direction, p in (room.get("paths") or {}).items()
            },
            items=ItemList([_parse_item(i) for i in room.get("items") or []]),
            characters=[
                Character(name=c["name"], dialogue=c.get("dialogue") or "")
                for c in room.get("characters") or []
            ],
        )

    return World(starting_room=data["startingRoom"], rooms=rooms)


def load_world(path: str | FilePath) -> World:
    path = FilePath(path)
    world = parse_world(_load_json(path))
    logger.info("Loaded %d rooms from %s", len(world.rooms), path)
    return world
