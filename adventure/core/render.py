from __future__ import annotations

from adventure.core.models import Room


def render_room(room: Room) -> list[str]:
    lines: list[str] = [room.description]
    lines.extend(f"{character.name} is here." for character in room.characters)
    lines.extend(f"There's a {item.name} here." for item in room.items)
    lines.extend(f"You can go {direction}." for direction in room.paths)
    return lines
