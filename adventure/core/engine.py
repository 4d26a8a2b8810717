from __future__ import annotations

import logging

from adventure.core.effects import apply_use_effects
from adventure.core.models import Session
from adventure.core.render import render_room


logger = logging.getLogger(__name__)


def look(session: Session) -> list[str]:
    return render_room(session.current_room)


def go(session: Session, direction: str) -> list[str]:
    room = session.current_room
    path = room.paths.get(direction)
    if path is None:
        return ["You can't go in that direction."]
    if path.locked:
        return [f"The path to the {direction} is locked."]

    logger.debug("Moving %s from room %s to room %s", direction, room.room_id, path.room_id)
    session.player.room_id = path.room_id
    return [f"You move {direction}.", *look(session)]


def get_item(session: Session, name: str) -> list[str]:
    item = session.current_room.items.take(name)
    if item is None:
        return [f"There's no {name} here to pick up."]
    session.player.inventory.append(item)
    logger.debug("Picked up %s in room %s", name, session.player.room_id)
    return [f"You picked up the {name}."]


def drop_item(session: Session, name: str) -> list[str]:
    item = session.player.inventory.take(name)
    if item is None:
        return [f"You don't have a {name} in your inventory."]
    session.current_room.items.append(item)
    logger.debug("Dropped %s in room %s", name, session.player.room_id)
    return [f"You dropped the {name}."]


def use_item(session: Session, name: str) -> list[str]:
    item = session.player.inventory.find(name)
    if item is None:
        return [f"You don't have a {name} in your inventory."]
    return [f"You used the {name}.", *apply_use_effects(session, item)]


def show_inventory(session: Session) -> list[str]:
    inventory = session.player.inventory
    if not inventory:
        return ["Your inventory is empty."]
    return ["You have:", *(f"- {item.name}: {item.description}" for item in inventory)]


def talk_to(session: Session, name: str) -> list[str]:
    character = session.current_room.find_character(name)
    if character is None:
        return [f"{name} is not here."]
    return [f'{name}: "{character.dialogue}"']
