from __future__ import annotations

import logging

from adventure.core.models import Item, Session, UseEffect


logger = logging.getLogger(__name__)

NOTHING_HAPPENS = "Nothing happens."


def apply_use_effects(session: Session, item: Item) -> list[str]:
    """Fire every effect of ``item`` that is valid in the player's current room.

    Each effect is evaluated on its own and contributes at most one line. An
    item with no effect mapping at all yields a single "Nothing happens.".
    """
    if item.use_effects is None:
        return [NOTHING_HAPPENS]

    lines: list[str] = []
    for key, effect in item.use_effects.items():
        if not effect.applies_in(session.player.room_id):
            logger.debug("Effect %s of %s is not valid in room %s", key, item.name, session.player.room_id)
            lines.append(NOTHING_HAPPENS)
            continue
        line = _apply(session, effect)
        if line is not None:
            lines.append(line)
    return lines


def _apply(session: Session, effect: UseEffect) -> str | None:
    room = session.current_room

    if effect.action == "open":
        removed = room.items.take(effect.target)
        if removed is None:
            return None
        logger.debug("Opened %s in room %s", removed.name, room.room_id)
        return effect.message

    if effect.action == "unlock":
        path = room.paths.get(effect.target)
        if path is not None:
            path.locked = False
            logger.debug("Unlocked %s in room %s", effect.target, room.room_id)
        return effect.message

    return NOTHING_HAPPENS
