from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from adventure.core.aliases import DEFAULT_ALIASES, resolve_alias
from adventure.core.dispatcher import CommandResult, dispatch
from adventure.core.loader import load_world
from adventure.core.models import Session, World


logger = logging.getLogger(__name__)


class Game:
    """One play session over a loaded world."""

    def __init__(self, world: World, aliases: Mapping[str, str] = DEFAULT_ALIASES):
        self.aliases = dict(aliases)
        self.session = Session.start(world)

    @classmethod
    def from_path(cls, path: str | Path, aliases: Mapping[str, str] = DEFAULT_ALIASES) -> "Game":
        return cls(load_world(path), aliases)

    def intro(self) -> str:
        return self.session.current_room.description

    def handle(self, raw: str) -> CommandResult:
        command = resolve_alias(raw, self.aliases)
        if command != raw:
            logger.debug("Resolved %r to %r", raw, command)
        return dispatch(self.session, command)
