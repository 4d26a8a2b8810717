from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from adventure.core import engine
from adventure.core.models import Session


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    lines: list[str] = field(default_factory=list)
    terminate: bool = False

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


# verb -> (handler, prompt shown when the argument is missing)
_ITEM_VERBS: dict[str, tuple[Callable[[Session, str], list[str]], str]] = {
    "use": (engine.use_item, "What would you like to use?"),
    "get": (engine.get_item, "What would you like to get?"),
    "drop": (engine.drop_item, "What would you like to drop?"),
}


def dispatch(session: Session, command: str) -> CommandResult:
    """Route a canonical command to its verb handler."""
    parts = command.split()
    if not parts:
        return CommandResult(["Please enter a command."])

    verb, args = parts[0], parts[1:]
    logger.debug("Dispatching verb %r with args %r", verb, args)

    if verb == "look":
        return CommandResult(engine.look(session))

    if verb in _ITEM_VERBS:
        handler, prompt = _ITEM_VERBS[verb]
        if not args:
            return CommandResult([prompt])
        return CommandResult(handler(session, " ".join(args)))

    if verb == "go":
        if not args:
            return CommandResult(["Where would you like to go?"])
        return CommandResult(engine.go(session, args[0]))

    if verb == "inventory":
        return CommandResult(engine.show_inventory(session))

    if verb == "talk":
        if len(parts) < 3 or parts[1] != "to":
            return CommandResult(["Who would you like to talk to?"])
        return CommandResult(engine.talk_to(session, " ".join(parts[2:])))

    if verb == "quit":
        return CommandResult(["Goodbye!"], terminate=True)

    return CommandResult(["I don't understand that command."])
