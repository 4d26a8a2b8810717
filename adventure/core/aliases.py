from __future__ import annotations

from typing import Mapping


DEFAULT_ALIASES: dict[str, str] = {
    "pick up": "get",
    "inv": "inventory",
    "i": "inventory",
    "move": "go",
    "north": "go north",
    "south": "go south",
    "east": "go east",
    "west": "go west",
    "up": "go up",
    "down": "go down",
    "n": "go north",
    "s": "go south",
    "e": "go east",
    "w": "go west",
    "talk": "talk to",
}


def build_alias_table(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    table = dict(DEFAULT_ALIASES)
    if overrides:
        table.update({str(k): str(v) for k, v in overrides.items()})
    return table


def _already_expanded(command: str, canonical: str) -> bool:
    if not command.startswith(canonical):
        return False
    rest = command[len(canonical):]
    return not rest or rest[0].isspace()


def resolve_alias(command: str, aliases: Mapping[str, str] = DEFAULT_ALIASES) -> str:
    """Expand a raw input line into its canonical command.

    An exact alias wins outright. Otherwise the longest alias that prefixes the
    input is expanded and the rest of the input is appended after a single
    space. Input that matches nothing is returned unchanged.
    """
    if command in aliases:
        return aliases[command]

    # sorted() is stable, so equal-length aliases keep declaration order
    for alias in sorted(aliases, key=len, reverse=True):
        if not command.startswith(alias):
            continue
        canonical = aliases[alias]
        if _already_expanded(command, canonical):
            return command
        remainder = command[len(alias):].lstrip()
        if not remainder:
            return canonical
        return f"{canonical} {remainder}"

    return command
