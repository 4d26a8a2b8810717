from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator


@dataclass(frozen=True)
class UseEffect:
    target: str
    action: str  # "open" | "unlock" | anything else is inert
    message: str = ""
    originating_room: int | None = None

    def applies_in(self, room_id: int) -> bool:
        return self.originating_room is None or self.originating_room == room_id


@dataclass(frozen=True)
class Item:
    name: str
    description: str = ""
    # None means the item has no effects at all, which differs from an empty mapping
    use_effects: dict[str, UseEffect] | None = None


@dataclass(frozen=True)
class Character:
    name: str
    dialogue: str = ""


@dataclass
class Path:
    room_id: int
    locked: bool = False


class ItemList:
    """Ordered item collection with first-match lookup by name."""

    def __init__(self, items: list[Item] | None = None):
        self._items: list[Item] = list(items or [])

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"ItemList({self._items!r})"

    def names(self) -> list[str]:
        return [item.name for item in self._items]

    def find(self, name: str) -> Item | None:
        return next((item for item in self._items if item.name == name), None)

    def remove_first(self, predicate: Callable[[Item], bool]) -> Item | None:
        for index, item in enumerate(self._items):
            if predicate(item):
                return self._items.pop(index)
        return None

    def take(self, name: str) -> Item | None:
        return self.remove_first(lambda item: item.name == name)

    def append(self, item: Item) -> None:
        self._items.append(item)


@dataclass
class Room:
    room_id: int
    description: str
    paths: dict[str, Path] = field(default_factory=dict)
    items: ItemList = field(default_factory=ItemList)
    characters: list[Character] = field(default_factory=list)

    def find_character(self, name: str) -> Character | None:
        return next((c for c in self.characters if c.name == name), None)


@dataclass
class World:
    starting_room: int
    rooms: dict[int, Room]


@dataclass
class Player:
    room_id: int
    inventory: ItemList = field(default_factory=ItemList)


@dataclass
class Session:
    world: World
    player: Player

    @classmethod
    def start(cls, world: World) -> "Session":
        return cls(world=world, player=Player(room_id=world.starting_room))

    @property
    def current_room(self) -> Room:
        return self.world.rooms[self.player.room_id]
