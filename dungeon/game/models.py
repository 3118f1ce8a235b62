from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RoomId(str, Enum):
    CELL = "cell"
    HALLWAY = "hallway"
    ARMORY = "armory"


class ItemId(str, Enum):
    STONE = "stone"
    KEY = "key"
    SWORD = "sword"


class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass(frozen=True)
class RevealItem:
    """Examine-effect: put a hidden item into a room the first time it fires."""

    room_id: RoomId
    item_id: ItemId
    found_text: str
    already_text: str


@dataclass(frozen=True)
class Item:
    item_id: ItemId
    name: str
    description: str
    takeable: bool
    on_examine: RevealItem | None = None


@dataclass(frozen=True)
class RoomDef:
    room_id: RoomId
    name: str
    description: str
    exits: dict[Direction, RoomId]
    blocked_exits: dict[Direction, str]
    items: tuple[ItemId, ...] = ()


@dataclass(frozen=True)
class UnblockExit:
    room_id: RoomId
    direction: Direction


@dataclass(frozen=True)
class UseRule:
    item_id: ItemId
    target: str
    required_room: RoomId
    effect: UnblockExit
    message: str
    escapes: bool = False


@dataclass(frozen=True)
class World:
    start_room: RoomId
    items: dict[ItemId, Item]
    rooms: dict[RoomId, RoomDef]
    use_rules: tuple[UseRule, ...]


@dataclass
class Room:
    """Per-session copy of a room: item placement and blocked exits change."""

    room_id: RoomId
    name: str
    description: str
    exits: dict[Direction, RoomId]
    blocked_exits: dict[Direction, str]
    items: list[ItemId] = field(default_factory=list)

    @classmethod
    def from_def(cls, room: RoomDef) -> "Room":
        return cls(
            room_id=room.room_id,
            name=room.name,
            description=room.description,
            exits=dict(room.exits),
            blocked_exits=dict(room.blocked_exits),
            items=list(room.items),
        )


@dataclass
class Player:
    current_room: RoomId
    inventory: list[ItemId] = field(default_factory=list)


def parse_enum(enum_cls, value: str):
    try:
        return enum_cls(value)
    except ValueError:
        return None
