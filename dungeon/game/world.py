from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from dungeon.game.models import Direction, Item, ItemId, Player, Room, RoomId, World


logger = logging.getLogger(__name__)


class Placement(Enum):
    IN_INVENTORY = "inventory"
    NOWHERE = "nowhere"


@dataclass(frozen=True)
class InRoom:
    room_id: RoomId


IN_INVENTORY = Placement.IN_INVENTORY
NOWHERE = Placement.NOWHERE

ItemLocation = InRoom | Placement


class WorldState:
    """Mutable state of one play-through.

    Built fresh from the static World for every session. An item id lives in
    at most one place: a single room, the inventory, or nowhere yet.
    """

    def __init__(self, world: World):
        self.world = world
        self.rooms: dict[RoomId, Room] = {rid: Room.from_def(r) for rid, r in world.rooms.items()}
        self.player = Player(current_room=world.start_room)
        self.triggered_effects: set[ItemId] = set()

    def item(self, item_id: ItemId) -> Item:
        return self.world.items[item_id]

    def current_room(self) -> Room:
        return self.rooms[self.player.current_room]

    def move_to(self, room_id: RoomId) -> None:
        self.player.current_room = room_id

    def item_location(self, item_id: ItemId) -> ItemLocation:
        if item_id in self.player.inventory:
            return IN_INVENTORY
        for room in self.rooms.values():
            if item_id in room.items:
                return InRoom(room.room_id)
        return NOWHERE

    def reveal_item(self, room_id: RoomId, item_id: ItemId) -> bool:
        if self.item_location(item_id) is not NOWHERE:
            logger.debug("item %s already revealed", item_id.value)
            return False
        self.rooms[room_id].items.append(item_id)
        return True

    def unblock_exit(self, room_id: RoomId, direction: Direction) -> None:
        self.rooms[room_id].blocked_exits.pop(direction, None)

    def take_item(self, item_id: ItemId) -> None:
        location = self.item_location(item_id)
        if not isinstance(location, InRoom):
            return
        self.rooms[location.room_id].items.remove(item_id)
        self.player.inventory.append(item_id)
