from __future__ import annotations

from typing import Any

from dungeon.game.data import WORLD_DATA
from dungeon.game.models import (
    Direction,
    Item,
    ItemId,
    RevealItem,
    RoomDef,
    RoomId,
    UnblockExit,
    UseRule,
    World,
)


VALID_DIRECTIONS = {d.value for d in Direction}
VALID_ROOMS = {r.value for r in RoomId}
VALID_ITEMS = {i.value for i in ItemId}
EFFECT_TYPES = {"reveal_item"}


class WorldValidationError(ValueError):
    pass


def validate_world(world_data: dict[str, Any]) -> None:
    rooms = world_data.get("rooms", {})
    items = world_data.get("items", {})

    for room_id in rooms:
        if room_id not in VALID_ROOMS:
            raise WorldValidationError(f"unknown room id {room_id}")
    for item_id in items:
        if item_id not in VALID_ITEMS:
            raise WorldValidationError(f"unknown item id {item_id}")

    start_room = world_data.get("start_room")
    if start_room not in rooms:
        raise WorldValidationError("start_room does not exist")

    placed: dict[str, str] = {}

    for room_id, room in rooms.items():
        exits = room.get("exits", {})
        for direction, target in exits.items():
            if direction not in VALID_DIRECTIONS:
                raise WorldValidationError(f"invalid exit direction {direction} in {room_id}")
            if target not in rooms:
                raise WorldValidationError(f"exit {direction} in {room_id} points to unknown room {target}")

        for direction in room.get("blocked_exits", {}):
            if direction not in exits:
                raise WorldValidationError(f"blocked exit {direction} in {room_id} is not an exit")

        for item_id in room.get("items", []):
            if item_id not in items:
                raise WorldValidationError(f"unknown item {item_id} in {room_id}")
            if item_id in placed:
                raise WorldValidationError(f"item {item_id} placed in both {placed[item_id]} and {room_id}")
            placed[item_id] = room_id

    for item_id, item in items.items():
        effect = item.get("on_examine")
        if effect is None:
            continue
        if effect.get("type") not in EFFECT_TYPES:
            raise WorldValidationError(f"unknown examine effect {effect.get('type')} on {item_id}")
        if effect.get("room") not in rooms:
            raise WorldValidationError(f"examine effect on {item_id} targets unknown room {effect.get('room')}")
        if effect.get("item") not in items:
            raise WorldValidationError(f"examine effect on {item_id} reveals unknown item {effect.get('item')}")

    for rule in world_data.get("use_rules", []):
        if rule.get("item") not in items:
            raise WorldValidationError(f"use rule references unknown item {rule.get('item')}")
        if rule.get("room") not in rooms:
            raise WorldValidationError(f"use rule references unknown room {rule.get('room')}")
        unblock = rule.get("unblock", {})
        unblock_room = rooms.get(unblock.get("room"))
        if unblock_room is None:
            raise WorldValidationError(f"use rule unblocks unknown room {unblock.get('room')}")
        if unblock.get("direction") not in unblock_room.get("exits", {}):
            raise WorldValidationError(
                f"use rule unblocks {unblock.get('direction')} in {unblock.get('room')}, which is not an exit"
            )


def _build_effect(effect: dict[str, Any] | None) -> RevealItem | None:
    if effect is None:
        return None
    return RevealItem(
        room_id=RoomId(effect["room"]),
        item_id=ItemId(effect["item"]),
        found_text=effect.get("found", ""),
        already_text=effect.get("already", ""),
    )


def load_world(data: dict[str, Any] | None = None) -> World:
    data = WORLD_DATA if data is None else data
    validate_world(data)

    items: dict[ItemId, Item] = {}
    for item_id, item in data.get("items", {}).items():
        items[ItemId(item_id)] = Item(
            item_id=ItemId(item_id),
            name=item.get("name", item_id),
            description=item.get("description", ""),
            takeable=bool(item.get("takeable", False)),
            on_examine=_build_effect(item.get("on_examine")),
        )

    rooms: dict[RoomId, RoomDef] = {}
    for room_id, room in data.get("rooms", {}).items():
        rooms[RoomId(room_id)] = RoomDef(
            room_id=RoomId(room_id),
            name=room.get("name", room_id),
            description=room.get("description", ""),
            exits={Direction(d): RoomId(t) for d, t in room.get("exits", {}).items()},
            blocked_exits={Direction(d): msg for d, msg in room.get("blocked_exits", {}).items()},
            items=tuple(ItemId(i) for i in room.get("items", [])),
        )

    use_rules = tuple(
        UseRule(
            item_id=ItemId(rule["item"]),
            target=rule["target"],
            required_room=RoomId(rule["room"]),
            effect=UnblockExit(
                room_id=RoomId(rule["unblock"]["room"]),
                direction=Direction(rule["unblock"]["direction"]),
            ),
            message=rule.get("message", ""),
            escapes=bool(rule.get("escapes", False)),
        )
        for rule in data.get("use_rules", [])
    )

    return World(
        start_room=RoomId(data["start_room"]),
        items=items,
        rooms=rooms,
        use_rules=use_rules,
    )
