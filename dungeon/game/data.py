from __future__ import annotations

from typing import Any


WORLD_DATA: dict[str, Any] = {
    "start_room": "cell",
    "rooms": {
        "cell": {
            "name": "Dank Cell",
            "description": (
                "You are in a cold, stone cell. A single torch flickers on the wall, casting long shadows. "
                "The iron door to the north is barred shut. There is a pile of straw in the corner "
                "and a loose stone on the floor."
            ),
            "exits": {"north": "hallway"},
            "blocked_exits": {"north": "The door is barred from the other side."},
            "items": ["stone"],
        },
        "hallway": {
            "name": "Dim Hallway",
            "description": (
                "You stand in a narrow hallway. The cell door is to the south. To the east is a heavy "
                "wooden door with a small, rusty lock. To the west, the hallway ends in a pile of rubble."
            ),
            "exits": {"south": "cell", "east": "armory"},
            "blocked_exits": {"east": "The door is locked."},
            "items": [],
        },
        "armory": {
            "name": "Dusty Armory",
            "description": (
                "This was once an armory. Racks that held weapons are now empty, save for a single, "
                "gleaming sword lying on a stone pedestal."
            ),
            "exits": {"west": "hallway"},
            "blocked_exits": {},
            "items": ["sword"],
        },
    },
    "items": {
        "stone": {
            "name": "Loose Stone",
            "description": "A fist-sized stone. You notice a small, rusty key hidden in the cavity beneath it.",
            "takeable": False,
            "on_examine": {
                "type": "reveal_item",
                "room": "cell",
                "item": "key",
                "found": "You lift the stone and find a small, rusty key!",
                "already": "It's just a stone. You already found the key that was under it.",
            },
        },
        "key": {
            "name": "Rusty Key",
            "description": "A small, simple key. It looks like it might fit the lock on the armory door.",
            "takeable": True,
        },
        "sword": {
            "name": "Gleaming Sword",
            "description": (
                "A beautiful, sharp sword. It feels powerful in your hands. "
                "Perhaps you could break something with it?"
            ),
            "takeable": True,
        },
    },
    "use_rules": [
        {
            "item": "key",
            "target": "door",
            "room": "hallway",
            "unblock": {"room": "hallway", "direction": "east"},
            "message": "The key fits! You unlock the armory door with a loud *click*.",
        },
        {
            "item": "sword",
            "target": "door",
            "room": "cell",
            "unblock": {"room": "cell", "direction": "north"},
            "message": (
                "You swing the sword with all your might and shatter the wooden bar "
                "on the other side of the door!"
            ),
            "escapes": True,
        },
    ],
}
