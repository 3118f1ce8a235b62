from __future__ import annotations

from dungeon.core.models import NarrativeLine
from dungeon.game.world import WorldState


def render_room(state: WorldState) -> list[NarrativeLine]:
    room = state.current_room()
    return [NarrativeLine(room.name), NarrativeLine(room.description)]


def render_inventory(state: WorldState) -> list[NarrativeLine]:
    if not state.player.inventory:
        return [NarrativeLine("You are not carrying anything.")]
    lines = [NarrativeLine("You are carrying:")]
    for item_id in state.player.inventory:
        lines.append(NarrativeLine(f"- {state.item(item_id).name}"))
    return lines
