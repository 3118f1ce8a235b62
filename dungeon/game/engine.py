from __future__ import annotations

import logging

from dungeon.core.models import CommandResult, NarrativeLine, Outcome, Style
from dungeon.game.models import Direction, ItemId, RevealItem, parse_enum
from dungeon.game.parser import ParsedCommand, Verb, split_use_phrase
from dungeon.game.render import render_inventory, render_room
from dungeon.game.world import IN_INVENTORY, InRoom, WorldState


logger = logging.getLogger(__name__)

ESCAPE_TEXT = "You have escaped the dungeon!"


def _fail(outcome: Outcome, text: str, style: Style = Style.ERROR) -> CommandResult:
    return CommandResult(outcome=outcome, lines=[NarrativeLine(text, style)])


class Engine:
    """Resolves parsed commands against one session's WorldState."""

    def __init__(self, state: WorldState):
        self.state = state

    def handle(self, command: ParsedCommand) -> CommandResult:
        if command.verb is Verb.LOOK:
            return self._look()
        if command.verb is Verb.MOVE:
            return self._move(command.noun)
        if command.verb is Verb.TAKE:
            return self._take(command.noun)
        if command.verb is Verb.EXAMINE:
            return self._examine(command.noun)
        if command.verb is Verb.INVENTORY:
            return CommandResult(Outcome.OK, render_inventory(self.state))
        if command.verb is Verb.USE:
            return self._use(command.noun)
        return _fail(Outcome.UNKNOWN_VERB, "I don't understand that command.")

    def _look(self) -> CommandResult:
        return CommandResult(Outcome.OK, render_room(self.state))

    def _move(self, noun: str) -> CommandResult:
        room = self.state.current_room()
        direction = parse_enum(Direction, noun)
        if direction is None or direction not in room.exits:
            return _fail(Outcome.INVALID_DIRECTION, "You can't go that way.")

        blocked = room.blocked_exits.get(direction)
        if blocked is not None:
            return _fail(Outcome.BLOCKED_EXIT, blocked, Style.WARNING)

        self.state.move_to(room.exits[direction])
        logger.debug("moved %s to %s", direction.value, self.state.player.current_room.value)
        return self._look()

    def _take(self, noun: str) -> CommandResult:
        room = self.state.current_room()
        item_id = parse_enum(ItemId, noun)
        if item_id is None or item_id not in room.items:
            return _fail(Outcome.ITEM_NOT_PRESENT, "You can't take that.")

        item = self.state.item(item_id)
        if not item.takeable:
            return _fail(Outcome.ITEM_NOT_TAKEABLE, "You can't take that.")

        self.state.take_item(item_id)
        return CommandResult(Outcome.OK, [NarrativeLine(f"You take the {item.name}.")])

    def _examine(self, noun: str) -> CommandResult:
        item_id = parse_enum(ItemId, noun)
        location = self.state.item_location(item_id) if item_id is not None else None
        here = InRoom(self.state.player.current_room)
        if location != here and location is not IN_INVENTORY:
            return _fail(Outcome.ITEM_NOT_PRESENT, "You don't see that here.")

        item = self.state.item(item_id)
        lines = [NarrativeLine(item.description)]
        if item.on_examine is not None:
            effect_line = self._apply_examine_effect(item_id, item.on_examine)
            if effect_line:
                lines.append(NarrativeLine(effect_line, Style.SUCCESS))
        return CommandResult(Outcome.OK, lines)

    def _apply_examine_effect(self, item_id: ItemId, effect: RevealItem) -> str:
        if item_id in self.state.triggered_effects:
            return effect.already_text
        self.state.triggered_effects.add(item_id)
        if not self.state.reveal_item(effect.room_id, effect.item_id):
            return effect.already_text
        logger.info("revealed %s in %s", effect.item_id.value, effect.room_id.value)
        return effect.found_text

    def _use(self, noun: str) -> CommandResult:
        item_word, target = split_use_phrase(noun)
        item_id = parse_enum(ItemId, item_word)
        if item_id is None or item_id not in self.state.player.inventory:
            return _fail(Outcome.ITEM_NOT_HELD, "You don't have that.")

        here = self.state.player.current_room
        for rule in self.state.world.use_rules:
            if rule.item_id is item_id and rule.target == target and rule.required_room is here:
                self.state.unblock_exit(rule.effect.room_id, rule.effect.direction)
                logger.info("unblocked %s exit of %s", rule.effect.direction.value, rule.effect.room_id.value)
                lines = [NarrativeLine(rule.message, Style.SUCCESS)]
                if rule.escapes:
                    lines.append(NarrativeLine(ESCAPE_TEXT, Style.WIN))
                    return CommandResult(Outcome.ESCAPED, lines)
                return CommandResult(Outcome.OK, lines)

        return _fail(Outcome.INVALID_USE_COMBINATION, "You can't use that like that.")
