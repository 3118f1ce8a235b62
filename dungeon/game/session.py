from __future__ import annotations

import logging

from dungeon.core.models import CommandResult, NarrativeLine, Outcome, Style
from dungeon.game.engine import Engine
from dungeon.game.loader import load_world
from dungeon.game.models import World
from dungeon.game.parser import parse
from dungeon.game.render import render_room
from dungeon.game.world import WorldState


logger = logging.getLogger(__name__)

BANNER = "You wake in the dark..."
SEPARATOR = "---"


class GameSession:
    """Entry point for a presentation layer.

    Idle until start_session(); escaping the dungeon returns it to idle.
    Commands submitted while idle are ignored.
    """

    def __init__(self, world: World | None = None):
        self.world = world or load_world()
        self.state: WorldState | None = None
        self.engine: Engine | None = None
        self.active = False

    def start_session(self) -> list[NarrativeLine]:
        self.state = WorldState(self.world)
        self.engine = Engine(self.state)
        self.active = True
        logger.info("session started in %s", self.state.player.current_room.value)
        return [
            NarrativeLine(BANNER, Style.WARNING),
            NarrativeLine(SEPARATOR),
            *render_room(self.state),
        ]

    def is_session_active(self) -> bool:
        return self.active

    def resolve(self, raw: str) -> CommandResult | None:
        command = parse(raw)
        if command is None:
            return None
        if not self.active or self.engine is None:
            logger.debug("ignoring %r: no active session", command.text)
            return None

        result = self.engine.handle(command)
        logger.debug("%s %r -> %s", command.verb.value, command.noun, result.outcome.value)
        if result.outcome is Outcome.ESCAPED:
            self.active = False
            logger.info("session finished: escaped")

        echo = NarrativeLine(f"> {command.text}", Style.ECHO)
        return CommandResult(
            result.outcome,
            [echo, *result.lines],
            command=command.text,
            verb=command.verb.value,
        )

    def submit(self, raw: str) -> list[NarrativeLine]:
        result = self.resolve(raw)
        if result is None:
            return []
        return result.lines
