from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Style(str, Enum):
    NORMAL = "normal"
    ECHO = "echo"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"
    WIN = "win"


class Outcome(str, Enum):
    OK = "ok"
    ESCAPED = "escaped"
    UNKNOWN_VERB = "unknown_verb"
    INVALID_DIRECTION = "invalid_direction"
    BLOCKED_EXIT = "blocked_exit"
    ITEM_NOT_PRESENT = "item_not_present"
    ITEM_NOT_TAKEABLE = "item_not_takeable"
    ITEM_NOT_HELD = "item_not_held"
    INVALID_USE_COMBINATION = "invalid_use_combination"


@dataclass(frozen=True)
class NarrativeLine:
    text: str
    style: Style = Style.NORMAL


@dataclass(frozen=True)
class CommandResult:
    outcome: Outcome
    lines: list[NarrativeLine] = field(default_factory=list)
    command: str = ""
    verb: str = ""
