from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Verb(str, Enum):
    LOOK = "look"
    MOVE = "move"
    TAKE = "take"
    EXAMINE = "examine"
    INVENTORY = "inventory"
    USE = "use"
    UNKNOWN = "unknown"


VERB_SYNONYMS: dict[str, Verb] = {
    "look": Verb.LOOK,
    "l": Verb.LOOK,
    "go": Verb.MOVE,
    "move": Verb.MOVE,
    "take": Verb.TAKE,
    "get": Verb.TAKE,
    "examine": Verb.EXAMINE,
    "x": Verb.EXAMINE,
    "inventory": Verb.INVENTORY,
    "i": Verb.INVENTORY,
    "use": Verb.USE,
}


@dataclass(frozen=True)
class ParsedCommand:
    text: str
    word: str
    verb: Verb
    noun: str


def parse(raw: str) -> ParsedCommand | None:
    """Split raw input into a canonical verb and a lower-cased noun phrase.

    Returns None for blank input.
    """
    tokens = raw.lower().split()
    if not tokens:
        return None
    head, *rest = tokens
    return ParsedCommand(
        text=" ".join(tokens),
        word=head,
        verb=VERB_SYNONYMS.get(head, Verb.UNKNOWN),
        noun=" ".join(rest),
    )


def split_use_phrase(noun: str) -> tuple[str, str]:
    # "<item> <anything> <target>": the middle word is never inspected.
    parts = noun.split()
    item = parts[0] if parts else ""
    target = parts[2] if len(parts) > 2 else ""
    return item, target
