"""Card and phase identifiers, names and costs."""

from __future__ import annotations

from enum import IntEnum

MAX_HAND = 500
MAX_DECK = 500
MAX_PLAYERS = 4

NUM_K_CARDS = 10
UNUSED = -1

COPPER_VALUE = 1
SILVER_VALUE = 2
GOLD_VALUE = 3

UNKNOWN_CARD_COST = 1000


class Card(IntEnum):
    """Every card used in the game, numbered as supply positions."""

    CURSE = 0
    ESTATE = 1
    DUCHY = 2
    PROVINCE = 3
    COPPER = 4
    SILVER = 5
    GOLD = 6
    ADVENTURER = 7
    COUNCIL_ROOM = 8
    FEAST = 9
    GARDENS = 10
    MINE = 11
    REMODEL = 12
    SMITHY = 13
    VILLAGE = 14
    BARON = 15
    GREAT_HALL = 16
    MINION = 17
    STEWARD = 18
    TRIBUTE = 19
    AMBASSADOR = 20
    CUTPURSE = 21
    EMBARGO = 22
    OUTPOST = 23
    SALVAGER = 24
    SEA_HAG = 25
    TREASURE_MAP = 26

    @property
    def label(self) -> str:
        """Human-readable card name."""
        return self.name.replace("_", " ").title()


class Phase(IntEnum):
    """Phases of a turn."""

    ACTION = 0
    BUY = 1
    CLEANUP = 2


NUM_TOTAL_K_CARDS = len(Card)

_COSTS = {
    Card.CURSE: 0,
    Card.ESTATE: 2,
    Card.DUCHY: 5,
    Card.PROVINCE: 8,
    Card.COPPER: 0,
    Card.SILVER: 3,
    Card.GOLD: 6,
    Card.ADVENTURER: 6,
    Card.COUNCIL_ROOM: 5,
    Card.FEAST: 4,
    Card.GARDENS: 4,
    Card.MINE: 5,
    Card.REMODEL: 4,
    Card.SMITHY: 4,
    Card.VILLAGE: 3,
    Card.BARON: 4,
    Card.GREAT_HALL: 3,
    Card.MINION: 5,
    Card.STEWARD: 3,
    Card.TRIBUTE: 5,
    Card.AMBASSADOR: 3,
    Card.CUTPURSE: 4,
    Card.EMBARGO: 2,
    Card.OUTPOST: 5,
    Card.SALVAGER: 4,
    Card.SEA_HAG: 4,
    Card.TREASURE_MAP: 4,
}

TREASURE_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_PHASE_NAMES = {
    Phase.ACTION: "Action",
    Phase.BUY: "Buy",
    Phase.CLEANUP: "Cleanup",
}


def _as_card(card: int) -> Card | None:
    try:
        return Card(card)
    except ValueError:
        return None


def get_cost(card: int) -> int:
    """Cost of a card, or -1 for a number that is not a card."""
    known = _as_card(card)
    return -1 if known is None else _COSTS[known]


def card_cost(card: int) -> int:
    """Cost of a card as shown to players; unknown cards cost 1000."""
    known = _as_card(card)
    return UNKNOWN_CARD_COST if known is None else _COSTS[known]


def card_name(card: int) -> str:
    """Display name of a card, or "?" for a number that is not a card."""
    known = _as_card(card)
    return "?" if known is None else known.label


def phase_name(phase: int) -> str:
    """Display name of a turn phase."""
    try:
        return _PHASE_NAMES[Phase(phase)]
    except ValueError:
        raise ValueError(f"unknown phase: {phase}") from None