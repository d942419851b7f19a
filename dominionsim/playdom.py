"""A scripted two-player game: a Smithy player against an Adventurer player."""

from __future__ import annotations

import sys
from contextlib import suppress
from typing import TextIO

from dominionsim.cards import TREASURE_VALUES, Card
from dominionsim.effects import play_card
from dominionsim.game import Game, GameError

KINGDOM = (
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
NO_CHOICE = -1
MAX_SMITHIES = 2
MAX_ADVENTURERS = 2


def _hand_money(game: Game) -> int:
    hand = game.hands[game.whose_turn()]
    return sum(TREASURE_VALUES.get(card, 0) for card in hand)


def _try_buy(game: Game, card: Card) -> None:
    with suppress(GameError):
        game.buy_card(card)


def _try_play(game: Game, hand_pos: int) -> None:
    with suppress(GameError):
        play_card(game, hand_pos, NO_CHOICE, NO_CHOICE, NO_CHOICE)


def _smithy_turn(game: Game, money: int, smithy_pos: int, smithies: int, out: TextIO) -> int:
    if smithy_pos != -1:
        out.write(f"0: smithy played from position {smithy_pos}\n")
        _try_play(game, smithy_pos)
        out.write("smithy played.\n")
        money = _hand_money(game)
    if money >= 8:
        out.write("0: bought province\n")
        _try_buy(game, Card.PROVINCE)
    elif money >= 6:
        out.write("0: bought gold\n")
        _try_buy(game, Card.GOLD)
    elif money >= 4 and smithies < MAX_SMITHIES:
        out.write("0: bought smithy\n")
        _try_buy(game, Card.SMITHY)
        smithies += 1
    elif money >= 3:
        out.write("0: bought silver\n")
        _try_buy(game, Card.SILVER)
    out.write("0: end turn\n")
    game.end_turn()
    return smithies


def _adventurer_turn(
    game: Game, money: int, adventurer_pos: int, adventurers: int, out: TextIO
) -> int:
    if adventurer_pos != -1:
        out.write(f"1: adventurer played from position {adventurer_pos}\n")
        _try_play(game, adventurer_pos)
        money = _hand_money(game)
    if money >= 8:
        out.write("1: bought province\n")
        _try_buy(game, Card.PROVINCE)
    elif money >= 6 and adventurers < MAX_ADVENTURERS:
        out.write("1: bought adventurer\n")
        _try_buy(game, Card.ADVENTURER)
        adventurers += 1
    elif money >= 6:
        out.write("1: bought gold\n")
        _try_buy(game, Card.GOLD)
    elif money >= 3:
        out.write("1: bought silver\n")
        _try_buy(game, Card.SILVER)
    out.write("1: endTurn\n")
    game.end_turn()
    return adventurers


def play_game(seed: int, out: TextIO | None = None) -> tuple[int, int]:
    """Play the scripted game to the end and return both players' scores."""
    out = sys.stdout if out is None else out
    out.write("Starting game.\n")
    game = Game(2, KINGDOM, seed)

    smithies = adventurers = 0
    while not game.is_game_over():
        money = 0
        smithy_pos = adventurer_pos = -1
        for pos, card in enumerate(game.hands[game.whose_turn()]):
            if card in TREASURE_VALUES:
                money += TREASURE_VALUES[card]
            elif card == Card.SMITHY:
                smithy_pos = pos
            elif card == Card.ADVENTURER:
                adventurer_pos = pos

        if game.whose_turn() == 0:
            smithies = _smithy_turn(game, money, smithy_pos, smithies, out)
        else:
            adventurers = _adventurer_turn(game, money, adventurer_pos, adventurers, out)

    scores = (game.score_for(0), game.score_for(1))
    out.write("Finished game.\n")
    out.write(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")
    return scores


def main(argv: list[str] | None = None) -> int:
    """Play a scripted game with the seed given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    try:
        seed = int(args[0])
    except (IndexError, ValueError):
        sys.stderr.write("Usage: playdom [integer random number seed]\n")
        return 2
    play_game(seed, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())