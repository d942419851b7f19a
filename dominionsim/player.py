"""Interactive command-line game with optional bot players."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from dominionsim.cards import MAX_PLAYERS, UNUSED, Card, card_name
from dominionsim.effects import play_card
from dominionsim.game import Game, GameError
from dominionsim.interface import (
    add_card_to_hand,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
)
from dominionsim.rngs import RandomStreams

DEFAULT_KINGDOM = (
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
USAGE = "Usage: player [integer random number seed]\n"
_COMMAND_WIDTH = 4


def _matches(command: str, keyword: str) -> bool:
    """Compare at most the first four characters, as far as either string goes."""
    pad = "\0" * _COMMAND_WIDTH
    return (command + pad)[:_COMMAND_WIDTH] == (keyword + pad)[:_COMMAND_WIDTH]


def _parse(line: str) -> tuple[str, list[int]]:
    tokens = line.split()
    command = tokens[0] if tokens else ""
    args = [UNUSED] * 4
    for slot, token in enumerate(tokens[1:5]):
        try:
            args[slot] = int(token)
        except ValueError:
            break
    return command, args


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _report_end(game: Game, turn_num: int, out: TextIO) -> None:
    out.write(format_scores(game))
    winners = game.get_winners()
    out.write(f"After {turn_num} turns, the winner(s) are:\n")
    for player, won in enumerate(winners[: game.num_players]):
        if won:
            out.write(f"Player {player}\n")
    for player in range(game.num_players):
        out.write(format_hand(game, player))
        out.write(format_played(game, player))
        out.write(format_discard(game, player))
        out.write(format_deck(game, player))


def run(seed: int, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Read commands until the game ends or the user exits; return the exit status."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    if seed <= 0:
        out.write(USAGE)
        return 0

    rng = RandomStreams()
    game = Game(2, DEFAULT_KINGDOM, seed, rng)
    is_bot = [False] * MAX_PLAYERS
    started = False
    turn_num = 0
    out.write('Please enter a command or "help" for commands\n')

    while True:
        current = game.whose_turn()
        if started and game.is_game_over():
            _report_end(game, turn_num, out)
            break
        if is_bot[current]:
            turn_num = execute_bot_turn(game, current, turn_num, out)
            continue

        out.write("$ ")
        line = stdin.readline()
        if not line:
            break
        command, (arg0, arg1, arg2, arg3) = _parse(line)

        if _matches(command, "add"):
            try:
                add_card_to_hand(game, current, arg0)
            except GameError:
                pass
            out.write(f"Player {current} adds {card_name(arg0)} to their hand\n\n")
        elif _matches(command, "buy"):
            try:
                game.buy_card(arg0)
            except GameError:
                out.write(f"Player {current} cannot buy card {arg0}, {card_name(arg0)}\n\n")
            else:
                out.write(f"Player {current} buys card {arg0}, {card_name(arg0)}\n\n")
        elif _matches(command, "end"):
            if started:
                if current == game.num_players - 1:
                    turn_num += 1
                game.end_turn()
                out.write(f"Player {game.whose_turn()}'s turn number {turn_num}\n\n")
        elif _matches(command, "exit"):
            break
        elif _matches(command, "help"):
            out.write(help_text())
        elif _matches(command, "init"):
            for player in range(arg0 - arg1, arg0):
                if 0 <= player < MAX_PLAYERS:
                    is_bot[player] = True
            out.write("\n")
            try:
                game = Game(arg0, DEFAULT_KINGDOM, seed, rng)
            except GameError:
                pass
            else:
                started = True
                out.write(f"Player {game.whose_turn()}'s turn number {turn_num}\n\n")
        elif _matches(command, "num"):
            out.write(f"There are {game.num_hand_cards()} cards in your hand.\n")
        elif _matches(command, "play"):
            try:
                card = game.hand_card(arg0)
            except GameError:
                card = UNUSED
            try:
                play_card(game, arg0, arg1, arg2, arg3)
            except GameError:
                out.write(f"Player {current} cannot play card {arg0}\n\n")
            else:
                out.write(f"Player {current} plays {card_name(card)}\n\n")
        elif _matches(command, "resi"):
            game.end_turn()
            out.write(format_scores(game))
            break
        elif _matches(command, "show"):
            if started:
                out.write(format_hand(game, current))
                out.write(format_played(game, current))
        elif _matches(command, "stat"):
            if started:
                out.write(format_state(game))
        elif _matches(command, "supp"):
            out.write(format_supply(game))
        elif _matches(command, "whos"):
            out.write(f"Player {game.whose_turn()}'s turn\n")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game with the seed given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        sys.stdout.write(USAGE)
        return 0
    return run(_atoi(args[0]))


if __name__ == "__main__":
    sys.exit(main())