"""Text views of a game, the helper commands and the simple bot player."""

from __future__ import annotations

import sys
from contextlib import suppress
from typing import Iterable, TextIO

from dominionsim.cards import (
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    TREASURE_VALUES,
    UNUSED,
    Card,
    card_cost,
    card_name,
    phase_name,
)
from dominionsim.game import Game, GameError
from dominionsim.rngs import RandomStreams

_HELP = (
    "Commands are: \n"
    "  add [Supply Card Number] \t\t\t- add any card to your hand (teh hacks)\n"
    "  buy [Supply Card Number] \t\t\t- buy a card at supply position\n"
    "  end \t\t\t      \t\t\t- end your turn\n"
    "  init [Number of Players] [Number of Bots] \t- initialize the game\n"
    "  num \t\t\t      \t\t\t- print number of cards in your hand\n"
    "  play [Hand Index] [Choice] [Choice] [Choice]\t- play a card from your hand\n"
    "  resign\t\t\t\t\t- end the game showing the current scores\n"
    "  show \t\t\t\t\t\t- show your current hand\n"
    "  stat \t\t\t\t\t\t- show your turn's status\n"
    "  supp \t\t\t\t\t\t- show the supply\n"
    "  whos \t\t\t      \t\t\t- whos turn\n"
    "  exit \t\t\t      \t\t\t- exit the interface"
    "\n\n"
)


def _listing(title: str, cards: Iterable[int], line_end: str) -> str:
    cards = list(cards)
    parts = [title]
    if cards:
        parts.append("#  Card\n")
    parts.extend(
        f"{index:<2d} {card_name(card):<13s}{line_end}"
        for index, card in enumerate(cards)
    )
    parts.append("\n")
    return "".join(parts)


def format_hand(game: Game, player: int) -> str:
    """Numbered list of the cards in a player's hand."""
    return _listing(f"Player {player}'s hand:\n", game.hands[player], "\n")


def format_deck(game: Game, player: int) -> str:
    """Numbered list of the cards in a player's deck."""
    return _listing(f"Player {player}'s deck: \n", game.decks[player], "\n")


def format_played(game: Game, player: int) -> str:
    """Numbered list of the cards played this turn."""
    return _listing(f"Player {player}'s played cards: \n", game.played_cards, " \n")


def format_discard(game: Game, player: int) -> str:
    """Numbered list of the cards in a player's discard pile."""
    return _listing(f"Player {player}'s discard: \n", game.discards[player], " \n")


def format_supply(game: Game) -> str:
    """Table of the supply piles in the game with their costs and sizes."""
    parts = ["#   Card          Cost   Copies\n"]
    for card, count in enumerate(game.supply[:NUM_TOTAL_K_CARDS]):
        if count == UNUSED:
            continue
        parts.append(
            f"{card:<2d}  {card_name(card):<13s} {card_cost(card):<5d}  {count:<5d}\n"
        )
    parts.append("\n")
    return "".join(parts)


def format_state(game: Game) -> str:
    """Summary of the current turn: player, phase, actions, coins and buys."""
    return (
        f"Player {game.whose_turn()}:\n"
        f"{phase_name(game.phase)} phase\n"
        f"{game.num_actions} actions\n"
        f"{game.coins} coins\n"
        f"{game.num_buys} buys\n\n"
    )


def format_scores(game: Game) -> str:
    """One line per player with their score."""
    return "".join(
        f"Player {player} has a score of {game.score_for(player)}\n"
        for player in range(game.num_players)
    )


def help_text() -> str:
    """The list of interactive commands."""
    return _HELP


def add_card_to_hand(game: Game, player: int, card: int) -> None:
    """Put any kingdom card straight into a player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} is not a kingdom card")
    game.hands[player].append(Card(card))


def select_kingdom_cards(
    random_seed: int, rng: RandomStreams | None = None
) -> list[Card]:
    """Pick ten different kingdom cards at random."""
    rng = RandomStreams() if rng is None else rng
    rng.select_stream(1)
    rng.put_seed(random_seed)
    chosen: list[Card] = []
    while len(chosen) < NUM_K_CARDS:
        card = int(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(Card(card))
    return chosen


def count_hand_coins(game: Game, player: int) -> int:
    """Coins the treasures in a player's hand are worth."""
    return sum(TREASURE_VALUES.get(card, 0) for card in game.hands[player])


def _bot_choice(game: Game, coins: int) -> Card | None:
    provinces = game.supply_count(Card.PROVINCE)
    if coins >= card_cost(Card.PROVINCE) and provinces > 0:
        return Card.PROVINCE
    if provinces == 0 and coins >= card_cost(Card.DUCHY):
        return Card.DUCHY
    if coins >= card_cost(Card.GOLD) and game.supply_count(Card.GOLD) > 0:
        return Card.GOLD
    if coins >= card_cost(Card.SILVER) and game.supply_count(Card.SILVER) > 0:
        return Card.SILVER
    return None


def execute_bot_turn(
    game: Game, player: int, turn_num: int, out: TextIO | None = None
) -> int:
    """Play one turn for a bot and return the turn number afterwards."""
    out = sys.stdout if out is None else out
    coins = count_hand_coins(game, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(format_supply(game))

    choice = _bot_choice(game, coins)
    if choice is not None:
        with suppress(GameError):
            game.buy_card(choice)
        out.write(f"Player {player} buys card {card_name(choice)}\n\n")

    if player == game.num_players - 1:
        turn_num += 1
    game.end_turn()
    if not game.is_game_over():
        out.write(f"Player {game.whose_turn()}'s turn number {turn_num}\n\n")
    return turn_num