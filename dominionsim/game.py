"""Game state and the basic rules: setup, drawing, buying, turns and scoring."""

from __future__ import annotations

from contextlib import suppress
from enum import IntEnum
from typing import Iterable

from dominionsim.cards import (
    MAX_PLAYERS,
    NUM_K_CARDS,
    TREASURE_VALUES,
    UNUSED,
    Card,
    Phase,
    get_cost,
)
from dominionsim.rngs import RandomStreams

HAND_SIZE = 5
START_ESTATES = 3
START_COPPERS = 7
NO_PLAYER_SCORE = -9999
GAME_OVER_PILES = 3
# Only the first 25 supply piles count towards the empty-pile ending.
_PILES_CHECKED = 25


class GameError(Exception):
    """Raised when a move is not allowed in the current game state."""


class EmptyDeckError(GameError):
    """Raised when a player has no cards left to draw or shuffle."""


class GainTo(IntEnum):
    """Where a gained card is put."""

    DISCARD = 0
    DECK = 1
    HAND = 2


class Game:
    """The full state of one game, with the rules that act on it."""

    def __init__(
        self,
        num_players: int,
        kingdom_cards: Iterable[int],
        random_seed: int = 1,
        rng: RandomStreams | None = None,
    ) -> None:
        self.rng = rng if rng is not None else RandomStreams()
        self.rng.select_stream(1)
        self.rng.put_seed(random_seed)

        if not 2 <= num_players <= MAX_PLAYERS:
            raise GameError(f"number of players must be 2 to {MAX_PLAYERS}")
        kingdom = [int(card) for card in kingdom_cards]
        if len(kingdom) != NUM_K_CARDS:
            raise GameError(f"exactly {NUM_K_CARDS} kingdom cards are needed")
        if len(set(kingdom)) != len(kingdom):
            raise GameError("kingdom cards must all be different")

        self.num_players = num_players
        self.supply = [0] * len(Card)
        self.supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
        victory = 8 if num_players == 2 else 12
        for card in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
            self.supply[card] = victory
        self.supply[Card.COPPER] = 60 - 7 * num_players
        self.supply[Card.SILVER] = 40
        self.supply[Card.GOLD] = 30
        for card in Card:
            if card < Card.ADVENTURER:
                continue
            if card not in kingdom:
                self.supply[card] = UNUSED
            elif card in (Card.GREAT_HALL, Card.GARDENS):
                self.supply[card] = victory
            else:
                self.supply[card] = 10

        self.decks: list[list[int]] = [
            [Card.ESTATE] * START_ESTATES + [Card.COPPER] * START_COPPERS
            for _ in range(num_players)
        ]
        for player in range(num_players):
            self.shuffle(player)
        self.hands: list[list[int]] = [[] for _ in range(num_players)]
        self.discards: list[list[int]] = [[] for _ in range(num_players)]
        self.embargo_tokens = [0] * len(Card)

        self.outpost_played = 0
        self.outpost_turn = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.num_buys = 1
        self.coins = 0
        self.played_cards: list[int] = []
        self.current_player = 0

        self._draw_hand(self.current_player)
        self.update_coins(self.current_player)

    def _draw_hand(self, player: int) -> None:
        for _ in range(HAND_SIZE):
            with suppress(EmptyDeckError):
                self.draw_card(player)

    def shuffle(self, player: int) -> None:
        """Shuffle a player's deck; the deck is sorted first so results are repeatable."""
        deck = self.decks[player]
        if not deck:
            raise EmptyDeckError(f"player {player} has an empty deck")
        remaining = sorted(deck)
        shuffled = []
        while remaining:
            shuffled.append(remaining.pop(int(self.rng.random() * len(remaining))))
        deck[:] = shuffled

    def draw_card(self, player: int) -> int:
        """Move the top card of a player's deck to their hand and return it.

        An empty deck is first refilled from the discard pile and shuffled.
        """
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                raise EmptyDeckError(f"player {player} has no cards to draw")
            self.shuffle(player)
        card = deck.pop()
        self.hands[player].append(card)
        return card

    def buy_card(self, card: int) -> None:
        """Buy a card from the supply for the current player."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(card) < 1:
            raise GameError(f"no {card_label(card)} left in the supply")
        cost = get_cost(card)
        if self.coins < cost:
            raise GameError(f"not enough coins: have {self.coins}, need {cost}")
        self.phase = Phase.BUY
        self.gain_card(card, self.current_player, GainTo.DISCARD)
        self.coins -= cost
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.current_player])

    def hand_card(self, hand_pos: int) -> int:
        """Card at a position in the current player's hand."""
        hand = self.hands[self.current_player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """Cards of a kind left in the supply; -1 if the pile is not in the game."""
        if not 0 <= card < len(self.supply):
            raise GameError(f"unknown card: {card}")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """Copies of a card a player owns across deck, hand and discard."""
        piles = (self.decks[player], self.hands[player], self.discards[player])
        return sum(pile.count(card) for pile in piles)

    def whose_turn(self) -> int:
        """Index of the player whose turn it is."""
        return self.current_player

    def end_turn(self) -> None:
        """Discard the current hand and start the next player's turn."""
        player = self.current_player
        self.discards[player].extend(self.hands[player])
        self.hands[player].clear()

        self.current_player = (player + 1) % self.num_players
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.current_player].clear()

        self._draw_hand(self.current_player)
        self.update_coins(self.current_player)

    def is_game_over(self) -> bool:
        """True once the provinces or three supply piles are gone."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_PILES_CHECKED] if count == 0)
        return empty >= GAME_OVER_PILES

    def _card_points(self, player: int, card: int) -> int:
        if card == Card.CURSE:
            return -1
        if card in (Card.ESTATE, Card.GREAT_HALL):
            return 1
        if card == Card.DUCHY:
            return 3
        if card == Card.PROVINCE:
            return 6
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return 0

    def score_for(self, player: int) -> int:
        """Victory points of a player."""
        # The deck is scored only as far as the discard pile is long.
        counted_deck = self.decks[player][: len(self.discards[player])]
        cards = [*self.hands[player], *self.discards[player], *counted_deck]
        return sum(self._card_points(player, card) for card in cards)

    def get_winners(self) -> list[bool]:
        """One flag per player seat telling whether that player won."""
        scores = [
            self.score_for(p) if p < self.num_players else NO_PLAYER_SCORE
            for p in range(MAX_PLAYERS)
        ]
        high = max(scores)
        scores = [
            score + 1 if score == high and p > self.current_player else score
            for p, score in enumerate(scores)
        ]
        high = max(scores)
        return [score == high for score in scores]

    def discard_card(self, hand_pos: int, player: int, trash: bool = False) -> None:
        """Remove a card from a hand, putting it in play unless it is trashed.

        The last card in the hand takes the removed card's place.
        """
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        if not trash:
            self.played_cards.append(hand[hand_pos])
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(
        self, card: int, player: int, destination: GainTo = GainTo.DISCARD
    ) -> None:
        """Take a card from the supply into a player's discard, deck or hand."""
        if self.supply_count(card) < 1:
            raise GameError(f"no {card_label(card)} left in the supply")
        gained = Card(card)
        if destination == GainTo.DECK:
            self.decks[player].append(gained)
        elif destination == GainTo.HAND:
            self.hands[player].append(gained)
        else:
            self.discards[player].append(gained)
        self.supply[card] -= 1

    def update_coins(self, player: int, bonus: int = 0) -> int:
        """Set the coins to the treasure in a player's hand plus a bonus."""
        self.coins = sum(TREASURE_VALUES.get(card, 0) for card in self.hands[player])
        self.coins += bonus
        return self.coins


def card_label(card: int) -> str:
    try:
        return Card(card).label
    except ValueError:
        return f"card {card}"