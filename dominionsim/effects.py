"""What each action card does when it is played."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass
from typing import Callable, Iterable

from dominionsim.cards import UNUSED, Card, Phase, get_cost
from dominionsim.game import EmptyDeckError, GainTo, Game, GameError

TREASURES = frozenset({Card.COPPER, Card.SILVER, Card.GOLD})
VICTORY_CARDS = frozenset(
    {Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL}
)
FEAST_LIMIT = 5
BARON_BONUS = 4
MINE_ALLOWANCE = 3
REMODEL_ALLOWANCE = 2


class InvalidPlayError(GameError):
    """Raised when a card cannot be played with the given choices."""


@dataclass
class _Play:
    game: Game
    player: int
    choice1: int
    choice2: int
    choice3: int
    hand_pos: int

    @property
    def hand(self) -> list[int]:
        return self.game.hands[self.player]

    def others(self) -> Iterable[int]:
        return (p for p in range(self.game.num_players) if p != self.player)

    def discard_played(self) -> None:
        self.game.discard_card(self.hand_pos, self.player)


def _draw(game: Game, player: int, count: int) -> None:
    for _ in range(count):
        with suppress(EmptyDeckError):
            game.draw_card(player)


def _gain(game: Game, card: int, player: int, destination: GainTo) -> None:
    # A gain from an empty or absent pile simply does not happen.
    with suppress(GameError):
        game.gain_card(card, player, destination)


def _hand_at(game: Game, player: int, pos: int) -> int:
    hand = game.hands[player]
    if not 0 <= pos < len(hand):
        raise InvalidPlayError(f"no card at hand position {pos}")
    return hand[pos]


def _pile(game: Game, card: int) -> int:
    if not 0 <= card < len(game.supply):
        raise InvalidPlayError(f"unknown card: {card}")
    return game.supply[card]


def _remove(game: Game, player: int, removals: list[tuple[int, bool]]) -> None:
    """Remove several hand positions at once, each trashed or put in play.

    Positions are taken highest first so the lower ones stay where they were.
    """
    positions = [pos for pos, _ in removals]
    if len(set(positions)) != len(positions):
        raise InvalidPlayError("the same hand position was chosen twice")
    for pos in positions:
        _hand_at(game, player, pos)
    for pos, trash in sorted(removals, reverse=True):
        game.discard_card(pos, player, trash)


def _discard_first(game: Game, player: int, card: int) -> None:
    hand = game.hands[player]
    if card in hand:
        game.discard_card(hand.index(card), player)


def _discard_hand(game: Game, player: int) -> None:
    hand = game.hands[player]
    game.played_cards.extend(hand)
    hand.clear()


def _adventurer(play: _Play) -> None:
    game, hand = play.game, play.hand
    revealed: list[int] = []
    treasures = 0
    while treasures < 2:
        try:
            card = game.draw_card(play.player)
        except EmptyDeckError:
            break
        if card in TREASURES:
            treasures += 1
        else:
            hand.pop()
            revealed.append(card)
    game.discards[play.player].extend(reversed(revealed))


def _council_room(play: _Play) -> None:
    _draw(play.game, play.player, 4)
    play.game.num_buys += 1
    for other in play.others():
        _draw(play.game, other, 1)
    play.discard_played()


def _feast(play: _Play) -> None:
    game, card = play.game, play.choice1
    if _pile(game, card) <= 0:
        raise InvalidPlayError(f"no card {card} left in the supply")
    if get_cost(card) > FEAST_LIMIT:
        raise InvalidPlayError("that card is too expensive")
    # The hand is set aside while gaining, so only the feast allowance counts.
    game.coins = FEAST_LIMIT
    game.gain_card(card, play.player, GainTo.DISCARD)


def _gardens(play: _Play) -> None:
    raise InvalidPlayError("gardens cannot be played")


def _mine(play: _Play) -> None:
    game = play.game
    trashed = _hand_at(game, play.player, play.choice1)
    if trashed not in TREASURES:
        raise InvalidPlayError("mine must trash a treasure")
    if not Card.CURSE <= play.choice2 <= Card.TREASURE_MAP:
        raise InvalidPlayError(f"unknown card: {play.choice2}")
    if get_cost(trashed) + MINE_ALLOWANCE > get_cost(play.choice2):
        raise InvalidPlayError("mine cannot gain that card")
    _gain(game, play.choice2, play.player, GainTo.HAND)
    play.discard_played()
    _discard_first(game, play.player, trashed)


def _remodel(play: _Play) -> None:
    game = play.game
    trashed = _hand_at(game, play.player, play.choice1)
    if get_cost(trashed) + REMODEL_ALLOWANCE > get_cost(play.choice2):
        raise InvalidPlayError("remodel cannot gain that card")
    _gain(game, play.choice2, play.player, GainTo.DISCARD)
    play.discard_played()
    _discard_first(game, play.player, trashed)


def _smithy(play: _Play) -> None:
    _draw(play.game, play.player, 3)
    play.discard_played()


def _village(play: _Play) -> None:
    _draw(play.game, play.player, 1)
    play.game.num_actions += 2
    play.discard_played()


def _baron(play: _Play) -> None:
    game, hand = play.game, play.hand
    game.num_buys += 1
    if play.choice1 > 0 and Card.ESTATE in hand:
        hand.remove(Card.ESTATE)
        game.coins += BARON_BONUS
        game.discards[play.player].append(Card.ESTATE)
        return
    if game.supply[Card.ESTATE] > 0:
        game.gain_card(Card.ESTATE, play.player, GainTo.DISCARD)
        # The estate pile loses one card more than is gained.
        game.supply[Card.ESTATE] -= 1


def _great_hall(play: _Play) -> None:
    _draw(play.game, play.player, 1)
    play.game.num_actions += 1
    play.discard_played()


def _minion(play: _Play) -> None:
    game = play.game
    game.num_actions += 1
    play.discard_played()
    if play.choice1:
        game.coins += 2
    elif play.choice2:
        _discard_hand(game, play.player)
        _draw(game, play.player, 4)
        for other in play.others():
            if len(game.hands[other]) > 4:
                _discard_hand(game, other)
                _draw(game, other, 4)


def _steward(play: _Play) -> None:
    game = play.game
    if play.choice1 == 1:
        _draw(game, play.player, 2)
        play.discard_played()
    elif play.choice1 == 2:
        game.coins += 2
        play.discard_played()
    else:
        _remove(
            game,
            play.player,
            [(play.choice2, True), (play.choice3, True), (play.hand_pos, False)],
        )


def _tribute(play: _Play) -> None:
    game = play.game
    target = (play.player + 1) % game.num_players
    deck, discard = game.decks[target], game.discards[target]
    revealed: list[int] = []
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed.append(deck.pop())
        elif discard:
            revealed.append(discard.pop())
    else:
        for _ in range(2):
            if not deck:
                deck.extend(discard)
                discard.clear()
                game.shuffle(target)
            revealed.append(deck.pop())
    if len(revealed) == 2 and revealed[0] == revealed[1]:
        game.played_cards.append(revealed.pop())
    for card in revealed:
        if card in TREASURES:
            game.coins += 2
        elif card in VICTORY_CARDS:
            _draw(game, play.player, 2)
        else:
            game.num_actions += 2


def _ambassador(play: _Play) -> None:
    game, hand = play.game, play.hand
    if not 0 <= play.choice2 <= 2:
        raise InvalidPlayError("ambassador returns 0 to 2 cards")
    if play.choice1 == play.hand_pos:
        raise InvalidPlayError("ambassador cannot reveal itself")
    revealed = _hand_at(game, play.player, play.choice1)
    copies = sum(
        1
        for i, card in enumerate(hand)
        if i not in (play.hand_pos, play.choice1) and card == revealed
    )
    if copies < play.choice2:
        raise InvalidPlayError("not enough copies to return")
    game.supply[revealed] += play.choice2
    for other in play.others():
        _gain(game, revealed, other, GainTo.DISCARD)
    play.discard_played()
    for _ in range(play.choice2):
        if revealed in hand:
            game.discard_card(hand.index(revealed), play.player, True)


def _cutpurse(play: _Play) -> None:
    game = play.game
    game.update_coins(play.player, 2)
    for other in play.others():
        hand = game.hands[other]
        if Card.COPPER in hand:
            game.discard_card(hand.index(Card.COPPER), other)
    play.discard_played()


def _embargo(play: _Play) -> None:
    game = play.game
    if _pile(game, play.choice1) == UNUSED:
        raise InvalidPlayError("that pile is not in the game")
    game.coins += 2
    game.embargo_tokens[play.choice1] += 1
    game.discard_card(play.hand_pos, play.player, True)


def _outpost(play: _Play) -> None:
    play.game.outpost_played += 1
    play.discard_played()


def _salvager(play: _Play) -> None:
    game = play.game
    game.num_buys += 1
    if play.choice1:
        salvaged = _hand_at(game, play.player, play.choice1)
        _remove(game, play.player, [(play.choice1, True), (play.hand_pos, False)])
        game.coins += get_cost(salvaged)
    else:
        play.discard_played()


def _sea_hag(play: _Play) -> None:
    game = play.game
    for other in play.others():
        deck = game.decks[other]
        if deck:
            game.discards[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(play: _Play) -> None:
    game = play.game
    partner = next(
        (
            i
            for i, card in enumerate(play.hand)
            if card == Card.TREASURE_MAP and i != play.hand_pos
        ),
        None,
    )
    if partner is None:
        raise InvalidPlayError("a second treasure map is needed")
    _remove(game, play.player, [(play.hand_pos, True), (partner, True)])
    for _ in range(4):
        _gain(game, Card.GOLD, play.player, GainTo.DECK)


_EFFECTS: dict[int, Callable[[_Play], None]] = {
    Card.ADVENTURER: _adventurer,
    Card.COUNCIL_ROOM: _council_room,
    Card.FEAST: _feast,
    Card.GARDENS: _gardens,
    Card.MINE: _mine,
    Card.REMODEL: _remodel,
    Card.SMITHY: _smithy,
    Card.VILLAGE: _village,
    Card.BARON: _baron,
    Card.GREAT_HALL: _great_hall,
    Card.MINION: _minion,
    Card.STEWARD: _steward,
    Card.TRIBUTE: _tribute,
    Card.AMBASSADOR: _ambassador,
    Card.CUTPURSE: _cutpurse,
    Card.EMBARGO: _embargo,
    Card.OUTPOST: _outpost,
    Card.SALVAGER: _salvager,
    Card.SEA_HAG: _sea_hag,
    Card.TREASURE_MAP: _treasure_map,
}


def card_effect(
    game: Game,
    card: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
    hand_pos: int = 0,
) -> None:
    """Carry out what a card does for the current player.

    Raises InvalidPlayError if the card cannot be played that way.
    """
    effect = _EFFECTS.get(card)
    if effect is None:
        raise InvalidPlayError(f"card {card} has no action")
    play = _Play(game, game.whose_turn(), choice1, choice2, choice3, hand_pos)
    try:
        effect(play)
    except InvalidPlayError:
        raise
    except GameError as exc:
        raise InvalidPlayError(str(exc)) from exc


def play_card(
    game: Game,
    hand_pos: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
) -> None:
    """Play the action card at a position in the current player's hand."""
    if game.phase != Phase.ACTION:
        raise InvalidPlayError("actions can only be played in the action phase")
    if game.num_actions < 1:
        raise InvalidPlayError("no actions left")
    try:
        card = game.hand_card(hand_pos)
    except GameError as exc:
        raise InvalidPlayError(str(exc)) from exc
    if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
        raise InvalidPlayError(f"card {card} is not an action")
    card_effect(game, card, choice1, choice2, choice3, hand_pos)
    game.num_actions -= 1
    game.update_coins(game.whose_turn(), 0)