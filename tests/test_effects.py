import pytest

from dominionsim.cards import Card, Phase, get_cost
from dominionsim.effects import InvalidPlayError, card_effect, play_card
from dominionsim.game import Game, GameError

KINGDOM = [
    Card.ADVENTURER,
    Card.FEAST,
    Card.MINE,
    Card.REMODEL,
    Card.SMITHY,
    Card.VILLAGE,
    Card.BARON,
    Card.GREAT_HALL,
    Card.MINION,
    Card.TRIBUTE,
]


@pytest.fixture
def game():
    g = Game(2, KINGDOM, 1)
    g.coins = 0
    g.played_cards.clear()
    return g


def arrange(game, player=0, hand=(), deck=(), discard=()):
    game.hands[player] = list(hand)
    game.decks[player] = list(deck)
    game.discards[player] = list(discard)


def test_invalid_play_can_be_caught_as_game_error(game):
    arrange(game, hand=[Card.COPPER])
    with pytest.raises(GameError):
        play_card(game, 0)
    assert game.hands[0] == [Card.COPPER]


def test_play_smithy_draws_three(game):
    arrange(game, hand=[Card.SMITHY, Card.COPPER],
            deck=[Card.ESTATE, Card.GOLD, Card.SILVER, Card.DUCHY])
    play_card(game, 0)
    assert sorted(game.hands[0]) == sorted(
        [Card.COPPER, Card.DUCHY, Card.SILVER, Card.GOLD])
    assert game.decks[0] == [Card.ESTATE]
    assert game.played_cards == [Card.SMITHY]
    assert game.num_actions == 0


def test_play_village_adds_actions(game):
    arrange(game, hand=[Card.VILLAGE], deck=[Card.ESTATE])
    before = game.num_actions
    play_card(game, 0)
    assert game.num_actions == before + 1
    assert game.hands[0] == [Card.ESTATE]


def test_play_card_rejects_treasure(game):
    arrange(game, hand=[Card.COPPER])
    with pytest.raises(InvalidPlayError):
        play_card(game, 0)


def test_play_card_rejects_buy_phase(game):
    arrange(game, hand=[Card.SMITHY])
    game.phase = Phase.BUY
    with pytest.raises(InvalidPlayError):
        play_card(game, 0)


def test_play_card_rejects_no_actions(game):
    arrange(game, hand=[Card.SMITHY])
    game.num_actions = 0
    with pytest.raises(InvalidPlayError):
        play_card(game, 0)


def test_play_card_rejects_bad_position(game):
    arrange(game, hand=[Card.SMITHY])
    with pytest.raises(InvalidPlayError):
        play_card(game, 5)


def test_gardens_cannot_be_played(game):
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.GARDENS)


def test_bad_hand_position_becomes_invalid_play(game):
    arrange(game, hand=[Card.SMITHY])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.SMITHY, hand_pos=7)


def test_adventurer_keeps_two_treasures(game):
    arrange(game, hand=[Card.ADVENTURER],
            deck=[Card.GOLD, Card.ESTATE, Card.SILVER, Card.DUCHY])
    card_effect(game, Card.ADVENTURER)
    assert game.hands[0] == [Card.ADVENTURER, Card.SILVER, Card.GOLD]
    assert game.discards[0] == [Card.ESTATE, Card.DUCHY]


def test_adventurer_stops_when_out_of_cards(game):
    arrange(game, hand=[Card.ADVENTURER], deck=[Card.ESTATE])
    card_effect(game, Card.ADVENTURER)
    assert game.hands[0] == [Card.ADVENTURER]
    assert game.discards[0] == [Card.ESTATE]


def test_council_room(game):
    arrange(game, hand=[Card.COUNCIL_ROOM], deck=[Card.COPPER] * 5)
    arrange(game, player=1, hand=[], deck=[Card.GOLD])
    buys = game.num_buys
    card_effect(game, Card.COUNCIL_ROOM)
    assert game.hands[0] == [Card.COPPER] * 4
    assert game.hands[1] == [Card.GOLD]
    assert game.num_buys == buys + 1
    assert game.played_cards == [Card.COUNCIL_ROOM]


def test_feast_gains_card(game):
    arrange(game, hand=[Card.FEAST])
    before = game.supply[Card.SMITHY]
    card_effect(game, Card.FEAST, Card.SMITHY)
    assert game.discards[0] == [Card.SMITHY]
    assert game.supply[Card.SMITHY] == before - 1
    assert game.hands[0] == [Card.FEAST]


def test_feast_rejects_expensive_card(game):
    arrange(game, hand=[Card.FEAST])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.FEAST, Card.GOLD)


def test_feast_rejects_unused_pile(game):
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.FEAST, Card.SEA_HAG)


def test_mine_turns_copper_into_gold(game):
    arrange(game, hand=[Card.MINE, Card.COPPER])
    card_effect(game, Card.MINE, 1, Card.GOLD, 0, 0)
    assert game.hands[0] == [Card.GOLD]
    assert game.played_cards == [Card.MINE, Card.COPPER]


def test_mine_rejects_cheap_target(game):
    arrange(game, hand=[Card.MINE, Card.COPPER])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.MINE, 1, Card.ESTATE, 0, 0)


def test_mine_rejects_non_treasure(game):
    arrange(game, hand=[Card.MINE, Card.ESTATE])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.MINE, 1, Card.GOLD, 0, 0)


def test_remodel(game):
    arrange(game, hand=[Card.REMODEL, Card.ESTATE])
    card_effect(game, Card.REMODEL, 1, Card.GOLD, 0, 0)
    assert game.discards[0] == [Card.GOLD]
    assert game.hands[0] == []


def test_remodel_rejects_cheap_target(game):
    arrange(game, hand=[Card.REMODEL, Card.ESTATE])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.REMODEL, 1, Card.SILVER, 0, 0)


def test_baron_discards_estate(game):
    arrange(game, hand=[Card.BARON, Card.ESTATE, Card.COPPER])
    coins, buys = game.coins, game.num_buys
    card_effect(game, Card.BARON, 1)
    assert game.hands[0] == [Card.BARON, Card.COPPER]
    assert game.discards[0] == [Card.ESTATE]
    assert game.coins == coins + 4
    assert game.num_buys == buys + 1


def test_baron_gains_estate(game):
    arrange(game, hand=[Card.BARON])
    before = game.supply[Card.ESTATE]
    card_effect(game, Card.BARON, 0)
    assert game.discards[0] == [Card.ESTATE]
    assert game.supply[Card.ESTATE] == before - 2


def test_great_hall(game):
    arrange(game, hand=[Card.GREAT_HALL], deck=[Card.SILVER])
    actions = game.num_actions
    card_effect(game, Card.GREAT_HALL)
    assert game.hands[0] == [Card.SILVER]
    assert game.num_actions == actions + 1


def test_minion_coins(game):
    arrange(game, hand=[Card.MINION, Card.COPPER])
    coins, actions = game.coins, game.num_actions
    card_effect(game, Card.MINION, 1, 0, 0, 0)
    assert game.coins == coins + 2
    assert game.num_actions == actions + 1
    assert game.played_cards == [Card.MINION]


def test_minion_redraw(game):
    arrange(game, hand=[Card.MINION, Card.COPPER, Card.ESTATE],
            deck=[Card.SILVER] * 5)
    arrange(game, player=1, hand=[Card.ESTATE] * 5, deck=[Card.GOLD] * 4)
    card_effect(game, Card.MINION, 0, 1, 0, 0)
    assert game.hands[0] == [Card.SILVER] * 4
    assert game.hands[1] == [Card.GOLD] * 4
    assert game.played_cards.count(Card.ESTATE) == 6


def test_steward_coins(game):
    arrange(game, hand=[Card.STEWARD])
    coins = game.coins
    card_effect(game, Card.STEWARD, 2)
    assert game.coins == coins + 2
    assert game.hands[0] == []


def test_steward_trash_two(game):
    arrange(game, hand=[Card.STEWARD, Card.ESTATE, Card.CURSE, Card.COPPER])
    card_effect(game, Card.STEWARD, 3, 1, 2, 0)
    assert game.hands[0] == [Card.COPPER]
    assert game.played_cards == [Card.STEWARD]


def test_steward_same_position_twice(game):
    arrange(game, hand=[Card.STEWARD, Card.ESTATE])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.STEWARD, 3, 1, 1, 0)


def test_tribute_treasure_and_victory(game):
    arrange(game, hand=[Card.TRIBUTE], deck=[Card.SILVER, Card.GOLD])
    arrange(game, player=1, deck=[Card.COPPER, Card.ESTATE])
    coins, actions = game.coins, game.num_actions
    card_effect(game, Card.TRIBUTE)
    assert game.decks[1] == []
    assert sorted(game.hands[0]) == sorted([Card.TRIBUTE, Card.SILVER, Card.GOLD])
    assert game.coins == coins + 2
    assert game.num_actions == actions


def test_tribute_duplicate_counts_once(game):
    arrange(game, player=1, deck=[Card.GOLD, Card.GOLD])
    coins = game.coins
    card_effect(game, Card.TRIBUTE)
    assert game.coins == coins + 2
    assert game.played_cards == [Card.GOLD]


def test_tribute_single_curse_gives_actions(game):
    arrange(game, player=1, deck=[Card.CURSE])
    actions = game.num_actions
    card_effect(game, Card.TRIBUTE)
    assert game.num_actions == actions + 2
    assert game.decks[1] == []


def test_ambassador_returns_copy(game):
    arrange(game, hand=[Card.AMBASSADOR, Card.ESTATE, Card.ESTATE, Card.COPPER])
    arrange(game, player=1)
    before = game.supply[Card.ESTATE]
    card_effect(game, Card.AMBASSADOR, 1, 1, 0, 0)
    assert game.discards[1] == [Card.ESTATE]
    assert game.supply[Card.ESTATE] == before
    assert sorted(game.hands[0]) == sorted([Card.COPPER, Card.ESTATE])
    assert game.played_cards == [Card.AMBASSADOR]


@pytest.mark.parametrize("choice1, choice2", [(1, 3), (0, 1), (1, 1)])
def test_ambassador_rejects(game, choice1, choice2):
    arrange(game, hand=[Card.AMBASSADOR, Card.ESTATE, Card.COPPER])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.AMBASSADOR, choice1, choice2, 0, 0)


def test_embargo(game):
    arrange(game, hand=[Card.EMBARGO])
    card_effect(game, Card.EMBARGO, Card.SMITHY)
    assert game.embargo_tokens[Card.SMITHY] == 1
    assert game.hands[0] == []
    assert game.played_cards == []


def test_embargo_rejects_unused_pile(game):
    arrange(game, hand=[Card.EMBARGO])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.EMBARGO, Card.SEA_HAG)


def test_outpost(game):
    arrange(game, hand=[Card.OUTPOST])
    card_effect(game, Card.OUTPOST)
    assert game.outpost_played == 1
    assert game.played_cards == [Card.OUTPOST]


def test_salvager(game):
    arrange(game, hand=[Card.SALVAGER, Card.GOLD, Card.COPPER])
    coins, buys = game.coins, game.num_buys
    card_effect(game, Card.SALVAGER, 1)
    assert game.hands[0] == [Card.COPPER]
    assert game.coins == coins + get_cost(Card.GOLD)
    assert game.num_buys == buys + 1
    assert game.played_cards == [Card.SALVAGER]


def test_sea_hag(game):
    arrange(game, player=1, deck=[Card.COPPER, Card.GOLD])
    card_effect(game, Card.SEA_HAG)
    assert game.discards[1] == [Card.GOLD]
    assert game.decks[1] == [Card.COPPER, Card.CURSE]


def test_treasure_map_pair(game):
    arrange(game, hand=[Card.TREASURE_MAP, Card.COPPER, Card.TREASURE_MAP])
    before = game.supply[Card.GOLD]
    card_effect(game, Card.TREASURE_MAP)
    assert game.hands[0] == [Card.COPPER]
    assert game.decks[0] == [Card.GOLD] * 4
    assert game.supply[Card.GOLD] == before - 4
    assert game.played_cards == []


def test_treasure_map_alone(game):
    arrange(game, hand=[Card.TREASURE_MAP, Card.COPPER])
    with pytest.raises(InvalidPlayError):
        card_effect(game, Card.TREASURE_MAP)