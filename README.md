# dominionsim

A small engine for a deck-building card game. All shuffling comes from a
deterministic multi-stream Lehmer random number generator, so a game played
from the same seed with the same moves always turns out the same.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Commands

Play a scripted two-player game and print the final scores. Player 0 buys
Smithies, and player 1 buys Adventurers:

    dominion-playdom 42

Play at the console. The seed must be a positive integer. Type `help` to list
the commands. Type `init 2 1` to start a two-player game in which player 1 is
a bot:

    dominion-player 42

Commands are matched on their first four letters: `add`, `buy`, `end`,
`exit`, `help`, `init`, `num`, `play`, `resign`, `show`, `stat`, `supp` and
`whos`. Once a game has been started with `init` and it ends, the console
prints the scores, the winners and every player's cards.

Draw values in the range 0 to 999,999,999 from random stream 1 with the given
seed until the target value comes up, then print `Found the bug!`:

    dominion-seedsearch 1 123456789

The search keeps drawing until it finds the target, so it can run for a long
time.

## Library use

    from dominionsim.rngs import RandomStreams
    from dominionsim.cards import Card
    from dominionsim.game import Game, GameError
    from dominionsim.effects import play_card, InvalidPlayError

    kingdom = [Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE,
               Card.MINION, Card.MINE, Card.CUTPURSE, Card.SEA_HAG,
               Card.TRIBUTE, Card.SMITHY]
    game = Game(2, kingdom, 42, RandomStreams())
    print(game.whose_turn(), game.num_hand_cards(), game.coins)
    game.buy_card(Card.SILVER)
    game.end_turn()
    print(game.is_game_over(), game.get_winners())

- `dominionsim.rngs.RandomStreams` holds the 256 random streams. Its methods
  are `random`, `put_seed`, `get_seed`, `select_stream`, `plant_seeds` and
  `self_test`. A seed of 0 makes `put_seed` ask for a seed on standard input,
  and a negative seed takes its value from the clock.
- `dominionsim.cards` defines the `Card` and `Phase` enums, along with
  `get_cost`, `card_cost`, `card_name` and `phase_name`.
- `dominionsim.game.Game` holds the game state: supply, decks, hands, discard
  piles and played cards. It implements the basic rules: `shuffle`,
  `draw_card`, `buy_card`, `gain_card`, `discard_card`, `end_turn`,
  `is_game_over`, `score_for` and `get_winners`. `get_winners` returns one
  flag for each of the four seats.
- `dominionsim.effects.play_card` plays an action card from the current
  player's hand. `card_effect` applies a card's effect directly.
- `dominionsim.interface` provides the text views used by the console:
  `format_hand`, `format_deck`, `format_played`, `format_discard`,
  `format_supply`, `format_state`, `format_scores` and `help_text`. It also
  provides `add_card_to_hand`, `select_kingdom_cards`, `count_hand_coins`
  and the bot turn, `execute_bot_turn`.
- `dominionsim.playdom.play_game` runs the scripted game and returns both
  scores.
- `dominionsim.seedsearch.find_value` returns how many draws it took to reach
  the target.
- `dominionsim.player.run` runs the console game, reading from and writing
  to the streams you give it.

Moves that the rules do not allow raise `GameError`. Examples are buying
without enough coins, buying with no buys left, and buying from an empty
pile. A card that cannot be played with the given choices raises
`InvalidPlayError`, which is a subclass of `GameError`.

## What it does not do

The package has no graphical interface and no network play. Games are not
saved: a game exists only while the process runs. The only way to reproduce a
game is to replay it from its seed.