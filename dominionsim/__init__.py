"""Deck-building card game engine: seeded random streams, game rules, card effects, a scripted game, a console player and bots."""

__version__ = "0.1.0"