"""Blackjack rules engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import (
    BlackjackError,
    EmptyDeckError,
    IllegalActionError,
    InvalidBetError,
)
from blackjack.hand import Hand, card_value, score
from blackjack.game import GameSession, Outcome, RoundState

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "card_value",
    "score",
    "BlackjackError",
    "EmptyDeckError",
    "IllegalActionError",
    "InvalidBetError",
    "GameSession",
    "Outcome",
    "RoundState",
]
