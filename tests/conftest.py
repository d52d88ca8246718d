"""Pytest fixtures for blackjack engine tests."""

from decimal import Decimal
from random import Random

import pytest

from blackjack.cards import Deck
from blackjack.game import GameSession
from blackjack.hand import Hand
from config import GameConfig
from tests.helpers import EventRecorder, cards


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand(cards("AS", "6H"))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand(cards("10S", "6H", "KC"))


@pytest.fixture
def session(rng):
    """A new session with a seeded shuffle."""
    return GameSession(
        game_config=GameConfig(initial_balance=Decimal("1000")),
        rng=rng,
    )


@pytest.fixture
def recorder():
    """Event recorder to subscribe to a session."""
    return EventRecorder()
