"""Shared builders for engine tests."""

from decimal import Decimal

from hypothesis import strategies as st

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.game import EventType, GameEvent, GameSession
from config import GameConfig


def cards(*codes: str) -> list[Card]:
    """Build cards from short codes like 'AS', '10H', 'KD'."""
    return [Card.from_string(code) for code in codes]


def stacked_session(*codes: str, initial_balance: str = "1000", **kwargs) -> GameSession:
    """
    A session whose every round deals the given cards in order.

    Deal order is player, dealer, player, dealer, then hits and dealer draws.
    """
    order = cards(*codes)
    return GameSession(
        game_config=GameConfig(initial_balance=Decimal(initial_balance)),
        deck_factory=lambda: Deck.stacked(order),
        **kwargs,
    )


class EventRecorder:
    """Collects every emitted event."""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def __call__(self, event: GameEvent) -> None:
        self.events.append(event)

    def types(self) -> list[EventType]:
        return [e.event_type for e in self.events]

    def of(self, event_type: EventType) -> list[GameEvent]:
        return [e for e in self.events if e.event_type == event_type]


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def cards_strategy(draw, min_cards=0, max_cards=11):
    """Generate a random list of cards."""
    return draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
