"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from blackjack.cards import Card

BLACKJACK = 21


def card_value(card: Card) -> int:
    """Return 11 for an Ace, 10 for a face card, else the pip value."""
    return card.value


def score(cards: Iterable[Card]) -> int:
    """
    Calculate the best total for a set of cards.

    Aces start at 11 and drop to 1 one at a time while the total busts.
    Returns the highest total that doesn't bust, or the lowest bust total.
    """
    total = 0
    aces = 0

    for card in cards:
        total += card_value(card)
        if card.is_ace:
            aces += 1

    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


@dataclass
class Hand:
    """Cards held by the player or the dealer."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """Best total for the hand."""
        return score(self.cards)

    @property
    def is_soft(self) -> bool:
        """Check if an Ace is still counted as 11."""
        if not any(card.is_ace for card in self.cards):
            return False
        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_busted:
            return f"{cards_str} (BUST)"
        if self.is_soft:
            return f"{cards_str} (soft {self.value})"
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
