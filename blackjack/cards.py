"""Card and Deck classes - immutable cards, a single 52-card deck."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random, SystemRandom
from typing import Iterable, Iterator

from blackjack.errors import EmptyDeckError


class Suit(Enum):
    """Card suits, in fresh-deck order. Cosmetic only."""

    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, in fresh-deck order."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value <= 10:
            return self.value
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_RANK_CODES = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}

_SUIT_CODES = {
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', '10h'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


def create_deck() -> list[Card]:
    """Return all 52 cards in fresh-deck order (suit by suit, A through K)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle(cards: list[Card], rng: Random) -> None:
    """
    Shuffle cards in place with the Fisher-Yates algorithm.

    Walks from the last index down to 1, swapping each element with one
    picked uniformly from [0, i]. Every permutation is equally likely given
    a uniform source.
    """
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


def deal_one(cards: list[Card]) -> Card:
    """Remove and return the top card (the end of the list)."""
    if not cards:
        raise EmptyDeckError("Cannot deal from an empty deck")
    return cards.pop()


class Deck:
    """A standard 52-card deck, dealt from the top."""

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in fresh order."""
        self._rng = rng or SystemRandom()
        self._cards: list[Card] = create_deck()

    @classmethod
    def stacked(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Build a deck with a fixed order.

        The first card given is the first card dealt.
        """
        deck = cls(rng=rng)
        deck._cards = list(reversed(list(cards)))
        return deck

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        shuffle(self._cards, self._rng)

    def deal(self) -> Card:
        """Deal a card from the top of the deck."""
        return deal_one(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
