"""Read-only table snapshot for the presentation layer."""

from dataclasses import dataclass
from decimal import Decimal

from blackjack.cards import Card
from blackjack.game.ledger import format_currency
from blackjack.game.state import Outcome, RoundState


@dataclass(frozen=True)
class TableView:
    """
    Everything a UI needs to redraw the table after a command.

    When ``hole_card_hidden`` is set, ``dealer_cards[0]`` must be drawn
    face-down and ``dealer_score`` only counts the face-up card.
    """

    state: RoundState
    player_cards: tuple[Card, ...]
    dealer_cards: tuple[Card, ...]
    hole_card_hidden: bool
    player_score: int | None
    dealer_score: int | None
    balance: Decimal
    current_bet: int
    outcome: Outcome | None
    message: str
    can_deal: bool
    can_hit: bool
    can_stand: bool

    @property
    def balance_text(self) -> str:
        """Balance formatted as dollars."""
        return format_currency(self.balance)

    @property
    def dealer_labels(self) -> list[str]:
        """Dealer card labels, with the hole card masked while hidden."""
        return [
            "??" if self.hole_card_hidden and i == 0 else str(card)
            for i, card in enumerate(self.dealer_cards)
        ]

    @property
    def player_labels(self) -> list[str]:
        """Player card labels."""
        return [str(card) for card in self.player_cards]
