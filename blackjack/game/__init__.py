"""Round engine, ledger and state management."""

from blackjack.game.events import GameEvent, EventEmitter, EventType
from blackjack.game.state import Outcome, RoundState
from blackjack.game.ledger import Ledger, format_currency, parse_bet, payout_for
from blackjack.game.view import TableView
from blackjack.game.engine import GameSession

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "Outcome",
    "RoundState",
    "Ledger",
    "format_currency",
    "parse_bet",
    "payout_for",
    "TableView",
    "GameSession",
]
