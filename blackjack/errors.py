"""Exceptions raised by the blackjack engine."""


class BlackjackError(Exception):
    """Base class for all engine errors."""


class InvalidBetError(BlackjackError, ValueError):
    """Bet is not a positive integer. The round does not start."""

    def __init__(self, bet: object) -> None:
        self.bet = bet
        super().__init__(f"Invalid bet amount: {bet!r}")


class IllegalActionError(BlackjackError):
    """Command issued in a state that does not allow it."""

    def __init__(self, action: str, state: object) -> None:
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} in state {state}")


class EmptyDeckError(BlackjackError, IndexError):
    """
    Deal attempted on an exhausted deck.

    A single deck is never exhausted in two-party play, so this indicates a
    logic error rather than a recoverable condition.
    """
