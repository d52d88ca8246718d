"""Round state and outcome enumerations."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: IDLE → DEALING → PLAYER_TURN → DEALER_TURN → SETTLED, and SETTLED
    accepts the next bet the same way IDLE does. A player bust skips
    DEALER_TURN.
    """

    # No active round
    IDLE = auto()

    # Bet taken, initial cards going out
    DEALING = auto()

    # Cards dealt, player may hit or stand
    PLAYER_TURN = auto()

    # Dealer draws to the stand threshold
    DEALER_TURN = auto()

    # Outcome computed and paid out
    SETTLED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Outcome(Enum):
    """Result of a settled round."""

    PLAYER_WIN = "You win!"
    PUSH = "It's a push."
    BUST = "You busted and lost the hand."
    DEALER_WIN = "Dealer wins."

    @property
    def message(self) -> str:
        """Human-readable result line."""
        return self.value

