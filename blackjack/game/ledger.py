"""Balance bookkeeping: bet deduction and round payouts."""

import logging
from decimal import Decimal

from blackjack.errors import InvalidBetError
from blackjack.game.state import Outcome

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_BALANCE = Decimal("1000")


def parse_bet(amount: object) -> int:
    """
    Validate a bet and return it as an int.

    Accepts an int or a string holding an integer. Booleans, floats and
    anything that is not strictly positive are rejected.

    Raises:
        InvalidBetError: if the bet is non-numeric or not positive
    """
    if isinstance(amount, bool):
        raise InvalidBetError(amount)

    if isinstance(amount, int):
        value = amount
    elif isinstance(amount, str):
        try:
            value = int(amount.strip())
        except ValueError:
            raise InvalidBetError(amount) from None
    else:
        raise InvalidBetError(amount)

    if value <= 0:
        raise InvalidBetError(amount)
    return value


def payout_for(outcome: Outcome, bet: int) -> Decimal:
    """
    Amount credited back for a settled round.

    The bet has already been deducted when the round started, so a win
    returns the stake plus equal winnings and a push returns the stake.
    """
    if outcome is Outcome.PLAYER_WIN:
        return Decimal(bet) * 2
    if outcome is Outcome.PUSH:
        return Decimal(bet)
    return Decimal("0")


def format_currency(amount: Decimal | int) -> str:
    """Format a balance as dollars, e.g. '$1,000.00' or '-$50.00'."""
    amount = Decimal(amount)
    prefix = "-$" if amount < 0 else "$"
    return f"{prefix}{abs(amount):,.2f}"


class Ledger:
    """
    Fake-money balance that outlives rounds.

    The balance has no floor or ceiling: bets are never capped by the
    funds on hand and the balance may go negative.
    """

    def __init__(self, initial_balance: Decimal = DEFAULT_INITIAL_BALANCE) -> None:
        self._initial_balance = Decimal(initial_balance)
        self.balance: Decimal = self._initial_balance
        self.current_bet: int = 0

    @property
    def initial_balance(self) -> Decimal:
        """Balance restored by reset()."""
        return self._initial_balance

    def place_bet(self, amount: int) -> None:
        """Deduct a validated bet from the balance."""
        self.current_bet = amount
        self.balance -= amount
        logger.debug("Bet %s placed, balance now %s", amount, self.balance)

    def apply_outcome(self, outcome: Outcome, bet: int | None = None) -> Decimal:
        """
        Credit the payout for a settled round.

        Args:
            outcome: How the round ended
            bet: Stake to settle (defaults to the current bet)

        Returns:
            The amount credited
        """
        stake = self.current_bet if bet is None else bet
        payout = payout_for(outcome, stake)
        self.balance += payout
        logger.debug("Settled %s on bet %s: +%s", outcome.name, stake, payout)
        return payout

    def reset(self) -> None:
        """Restore the initial balance and clear the bet."""
        self.balance = self._initial_balance
        self.current_bet = 0
