"""Blackjack round engine with state machine."""

import logging
from decimal import Decimal
from random import Random, SystemRandom
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.errors import IllegalActionError, InvalidBetError
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.ledger import Ledger, parse_bet
from blackjack.game.state import Outcome, RoundState
from blackjack.game.view import TableView
from blackjack.hand import BLACKJACK, Hand, card_value
from config import GameConfig, config

logger = logging.getLogger(__name__)

INVALID_BET_MESSAGE = "Please enter a valid bet amount."


class GameSession:
    """
    One player against the dealer, with a balance carried across rounds.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events, queries and exceptions only.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "place_bet", "source": ["idle", "settled"], "dest": "dealing"},
        {"trigger": "deal_cards", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "settled"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "settled"},
        {"trigger": "force_idle", "source": "*", "dest": "idle"},
    ]

    def __init__(
        self,
        game_config: GameConfig | None = None,
        rng: Random | None = None,
        deck_factory: Callable[[], Deck] | None = None,
    ) -> None:
        """
        Initialize a new session.

        Args:
            game_config: Balance and dealer settings (uses global config if not provided)
            rng: Random source used to shuffle each round's deck
            deck_factory: Returns a ready-to-deal deck for each round; replaces
                the default fresh-and-shuffled deck
        """
        self.config = game_config or config.game
        self._rng = rng or SystemRandom()
        self._deck_factory = deck_factory or self._shuffled_deck

        self.ledger = Ledger(initial_balance=self.config.initial_balance)
        self.deck: Deck | None = None
        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.outcome: Outcome | None = None
        self.message = ""
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    # Commands

    def start_round(self, bet_amount: object) -> None:
        """
        Take a bet and deal a new round.

        The bet is deducted up front whatever the balance, then two cards
        each are dealt in player, dealer, player, dealer order.

        Raises:
            InvalidBetError: bet is not a positive integer; nothing changes
            IllegalActionError: a round is already in progress
        """
        if not self.can_deal:
            self._reject("deal")

        try:
            amount = parse_bet(bet_amount)
        except InvalidBetError:
            logger.warning("Rejected bet %r", bet_amount)
            self.events.emit_new(
                EventType.INVALID_BET,
                bet=bet_amount,
                message=INVALID_BET_MESSAGE,
            )
            raise

        # Fresh deck and hands every round; the deck is built before any money moves
        deck = self._deck_factory()

        self.place_bet()  # Trigger state transition
        self.deck = deck
        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.outcome = None
        self.message = ""
        self.ledger.place_bet(amount)
        self.events.emit_new(
            EventType.BET_PLACED,
            amount=amount,
            balance=self.ledger.balance,
        )

        # Deal: player, dealer (face down), player, dealer
        for hand, face_up in (
            (self.player_hand, True),
            (self.dealer_hand, False),
            (self.player_hand, True),
            (self.dealer_hand, True),
        ):
            # A handler may reset the game mid-deal
            if self.state != RoundState.DEALING:
                return
            self._deal_card_to_hand(hand, face_up=face_up)

        if self.state != RoundState.DEALING:
            return
        self.deal_cards()
        logger.info(
            "Round started: bet %s, player %s, dealer shows %s",
            amount,
            self.player_hand,
            self.dealer_hand[1],
        )
        self.events.emit_new(
            EventType.ROUND_STARTED,
            bet=amount,
            player_score=self.player_score,
            dealer_score=self.dealer_score,
        )
        self._publish()

    def hit(self) -> None:
        """
        Player takes another card.

        Going over 21 settles the round at once as a bust; the dealer
        does not draw.
        """
        if self.state != RoundState.PLAYER_TURN:
            self._reject("hit")

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.value)

        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            if self.state == RoundState.PLAYER_TURN:
                self.player_busts(outcome=Outcome.BUST)

        self._publish()

    def stand(self) -> None:
        """Player stands; the dealer plays out and the round settles."""
        if self.state != RoundState.PLAYER_TURN:
            self._reject("stand")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.player_done()
        self._play_dealer()
        self._publish()

    def reset(self) -> None:
        """Hard reset: initial balance, empty hands, back to idle."""
        self.ledger.reset()
        self.deck = None
        self.player_hand.clear()
        self.dealer_hand.clear()
        self.outcome = None
        self.message = ""
        self.force_idle()

        logger.info("Game reset, balance %s", self.ledger.balance)
        self.events.emit_new(EventType.GAME_RESET, balance=self.ledger.balance)
        self._publish()

    # Internals

    def _shuffled_deck(self) -> Deck:
        deck = Deck(rng=self._rng)
        deck.shuffle()
        return deck

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        if self.deck is None:
            raise RuntimeError("No deck in play")
        card = self.deck.deal()
        hand.add_card(card)
        is_dealer = hand is self.dealer_hand
        logger.debug("Dealt %s to %s", card, "dealer" if is_dealer else "player")
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if is_dealer else "player",
            hand_value=None if is_dealer else hand.value,
        )
        return card

    def _play_dealer(self) -> None:
        """Dealer reveals, then draws while under the stand total."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_hand[0]),
            hand_value=self.dealer_hand.value,
        )

        # A handler may reset the game mid-draw; stop as soon as we leave the turn
        while (
            self.state == RoundState.DEALER_TURN
            and self.dealer_hand.value < self.config.dealer_stands_on
        ):
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if self.state != RoundState.DEALER_TURN:
            return

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        if self.state == RoundState.DEALER_TURN:
            self.dealer_done(outcome=self._determine_outcome())

    def _determine_outcome(self) -> Outcome:
        """Compare totals once the dealer has finished drawing."""
        player_value = self.player_hand.value
        dealer_value = self.dealer_hand.value

        if dealer_value > BLACKJACK or player_value > dealer_value:
            return Outcome.PLAYER_WIN
        if player_value == dealer_value:
            return Outcome.PUSH
        return Outcome.DEALER_WIN

    def on_enter_settled(self, outcome: Outcome) -> None:
        """Pay out the round; runs on every transition into SETTLED."""
        self.outcome = outcome
        self.message = outcome.message
        payout = self.ledger.apply_outcome(outcome, self.ledger.current_bet)

        logger.info(
            "Round settled: %s (player %s, dealer %s), payout %s, balance %s",
            outcome.name,
            self.player_hand.value,
            self.dealer_hand.value,
            payout,
            self.ledger.balance,
        )
        self.events.emit_new(
            EventType.ROUND_SETTLED,
            outcome=outcome,
            message=outcome.message,
            payout=payout,
            balance=self.ledger.balance,
        )

    def _reject(self, action: str) -> None:
        """Report a command that is not allowed in the current state."""
        logger.warning("Rejected %s in state %s", action, self.state)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            action=action,
            state=self.state.name,
            message=f"Cannot {action} in current state",
        )
        raise IllegalActionError(action, self.state)

    def _publish(self) -> None:
        self.events.emit_new(EventType.TABLE_UPDATED, view=self.view())

    # Queries

    @property
    def hole_card_hidden(self) -> bool:
        """The dealer's first card stays face-down while dealing and during the player's turn."""
        return self.state in (RoundState.DEALING, RoundState.PLAYER_TURN)

    @property
    def player_score(self) -> int | None:
        """Player total, or None before any cards are dealt."""
        if not self.player_hand:
            return None
        return self.player_hand.value

    @property
    def dealer_score(self) -> int | None:
        """
        Dealer total as the player may see it.

        While the hole card is hidden only the second dealt card counts, and
        nothing is shown until that card is out.
        """
        if not self.dealer_hand:
            return None
        if self.hole_card_hidden:
            if len(self.dealer_hand) < 2:
                return None
            return card_value(self.dealer_hand[1])
        return self.dealer_hand.value

    @property
    def balance(self) -> Decimal:
        """Current balance."""
        return self.ledger.balance

    @property
    def current_bet(self) -> int:
        """Stake of the current or last round."""
        return self.ledger.current_bet

    @property
    def cards_remaining(self) -> int:
        """Cards left in this round's deck."""
        return len(self.deck) if self.deck is not None else 0

    @property
    def can_deal(self) -> bool:
        """Check if a new round may start."""
        return self.state in (RoundState.IDLE, RoundState.SETTLED)

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == RoundState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == RoundState.PLAYER_TURN

    def view(self) -> TableView:
        """Snapshot of the table for rendering."""
        return TableView(
            state=self.state,
            player_cards=tuple(self.player_hand),
            dealer_cards=tuple(self.dealer_hand),
            hole_card_hidden=self.hole_card_hidden,
            player_score=self.player_score,
            dealer_score=self.dealer_score,
            balance=self.ledger.balance,
            current_bet=self.ledger.current_bet,
            outcome=self.outcome,
            message=self.message,
            can_deal=self.can_deal,
            can_hit=self.can_hit,
            can_stand=self.can_stand,
        )
