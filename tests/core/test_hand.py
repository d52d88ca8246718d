"""Tests for hand scoring."""

from hypothesis import given

from blackjack.cards import Card, Rank, Suit
from blackjack.hand import Hand, card_value, score
from tests.helpers import cards, cards_strategy


class TestCardValue:
    """Tests for card_value."""

    def test_ace_is_eleven(self):
        """Test that an Ace counts 11 on its own."""
        assert card_value(Card(Rank.ACE, Suit.CLUBS)) == 11

    def test_face_cards_are_ten(self):
        """Test face card values."""
        for rank in (Rank.JACK, Rank.QUEEN, Rank.KING):
            assert card_value(Card(rank, Suit.DIAMONDS)) == 10

    def test_pip_cards(self):
        """Test numeric ranks score their number."""
        for n, rank in enumerate(
            [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX,
             Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.TEN],
            start=2,
        ):
            assert card_value(Card(rank, Suit.SPADES)) == n


class TestScore:
    """Tests for score()."""

    def test_empty(self):
        """Test that no cards score zero."""
        assert score([]) == 0

    def test_pair_of_aces(self):
        """Test A-A = 12."""
        assert score(cards("AS", "AH")) == 12

    def test_ace_king(self):
        """Test A-K = 21."""
        assert score(cards("AS", "KH")) == 21

    def test_two_aces_and_nine(self):
        """Test A-A-9 = 21."""
        assert score(cards("AS", "AH", "9C")) == 21

    def test_bust_reported_as_is(self):
        """Test 10-9-5 = 24 is returned, not capped."""
        assert score(cards("10S", "9H", "5C")) == 24

    def test_all_aces_low_still_busts(self):
        """Test the lowest total is returned when nothing avoids a bust."""
        assert score(cards("AS", "KH", "QC", "5D")) == 26

    def test_four_aces(self):
        """Test A-A-A-A = 14."""
        assert score(cards("AS", "AH", "AD", "AC")) == 14

    def test_soft_to_hard(self):
        """Test ace switching from 11 to 1."""
        assert score(cards("AS", "5H")) == 16
        assert score(cards("AS", "5H", "8C")) == 14

    @given(cards_strategy())
    def test_score_within_ace_bounds(self, hand):
        """Test score lies between the all-low and all-high totals."""
        aces = sum(1 for c in hand if c.is_ace)
        high = sum(card_value(c) for c in hand)
        low = high - 10 * aces
        result = score(hand)

        assert low <= result <= high
        assert (result - low) % 10 == 0

    @given(cards_strategy())
    def test_score_is_best_total(self, hand):
        """Test score is the max total <= 21 if one exists, else the min."""
        aces = sum(1 for c in hand if c.is_ace)
        low = sum(card_value(c) for c in hand) - 10 * aces
        totals = [low + 10 * k for k in range(aces + 1)]
        under = [t for t in totals if t <= 21]

        expected = max(under) if under else min(totals)
        assert score(hand) == expected

    @given(cards_strategy())
    def test_score_ignores_order(self, hand):
        """Test that card order does not change the score."""
        assert score(hand) == score(list(reversed(hand)))


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10
        assert empty_hand[0] == Card(Rank.TEN, Suit.SPADES)

    def test_soft_hand(self, soft_17_hand):
        """Test soft hand detection."""
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_bust(self, bust_hand):
        """Test bust detection."""
        assert bust_hand.is_busted
        assert bust_hand.value == 26
        assert "BUST" in str(bust_hand)

    def test_clear_hand(self, soft_17_hand):
        """Test clearing a hand."""
        soft_17_hand.clear()
        assert len(soft_17_hand) == 0
        assert soft_17_hand.value == 0

    def test_str(self):
        """Test hand string shows cards and total."""
        assert str(Hand(cards("10S", "7H"))) == "10♠ 7♥ (17)"
        assert str(Hand(cards("AS", "6H"))) == "A♠ 6♥ (soft 17)"
