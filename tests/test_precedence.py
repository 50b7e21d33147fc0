"""Tests for card precedence and sorting."""

from cho_dai_di.game.precedence import (
    SortCardsBy,
    cmp_card,
    cmp_rank,
    cmp_suit,
    highest_card,
    lowest_card,
    sort_by_rank,
    sort_by_suit,
    sort_hand,
)
from cho_dai_di.models.card import (
    STANDARD_DECK,
    THREE_OF_DIAMONDS,
    TWO_OF_SPADES,
    Card,
    Hand,
    Rank,
    Suit,
)


class TestComparisons:
    """Tests for rank, suit and card comparison."""

    def test_suit_order(self):
        """Test Diamonds < Clubs < Hearts < Spades."""
        assert cmp_suit(Suit.DIAMONDS, Suit.CLUBS) == -1
        assert cmp_suit(Suit.CLUBS, Suit.HEARTS) == -1
        assert cmp_suit(Suit.HEARTS, Suit.SPADES) == -1
        assert cmp_suit(Suit.SPADES, Suit.DIAMONDS) == 1

    def test_rank_order(self):
        """Test Three is lowest and Two is highest."""
        assert cmp_rank(Rank.THREE, Rank.FOUR) == -1
        assert cmp_rank(Rank.ACE, Rank.KING) == 1
        assert cmp_rank(Rank.TWO, Rank.ACE) == 1
        assert cmp_rank(Rank.TEN, Rank.TEN) == 0

    def test_three_of_diamonds_lowest(self):
        """Test that 3D is below every other card."""
        for card in STANDARD_DECK:
            if card != THREE_OF_DIAMONDS:
                assert cmp_card(THREE_OF_DIAMONDS, card) == -1

    def test_two_of_spades_highest(self):
        """Test that 2S is above every other card."""
        for card in STANDARD_DECK:
            if card != TWO_OF_SPADES:
                assert cmp_card(TWO_OF_SPADES, card) == 1

    def test_card_equal_to_itself(self):
        """Test that a card compares equal only to itself."""
        for card in STANDARD_DECK:
            assert cmp_card(card, card) == 0

    def test_rank_before_suit(self):
        """Test that rank decides before suit."""
        assert cmp_card(Card.parse("4D"), Card.parse("3S")) == 1
        assert cmp_card(Card.parse("3S"), Card.parse("3H")) == 1

    def test_highest_and_lowest(self):
        """Test highest/lowest card lookups."""
        hand = Hand.of("KH", "2D", "3C", "AS")
        assert highest_card(hand) == Card.parse("2D")
        assert lowest_card(hand) == Card.parse("3C")
        assert highest_card([]) is None
        assert lowest_card([]) is None


class TestSorting:
    """Tests for hand sort orders."""

    def test_sort_by_rank(self):
        """Test rank-major sort."""
        hand = Hand.of("2S", "3H", "AD", "3D", "10C")
        sort_by_rank(hand)
        assert hand == Hand.of("3D", "3H", "10C", "AD", "2S")

    def test_sort_by_suit(self):
        """Test suit-major sort."""
        hand = Hand.of("2S", "3H", "AD", "3D", "10C")
        sort_by_suit(hand)
        assert hand == Hand.of("3D", "AD", "10C", "3H", "2S")

    def test_sort_full_deck_by_rank(self):
        """Test that a sorted deck runs from 3D to 2S."""
        hand = Hand(reversed(STANDARD_DECK))
        sort_by_rank(hand)
        assert hand[0] == THREE_OF_DIAMONDS
        assert hand[-1] == TWO_OF_SPADES

    def test_sort_hand_toggle(self):
        """Test sorting by the selected display order."""
        order = SortCardsBy.RANK
        hand = Hand.of("4D", "3S")

        sort_hand(hand, order)
        assert hand == Hand.of("3S", "4D")

        order = order.toggled()
        assert order == SortCardsBy.SUIT
        sort_hand(hand, order)
        assert hand == Hand.of("4D", "3S")
        assert order.toggled() == SortCardsBy.RANK
