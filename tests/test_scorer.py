"""计分器单元测试 - 覆盖五项计分规则 + 已知牌例"""

import random
from itertools import permutations

import pytest
from cribbage.engine.card import Card, Rank, Suit, create_deck
from cribbage.engine.score_type import ScoreBreakdown
from cribbage.engine.scorer import (
    compute_score_breakdown, score_hand, score_fifteens, score_pairs,
    score_runs, score_flush, score_nobs, score_his_heels,
)


# ============================================================
#  辅助：快速构造牌
# ============================================================

def c(rank: Rank, suit: Suit = Suit.SPADE) -> Card:
    """快捷构造一张牌"""
    return Card(rank=rank, suit=suit)


def cards_of_rank(rank: Rank, count: int) -> list[Card]:
    """构造同点数的多张牌（自动分配不同花色）"""
    suits = [Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB]
    return [Card(rank=rank, suit=suits[i]) for i in range(count)]


# ============================================================
#  已知牌例
# ============================================================

KNOWN_HANDS = [
    # (手牌, 开牌, 是否 crib, 期望总分)
    ([c(Rank.FIVE, Suit.SPADE), c(Rank.FIVE, Suit.DIAMOND), c(Rank.FIVE, Suit.HEART), c(Rank.JACK, Suit.CLUB)],
     c(Rank.FIVE, Suit.CLUB), False, 29),
    ([c(Rank.FOUR, Suit.CLUB), c(Rank.FOUR, Suit.DIAMOND), c(Rank.FIVE, Suit.CLUB), c(Rank.SIX, Suit.HEART)],
     c(Rank.JACK, Suit.DIAMOND), False, 14),
    ([c(Rank.FOUR, Suit.CLUB), c(Rank.SEVEN, Suit.HEART), c(Rank.FIVE, Suit.CLUB), c(Rank.SIX, Suit.HEART)],
     c(Rank.JACK, Suit.DIAMOND), False, 8),
    ([c(Rank.FOUR, Suit.CLUB), c(Rank.SEVEN, Suit.HEART), c(Rank.FIVE, Suit.CLUB), c(Rank.SIX, Suit.HEART)],
     c(Rank.EIGHT, Suit.DIAMOND), False, 9),
    ([c(Rank.FIVE, Suit.SPADE), c(Rank.FIVE, Suit.DIAMOND), c(Rank.FIVE, Suit.HEART), c(Rank.FIVE, Suit.CLUB)],
     c(Rank.JACK, Suit.CLUB), False, 28),
    ([c(Rank.SEVEN, Suit.HEART), c(Rank.EIGHT, Suit.DIAMOND), c(Rank.SEVEN, Suit.CLUB), c(Rank.EIGHT, Suit.CLUB)],
     c(Rank.SIX, Suit.HEART), False, 24),
    ([c(Rank.JACK, Suit.DIAMOND), c(Rank.EIGHT, Suit.DIAMOND), c(Rank.FOUR, Suit.DIAMOND), c(Rank.TEN, Suit.CLUB)],
     c(Rank.SIX, Suit.HEART), False, 0),
    ([c(Rank.JACK, Suit.DIAMOND), c(Rank.EIGHT, Suit.DIAMOND), c(Rank.TEN, Suit.CLUB), c(Rank.SIX, Suit.HEART)],
     c(Rank.FOUR, Suit.DIAMOND), False, 1),
    ([c(Rank.JACK, Suit.DIAMOND), c(Rank.FOUR, Suit.DIAMOND), c(Rank.EIGHT, Suit.DIAMOND), c(Rank.SIX, Suit.DIAMOND)],
     c(Rank.TEN, Suit.CLUB), False, 4),
    ([c(Rank.JACK, Suit.DIAMOND), c(Rank.FOUR, Suit.DIAMOND), c(Rank.EIGHT, Suit.DIAMOND), c(Rank.SIX, Suit.DIAMOND)],
     c(Rank.TEN, Suit.CLUB), True, 0),
    ([c(Rank.TWO, Suit.DIAMOND), c(Rank.FOUR, Suit.DIAMOND), c(Rank.EIGHT, Suit.DIAMOND), c(Rank.SIX, Suit.DIAMOND)],
     c(Rank.TEN, Suit.DIAMOND), False, 5),
    ([c(Rank.TWO, Suit.DIAMOND), c(Rank.FOUR, Suit.DIAMOND), c(Rank.EIGHT, Suit.DIAMOND), c(Rank.SIX, Suit.DIAMOND)],
     c(Rank.TEN, Suit.DIAMOND), True, 5),
]


class TestKnownHands:
    """已知总分的牌例"""

    @pytest.mark.parametrize("hand,starter,is_crib,expected", KNOWN_HANDS)
    def test_total(self, hand, starter, is_crib, expected):
        assert score_hand(is_crib, starter, hand) == expected

    def test_29_breakdown(self):
        hand, starter, _, _ = KNOWN_HANDS[0]
        b = compute_score_breakdown(False, starter, hand)
        assert b == ScoreBreakdown(fifteens=16, pairs=12, runs=0, flush=0, nobs=1)
        assert b.total == 29

    def test_28_has_no_nobs_when_jack_is_starter(self):
        """J 是开牌时不算同花色 J"""
        b = compute_score_breakdown(False, c(Rank.JACK, Suit.CLUB), cards_of_rank(Rank.FIVE, 4))
        assert b.nobs == 0
        assert b.fifteens == 16
        assert b.pairs == 12

    def test_double_run_breakdown(self):
        """4-4-5-6 + J：两个 3 张顺子"""
        hand, starter, _, _ = KNOWN_HANDS[1]
        b = compute_score_breakdown(False, starter, hand)
        assert b.runs == 6
        assert b.pairs == 2
        assert b.fifteens == 6


# ============================================================
#  凑十五 / 对子
# ============================================================

class TestFifteensAndPairs:

    def test_ten_and_five(self):
        assert score_fifteens([c(Rank.KING), c(Rank.FIVE)]) == 2

    def test_no_fifteen(self):
        assert score_fifteens([c(Rank.ACE), c(Rank.TWO), c(Rank.THREE)]) == 0

    def test_card_reused_in_many_fifteens(self):
        """一张 5 与四张十点牌各凑一次"""
        cards = [c(Rank.FIVE), c(Rank.TEN), c(Rank.JACK), c(Rank.QUEEN), c(Rank.KING)]
        assert score_fifteens(cards) == 8

    def test_five_card_fifteen(self):
        cards = [c(Rank.ACE), c(Rank.TWO), c(Rank.THREE), c(Rank.FOUR), c(Rank.FIVE)]
        # 只有 1+2+3+4+5 一组
        assert score_fifteens(cards) == 2

    @pytest.mark.parametrize("count,expected", [(1, 0), (2, 2), (3, 6), (4, 12)])
    def test_pairs_scale_quadratically(self, count, expected):
        assert score_pairs(cards_of_rank(Rank.NINE, count)) == expected

    def test_pair_ignores_suit(self):
        assert score_pairs([c(Rank.QUEEN, Suit.HEART), c(Rank.QUEEN, Suit.CLUB)]) == 2

    def test_face_cards_of_different_rank_do_not_pair(self):
        assert score_pairs([c(Rank.JACK), c(Rank.QUEEN), c(Rank.KING)]) == 0


# ============================================================
#  顺子
# ============================================================

class TestRuns:

    def test_five_card_run_scores_five_only(self):
        cards = [c(Rank.NINE), c(Rank.TEN, Suit.HEART), c(Rank.JACK),
                 c(Rank.QUEEN, Suit.CLUB), c(Rank.KING, Suit.DIAMOND)]
        assert score_runs(cards) == 5

    def test_four_card_run(self):
        cards = [c(Rank.ACE), c(Rank.TWO), c(Rank.THREE), c(Rank.FOUR), c(Rank.NINE)]
        assert score_runs(cards) == 4

    def test_double_four_card_run(self):
        """4-5-5-6-7：两个 4 张顺子"""
        cards = [c(Rank.FOUR), c(Rank.FIVE, Suit.HEART), c(Rank.FIVE, Suit.CLUB),
                 c(Rank.SIX), c(Rank.SEVEN)]
        assert score_runs(cards) == 8

    def test_triple_run(self):
        """3-3-3-4-5：三个 3 张顺子"""
        cards = cards_of_rank(Rank.THREE, 3) + [c(Rank.FOUR), c(Rank.FIVE)]
        assert score_runs(cards) == 9

    def test_double_double_run(self):
        """6-6-7-7-8：四个 3 张顺子"""
        cards = cards_of_rank(Rank.SIX, 2) + cards_of_rank(Rank.SEVEN, 2) + [c(Rank.EIGHT)]
        assert score_runs(cards) == 12

    def test_ace_is_low_only(self):
        """Q-K-A 不是顺子"""
        assert score_runs([c(Rank.QUEEN), c(Rank.KING), c(Rank.ACE)]) == 0

    def test_two_cards_never_run(self):
        assert score_runs([c(Rank.FIVE), c(Rank.SIX)]) == 0

    def test_gap_breaks_run(self):
        assert score_runs([c(Rank.TWO), c(Rank.THREE), c(Rank.FIVE), c(Rank.SIX)]) == 0


# ============================================================
#  同花 / 同花色 J / his heels
# ============================================================

class TestFlushAndNobs:

    def setup_method(self):
        self.hearts = [c(Rank.TWO, Suit.HEART), c(Rank.FOUR, Suit.HEART),
                       c(Rank.SIX, Suit.HEART), c(Rank.EIGHT, Suit.HEART)]

    def test_four_card_flush_in_hand(self):
        assert score_flush(False, self.hearts, c(Rank.KING, Suit.CLUB)) == 4

    def test_four_card_flush_not_in_crib(self):
        assert score_flush(True, self.hearts, c(Rank.KING, Suit.CLUB)) == 0

    @pytest.mark.parametrize("is_crib", [False, True])
    def test_five_card_flush(self, is_crib):
        assert score_flush(is_crib, self.hearts, c(Rank.KING, Suit.HEART)) == 5

    def test_mixed_suits(self):
        hand = self.hearts[:3] + [c(Rank.EIGHT, Suit.SPADE)]
        assert score_flush(False, hand, c(Rank.KING, Suit.HEART)) == 0

    def test_empty_hand_has_no_flush(self):
        assert score_flush(False, [], c(Rank.KING, Suit.HEART)) == 0

    def test_nobs(self):
        hand = [c(Rank.JACK, Suit.HEART), c(Rank.TWO)]
        assert score_nobs(hand, c(Rank.NINE, Suit.HEART)) == 1
        assert score_nobs(hand, c(Rank.NINE, Suit.CLUB)) == 0

    def test_nobs_counts_every_match(self):
        hand = [c(Rank.JACK, Suit.HEART), c(Rank.JACK, Suit.HEART)]
        assert score_nobs(hand, c(Rank.NINE, Suit.HEART)) == 2

    def test_his_heels(self):
        assert score_his_heels(c(Rank.JACK, Suit.DIAMOND)) == 2
        assert score_his_heels(c(Rank.QUEEN, Suit.DIAMOND)) == 0


# ============================================================
#  性质测试
# ============================================================

class TestProperties:

    def test_order_does_not_matter(self):
        hand, starter, _, expected = KNOWN_HANDS[1]
        for perm in permutations(hand):
            assert score_hand(False, starter, list(perm)) == expected

    def test_total_is_sum_of_items(self):
        rng = random.Random(7)
        deck = create_deck()
        for _ in range(200):
            cards = rng.sample(deck, 5)
            for is_crib in (False, True):
                b = compute_score_breakdown(is_crib, cards[0], cards[1:])
                assert b.total == b.fifteens + b.pairs + b.runs + b.flush + b.nobs

    def test_score_never_exceeds_29(self):
        rng = random.Random(11)
        deck = create_deck()
        for _ in range(200):
            cards = rng.sample(deck, 5)
            assert 0 <= score_hand(False, cards[0], cards[1:]) <= 29

    def test_inputs_are_not_mutated(self):
        hand, starter, _, _ = KNOWN_HANDS[0]
        before = list(hand)
        score_hand(False, starter, hand)
        assert hand == before
