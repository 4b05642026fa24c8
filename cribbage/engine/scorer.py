"""计分器 - 按克里比奇规则计算一手牌的得分"""

from typing import List

from .card import Card, Rank
from .score_type import ScoreBreakdown
from .subsets import subsets


# 开牌为 J 时庄家直接得分（his heels）
HIS_HEELS_POINTS = 2


def compute_score_breakdown(is_crib: bool, starter: Card, hand: List[Card]) -> ScoreBreakdown:
    """
    计算一手牌的得分明细。
    凑十五/对子/顺子在 开牌+手牌 的全部子集上统计，
    同花/同花色 J 只看手牌与开牌。
    """
    all_cards = [starter] + list(hand)
    return ScoreBreakdown(
        fifteens=score_fifteens(all_cards),
        pairs=score_pairs(all_cards),
        runs=score_runs(all_cards),
        flush=score_flush(is_crib, hand, starter),
        nobs=score_nobs(hand, starter),
    )


def score_hand(is_crib: bool, starter: Card, hand: List[Card]) -> int:
    """一手牌的总分"""
    return compute_score_breakdown(is_crib, starter, hand).total


# ============================================================
#  子集类计分
# ============================================================

def score_fifteens(cards: List[Card]) -> int:
    """凑十五：每个点值之和为 15 的子集得 2 分（同一张牌可参与多个子集）"""
    count = sum(1 for s in subsets(cards) if sum(c.value for c in s) == 15)
    return 2 * count


def score_pairs(cards: List[Card]) -> int:
    """对子：每个同点数的两张组合得 2 分（三条=6，四条=12）"""
    count = sum(
        1 for s in subsets(cards)
        if len(s) == 2 and s[0].rank == s[1].rank
    )
    return 2 * count


def _is_run(cards: List[Card]) -> bool:
    """≥3 张且排序后序号严格连续（不允许重复点数）"""
    if len(cards) < 3:
        return False
    orders = sorted(c.order for c in cards)
    return all(orders[i + 1] - orders[i] == 1 for i in range(len(orders) - 1))


def score_runs(cards: List[Card]) -> int:
    """
    顺子：只计最长的顺子长度。
    先看 5 张，有则只计 5 张顺子；否则看 4 张；否则看 3 张。
    重复点数造成的多个同长度顺子分别计分（如 4-5-5-6-7 计两个 4 张顺子）。
    """
    all_subsets = subsets(cards)
    for length in (5, 4, 3):
        count = sum(1 for s in all_subsets if len(s) == length and _is_run(s))
        if count > 0:
            return length * count
    return 0


# ============================================================
#  手牌类计分
# ============================================================

def score_flush(is_crib: bool, hand: List[Card], starter: Card) -> int:
    """
    同花：
    - 手牌同花且开牌同花色 → 5
    - 手牌同花、开牌不同花色、非 crib → 4
    - crib 只认 5 张同花
    """
    suits = {c.suit for c in hand}
    if len(suits) != 1:
        # 空手牌没有可比较的花色
        return 0
    if starter.suit in suits:
        return 5
    return 0 if is_crib else 4


def score_nobs(hand: List[Card], starter: Card) -> int:
    """同花色 J：手牌（不含开牌）中每张与开牌同花色的 J 得 1 分"""
    return sum(1 for c in hand if c.rank == Rank.JACK and c.suit == starter.suit)


def score_his_heels(starter: Card) -> int:
    """开牌为 J：庄家得 2 分。独立于手牌计分"""
    return HIS_HEELS_POINTS if starter.rank == Rank.JACK else 0
