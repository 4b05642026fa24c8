"""弃牌 AI - 穷举 6 张手牌中的 2 张弃牌组合，保留得分最高的 4 张"""

import logging
from itertools import combinations
from typing import List, Tuple, TYPE_CHECKING

from cribbage.engine.card import Card, Rank, Suit, DISCARD_COUNT
from cribbage.engine.scorer import score_hand

if TYPE_CHECKING:
    from cribbage.game.player import Player
    from cribbage.game.game_state import RoundState

logger = logging.getLogger(__name__)

# 固定占位开牌：弃牌时真实开牌未知，统一按黑桃 A 计分
PLACEHOLDER_STARTER = Card(rank=Rank.ACE, suit=Suit.SPADE)


def choose_discard(hand: List[Card]) -> Tuple[List[Card], List[Card]]:
    """
    弃牌决策：返回 (保留的牌, 弃掉的牌)。
    按 (i, j) 字典序枚举全部下标对，保留牌以占位开牌计分，
    取严格最高分；同分时取最先枚举到的组合。
    占位开牌无法评估同花补全、顺子延伸、同花色 J 等依赖真实开牌的加分。
    """
    if len(hand) < DISCARD_COUNT:
        raise ValueError(f"手牌不足 {DISCARD_COUNT} 张，无法弃牌: {len(hand)}")

    best_pair: Tuple[int, ...] = ()
    best_score = -1
    for pair in combinations(range(len(hand)), DISCARD_COUNT):
        kept = [c for idx, c in enumerate(hand) if idx not in pair]
        score = score_hand(False, PLACEHOLDER_STARTER, kept)
        logger.debug("弃牌候选 %s: 保留 %s 得 %d 分", pair, kept, score)
        if score > best_score:
            best_score = score
            best_pair = pair

    kept = [c for idx, c in enumerate(hand) if idx not in best_pair]
    discarded = [hand[idx] for idx in best_pair]
    return kept, discarded


class DiscardAI:
    """基于穷举计分的电脑弃牌策略"""

    def decide_discard(self, player: "Player", state: "RoundState") -> List[Card]:
        """弃牌决策：返回要放入 crib 的 2 张牌"""
        kept, discarded = choose_discard(player.hand)
        logger.info("%s 弃牌 %s，保留 %s", player.name, discarded, kept)
        return discarded
