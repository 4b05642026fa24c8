"""玩家模型 - 克里比奇双人玩家的数据结构"""

from dataclasses import dataclass, field
from typing import List

from cribbage.engine.card import Card, sort_cards


@dataclass
class Player:
    """一个玩家"""
    id: int                          # 座位号 0/1
    name: str                        # 显示名
    hand: List[Card] = field(default_factory=list)
    is_dealer: bool = False          # 本轮是否为庄家（拥有 crib）

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def sort_hand(self) -> None:
        """手牌排序"""
        self.hand = sort_cards(self.hand)

    def remove_cards(self, cards: List[Card]) -> None:
        """从手牌中移除指定的牌"""
        for card in cards:
            self.hand.remove(card)

    def has_cards(self, cards: List[Card]) -> bool:
        """检查手牌中是否包含指定的牌"""
        hand_copy = list(self.hand)
        for card in cards:
            if card in hand_copy:
                hand_copy.remove(card)
            else:
                return False
        return True

    def reset_for_new_round(self) -> None:
        """新一轮重置"""
        self.hand.clear()
        self.is_dealer = False
