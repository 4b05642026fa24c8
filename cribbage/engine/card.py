"""牌的定义 - 克里比奇 52 张扑克牌的数据模型"""

from enum import IntEnum, Enum
from dataclasses import dataclass
from typing import List, Optional
import random


class Rank(IntEnum):
    """点数枚举（数值即顺子判定用的序号，A=1 .. K=13）"""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Suit(str, Enum):
    """花色枚举"""
    CLUB = "♣"
    DIAMOND = "♦"
    HEART = "♥"
    SPADE = "♠"


# 点数显示映射
RANK_DISPLAY = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3",
    Rank.FOUR: "4", Rank.FIVE: "5", Rank.SIX: "6",
    Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K",
}

# 花色代码映射（两字母牌码用）
SUIT_CODE = {
    Suit.CLUB: "C",
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
    Suit.SPADE: "S",
}

# 每人发牌张数 / 弃入 crib 的张数
DEAL_SIZE = 6
DISCARD_COUNT = 2


@dataclass(frozen=True)
class Card:
    """一张扑克牌"""
    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        """凑 15 用的点值：A=1，2..10 为面值，J/Q/K=10"""
        return min(int(self.rank), 10)

    @property
    def order(self) -> int:
        """顺子用的序号：A=1 .. K=13"""
        return int(self.rank)

    @property
    def display(self) -> str:
        return f"{RANK_DISPLAY[self.rank]}{self.suit.value}"

    @property
    def code(self) -> str:
        """两字母牌码，如 10C、JD、AS"""
        return f"{RANK_DISPLAY[self.rank]}{SUIT_CODE[self.suit]}"

    def __repr__(self) -> str:
        return self.display


def point_value(card: Card) -> int:
    return card.value


def sequence_order(card: Card) -> int:
    return card.order


def create_deck() -> List[Card]:
    """创建一副52张标准扑克牌"""
    deck: List[Card] = []
    suits = [Suit.HEART, Suit.SPADE, Suit.CLUB, Suit.DIAMOND]

    for suit in suits:
        for rank in Rank:
            deck.append(Card(rank=rank, suit=suit))

    assert len(deck) == 52, f"牌数错误: {len(deck)}"
    return deck


def shuffle_and_deal(
    deck: List[Card], rng: Optional[random.Random] = None
) -> tuple[List[Card], List[Card], List[Card]]:
    """洗牌并发牌: 返回 (玩家1手牌, 玩家2手牌, 剩余牌堆)"""
    shuffled = deck.copy()
    (rng or random).shuffle(shuffled)

    hand1 = shuffled[0:DEAL_SIZE]
    hand2 = shuffled[DEAL_SIZE:2 * DEAL_SIZE]
    rest = shuffled[2 * DEAL_SIZE:]

    return hand1, hand2, rest


def sort_cards(cards: List[Card]) -> List[Card]:
    """按点数排序手牌（从小到大），同点数按花色"""
    suit_rank = {s: i for i, s in enumerate(Suit)}
    return sorted(cards, key=lambda c: (c.rank, suit_rank[c.suit]))


# 牌码 → 牌 的反查表
_CODE_TO_RANK = {text: rank for rank, text in RANK_DISPLAY.items()}
_CODE_TO_RANK["T"] = Rank.TEN
_CODE_TO_SUIT = {text: suit for suit, text in SUIT_CODE.items()}


def parse_card(code: str) -> Card:
    """
    解析两字母牌码（不区分大小写），如 "5s"、"10C"、"TD"。
    非法牌码抛出 ValueError。
    """
    text = code.strip().upper()
    if len(text) < 2:
        raise ValueError(f"无法识别的牌码: {code!r}")
    rank = _CODE_TO_RANK.get(text[:-1])
    suit = _CODE_TO_SUIT.get(text[-1])
    if rank is None or suit is None:
        raise ValueError(f"无法识别的牌码: {code!r}")
    return Card(rank=rank, suit=suit)


def format_hand(cards: List[Card]) -> str:
    """手牌 → 逗号分隔的牌码文本"""
    return ", ".join(c.code for c in cards)
