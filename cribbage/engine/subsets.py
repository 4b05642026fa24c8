"""子集枚举 - 列出一组牌的全部非空子集"""

from typing import List

from .card import Card


def subsets(cards: List[Card]) -> List[List[Card]]:
    """
    返回 cards 的全部 2^n - 1 个非空子集。
    按位掩码 1 .. 2^n-1 枚举，子集内保持输入顺序；
    同一输入多次调用结果相同，不遗漏也不重复。
    """
    n = len(cards)
    result: List[List[Card]] = []
    for mask in range(1, 1 << n):
        result.append([cards[i] for i in range(n) if mask & (1 << i)])
    return result


def subsets_of_size(cards: List[Card], size: int) -> List[List[Card]]:
    """只保留恰好 size 张的子集"""
    return [s for s in subsets(cards) if len(s) == size]
