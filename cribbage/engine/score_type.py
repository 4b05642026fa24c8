"""得分明细定义 - 一手牌五项计分的结构化表示"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ScoreItem(str, Enum):
    """计分项枚举"""
    FIFTEENS = "FIFTEENS"   # 凑十五
    PAIRS = "PAIRS"         # 对子
    RUNS = "RUNS"           # 顺子
    FLUSH = "FLUSH"         # 同花
    NOBS = "NOBS"           # 同花色 J
    TOTAL = "TOTAL"         # 合计


@dataclass(frozen=True)
class ScoreBreakdown:
    """一手牌（或 crib）的得分明细"""
    fifteens: int = 0
    pairs: int = 0
    runs: int = 0
    flush: int = 0
    nobs: int = 0

    @property
    def total(self) -> int:
        # 总分只由各项相加得出，不单独存储
        return self.fifteens + self.pairs + self.runs + self.flush + self.nobs

    def as_dict(self) -> Dict[ScoreItem, int]:
        return {
            ScoreItem.FIFTEENS: self.fifteens,
            ScoreItem.PAIRS: self.pairs,
            ScoreItem.RUNS: self.runs,
            ScoreItem.FLUSH: self.flush,
            ScoreItem.NOBS: self.nobs,
            ScoreItem.TOTAL: self.total,
        }

    def __repr__(self) -> str:
        items = " ".join(f"{k.value}={v}" for k, v in self.as_dict().items())
        return f"[Score] {items}"
