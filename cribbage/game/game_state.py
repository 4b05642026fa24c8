"""一轮状态 - 记录克里比奇一轮（发牌→弃牌→开牌→计分）的完整过程"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from cribbage.engine.card import Card
from cribbage.engine.score_type import ScoreBreakdown
from cribbage.game.player import Player


class RoundPhase(str, Enum):
    """一轮的阶段"""
    WAITING = "WAITING"         # 等待开始
    DEALING = "DEALING"         # 发牌中
    DISCARDING = "DISCARDING"   # 弃牌入 crib
    CUT = "CUT"                 # 切开牌
    SHOW = "SHOW"               # 亮牌计分
    FINISHED = "FINISHED"       # 已结束


@dataclass
class RoundEvent:
    """一轮中的事件记录"""
    phase: RoundPhase
    player_id: int
    action: str                  # "deal", "discard", "cut", "heels", "hand", "crib"
    data: Any = None             # 弃牌列表 / 开牌 / 得分 / ScoreBreakdown


@dataclass
class RoundState:
    """一轮的完整状态"""
    players: List[Player]
    dealer: int = 0
    phase: RoundPhase = RoundPhase.WAITING

    # 牌
    crib: List[Card] = field(default_factory=list)
    cut_pile: List[Card] = field(default_factory=list)
    starter: Optional[Card] = None

    # 计分
    heels: int = 0                                   # 开牌为 J 时庄家所得
    hand_scores: Dict[int, ScoreBreakdown] = field(default_factory=dict)
    crib_score: Optional[ScoreBreakdown] = None

    # 事件日志
    events: List[RoundEvent] = field(default_factory=list)

    @property
    def pone(self) -> int:
        """非庄家座位号"""
        return 1 - self.dealer

    def round_points(self, player_id: int) -> int:
        """本轮该玩家所得总分（手牌 + 庄家的 crib 与 heels）"""
        hand = self.hand_scores.get(player_id)
        points = hand.total if hand is not None else 0
        if player_id == self.dealer:
            points += self.heels
            if self.crib_score is not None:
                points += self.crib_score.total
        return points
