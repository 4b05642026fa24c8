"""一轮控制器 - 驱动克里比奇一轮的完整流程（发牌→弃牌→开牌→计分）"""

import logging
import random
from typing import List, Optional, Protocol

from cribbage.engine.card import Card, DISCARD_COUNT, create_deck, shuffle_and_deal
from cribbage.engine.scorer import compute_score_breakdown, score_his_heels
from cribbage.ai.discard_ai import DiscardAI
from cribbage.game.player import Player
from cribbage.game.game_state import RoundState, RoundPhase, RoundEvent

logger = logging.getLogger(__name__)


class DiscardStrategy(Protocol):
    """弃牌决策接口（策略模式）"""

    def decide_discard(self, player: Player, state: RoundState) -> List[Card]:
        """决定弃牌：返回放入 crib 的 2 张牌"""
        ...


class RoundController:
    """一轮控制器：驱动一轮克里比奇的完整流程，轮与轮之间庄家交替"""

    def __init__(
        self,
        player_names: List[str],
        strategies: List[DiscardStrategy],
        rng: Optional[random.Random] = None,
        first_dealer: Optional[int] = None,
    ):
        assert len(player_names) == 2 and len(strategies) == 2
        self.players = [
            Player(id=i, name=name) for i, name in enumerate(player_names)
        ]
        self.strategies = strategies
        self.rng = rng or random.Random()
        self.dealer = first_dealer if first_dealer is not None else self.rng.randint(0, 1)
        assert self.dealer in (0, 1)
        self._fallback = DiscardAI()
        self.state = RoundState(players=self.players, dealer=self.dealer)
        self._callbacks: List = []  # 事件回调（用于 UI 通知）

    def on_event(self, callback) -> None:
        """注册事件回调"""
        self._callbacks.append(callback)

    def _emit(self, event: RoundEvent) -> None:
        """触发事件通知"""
        self.state.events.append(event)
        for cb in self._callbacks:
            cb(event)

    # ============================================================
    #  发牌阶段
    # ============================================================

    def deal(self) -> None:
        """洗牌发牌：非庄家先拿 6 张"""
        s = self.state
        s.phase = RoundPhase.DEALING
        first, second, rest = shuffle_and_deal(create_deck(), self.rng)

        self.players[s.pone].hand = first
        self.players[s.dealer].hand = second
        s.cut_pile = rest

        for p in self.players:
            p.is_dealer = (p.id == s.dealer)
            p.sort_hand()
            self._emit(RoundEvent(RoundPhase.DEALING, p.id, "deal", list(p.hand)))

        s.phase = RoundPhase.DISCARDING

    # ============================================================
    #  弃牌阶段
    # ============================================================

    def run_discards(self) -> None:
        """非庄家先弃牌，双方各弃 2 张进入 crib"""
        s = self.state
        for pid in (s.pone, s.dealer):
            player = self.players[pid]
            cards = self.strategies[pid].decide_discard(player, s)

            if not self._is_valid_discard(player, cards):
                # 策略给出了非法弃牌，改用电脑策略
                logger.warning("%s 的弃牌非法: %s，改用 DiscardAI", player.name, cards)
                cards = self._fallback.decide_discard(player, s)

            player.remove_cards(cards)
            s.crib.extend(cards)
            self._emit(RoundEvent(RoundPhase.DISCARDING, pid, "discard", list(cards)))

        s.phase = RoundPhase.CUT

    @staticmethod
    def _is_valid_discard(player: Player, cards: Optional[List[Card]]) -> bool:
        """弃牌必须是手牌中的 2 张不同的牌"""
        if cards is None or len(cards) != DISCARD_COUNT:
            return False
        if len(set(cards)) != len(cards):
            return False
        return player.has_cards(cards)

    # ============================================================
    #  开牌阶段
    # ============================================================

    def cut_starter(self) -> Card:
        """从剩余牌堆中切出开牌；开牌为 J 时庄家得 2 分"""
        s = self.state
        s.starter = s.cut_pile[self.rng.randrange(len(s.cut_pile))]
        self._emit(RoundEvent(RoundPhase.CUT, s.dealer, "cut", s.starter))

        s.heels = score_his_heels(s.starter)
        if s.heels:
            self._emit(RoundEvent(RoundPhase.CUT, s.dealer, "heels", s.heels))

        s.phase = RoundPhase.SHOW
        return s.starter

    # ============================================================
    #  计分阶段
    # ============================================================

    def run_show(self) -> None:
        """按 非庄家手牌 → 庄家手牌 → crib 的顺序计分"""
        s = self.state
        assert s.starter is not None, "尚未开牌"

        for pid in (s.pone, s.dealer):
            breakdown = compute_score_breakdown(False, s.starter, self.players[pid].hand)
            s.hand_scores[pid] = breakdown
            self._emit(RoundEvent(RoundPhase.SHOW, pid, "hand", breakdown))

        s.crib_score = compute_score_breakdown(True, s.starter, s.crib)
        self._emit(RoundEvent(RoundPhase.SHOW, s.dealer, "crib", s.crib_score))

        s.phase = RoundPhase.FINISHED
        logger.info(
            "本轮结束: 开牌 %s, %s",
            s.starter,
            ", ".join(f"{p.name}={s.round_points(p.id)}" for p in self.players),
        )

    # ============================================================
    #  完整一轮入口
    # ============================================================

    def run_round(self) -> RoundState:
        """运行完整一轮，结束后庄家交替"""
        self._reset_round()
        self.deal()
        self.run_discards()
        self.cut_starter()
        self.run_show()
        state = self.state
        self.next_dealer()
        return state

    def next_dealer(self) -> None:
        """庄家交替"""
        self.dealer = 1 - self.dealer

    def _reset_round(self) -> None:
        """重置一轮的状态"""
        for p in self.players:
            p.reset_for_new_round()
        self.state = RoundState(players=self.players, dealer=self.dealer)
        logger.debug("新一轮开始，庄家 %s", self.players[self.dealer].name)
