"""人类玩家输入 - 在终端中选择弃入 crib 的 2 张牌"""

import logging
from typing import Callable, List, Optional, Set

from cribbage.engine.card import Card, DISCARD_COUNT
from cribbage.game.player import Player
from cribbage.game.game_state import RoundState
from cribbage.ui.renderer import TerminalRenderer

logger = logging.getLogger(__name__)


def parse_selection(text: str, hand_size: int, chosen: Set[int]) -> int:
    """
    解析一次选牌输入（1 起的序号），返回 0 起的下标。
    非数字、超出 [1, hand_size]、已选过的序号抛出 ValueError。
    """
    text = text.strip()
    if not text.isdigit():
        raise ValueError(f"请输入 1-{hand_size} 之间的数字")
    number = int(text)
    if not 1 <= number <= hand_size:
        raise ValueError(f"序号超出范围，请输入 1-{hand_size}")
    index = number - 1
    if index in chosen:
        raise ValueError(f"第 {number} 张已经选过了")
    return index


class HumanDiscard:
    """终端人类玩家的弃牌策略"""

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self._input = input_fn or input
        self._output = output_fn or print

    def decide_discard(self, player: Player, state: RoundState) -> List[Card]:
        """逐张读取序号，非法输入时提示并重新输入"""
        hand = player.hand
        self._output(f"  你的手牌: {TerminalRenderer.format_cards(hand, numbered=True)}")

        chosen: List[int] = []
        while len(chosen) < DISCARD_COUNT:
            text = self._input(f"  选择第 {len(chosen) + 1} 张弃牌 (1-{len(hand)}): ")
            try:
                chosen.append(parse_selection(text, len(hand), set(chosen)))
            except ValueError as e:
                logger.debug("非法输入 %r: %s", text, e)
                self._output(f"  {e}")
        return [hand[i] for i in chosen]
