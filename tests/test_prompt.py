"""人类玩家输入与终端渲染测试"""

import pytest

from cribbage.engine.card import Card, Rank, Suit
from cribbage.engine.score_type import ScoreBreakdown
from cribbage.game.player import Player
from cribbage.game.game_state import RoundState
from cribbage.ui.prompt import HumanDiscard, parse_selection
from cribbage.ui.renderer import TerminalRenderer, RED


HAND = [
    Card(Rank.ACE, Suit.SPADE), Card(Rank.TWO, Suit.HEART), Card(Rank.THREE, Suit.CLUB),
    Card(Rank.FOUR, Suit.DIAMOND), Card(Rank.FIVE, Suit.SPADE), Card(Rank.SIX, Suit.HEART),
]


def _scripted(*answers):
    """按顺序返回预设输入"""
    it = iter(answers)
    return lambda prompt: next(it)


# ============================================================
#  输入解析
# ============================================================

class TestParseSelection:

    def test_valid(self):
        assert parse_selection(" 3 ", 6, set()) == 2

    @pytest.mark.parametrize("text", ["", "abc", "-1", "2.5", "0", "7"])
    def test_rejected(self, text):
        with pytest.raises(ValueError):
            parse_selection(text, 6, set())

    def test_already_chosen(self):
        with pytest.raises(ValueError):
            parse_selection("1", 6, {0})


# ============================================================
#  重新输入循环
# ============================================================

class TestHumanDiscard:

    def _run(self, *answers):
        out = []
        human = HumanDiscard(input_fn=_scripted(*answers), output_fn=out.append)
        player = Player(id=0, name="你", hand=list(HAND))
        state = RoundState(players=[player, Player(id=1, name="电脑")])
        return human.decide_discard(player, state), out

    def test_two_valid_picks(self):
        cards, _ = self._run("2", "6")
        assert cards == [HAND[1], HAND[5]]

    def test_reprompts_on_bad_input(self):
        cards, out = self._run("x", "9", "1", "1", "4")
        assert cards == [HAND[0], HAND[3]]
        # 手牌展示 1 行 + 三次错误提示
        assert len(out) == 4

    def test_eof_propagates(self):
        def eof(prompt):
            raise EOFError

        human = HumanDiscard(input_fn=eof, output_fn=lambda s: None)
        player = Player(id=0, name="你", hand=list(HAND))
        with pytest.raises(EOFError):
            human.decide_discard(player, RoundState(players=[player]))


# ============================================================
#  渲染
# ============================================================

class TestRenderer:

    def test_red_suits_highlighted(self):
        text = TerminalRenderer.format_cards([Card(Rank.TWO, Suit.HEART), Card(Rank.ACE, Suit.SPADE)])
        assert f"{RED}2♥" in text
        assert f"{RED}A♠" not in text

    def test_numbered(self):
        text = TerminalRenderer.format_cards(HAND, numbered=True)
        assert "1:" in text and "6:" in text

    def test_breakdown_prints_total(self, capsys):
        renderer = TerminalRenderer(delay=0)
        renderer.show_breakdown("手牌", HAND[:4], HAND[4], ScoreBreakdown(fifteens=4, runs=5))
        out = capsys.readouterr().out
        assert "凑十五" in out
        assert "顺子" in out
        assert "同花" not in out
        assert "合计" in out
        assert f"{9:>4}" in out
