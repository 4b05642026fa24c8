"""终端可视化渲染器 - 在终端中展示克里比奇一轮的过程与计分"""

import os
import time
from typing import List, Optional

from cribbage.engine.card import Card, Suit
from cribbage.engine.score_type import ScoreBreakdown, ScoreItem
from cribbage.game.player import Player
from cribbage.game.game_state import RoundState, RoundPhase, RoundEvent


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
MAGENTA = "\033[95m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 计分项中文名
SCORE_ITEM_NAME = {
    ScoreItem.FIFTEENS: "凑十五",
    ScoreItem.PAIRS: "对子",
    ScoreItem.RUNS: "顺子",
    ScoreItem.FLUSH: "同花",
    ScoreItem.NOBS: "同花色 J",
    ScoreItem.TOTAL: "合计",
}


class TerminalRenderer:
    """终端可视化渲染器"""

    def __init__(self, delay: float = 0.8):
        self.delay = delay  # 每步之间的延迟（秒）

    def clear(self) -> None:
        """清屏"""
        os.system("clear" if os.name != "nt" else "cls")

    def pause(self, seconds: float = 0) -> None:
        """暂停"""
        if self.delay:
            time.sleep(seconds or self.delay)

    # ============================================================
    #  牌面渲染
    # ============================================================

    @staticmethod
    def format_cards(cards: List[Card], numbered: bool = False) -> str:
        """将牌列表格式化为彩色字符串；numbered=True 时带 1 起的序号"""
        parts = []
        for i, c in enumerate(cards, start=1):
            display = c.display
            # 红色花色高亮
            if c.suit in (Suit.HEART, Suit.DIAMOND):
                display = f"{RED}{display}{RESET}"
            parts.append(f"{DIM}{i}:{RESET}{display}" if numbered else display)
        return " ".join(parts)

    @staticmethod
    def format_player_name(player: Player) -> str:
        """格式化玩家名（庄家高亮）"""
        if player.is_dealer:
            return f"{RED}{BOLD}{player.name} [庄家]{RESET}"
        return f"{GREEN}{BOLD}{player.name}{RESET}"

    # ============================================================
    #  分隔线与标题
    # ============================================================

    @staticmethod
    def separator(char: str = "─", width: int = 60) -> str:
        return char * width

    def print_header(self, title: str) -> None:
        """打印带框的标题"""
        print(f"\n{YELLOW}{BOLD}{'═' * 60}{RESET}")
        print(f"{YELLOW}{BOLD}  {title}{RESET}")
        print(f"{YELLOW}{BOLD}{'═' * 60}{RESET}\n")

    # ============================================================
    #  发牌 / 弃牌 / 开牌
    # ============================================================

    def show_deal(self, player: Player, cards: List[Card], hidden: bool = False) -> None:
        """展示一名玩家拿到的牌；hidden=True 时只显示张数"""
        name = self.format_player_name(player)
        shown = f"{DIM}{'🂠 ' * len(cards)}{RESET}" if hidden else self.format_cards(cards)
        print(f"  {name} ({len(cards)}张): {shown}")

    def show_discard(self, player: Player, cards: List[Card], hidden: bool = False) -> None:
        """展示弃入 crib 的牌"""
        name = self.format_player_name(player)
        shown = f"{DIM}{len(cards)} 张暗牌{RESET}" if hidden else self.format_cards(cards)
        print(f"  {name} 弃入 crib: {shown}")

    def show_starter(self, starter: Card) -> None:
        """展示开牌"""
        print(f"\n  {MAGENTA}开牌: {self.format_cards([starter])}{RESET}")

    def show_heels(self, player: Player, points: int) -> None:
        """展示开牌为 J 的庄家得分"""
        name = self.format_player_name(player)
        print(f"  {RED}{BOLD}开牌是 J！{RESET}{name} 得 {points} 分 (his heels)")

    # ============================================================
    #  计分展示
    # ============================================================

    def show_breakdown(
        self, title: str, cards: List[Card], starter: Optional[Card], breakdown: ScoreBreakdown
    ) -> None:
        """展示一手牌的得分明细"""
        print(f"\n  {BOLD}{title}{RESET}: {self.format_cards(cards)}"
              + (f"  + {self.format_cards([starter])}" if starter else ""))
        for item, points in breakdown.as_dict().items():
            label = SCORE_ITEM_NAME[item]
            if item == ScoreItem.TOTAL:
                print(f"    {self.separator('─', 20)}")
                print(f"    {BOLD}{label:<8}{points:>4}{RESET}")
            elif points:
                print(f"    {label:<8}{points:>4}")

    def show_result(self, state: RoundState) -> None:
        """展示本轮结果"""
        self.print_header("🏆 本轮结算")
        print(f"  {'玩家':<12} {'手牌':<6} {'crib':<6} {'heels':<6} {'合计':<6}")
        print(f"  {self.separator('─', 44)}")
        for p in state.players:
            hand = state.hand_scores.get(p.id)
            hand_pts = hand.total if hand is not None else 0
            is_dealer = p.id == state.dealer
            crib_pts = state.crib_score.total if is_dealer and state.crib_score else 0
            heels_pts = state.heels if is_dealer else 0
            print(f"  {p.name:<10} {hand_pts:<6} {crib_pts:<6} {heels_pts:<6} "
                  f"{BOLD}{state.round_points(p.id)}{RESET}")
        print()

    # ============================================================
    #  事件回调（注册到 RoundController）
    # ============================================================

    def make_event_callback(self, players: List[Player], state_getter=None, hidden_ids=()):
        """
        创建事件回调函数，供 RoundController.on_event() 使用。
        state_getter 返回当前 RoundState，用于展示计分时取开牌与 crib；
        hidden_ids 中的玩家发牌与弃牌时不亮牌。
        """
        renderer = self

        def callback(event: RoundEvent) -> None:
            player = players[event.player_id]
            state = state_getter() if state_getter else None

            if event.action == "deal":
                renderer.show_deal(player, event.data, hidden=event.player_id in hidden_ids)

            elif event.action == "discard":
                renderer.show_discard(player, event.data, hidden=event.player_id in hidden_ids)
                renderer.pause(0.5)

            elif event.action == "cut":
                renderer.show_starter(event.data)
                renderer.pause()

            elif event.action == "heels":
                renderer.show_heels(player, event.data)

            elif event.phase == RoundPhase.SHOW:
                starter = state.starter if state else None
                if event.action == "hand":
                    renderer.show_breakdown(f"{player.name} 手牌", player.hand, starter, event.data)
                elif event.action == "crib":
                    crib = state.crib if state else []
                    renderer.show_breakdown(f"{player.name} 的 crib", crib, starter, event.data)
                renderer.pause()

        return callback
