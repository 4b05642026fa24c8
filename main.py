"""克里比奇计分 - 主入口"""

import sys
import random
import logging
import argparse
from typing import List

from cribbage.ai.discard_ai import DiscardAI
from cribbage.engine.card import Card, Rank, Suit, parse_card, format_hand
from cribbage.engine.scorer import compute_score_breakdown, score_hand
from cribbage.game.controller import RoundController
from cribbage.ui.prompt import HumanDiscard
from cribbage.ui.renderer import TerminalRenderer


def _c(rank: Rank, suit: Suit) -> Card:
    return Card(rank=rank, suit=suit)


# 验证用牌例: (名称, 是否 crib, 开牌, 手牌, 期望分数)
VERIFICATION_HANDS = [
    ("29 hand", False, _c(Rank.FIVE, Suit.CLUB),
     [_c(Rank.FIVE, Suit.SPADE), _c(Rank.FIVE, Suit.DIAMOND), _c(Rank.FIVE, Suit.HEART), _c(Rank.JACK, Suit.CLUB)], 29),
    ("test1", False, _c(Rank.JACK, Suit.DIAMOND),
     [_c(Rank.FOUR, Suit.CLUB), _c(Rank.FOUR, Suit.DIAMOND), _c(Rank.FIVE, Suit.CLUB), _c(Rank.SIX, Suit.HEART)], 14),
    ("test2", False, _c(Rank.JACK, Suit.DIAMOND),
     [_c(Rank.FOUR, Suit.CLUB), _c(Rank.SEVEN, Suit.HEART), _c(Rank.FIVE, Suit.CLUB), _c(Rank.SIX, Suit.HEART)], 8),
    ("test3", False, _c(Rank.EIGHT, Suit.DIAMOND),
     [_c(Rank.FOUR, Suit.CLUB), _c(Rank.SEVEN, Suit.HEART), _c(Rank.FIVE, Suit.CLUB), _c(Rank.SIX, Suit.HEART)], 9),
    ("test5", False, _c(Rank.JACK, Suit.CLUB),
     [_c(Rank.FIVE, Suit.SPADE), _c(Rank.FIVE, Suit.DIAMOND), _c(Rank.FIVE, Suit.HEART), _c(Rank.FIVE, Suit.CLUB)], 28),
    ("test6", False, _c(Rank.SIX, Suit.HEART),
     [_c(Rank.SEVEN, Suit.HEART), _c(Rank.EIGHT, Suit.DIAMOND), _c(Rank.SEVEN, Suit.CLUB), _c(Rank.EIGHT, Suit.CLUB)], 24),
    ("test7", False, _c(Rank.SIX, Suit.HEART),
     [_c(Rank.JACK, Suit.DIAMOND), _c(Rank.EIGHT, Suit.DIAMOND), _c(Rank.FOUR, Suit.DIAMOND), _c(Rank.TEN, Suit.CLUB)], 0),
    ("test8", False, _c(Rank.FOUR, Suit.DIAMOND),
     [_c(Rank.JACK, Suit.DIAMOND), _c(Rank.EIGHT, Suit.DIAMOND), _c(Rank.TEN, Suit.CLUB), _c(Rank.SIX, Suit.HEART)], 1),
    ("test9", False, _c(Rank.TEN, Suit.CLUB),
     [_c(Rank.JACK, Suit.DIAMOND), _c(Rank.FOUR, Suit.DIAMOND), _c(Rank.EIGHT, Suit.DIAMOND), _c(Rank.SIX, Suit.DIAMOND)], 4),
    ("test10", False, _c(Rank.TEN, Suit.DIAMOND),
     [_c(Rank.TWO, Suit.DIAMOND), _c(Rank.FOUR, Suit.DIAMOND), _c(Rank.EIGHT, Suit.DIAMOND), _c(Rank.SIX, Suit.DIAMOND)], 5),
    ("test11-crib", True, _c(Rank.TEN, Suit.CLUB),
     [_c(Rank.JACK, Suit.DIAMOND), _c(Rank.FOUR, Suit.DIAMOND), _c(Rank.EIGHT, Suit.DIAMOND), _c(Rank.SIX, Suit.DIAMOND)], 0),
    ("test12-crib", True, _c(Rank.TEN, Suit.DIAMOND),
     [_c(Rank.TWO, Suit.DIAMOND), _c(Rank.FOUR, Suit.DIAMOND), _c(Rank.EIGHT, Suit.DIAMOND), _c(Rank.SIX, Suit.DIAMOND)], 5),
]


def run_verify() -> int:
    """逐个验证牌例，有失败时返回 1"""
    failed = 0
    for label, is_crib, starter, hand, expected in VERIFICATION_HANDS:
        actual = score_hand(is_crib, starter, hand)
        status = "PASS" if actual == expected else "FAIL"
        if actual != expected:
            failed += 1
        print(f"  [{status}] {label}: hand=[{format_hand(hand)}] starter={starter.code} "
              f"=> Score: {actual} (expected {expected})")
    return 1 if failed else 0


def run_score(hand_codes: List[str], starter_code: str, is_crib: bool) -> None:
    """为命令行给出的一手牌计分"""
    hand = [parse_card(code) for code in hand_codes]
    starter = parse_card(starter_code)
    breakdown = compute_score_breakdown(is_crib, starter, hand)
    title = "crib" if is_crib else "手牌"
    TerminalRenderer(delay=0).show_breakdown(title, hand, starter, breakdown)


def run_rounds(rounds: int, seed, auto: bool, delay: float) -> None:
    """运行若干轮：人类对电脑，或电脑对电脑"""
    renderer = TerminalRenderer(delay=delay)
    rng = random.Random(seed)

    if auto:
        names = ["电脑甲", "电脑乙"]
        strategies = [DiscardAI(), DiscardAI()]
        hidden = ()
    else:
        names = ["你", "电脑"]
        strategies = [HumanDiscard(), DiscardAI()]
        hidden = (1,)

    rc = RoundController(player_names=names, strategies=strategies, rng=rng)
    rc.on_event(renderer.make_event_callback(rc.players, lambda: rc.state, hidden_ids=hidden))

    for i in range(rounds):
        renderer.print_header(f"🃏 第 {i + 1}/{rounds} 轮  庄家: {rc.players[rc.dealer].name}")
        state = rc.run_round()
        renderer.show_result(state)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="克里比奇计分")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="日志级别 (默认WARNING)")
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="对局 (默认)")
    play.add_argument("--rounds", type=int, default=1, help="轮数 (默认1)")
    play.add_argument("--seed", type=int, default=None, help="随机种子")
    play.add_argument("--auto", action="store_true", help="电脑对电脑")
    play.add_argument("--delay", type=float, default=0.8, help="展示延迟秒数 (默认0.8)")
    play.add_argument("--fast", action="store_true", help="快速模式 (无延迟)")

    score = sub.add_parser("score", help="为一手牌计分")
    score.add_argument("hand", nargs="+", help="手牌牌码，如 5S 5D 5H JC")
    score.add_argument("--starter", required=True, help="开牌牌码，如 5C")
    score.add_argument("--crib", action="store_true", help="按 crib 规则计分")

    sub.add_parser("verify", help="运行验证牌例")
    return parser


def main(argv=None) -> int:
    """命令行入口"""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "verify":
        return run_verify()

    if args.command == "score":
        try:
            run_score(args.hand, args.starter, args.crib)
        except ValueError as e:
            parser.error(str(e))
        return 0

    rounds = getattr(args, "rounds", 1)
    seed = getattr(args, "seed", None)
    auto = getattr(args, "auto", False)
    delay = 0.0 if getattr(args, "fast", False) else getattr(args, "delay", 0.8)
    try:
        run_rounds(rounds, seed, auto, delay)
    except (EOFError, KeyboardInterrupt):
        print("\n  再见！")
    return 0


if __name__ == "__main__":
    sys.exit(main())
