# 一轮流程控制模块
from .player import Player
from .game_state import RoundState, RoundPhase, RoundEvent
from .controller import RoundController, DiscardStrategy
