# 计分引擎模块
from .card import Card, Rank, Suit, create_deck, shuffle_and_deal, sort_cards, parse_card
from .subsets import subsets, subsets_of_size
from .score_type import ScoreItem, ScoreBreakdown
from .scorer import compute_score_breakdown, score_hand, score_his_heels
