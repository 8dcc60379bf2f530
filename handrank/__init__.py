"""Poker hand ranking: parse card tokens and score the best five-card hand."""

from .cards import Card, ParseError, RANKS, SUITS, build_deck, deal, parse_card, parse_cards
from .encoder import decode
from .evaluator import best_hands, describe_rank, evaluate_cards, evaluate_hand, winners
from .models import DEFAULT_CONFIG, EvaluatorConfig, HandCategory, InvalidHandError

__all__ = [
    "Card",
    "ParseError",
    "RANKS",
    "SUITS",
    "build_deck",
    "deal",
    "parse_card",
    "parse_cards",
    "decode",
    "best_hands",
    "describe_rank",
    "evaluate_cards",
    "evaluate_hand",
    "winners",
    "DEFAULT_CONFIG",
    "EvaluatorConfig",
    "HandCategory",
    "InvalidHandError",
]
