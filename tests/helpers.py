from __future__ import annotations

from typing import List

from handrank.cards import Card, parse_cards
from handrank.encoder import decode
from handrank.evaluator import evaluate_cards
from handrank.models import HandCategory


def cards(spec: str) -> List[Card]:
    """Parse a space separated run of tokens such as ``"A_S 10_H"``."""
    return parse_cards(spec.split())


def rank_of(spec: str) -> int:
    return evaluate_cards(cards(spec))


def category_of(spec: str) -> HandCategory:
    category, _ = decode(rank_of(spec))
    return category
