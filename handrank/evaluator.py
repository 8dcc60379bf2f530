from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence, Tuple

from .cards import Card, parse_cards
from .detectors import CASCADE
from .encoder import decode
from .models import DEFAULT_CONFIG, EvaluatorConfig, InvalidHandError

LOGGER = logging.getLogger("handrank")


def evaluate_hand(
    community_cards: Sequence[str],
    player_cards: Sequence[str],
    config: EvaluatorConfig = DEFAULT_CONFIG,
) -> int:
    """Rank the best five-card hand from board and hole tokens. Higher is better."""
    cards = parse_cards(community_cards) + parse_cards(player_cards)
    return evaluate_cards(cards, config)


def evaluate_cards(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> int:
    if not config.hand_size <= len(cards) <= config.max_cards:
        raise InvalidHandError(
            f"Expected {config.hand_size} to {config.max_cards} cards, got {len(cards)}"
        )
    card_set = tuple(cards)
    for category, detector in CASCADE:
        rank = detector(card_set, config)
        if rank is not None:
            LOGGER.debug("%s -> %s (%#x)", " ".join(card.token for card in card_set), category.label, rank)
            return rank
    # High card always matches a card set of at least hand_size cards.
    raise InvalidHandError("No hand category matched")


def describe_rank(rank: int) -> str:
    category, _ = decode(rank)
    return category.label


def best_hands(
    community_cards: Sequence[str],
    players: Mapping[str, Sequence[str]],
    config: EvaluatorConfig = DEFAULT_CONFIG,
) -> List[Tuple[str, int]]:
    """Rank every player's hand against the shared board, strongest first."""
    board = parse_cards(community_cards)
    scores: Dict[str, int] = {}
    for player, hole in players.items():
        scores[player] = evaluate_cards(board + parse_cards(hole), config)
    return sorted(scores.items(), key=lambda item: item[1], reverse=True)


def winners(
    community_cards: Sequence[str],
    players: Mapping[str, Sequence[str]],
    config: EvaluatorConfig = DEFAULT_CONFIG,
) -> List[str]:
    ranked = best_hands(community_cards, players, config)
    if not ranked:
        return []
    best = ranked[0][1]
    return [player for player, rank in ranked if rank == best]
