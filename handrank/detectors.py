"""One detector per hand category.

Each public detector takes the combined card set and returns an encoded
rank, or ``None`` when the cards do not make that category. The ``*_fields``
helpers work on ace-high rank values and return untiered field sums so
stronger detectors can compose them.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .cards import Card
from .encoder import CARD_FIELDS, encode, pack, repeat, weight
from .histogram import build_histogram, highest_group, remove_group
from .models import DEFAULT_CONFIG, EvaluatorConfig, HandCategory, InvalidHandError

Detector = Callable[[Sequence[Card], EvaluatorConfig], Optional[int]]


def rank_values(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Tuple[int, ...]:
    return tuple(config.ace_high if card.rank == config.ace_low else card.rank for card in cards)


# Field helpers ---------------------------------------------------------


def high_card_fields(values: Sequence[int], count: int) -> Optional[int]:
    if not 0 <= count <= min(len(values), CARD_FIELDS):
        return None
    top = sorted(values, reverse=True)[:count]
    return pack(top, count - 1)


def pair_fields(values: Sequence[int], kickers: int) -> Optional[int]:
    # The pair takes two fields above the kickers.
    if kickers + 2 > CARD_FIELDS:
        return None
    pair = highest_group(build_histogram(values), 2)
    if pair is None:
        return None
    kicker_fields = high_card_fields(remove_group(values, pair, 2), kickers)
    if kicker_fields is None:
        return None
    return repeat(pair, kickers + 1, 2) + kicker_fields


def find_triplet(values: Sequence[int]) -> Optional[Tuple[int, Tuple[int, ...]]]:
    """Return the highest triplet value and the values left once it is removed."""
    triplet = highest_group(build_histogram(values), 3)
    if triplet is None:
        return None
    return triplet, remove_group(values, triplet, 3)


def straight_fields(values: Sequence[int], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[int]:
    distinct = sorted(set(values), reverse=True)
    run = 0
    top = 0
    for idx, value in enumerate(distinct):
        if idx and distinct[idx - 1] - 1 == value:
            run += 1
        else:
            run = 1
            top = value
        if run == config.hand_size:
            return pack(range(top, top - config.hand_size, -1), config.hand_size - 1)

    wheel = range(config.wheel_top_card, config.wheel_top_card - config.wheel_run_length, -1)
    if config.ace_high in distinct and all(value in distinct for value in wheel):
        return pack(list(wheel) + [config.ace_low], config.hand_size - 1)
    return None


def flush_values(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[Tuple[int, ...]]:
    """Return the values of the flush suit, highest first."""
    by_suit: Dict[str, List[int]] = {}
    for card, value in zip(cards, rank_values(cards, config)):
        by_suit.setdefault(card.suit, []).append(value)

    suited = [values for values in by_suit.values() if len(values) >= config.hand_size]
    if not suited:
        return None
    if len(suited) > 1:
        raise InvalidHandError(f"{len(suited)} suits make a flush in a {len(cards)} card pool")
    return tuple(sorted(suited[0], reverse=True))


# Category detectors ------------------------------------------------------


def straight_flush(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[int]:
    suited = flush_values(cards, config)
    if suited is None:
        return None
    fields = straight_fields(suited, config)
    if fields is None:
        return None
    return encode(HandCategory.STRAIGHT_FLUSH, fields)


def four_of_a_kind(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[int]:
    values = rank_values(cards, config)
    quad = highest_group(build_histogram(values), 4)
    if quad is None:
        return None
    kicker = high_card_fields(remove_group(values, quad, 4), 1)
    if kicker is None:
        return None
    return encode(HandCategory.FOUR_OF_A_KIND, repeat(quad, 4, 4) + kicker)


def full_house(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[int]:
    found = find_triplet(rank_values(cards, config))
    if found is None:
        return None
    triplet, remaining = found
    pair = pair_fields(remaining, 0)
    if pair is None:
        return None
    # Triplet fields sit two places above the pair fields.
    return encode(HandCategory.FULL_HOUSE, repeat(triplet, 2, 3) * weight(2) + pair)


def flush(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[int]:
    suited = flush_values(cards, config)
    if suited is None:
        return None
    return encode(HandCategory.FLUSH, pack(suited[: config.hand_size], config.hand_size - 1))


def straight(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[int]:
    fields = straight_fields(rank_values(cards, config), config)
    if fields is None:
        return None
    return encode(HandCategory.STRAIGHT, fields)


def three_of_a_kind(
    cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG, kickers: int = 2
) -> Optional[int]:
    if kickers + 3 > CARD_FIELDS:
        return None
    found = find_triplet(rank_values(cards, config))
    if found is None:
        return None
    triplet, remaining = found
    kicker_fields = high_card_fields(remaining, kickers)
    if kicker_fields is None:
        return None
    return encode(HandCategory.THREE_OF_A_KIND, repeat(triplet, kickers + 2, 3) + kicker_fields)


def two_pair(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG) -> Optional[int]:
    values = rank_values(cards, config)
    high_pair = highest_group(build_histogram(values), 2)
    if high_pair is None:
        return None
    low_pair = pair_fields(remove_group(values, high_pair, 2), 1)
    if low_pair is None:
        return None
    return encode(HandCategory.TWO_PAIR, repeat(high_pair, 4, 2) + low_pair)


def one_pair(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG, kickers: int = 3) -> Optional[int]:
    fields = pair_fields(rank_values(cards, config), kickers)
    if fields is None:
        return None
    return encode(HandCategory.ONE_PAIR, fields)


def high_card(cards: Sequence[Card], config: EvaluatorConfig = DEFAULT_CONFIG, count: int = 5) -> Optional[int]:
    fields = high_card_fields(rank_values(cards, config), count)
    if fields is None:
        return None
    return encode(HandCategory.HIGH_CARD, fields)


# Strongest first; the evaluator stops at the first match.
CASCADE: Tuple[Tuple[HandCategory, Detector], ...] = (
    (HandCategory.STRAIGHT_FLUSH, straight_flush),
    (HandCategory.FOUR_OF_A_KIND, four_of_a_kind),
    (HandCategory.FULL_HOUSE, full_house),
    (HandCategory.FLUSH, flush),
    (HandCategory.STRAIGHT, straight),
    (HandCategory.THREE_OF_A_KIND, three_of_a_kind),
    (HandCategory.TWO_PAIR, two_pair),
    (HandCategory.ONE_PAIR, one_pair),
    (HandCategory.HIGH_CARD, high_card),
)
