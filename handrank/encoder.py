"""Pack a category tier and tie-break values into one comparable integer.

A rank is six base-16 fields. Field 5 holds the category tier and fields
4..0 hold card values from most to least significant, so comparing two
ranks numerically compares category first and then kickers in order.
Sub-results packed at different fields add together without overlap,
which is how the full house and two pair detectors combine their parts.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from .models import HandCategory

FIELD_BASE = 16
TIER_FIELD = 5
CARD_FIELDS = 5


def weight(field: int) -> int:
    if field < 0:
        raise ValueError(f"Field index must be non-negative: {field}")
    return FIELD_BASE ** field


def pack(values: Sequence[int], top_field: int) -> int:
    """Place ``values`` in successive fields starting at ``top_field``."""
    if len(values) > top_field + 1:
        raise ValueError(f"{len(values)} values do not fit below field {top_field}")
    total = 0
    for offset, value in enumerate(values):
        if not 0 <= value < FIELD_BASE:
            raise ValueError(f"Value does not fit in one field: {value}")
        total += value * weight(top_field - offset)
    return total


def repeat(value: int, top_field: int, times: int) -> int:
    return pack([value] * times, top_field)


def encode(category: HandCategory, fields: int) -> int:
    return int(category) * weight(TIER_FIELD) + fields


def decode(rank: int) -> Tuple[HandCategory, Tuple[int, ...]]:
    if rank < 0 or rank >= (max(HandCategory) + 1) * weight(TIER_FIELD):
        raise ValueError(f"Not a hand rank: {rank}")
    tier, fields = divmod(rank, weight(TIER_FIELD))
    values = tuple((fields // weight(field)) % FIELD_BASE for field in range(CARD_FIELDS - 1, -1, -1))
    return HandCategory(tier), values
