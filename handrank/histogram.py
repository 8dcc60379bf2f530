"""Per-rank occurrence counts used to find pairs, trips and quads."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

# Twos live in slot 0, aces (valued 14) in slot 12.
RANK_OFFSET = 2
HISTOGRAM_SIZE = 13

Histogram = Tuple[int, ...]


def build_histogram(values: Iterable[int]) -> Histogram:
    counts = [0] * HISTOGRAM_SIZE
    for value in values:
        slot = value - RANK_OFFSET
        if not 0 <= slot < HISTOGRAM_SIZE:
            raise ValueError(f"Rank value out of range: {value}")
        counts[slot] += 1
    return tuple(counts)


def highest_group(histogram: Histogram, size: int) -> Optional[int]:
    """Return the highest rank value with at least ``size`` cards, if any."""
    for slot in range(HISTOGRAM_SIZE - 1, -1, -1):
        if histogram[slot] >= size:
            return slot + RANK_OFFSET
    return None


def remove_group(values: Sequence[int], value: int, count: int) -> Tuple[int, ...]:
    remaining: List[int] = []
    for item in values:
        if item == value and count > 0:
            count -= 1
            continue
        remaining.append(item)
    return tuple(remaining)
