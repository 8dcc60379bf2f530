from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .cards import SUITS


class HandCategory(int, Enum):
    HIGH_CARD = 0
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class EvaluatorConfig:
    ace_low: int = 1
    ace_high: int = 14
    hand_size: int = 5
    suit_count: int = 4
    # A 5-4-3-2 run plus an ace is the wheel: ace plays low under a five.
    wheel_top_card: int = 5
    wheel_run_length: int = 4
    max_cards: int = 7

    def __post_init__(self) -> None:
        # Encoded ranks carry exactly five tie-break fields.
        if self.hand_size != 5:
            raise ValueError("Only five-card hands are supported")
        if self.max_cards < self.hand_size:
            raise ValueError("max_cards must be at least hand_size")
        if self.suit_count != len(SUITS):
            raise ValueError(f"suit_count must be {len(SUITS)}")
        if self.wheel_run_length != self.hand_size - 1:
            raise ValueError("wheel_run_length must be one short of hand_size")


DEFAULT_CONFIG = EvaluatorConfig()


class InvalidHandError(ValueError):
    """Raised when a card set cannot be ranked as a single hand."""
