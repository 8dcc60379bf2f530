from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
SUITS = ("S", "H", "D", "C")

RANK_NUMBER: Dict[str, int] = {rank: idx for idx, rank in enumerate(RANKS, start=1)}
NUMBER_RANK: Dict[int, str] = {number: rank for rank, number in RANK_NUMBER.items()}

ACE = 1
ACE_HIGH = 14


class ParseError(ValueError):
    """Raised when a card token is not ``<rank>_<suit>``."""


@dataclass(frozen=True)
class Card:
    rank: int
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in NUMBER_RANK:
            raise ParseError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ParseError(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> int:
        # Aces rank above kings everywhere except the wheel straight.
        return ACE_HIGH if self.rank == ACE else self.rank

    @property
    def token(self) -> str:
        return f"{NUMBER_RANK[self.rank]}_{self.suit}"


def parse_card(token: str) -> Card:
    """Parse an upper-case ``<rank>_<suit>`` token such as ``10_H``."""
    if not isinstance(token, str):
        raise ParseError(f"Invalid card token: {token!r}")
    rank, sep, suit = token.partition("_")
    if not sep or rank not in RANK_NUMBER or suit not in SUITS:
        raise ParseError(f"Invalid card token: {token!r}")
    return Card(RANK_NUMBER[rank], suit)


def parse_cards(tokens: Sequence[str]) -> List[Card]:
    return [parse_card(token) for token in tokens]


def cards_to_tokens(cards: Sequence[Card]) -> List[str]:
    return [card.token for card in cards]


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card(RANK_NUMBER[rank], suit) for rank in RANKS for suit in SUITS]
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[str]:
    """Take ``count`` cards off the top of ``deck`` and return their tokens."""
    if len(deck) < count:
        raise ValueError(f"Cannot deal {count} cards from {len(deck)}")
    dealt = cards_to_tokens(deck[:count])
    del deck[:count]
    return dealt
