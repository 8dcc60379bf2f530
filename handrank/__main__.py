import argparse
import logging
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from .cards import build_deck, deal
from .evaluator import best_hands, describe_rank, evaluate_hand, winners
from .models import EvaluatorConfig

LOGGER = logging.getLogger("handrank")


def _parse_player(raw: str) -> Tuple[str, List[str]]:
    name, sep, cards = raw.partition(":")
    if not sep or not name or not cards:
        raise ValueError(f"Player must look like NAME:CARD,CARD (got {raw!r})")
    return name, [token for token in cards.split(",") if token]


def _print_showdown(board: Sequence[str], players: Dict[str, List[str]], config: EvaluatorConfig) -> None:
    print(f"board: {' '.join(board)}")
    for name, rank in best_hands(board, players, config):
        print(f"{name}: {' '.join(players[name])} -> {describe_rank(rank)} ({rank:#x})")
    print(f"winner: {', '.join(winners(board, players, config))}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="handrank", description="Poker hand ranking")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows matched categories)")
    parser.add_argument("--max-cards", type=int, default=7, help="Largest card pool accepted per player")
    sub = parser.add_subparsers(dest="command", required=True)

    evaluate = sub.add_parser("evaluate", help="Rank one player's hand")
    evaluate.add_argument("--board", nargs="+", required=True, help="Community card tokens, e.g. 10_H")
    evaluate.add_argument("--hole", nargs="+", required=True, help="Private card tokens")

    showdown = sub.add_parser("showdown", help="Compare several players on one board")
    showdown.add_argument("--board", nargs="+", required=True)
    showdown.add_argument("--player", action="append", required=True, help="NAME:CARD,CARD (repeatable)")

    dealer = sub.add_parser("deal", help="Deal a random board and hands, then show down")
    dealer.add_argument("--players", type=int, default=2)
    dealer.add_argument("--seed", type=int, default=None)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        config = EvaluatorConfig(max_cards=args.max_cards)
        if args.command == "evaluate":
            rank = evaluate_hand(args.board, args.hole, config)
            print(f"{describe_rank(rank)} {rank} ({rank:#x})")
        elif args.command == "showdown":
            players: Dict[str, List[str]] = {}
            for raw in args.player:
                name, cards = _parse_player(raw)
                players[name] = cards
            _print_showdown(args.board, players, config)
        else:
            if not 1 <= args.players <= 23:
                raise ValueError("Between 1 and 23 players fit in one deck")
            deck = build_deck(args.seed)
            hands = {f"Player{idx}": deal(deck, 2) for idx in range(args.players)}
            board = deal(deck, 5)
            LOGGER.info("Dealt %d hands (seed=%s)", args.players, args.seed)
            _print_showdown(board, hands, config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
