import itertools
import logging

import pytest

from handrank.cards import ParseError, build_deck
from handrank.encoder import decode
from handrank.evaluator import best_hands, describe_rank, evaluate_cards, evaluate_hand, winners
from handrank.models import EvaluatorConfig, HandCategory, InvalidHandError

from .helpers import cards, category_of, rank_of


def test_evaluate_identifies_all_hand_categories():
    cases = [
        (0x9EDCBA, "A_H K_H Q_H J_H 10_H"),  # straight flush
        (0x8EEEED, "A_S A_H A_D A_C K_D"),  # four of a kind
        (0x7CCC99, "Q_C Q_D Q_S 9_H 9_S"),  # full house
        (0x6EB962, "A_H J_H 9_H 6_H 2_H"),  # flush
        (0x598765, "9_H 8_D 7_C 6_S 5_H"),  # straight
        (0x4888CB, "8_H 8_D 8_S Q_D J_S"),  # three of a kind
        (0x37744E, "7_H 7_D 4_S 4_C A_S"),  # two pair
        (0x266C84, "6_H 6_S Q_H 8_D 4_C"),  # one pair
        (0x0EDB94, "A_S K_D J_H 9_C 4_D"),  # high card
    ]

    for expected, spec in cases:
        assert rank_of(spec) == expected, f"cards={spec}"


def test_trip_aces_with_king_nine_kickers():
    rank = evaluate_hand(["2_H", "7_D", "9_C", "K_S", "A_H"], ["A_S", "A_C"])
    assert rank == 0x4EEED9
    assert decode(rank) == (HandCategory.THREE_OF_A_KIND, (14, 14, 14, 13, 9))


def test_wheel_straight_plays_ace_low():
    rank = evaluate_hand(["2_C", "3_D", "4_H", "5_S", "K_H"], ["A_S", "7_C"])
    assert decode(rank) == (HandCategory.STRAIGHT, (5, 4, 3, 2, 1))
    assert rank < rank_of("2_C 3_D 4_H 5_S 6_H")
    assert rank > rank_of("A_S K_D Q_H J_C 9_D")


def test_six_high_straight_preferred_over_wheel():
    assert decode(rank_of("A_S 2_D 3_C 4_S 5_H 6_D K_D")) == (HandCategory.STRAIGHT, (6, 5, 4, 3, 2))


def test_ace_high_straight_uses_ace_as_fourteen():
    assert rank_of("10_S J_D Q_C K_S A_H 2_D 3_C") == 0x5EDCBA


def test_straight_flush_outranks_four_of_a_kind():
    rank = evaluate_hand(["5_S", "6_S", "7_S", "8_S", "2_D"], ["9_S", "K_C"])
    assert rank == 0x998765
    assert rank > rank_of("A_S A_H A_D A_C K_D")


def test_steel_wheel_is_five_high_straight_flush():
    assert rank_of("A_S 2_S 3_S 4_S 5_S 9_D") == 0x954321


def test_straight_flush_only_uses_suited_cards():
    # The ten is off-suit, so the straight flush stays nine high.
    assert rank_of("5_S 6_S 7_S 8_S 9_S 10_H") == 0x998765


def test_flush_beats_straight_in_same_cards():
    assert rank_of("2_H 4_H 6_H 8_H 10_H 7_C 9_D") == 0x6A8642


def test_flush_keeps_top_five_suited_cards():
    assert rank_of("2_H 4_H 6_H 8_H 10_H Q_H 3_S") == 0x6CA864


def test_two_pair_beats_pair_of_twos():
    two_pair = evaluate_hand(["2_H", "2_D", "3_C", "3_S", "9_H"], ["4_D", "5_C"])
    one_pair = evaluate_hand(["2_H", "2_D", "7_C", "8_S", "9_H"], ["4_D", "5_C"])
    assert two_pair == 0x333229
    assert one_pair == 0x222987
    assert two_pair > one_pair


def test_best_two_of_three_pairs_with_third_pair_as_kicker():
    assert rank_of("A_S A_H K_D K_C Q_S Q_H 2_D") == 0x3EEDDC


def test_full_house_from_two_triplets():
    assert rank_of("K_S K_H K_D 5_C 5_S 5_H 2_D") == 0x7DDD55


def test_full_house_takes_highest_pair():
    assert rank_of("9_S 9_H 9_D K_C K_S 2_H 2_D") == 0x7999DD


def test_four_of_a_kind_kicker_comes_from_remaining_cards():
    assert rank_of("7_S 7_H 7_D 7_C K_S K_H 2_D") == 0x87777D
    assert rank_of("A_S A_H A_D A_C K_S K_H K_D") == 0x8EEEED


def test_higher_kickers_increase_rank_within_category():
    assert rank_of("A_H A_D K_C Q_S 9_H 2_D 3_C") > rank_of("A_H A_D Q_C J_S 8_H 2_D 3_C")
    assert rank_of("8_H 8_D 8_S A_D 3_S") > rank_of("8_H 8_D 8_S K_D Q_S")
    assert rank_of("A_S K_D J_H 9_C 5_D") > rank_of("A_S K_D J_H 9_C 4_D")


def test_category_ordering_ignores_kickers():
    ordered = [
        "2_S 3_D 4_H 5_C 7_D",
        "2_S 2_D 3_H 4_C 5_D 9_C",
        "2_S 2_D 3_H 3_C 4_D",
        "2_S 2_D 2_H 3_C 4_D",
        "2_S 3_D 4_H 5_C 6_D",
        "2_H 3_H 4_H 5_H 7_H",
        "2_S 2_D 2_H 3_C 3_D",
        "2_S 2_D 2_H 2_C 3_D",
        "2_S 3_S 4_S 5_S 6_S",
    ]
    ranks = [rank_of(spec) for spec in ordered]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(ranks)
    assert rank_of("A_S K_D Q_H J_C 9_D") < ranks[1]


def test_seven_card_rank_matches_best_five_card_subset():
    for seed in range(40):
        deck = build_deck(seed=seed)
        for idx in range(0, 42, 7):
            pool = deck[idx : idx + 7]
            best = max(evaluate_cards(combo) for combo in itertools.combinations(pool, 5))
            assert evaluate_cards(pool) == best, [card.token for card in pool]


def test_random_hands_decode_to_a_known_category():
    deck = build_deck(seed=31)
    for idx in range(0, 42, 7):
        category, fields = decode(evaluate_cards(deck[idx : idx + 7]))
        assert isinstance(category, HandCategory)
        assert all(0 <= value <= 14 for value in fields)


def test_invalid_token_raises_parse_error():
    with pytest.raises(ParseError, match="Z_X"):
        evaluate_hand(["2_H", "7_D", "Z_X"], ["A_S", "A_C"])
    with pytest.raises(ParseError):
        evaluate_hand(["2_H", "7_D", "9_C"], ["A_S", "1_C"])


def test_card_count_outside_range_rejected():
    with pytest.raises(InvalidHandError, match="got 4"):
        evaluate_hand(["2_H", "7_D"], ["A_S", "A_C"])
    with pytest.raises(InvalidHandError, match="got 8"):
        evaluate_cards(cards("2_H 3_H 4_H 5_H 6_D 7_D 8_D 9_D"))


def test_larger_pool_allowed_by_config():
    config = EvaluatorConfig(max_cards=9)
    rank = evaluate_cards(cards("2_H 3_H 4_H 5_H 6_D 7_D 8_D 9_D K_C"), config)
    assert decode(rank) == (HandCategory.STRAIGHT, (9, 8, 7, 6, 5))


def test_two_flush_suits_in_oversized_pool_rejected():
    config = EvaluatorConfig(max_cards=10)
    pool = cards("2_H 4_H 6_H 8_H 10_H 3_S 5_S 7_S 9_S J_S")
    with pytest.raises(InvalidHandError, match="2 suits"):
        evaluate_cards(pool, config)


def test_describe_rank_labels():
    assert describe_rank(rank_of("Q_C Q_D Q_S 9_H 9_S")) == "full_house"
    assert category_of("A_S K_D J_H 9_C 4_D") is HandCategory.HIGH_CARD


def test_best_hands_and_winners():
    board = ["2_H", "7_D", "9_C", "K_S", "A_H"]
    players = {"alice": ["A_S", "A_C"], "bob": ["K_D", "K_C"], "carol": ["3_S", "4_D"]}
    ranked = best_hands(board, players)
    assert [name for name, _ in ranked] == ["alice", "bob", "carol"]
    assert winners(board, players) == ["alice"]


def test_winners_split_on_equal_rank():
    board = ["10_S", "J_D", "Q_C", "K_S", "A_H"]
    players = {"alice": ["2_S", "3_D"], "bob": ["4_H", "5_C"]}
    assert winners(board, players) == ["alice", "bob"]
    assert winners(board, {}) == []


def test_debug_log_names_matched_category(caplog):
    with caplog.at_level(logging.DEBUG, logger="handrank"):
        evaluate_hand(["5_S", "6_S", "7_S", "8_S", "2_D"], ["9_S", "K_C"])
    assert "straight_flush" in caplog.text
