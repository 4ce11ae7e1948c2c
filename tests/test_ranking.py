from collections import Counter

from wordrank.datasets import DictionaryIndex, build_index
from wordrank.engine import ConstraintSet, format_suggestion, parse_constraints, rank, score_word, top


def _index_with_e(at_1: int, at_3: int) -> DictionaryIndex:
    # only 'e' carries any weight: 5 overall, plus the given positional counts
    pos = [Counter() for _ in range(5)]
    pos[1]["e"] = at_1
    pos[3]["e"] = at_3
    return DictionaryIndex(N=5, words=("bebed",), letter_frequency=Counter({"e": 5}),
                           position_frequency=tuple(pos))


def test_repeated_letter_counts_once_at_its_best_position():
    # 'e' is worth 10 at position 1 and 15 at position 3 -> 15, not 25
    assert score_word("bebed", _index_with_e(5, 10)) == 15
    assert score_word("bebed", _index_with_e(10, 5)) == 15

def test_score_sums_letter_and_position_frequency():
    index = build_index(["crane", "slate"])
    # c:1+1 r:1+1 a:2+2 n:1+1 e:2+2
    assert score_word("crane", index) == 14
    assert score_word("slate", index) == 14

def test_score_rewards_distinct_letters():
    index = build_index(["aaaaa", "abcde"])
    assert score_word("aaaaa", index) == 4
    assert score_word("abcde", index) == 12

def test_rank_orders_by_score_descending():
    index = build_index(["aaaaa", "abcde"])
    ranked = rank(index, ConstraintSet())
    assert [(s.word, s.score) for s in ranked] == [("abcde", 12), ("aaaaa", 4)]
    assert format_suggestion(ranked[0]) == "abcde (12)"

def test_rank_ties_keep_dictionary_order():
    assert [s.word for s in rank(build_index(["crane", "slate"]))] == ["crane", "slate"]
    assert [s.word for s in rank(build_index(["slate", "crane"]))] == ["slate", "crane"]

def test_rank_is_deterministic():
    index = build_index(["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "slate"])
    cs = parse_constraints(["+a"])
    assert rank(index, cs) == rank(index, cs)

def test_rank_scores_with_the_full_dictionary():
    index = build_index(["aaaaa", "abcde"])
    assert [(s.word, s.score) for s in rank(index, parse_constraints(["-e"]))] == [("aaaaa", 4)]

def test_rank_empty_when_nothing_matches():
    index = build_index(["crane", "slate"])
    assert rank(index, parse_constraints(["+z"])) == []

def test_top_limits_output():
    index = build_index(["crane", "raise", "stare", "trace", "cared"])
    ranked = rank(index)
    assert top(ranked, 2) == ranked[:2]
    assert top(ranked, 20) == ranked
    assert top(iter(ranked), 1) == ranked[:1]
