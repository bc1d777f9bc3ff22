from collections import Counter

import pytest

from text_analyzer.analysis import RankedEntry, RankRequestError, aggregate, tokenize, top_n


def test_top_two_words() -> None:
    counts = aggregate(tokenize("cat dog cat bird dog cat"))
    assert top_n(counts, 2) == [("cat", 3), ("dog", 2)]


def test_entries_are_named() -> None:
    entry = top_n({"cat": 3}, 1)[0]
    assert isinstance(entry, RankedEntry)
    assert entry.label == "cat"
    assert entry.count == 3


def test_ties_are_ordered_by_label() -> None:
    counts = {"pear": 2, "apple": 2, "fig": 5, "banana": 2}
    assert top_n(counts, 4) == [("fig", 5), ("apple", 2), ("banana", 2), ("pear", 2)]


def test_result_does_not_depend_on_insertion_order() -> None:
    forward = {"b": 1, "a": 1, "c": 1}
    backward = dict(reversed(list(forward.items())))
    assert top_n(forward, 2) == top_n(backward, 2) == [("a", 1), ("b", 1)]


def test_n_larger_than_map_returns_everything() -> None:
    counts = {"x": 1, "y": 3}
    assert top_n(counts, 100) == [("y", 3), ("x", 1)]


def test_empty_map() -> None:
    assert top_n({}, 5) == []


@pytest.mark.parametrize("n", [0, -1, True, 2.5, "3"])
def test_rejects_invalid_n(n: object) -> None:
    with pytest.raises(RankRequestError):
        top_n({"x": 1}, n)  # type: ignore[arg-type]


def test_rank_request_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        top_n({"x": 1}, 0)


@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_result_is_sorted_bounded_sub_multiset(n: int) -> None:
    counts = aggregate(tokenize("a b c a b a d e e e e f"))
    ranked = top_n(counts, n)

    assert len(ranked) == min(n, len(counts))
    assert all(x.count >= y.count for x, y in zip(ranked, ranked[1:]))
    assert not Counter(ranked) - Counter(counts.items())
