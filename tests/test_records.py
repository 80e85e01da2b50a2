import numpy as np
import pytest

from powerlotto.records import (
    DrawRecord,
    NumberDomain,
    count_matrix,
    indicator_matrix,
    to_distribution,
)


def test_domains_cover_expected_ranges():
    assert NumberDomain.MAIN.numbers == list(range(1, 39))
    assert NumberDomain.SPECIAL.numbers == list(range(1, 9))
    assert NumberDomain.MAIN.size == 38
    assert NumberDomain.SPECIAL.size == 8


def test_record_is_immutable_and_normalized():
    r = DrawRecord([3, 1, 2, 4, 5, 6], 2)
    assert r.main_numbers == (3, 1, 2, 4, 5, 6)
    with pytest.raises(Exception):
        r.special_number = 3


def test_observed_by_domain():
    r = DrawRecord((1, 1, 2, 3, 4, 5))
    assert NumberDomain.MAIN.observed(r) == [1, 1, 2, 3, 4, 5]
    assert NumberDomain.SPECIAL.observed(r) == []
    assert NumberDomain.SPECIAL.observed(DrawRecord((1, 2, 3, 4, 5, 6), 8)) == [8]


@pytest.mark.parametrize("main, special, expected", [
    ((0, 2, 3, 4, 5, 6), None, [(1, 0)]),
    ((1, 2, 3, 4, 5, 39), None, [(6, 39)]),
    ((1, 2, 3, 4, 5, 6), 9, [(7, 9)]),
    ((40, 2, 3, 4, 5, 6), 0, [(1, 40), (7, 0)]),
])
def test_range_violations_name_columns(main, special, expected):
    assert DrawRecord(main, special).range_violations() == expected


def test_duplicate_main_numbers_are_in_range():
    assert DrawRecord((5, 5, 5, 5, 5, 5), 1).range_violations() == []


def test_count_and_indicator_matrices(two_draws):
    dup = two_draws + [DrawRecord((9, 9, 10, 11, 12, 13))]
    counts = count_matrix(dup, NumberDomain.MAIN)
    assert counts.shape == (3, 38)
    assert counts[2, 8] == 2
    assert indicator_matrix(dup, NumberDomain.MAIN)[2, 8] == 1.0
    assert count_matrix([], NumberDomain.SPECIAL).shape == (0, 8)


def test_to_distribution_keys():
    dist = to_distribution(np.arange(8, dtype=float), NumberDomain.SPECIAL)
    assert list(dist) == list(range(1, 9))
    assert dist[8] == 7.0
