import io
import random

import pytest

from desafios.contest import (
    MOD,
    best_two_windows,
    can_separate,
    classify_plate,
    count_combinations,
    fits_capacity,
    in_region,
    main,
    max_prime_occurrences,
    partitions_without,
    route_length,
)


def test_fits_capacity_exact_sum_fits():
    assert fits_capacity(10, 3, 3, 4) is True


def test_fits_capacity_one_over_does_not_fit():
    assert fits_capacity(9, 3, 3, 4) is False


@pytest.mark.parametrize(
    "point", [(51, 50), (300, 0), (0, -101), (-201, 0), (150, 10), (-100, -100)]
)
def test_in_region_outside(point):
    assert in_region(*point) is False


def test_count_combinations_without_extras_or_exceptions():
    assert count_combinations(2, 1, 1, []) == 1


def test_count_combinations_forbidden_pair_blocks_all():
    assert count_combinations(2, 1, 1, [(1, 2)]) == 0


def test_count_combinations_too_few_ingredients():
    assert count_combinations(2, 2, 1, []) == 0


def test_count_combinations_exceptions_only_reduce():
    free = count_combinations(6, 2, 2, [])
    restricted = count_combinations(6, 2, 2, [(5, 6)])
    assert restricted < free
    assert count_combinations(6, 2, 2, [(5, 6), (1, 3)]) <= restricted


def test_count_combinations_extras_double_the_count():
    assert count_combinations(5, 2, 2, []) == 2 * count_combinations(4, 2, 2, [])


def test_count_combinations_rejects_zero_index():
    with pytest.raises(ValueError):
        count_combinations(3, 1, 1, [(0, 2)])


def test_best_two_windows_empty():
    assert best_two_windows(5, []) == 0


def test_best_two_windows_single_product():
    assert best_two_windows(3, [(10, 7)]) == 7


def test_best_two_windows_two_far_products_both_taken():
    assert best_two_windows(1, [(0, 5), (100, 7)]) == 12


def test_best_two_windows_all_in_one_window_takes_everything():
    products = [(1, 4), (2, 6), (3, 1), (4, 9)]
    assert best_two_windows(10, products) == sum(v for _, v in products)


def test_best_two_windows_order_independent():
    products = [(i * 3, (i * 7) % 11 + 1) for i in range(20)]
    shuffled = products[:]
    random.Random(1).shuffle(shuffled)
    assert best_two_windows(4, shuffled) == best_two_windows(4, products)


def test_best_two_windows_bounded_by_total():
    products = [(i * 5, i + 1) for i in range(15)]
    assert best_two_windows(6, products) <= sum(v for _, v in products)


def test_best_two_windows_negative_width_rejected():
    with pytest.raises(ValueError):
        best_two_windows(-1, [(0, 1)])


def test_route_length_nothing_hot():
    assert route_length([1, 2, 3], 10, [(1, 2), (2, 3)]) == 0


def test_route_length_single_hot_root():
    assert route_length([50], 10, []) == 0


def test_route_length_one_hot_neighbour():
    assert route_length([0, 20], 10, [(1, 2)]) == 1


def test_route_length_line_ends_at_far_node():
    assert route_length([0, 0, 20], 10, [(1, 2), (2, 3)]) == 2


def test_route_length_deep_line_does_not_overflow_stack():
    n = 5000
    temps = [0] * (n - 1) + [20]
    edges = [(i, i + 1) for i in range(1, n)]
    assert route_length(temps, 10, edges) == n - 1


def test_route_length_rejects_bad_edge():
    with pytest.raises(ValueError):
        route_length([1, 2], 0, [(1, 3)])


def test_route_length_rejects_empty_tree():
    with pytest.raises(ValueError):
        route_length([], 0, [])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("?R-SP", "S"),
        ("B?-SP", "S"),
        ("BR?SP", "S"),
        ("BR-?P", "T"),
        ("BR-S?", "T"),
        ("BR-SP", "N"),
        ("XYZ", "N"),
    ],
)
def test_classify_plate(text, expected):
    assert classify_plate(text) == expected


def test_partitions_without_zero():
    assert partitions_without(0, 1) == 1


def test_partitions_without_large_k_is_unrestricted():
    assert partitions_without(12, 13) == partitions_without(12, 100)


def test_partitions_without_one_identity():
    for n in range(1, 20):
        full = partitions_without(n, n + 1)
        previous = partitions_without(n - 1, n + 1)
        assert partitions_without(n, 1) == full - previous


def test_partitions_without_reduced_modulo():
    assert 0 <= partitions_without(500, 3) < MOD


def test_partitions_without_negative_rejected():
    with pytest.raises(ValueError):
        partitions_without(-1, 1)


def test_can_separate_other_column_counts():
    assert can_separate([[1], [2], [1]]) is True
    assert can_separate([[2, 1]]) is True


def test_can_separate_already_sorted():
    assert can_separate([[1, 1], [2, 2]]) is True


def test_can_separate_buried_wrong_stone():
    assert can_separate([[2, 1], [1, 2]]) is False


def test_can_separate_leaves_input_untouched():
    columns = [[1, 2], [2, 1]]
    can_separate(columns)
    assert columns == [[1, 2], [2, 1]]


def test_max_prime_occurrences_one_has_no_primes():
    assert max_prime_occurrences([1, 1]) == [0, 0]


def test_max_prime_occurrences_toggle():
    assert max_prime_occurrences([2, 2]) == [1, 0]


def test_max_prime_occurrences_shared_prime():
    assert max_prime_occurrences([6, 4]) == [1, 2]


def test_max_prime_occurrences_full_removal_returns_to_zero():
    values = [6, 10, 15, 30, 7]
    answers = max_prime_occurrences(values + values)
    assert len(answers) == 2 * len(values)
    assert answers[-1] == 0
    assert answers[len(values) - 1] >= answers[0]


def test_max_prime_occurrences_rejects_negative():
    with pytest.raises(ValueError):
        max_prime_occurrences([-4])


def _run(monkeypatch, capsys, problem, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([problem])
    return code, capsys.readouterr().out


def test_main_problem_a(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "A", "10 3 3 4\n")
    assert code == 0
    assert out.strip() == "S"


def test_main_problem_c(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "C", "2\n0 0\n300 0\n")
    assert out.split() == ["S", "N"]


def test_main_problem_g(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "g", "BR-S?\n")
    assert out.strip() == "T"


def test_main_problem_n(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "N", "2\n2 2\n")
    assert out.split() == ["1", "0"]


def test_main_truncated_input(monkeypatch, capsys):
    code, _ = _run(monkeypatch, capsys, "A", "10 3\n")
    assert code == 1