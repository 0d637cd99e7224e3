import pytest

from puzzlekit.digits import (
    find_kth_number,
    lexical_order,
    max_diff,
    min_max_difference,
)

SAMPLE_NUMBERS = [1, 5, 9, 10, 19, 90, 99, 101, 111, 123456, 9288, 100000, 1101057, 555]


def test_max_diff_worked_example():
    assert max_diff(555) == 888


def test_min_max_difference_worked_example():
    assert min_max_difference(11891) == 99009


def test_lexical_order_worked_example():
    assert lexical_order(13) == [1, 10, 11, 12, 13, 2, 3, 4, 5, 6, 7, 8, 9]


@pytest.mark.parametrize("num", SAMPLE_NUMBERS)
def test_max_diff_bounded_by_min_max_difference(num):
    result = max_diff(num)
    assert 0 <= result <= min_max_difference(num)


@pytest.mark.parametrize("num", SAMPLE_NUMBERS)
def test_differences_stay_within_digit_count(num):
    limit = 10 ** len(str(num))
    assert min_max_difference(num) < limit
    assert max_diff(num) < limit


@pytest.mark.parametrize("num", [9, 99, 999, 99999])
def test_all_nines_min_max_is_number_itself(num):
    assert min_max_difference(num) == num


@pytest.mark.parametrize("num", range(1, 10))
def test_single_digits_share_results(num):
    assert max_diff(num) == max_diff(1)
    assert min_max_difference(num) == min_max_difference(1)


@pytest.mark.parametrize("n", [1, 9, 10, 13, 57, 100, 250, 1001])
def test_lexical_order_matches_string_sort(n):
    assert lexical_order(n) == sorted(range(1, n + 1), key=str)


@pytest.mark.parametrize("n", [1, 2, 9, 10, 13, 100, 137, 1000])
def test_find_kth_number_agrees_with_lexical_order(n):
    order = lexical_order(n)
    assert [find_kth_number(n, k) for k in range(1, n + 1)] == order


def test_find_kth_number_first_is_one():
    assert find_kth_number(10**6, 1) == 1


def test_find_kth_number_large_n():
    n = 10**9
    assert find_kth_number(n, 2) == 10
    assert find_kth_number(n, n) == int("9" * 9)