import pytest

from patternkit.search import (
    binary_search,
    count_negatives,
    is_valid,
    next_greatest_letter,
    search,
    search_insert,
    search_range,
    search_range_scan,
)


def test_count_negatives():
    grid = [
        [4, 3, 2, -1],
        [3, 2, 1, -1],
        [1, 1, -1, -2],
        [-1, -1, -2, -3],
    ]
    assert count_negatives(grid) == 8


def test_count_negatives_empty_rows():
    assert count_negatives([[], [1, 0], [-5]]) == 1


@pytest.mark.parametrize(
    "case", ["", "[]", "{}", "[]", "{}()[]", "{([])}", "{}([])", "[()]{}", "[{}()]"]
)
def test_is_valid_correct_cases(case):
    assert is_valid(case) is True


@pytest.mark.parametrize("case", ["{", "}", "{}(){", "[{]}"])
def test_is_valid_fail_cases(case):
    assert is_valid(case) is False


def test_is_valid_rejects_other_characters():
    assert is_valid("(a)") is False


def test_search_insert_exists():
    nums = [1, 2, 3, 4, 5, 6, 7, 8]
    for i, num in enumerate(nums):
        assert search_insert(nums, num) == i


def test_search_insert_not_exists():
    nums = [1, 3, 5, 7, 9]
    targets = [0, 2, 4, 6, 8, 10]
    results = [0, 1, 2, 3, 4, 5]
    for target, expected in zip(targets, results):
        assert search_insert(nums, target) == expected


def test_search_insert_empty():
    assert search_insert([], 3) == 0


def test_search_exists():
    nums = [1, 2, 3, 4, 5, 6, 7, 8]
    for i, num in enumerate(nums):
        assert search(nums, num) == i


def test_search_not_exists():
    nums = [1, 3, 5, 7, 9]
    for num in nums:
        assert search(nums, num + 1) == -1


def test_search_example():
    assert search([1, 2, 3, 4, 5, 6, 7], 5) == 4


@pytest.mark.parametrize(
    "letters, target, expected",
    [
        ("aabbbccc", "d", "a"),
        ("cfj", "a", "c"),
        ("cfj", "c", "f"),
        ("xxyyy", "z", "x"),
    ],
)
def test_next_greatest_letter(letters, target, expected):
    assert next_greatest_letter(letters, target) == expected


def test_next_greatest_letter_bytes():
    assert next_greatest_letter(b"cfj", ord("c")) == ord("f")


def test_next_greatest_letter_empty():
    with pytest.raises(IndexError):
        next_greatest_letter("", "a")


RANGE_NUMS = [5, 7, 7, 8, 8, 10]
RANGE_CASES = [(8, (3, 4)), (6, (-1, -1)), (10, (5, 5))]


@pytest.mark.parametrize("target, expected", RANGE_CASES)
def test_search_range_scan(target, expected):
    assert search_range_scan(RANGE_NUMS, target) == expected


@pytest.mark.parametrize("target, expected", RANGE_CASES)
def test_search_range(target, expected):
    assert search_range(RANGE_NUMS, target) == expected


def test_search_range_edges():
    assert search_range_scan([8, 8, 8], 8) == (0, 2)
    assert search_range([8, 8, 8], 8) == (0, 2)
    assert search_range([], 1) == (-1, -1)


def test_binary_search_directions():
    assert binary_search(RANGE_NUMS, 7, go_left=True) == 1
    assert binary_search(RANGE_NUMS, 7, go_left=False) == 2
    assert binary_search(RANGE_NUMS, 9, go_left=True) == -1