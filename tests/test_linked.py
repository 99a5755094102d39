import pytest

from dsakit.linked import (
    LinkedList,
    Node,
    build_chain,
    chain_values,
    find_middle,
    is_circular,
    reverse_chain,
    reverse_in_groups,
)


def test_build_chain_round_trip():
    values = [5, 6, 7, 8, 9]
    assert chain_values(build_chain(values)) == values


def test_build_chain_empty():
    assert build_chain([]) is None
    assert chain_values(None) == []


def test_reverse_chain():
    values = list(range(5, 14))
    assert chain_values(reverse_chain(build_chain(values))) == values[::-1]


def test_reverse_chain_single_and_empty():
    assert reverse_chain(None) is None
    assert chain_values(reverse_chain(build_chain([1]))) == [1]


def test_reverse_in_groups_source_example():
    head = build_chain(range(5, 14))
    assert chain_values(reverse_in_groups(head, 4)) == [8, 7, 6, 5, 12, 11, 10, 9, 13]


@pytest.mark.parametrize("k", [1, 2, 3, 5, 9, 20])
def test_reverse_in_groups_chunks(k):
    values = list(range(9))
    result = chain_values(reverse_in_groups(build_chain(values), k))
    chunks = [values[i:i + k] for i in range(0, len(values), k)]
    assert result == [v for chunk in chunks for v in reversed(chunk)]


def test_reverse_in_groups_rejects_bad_k():
    with pytest.raises(ValueError):
        reverse_in_groups(build_chain([1, 2]), 0)


def test_find_middle_source_example():
    head = build_chain(range(5, 17))
    assert find_middle(head).data == 11


def test_find_middle_odd_and_trivial():
    assert find_middle(build_chain([1, 2, 3])).data == 2
    assert find_middle(None) is None
    single = Node(4)
    assert find_middle(single) is single


def test_is_circular():
    head = build_chain([10, 12, 15, 22])
    assert is_circular(head) is False
    tail = head.next.next.next
    tail.next = head
    assert is_circular(head) is True
    assert is_circular(None) is True


def test_is_circular_loop_elsewhere():
    head = build_chain([1, 2, 3, 4])
    head.next.next.next.next = head.next
    assert is_circular(head) is False


def test_list_source_example():
    items = LinkedList([10])
    items.insert_at_tail(12)
    items.insert_at_tail(15)
    items.insert_at_position(4, 22)
    assert list(items) == [10, 12, 15, 22]
    assert items.tail.data == 22
    assert len(items) == 4
    items.reverse()
    assert list(items) == [22, 15, 12, 10]
    assert items.tail.data == 10


def test_insert_at_head_and_middle_position():
    items = LinkedList()
    items.insert_at_head(3)
    items.insert_at_head(1)
    items.insert_at_position(2, 2)
    items.insert_at_position(1, 0)
    assert list(items) == [0, 1, 2, 3]
    assert items.tail.data == 3


def test_insert_at_position_out_of_range():
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert_at_position(5, 9)
    with pytest.raises(IndexError):
        items.insert_at_position(0, 9)
    assert list(items) == [1, 2]


def test_delete_at_position():
    items = LinkedList([1, 2, 3, 4])
    assert items.delete_at_position(1) == 1
    assert items.delete_at_position(3) == 4
    assert list(items) == [2, 3]
    assert items.tail.data == 3
    items.insert_at_tail(5)
    assert list(items) == [2, 3, 5]


def test_delete_errors():
    with pytest.raises(IndexError):
        LinkedList().delete_at_position(1)
    items = LinkedList([1])
    with pytest.raises(IndexError):
        items.delete_at_position(2)
    assert items.delete_at_position(1) == 1
    assert items.head is None and items.tail is None


def test_list_reverse_in_groups_keeps_tail():
    items = LinkedList(range(5, 14))
    items.reverse_in_groups(4)
    assert list(items) == [8, 7, 6, 5, 12, 11, 10, 9, 13]
    assert items.tail.data == 13
    items.insert_at_tail(99)
    assert list(items)[-1] == 99


def test_list_middle():
    assert LinkedList([1, 2, 3, 4, 5]).middle() == 3
    with pytest.raises(IndexError):
        LinkedList().middle()