"""Algorithms over chains of singly linked nodes: sums, merges, dedup, sorting."""

from __future__ import annotations

from collections import Counter
from itertools import zip_longest
from typing import Optional

from dsakit.linked import Node, build_chain, chain_values, find_middle, reverse_chain


def add_numbers(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Add two numbers stored most significant digit first; return a new chain.

    Each node may hold a value above 9; the excess is carried to the next
    more significant place. The input chains are left untouched.
    """
    digits: list[int] = []
    carry = 0
    pairs = zip_longest(
        reversed(chain_values(first)), reversed(chain_values(second)), fillvalue=0
    )
    for a, b in pairs:
        carry, digit = divmod(carry + a + b, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return build_chain(reversed(digits))


def merge_sorted(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two ascending chains by relinking their nodes; return the new head.

    Equal values keep the nodes of the first chain ahead of the second.
    """
    if first is None:
        return second
    if second is None:
        return first
    if first.data <= second.data:
        head, first = first, first.next
    else:
        head, second = second, second.next
    tail = head
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return head


def is_palindrome(head: Optional[Node]) -> bool:
    """Tell whether the chain reads the same both ways.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    # The node ending the first half: for even lengths, the first of the two middles.
    mid = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        mid = mid.next
    mid.next = reverse_chain(mid.next)
    try:
        left, right = head, mid.next
        while right is not None:
            if left.data != right.data:
                return False
            left, right = left.next, right.next
        return True
    finally:
        mid.next = reverse_chain(mid.next)


def remove_sorted_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Unlink repeated neighbours from a sorted chain in place; return the head."""
    current = head
    while current is not None:
        if current.next is not None and current.data == current.next.data:
            removed = current.next
            current.next = removed.next
            removed.next = None
        else:
            current = current.next
    return head


def remove_unsorted_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Keep only the first node for each value, in place; return the head."""
    if head is None:
        return None
    seen = {head.data}
    previous = head
    while previous.next is not None:
        current = previous.next
        if current.data in seen:
            previous.next = current.next
            current.next = None
        else:
            seen.add(current.data)
            previous = current
    return head


def sort_012_counting(head: Optional[Node]) -> Optional[Node]:
    """Sort a chain of 0s, 1s and 2s by rewriting the node values.

    Any value other than 0 or 1 is counted as a 2.
    """
    counts = Counter(
        value if value in (0, 1) else 2 for value in chain_values(head)
    )
    ordered = iter([0] * counts[0] + [1] * counts[1] + [2] * counts[2])
    node = head
    while node is not None:
        node.data = next(ordered)
        node = node.next
    return head


def sort_012_relink(head: Optional[Node]) -> Optional[Node]:
    """Sort a chain of 0s, 1s and 2s by relinking nodes; return the new head.

    Any value other than 0 or 1 goes with the 2s. Order within a value is kept.
    """
    dummies = {0: Node(-1), 1: Node(-1), 2: Node(-1)}
    tails = dict(dummies)
    node = head
    while node is not None:
        key = node.data if node.data in (0, 1) else 2
        tails[key].next = node
        tails[key] = node
        node = node.next
    for key in (0, 1, 2):
        tails[key].next = None
    new_head: Optional[Node] = None
    last: Optional[Node] = None
    for key in (0, 1, 2):
        segment = dummies[key].next
        if segment is None:
            continue
        if last is None:
            new_head = segment
        else:
            last.next = segment
        last = tails[key]
    return new_head


__all__ = [
    "add_numbers",
    "merge_sorted",
    "is_palindrome",
    "remove_sorted_duplicates",
    "remove_unsorted_duplicates",
    "sort_012_counting",
    "sort_012_relink",
    "find_middle",
]