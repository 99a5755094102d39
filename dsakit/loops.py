"""Cycle detection and repair for chains of linked nodes."""

from __future__ import annotations

from typing import Optional

from dsakit.linked import Node


def detect_loop(head: Optional[Node]) -> Optional[Node]:
    """Return the node where the slow and fast walkers meet, or None."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_loop(head: Optional[Node]) -> bool:
    """Tell whether the chain from head runs into a cycle."""
    return detect_loop(head) is not None


def loop_start(head: Optional[Node]) -> Optional[Node]:
    """Return the first node of the cycle, or None when there is none."""
    meeting = detect_loop(head)
    if meeting is None:
        return None
    slow, fast = head, meeting
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def remove_loop(head: Optional[Node]) -> bool:
    """Break the cycle, if any, so the chain ends; report whether one was cut."""
    start = loop_start(head)
    if start is None:
        return False
    node = start
    while node.next is not start:
        node = node.next
    node.next = None
    return True