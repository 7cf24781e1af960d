"""Singly linked lists and circular doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


@dataclass(eq=False, repr=False)
class DoubleNode:
    """A node of a circular doubly linked list."""

    value: Any
    prev: Optional[DoubleNode] = None
    next: Optional[DoubleNode] = None

    def __repr__(self) -> str:
        return f"DoubleNode({self.value!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _ring(head: Optional[DoubleNode]) -> Iterator[DoubleNode]:
    node = head
    while node is not None:
        yield node
        node = node.next
        if node is head:
            return


def _link_ring(nodes: list[DoubleNode]) -> None:
    for current, following in zip(nodes, nodes[1:] + nodes[:1]):
        current.next = following
        following.prev = current


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a singly linked list and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of a singly linked list in order."""
    return [node.value for node in _nodes(head)]


def circular_from_values(values: Iterable[Any]) -> Optional[DoubleNode]:
    """Build a circular doubly linked list and return its head."""
    nodes = [DoubleNode(value) for value in values]
    if not nodes:
        return None
    _link_ring(nodes)
    return nodes[0]


def circular_to_values(head: Optional[DoubleNode]) -> list[Any]:
    """Return the values of a circular list, starting at ``head``."""
    return [node.value for node in _ring(head)]


def count_circular(head: Optional[DoubleNode]) -> int:
    """Count the nodes of a circular doubly linked list."""
    return sum(1 for _ in _ring(head))


def delete_circular(head: Optional[DoubleNode], target: Any) -> Optional[DoubleNode]:
    """Remove every node holding ``target`` from a circular list.

    Returns the new head: the first remaining node from the old head on,
    or ``None`` when nothing is left.
    """
    nodes = list(_ring(head))
    kept = [node for node in nodes if node.value != target]
    for node in nodes:
        if node.value == target:
            node.prev = node.next = None
    if not kept:
        return None
    _link_ring(kept)
    return kept[0]


def delete_value(head: Optional[ListNode], value: Any) -> Optional[ListNode]:
    """Remove every node holding ``value`` and return the new head."""
    sentinel = ListNode(None, head)
    current = sentinel
    while current.next is not None:
        if current.next.value == value:
            current.next = current.next.next
        else:
            current = current.next
    return sentinel.next


def delete_tail(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    current = head
    while current.next.next is not None:
        current = current.next
    current.next = None
    return head


def insert_at(head: Optional[ListNode], index: int, value: Any) -> ListNode:
    """Insert ``value`` so that it ends up at position ``index``."""
    if index < 0:
        raise IndexError("index must not be negative")
    if index == 0:
        return ListNode(value, head)
    current = head
    for _ in range(index - 1):
        if current is None:
            break
        current = current.next
    if current is None:
        raise IndexError(f"index {index} is past the end of the list")
    current.next = ListNode(value, current.next)
    return head


def insert_at_tail(head: Optional[ListNode], node: ListNode) -> ListNode:
    """Append ``node`` to the list and return the head."""
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def merge_sorted(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes.

    On equal values the node of ``first`` comes first.
    """
    sentinel = ListNode(None)
    tail = sentinel
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return sentinel.next


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous