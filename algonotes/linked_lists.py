"""Singly linked lists and operations that rearrange them in place."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, TypeVar


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self))

    def __repr__(self) -> str:
        return "->".join(str(value) for value in self)


@dataclass(eq=False, repr=False)
class RandomListNode:
    """A list node that also points at an arbitrary node of its list."""

    label: int
    next: Optional["RandomListNode"] = None
    random: Optional["RandomListNode"] = None

    def __repr__(self) -> str:
        return f"RandomListNode({self.label})"


_Node = TypeVar("_Node", ListNode, RandomListNode)


def _nodes(head: Optional[_Node]) -> Iterator[_Node]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding the given values in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in _nodes(head)]


def reverse(head: Optional[_Node]) -> Optional[_Node]:
    """Reverse a linked list in place and return its new head."""
    previous = None
    while head is not None:
        following = head.next
        head.next = previous
        previous = head
        head = following
    return previous


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each run of k nodes; a shorter final run keeps its order."""
    if k < 2 or head is None:
        return head
    anchor = ListNode(0, head)
    group_prev = anchor
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return anchor.next
        group_next = kth.next
        kth.next = None
        first = group_prev.next
        group_prev.next = reverse(first)
        first.next = group_next
        group_prev = first


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place.

    Linear time and constant extra space.
    """
    if head is None or head.next is None:
        return
    midpoint = end = head
    while end.next is not None and end.next.next is not None:
        midpoint = midpoint.next
        end = end.next.next
    right = reverse(midpoint.next)
    midpoint.next = None
    left = head.next
    tail = head
    while left is not None and right is not None:
        tail.next = right
        tail = right
        right = right.next
        tail.next = left
        tail = left
        left = left.next
    tail.next = left if left is not None else right


def reorder_list_with_list(head: Optional[ListNode]) -> None:
    """Same reordering as reorder_list, holding the nodes in a deque."""
    if head is None:
        return
    pending = deque(_nodes(head.next))
    take_right = True
    tail = head
    while pending:
        node = pending.pop() if take_right else pending.popleft()
        tail.next = node
        tail = node
        take_right = not take_right
    tail.next = None


def reorder_list_by_reversal(head: Optional[ListNode]) -> None:
    """Same reordering as reorder_list by reversing the rest repeatedly.

    Quadratic time, constant extra space.
    """
    if head is None or head.next is None:
        return
    while head.next is not None:
        head.next = reverse(head.next)
        head = head.next


def copy_random_list(head: Optional[RandomListNode]) -> Optional[RandomListNode]:
    """Deep-copy a list whose nodes carry random pointers."""
    copies = {node: RandomListNode(node.label) for node in _nodes(head)}
    for original, copy in copies.items():
        copy.next = copies.get(original.next)
        copy.random = copies.get(original.random)
    return copies.get(head)