"""Singly linked list nodes and algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed decimal digits; return the sum the same way."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index len // 2 and return the head."""
    if head is None or head.next is None:
        return None
    slow = fast = before = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        before = slow
        slow = slow.next
    before.next = slow.next
    return head


def pair_sum(head: Optional[ListNode]) -> int:
    """Return the largest twin sum of the list (0 if none is larger)."""
    values = to_values(head)
    second_half = values[len(values) // 2:]
    return max([0, *(a + b for a, b in zip(values, reversed(second_half)))])


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; the second middle for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the list so nodes at even indices come before those at odd ones."""
    if head is None:
        return None
    odd = head
    even = head.next
    while even is not None and even.next is not None:
        moved = even.next
        even.next = moved.next
        moved.next = odd.next
        odd.next = moved
        odd = moved
        even = even.next
    return head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = to_values(head)
    return values == values[::-1]


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list, keeping the first of each run."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Remove every node holding ``val`` and return the new head."""
    dummy = ListNode(next=head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        following = head.next
        head.next = previous
        previous = head
        head = following
    return previous