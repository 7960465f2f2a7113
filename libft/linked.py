"""A singly linked list of byte payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(eq=False)
class ListNode:
    """One list element holding a copy of its payload."""

    content: Optional[bytes] = None
    content_size: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def lstnew(content: Optional[BytesLike], content_size: int) -> ListNode:
    """A new unlinked node holding a copy of ``content_size`` bytes of ``content``.

    With no content or a zero size the node holds nothing and its size is 0.
    """
    if content_size < 0:
        raise ValueError(f"content size must not be negative, got {content_size}")
    if content is None or content_size == 0:
        return ListNode()
    if content_size > len(content):
        raise IndexError(f"content holds {len(content)} bytes, {content_size} requested")
    return ListNode(bytes(content[:content_size]), content_size)


def lstadd(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Put ``node`` in front of ``head`` and return the new head."""
    if node is None:
        return head
    if head is not None:
        node.next = head
    return node


def lstdelone(
    node: Optional[ListNode], delete: Callable[[Optional[bytes], int], None]
) -> None:
    """Pass a node's content to ``delete`` and release the node.

    The following nodes are left alone. Callers rebind their name to the
    result.
    """
    if node is None:
        return None
    delete(node.content, node.content_size)
    node.content = None
    node.content_size = 0
    return None


def lstdel(head: Optional[ListNode], delete: Callable[[Optional[bytes], int], None]) -> None:
    """Release every node from ``head`` on, passing each content to ``delete``."""
    node = head
    while node is not None:
        following = node.next
        lstdelone(node, delete)
        node.next = None
        node = following
    return None


def lstiter(head: Optional[ListNode], func: Callable[[ListNode], None]) -> None:
    """Call ``func`` on every node from ``head`` on, in order."""
    if head is None:
        return
    for node in head:
        func(node)