import pytest

from libft.linked import ListNode, lstadd, lstdel, lstdelone, lstiter, lstnew


def _build(*payloads):
    head = None
    for payload in reversed(payloads):
        head = lstadd(head, lstnew(payload, len(payload)))
    return head


def test_lstnew_copies_content():
    source = bytearray(b"data")
    node = lstnew(source, len(source))
    source[0] = ord("X")
    assert node.content == b"data"
    assert node.content_size == len(b"data")
    assert node.next is None


def test_lstnew_takes_prefix():
    node = lstnew(b"abcdef", 3)
    assert node.content == b"abc"
    assert node.content_size == 3


@pytest.mark.parametrize("content,size", [(None, 4), (b"abc", 0)])
def test_lstnew_empty(content, size):
    node = lstnew(content, size)
    assert node.content is None
    assert node.content_size == 0


def test_lstnew_size_too_large():
    with pytest.raises(IndexError):
        lstnew(b"ab", 5)


def test_lstadd_prepends():
    head = _build(b"one", b"two", b"three")
    assert [node.content for node in head] == [b"one", b"two", b"three"]


def test_lstadd_none_node_keeps_head():
    head = lstnew(b"x", 1)
    assert lstadd(head, None) is head


def test_lstadd_to_empty_list():
    node = lstnew(b"x", 1)
    assert lstadd(None, node) is node


def test_lstiter_visits_in_order():
    head = _build(b"a", b"b", b"c")
    seen = []
    lstiter(head, lambda node: seen.append(node.content))
    assert seen == [b"a", b"b", b"c"]


def test_lstiter_empty_list():
    seen = []
    lstiter(None, seen.append)
    assert seen == []


def test_lstdelone_calls_delete_and_clears():
    head = _build(b"a", b"b")
    second = head.next
    calls = []
    assert lstdelone(head, lambda content, size: calls.append((content, size))) is None
    assert calls == [(b"a", 1)]
    assert head.content is None
    assert head.next is second


def test_lstdel_deletes_every_node():
    head = _build(b"a", b"bb", b"ccc")
    nodes = list(head)
    calls = []
    assert lstdel(head, lambda content, size: calls.append((content, size))) is None
    assert calls == [(b"a", 1), (b"bb", 2), (b"ccc", 3)]
    assert all(node.next is None and node.content is None for node in nodes)


def test_list_node_iteration_length():
    head = _build(b"1", b"2", b"3", b"4")
    assert len(list(head)) == 4
    assert isinstance(head, ListNode)