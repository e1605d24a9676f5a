import pytest

from raycube.linkedlist import LinkedList, Node


def test_push_back_keeps_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]


def test_push_front_returns_new_head():
    lst = LinkedList(["x"])
    node = lst.push_front("y")
    assert lst.head is node
    assert node.next.content == "x"


def test_last_of_empty_is_none():
    assert LinkedList().last() is None
    assert len(LinkedList()) == 0


def test_last_returns_tail_node():
    lst = LinkedList(["first", "second"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "second"
    assert tail.next is None


def test_clear_deletes_in_order_and_empties():
    contents = ["one", "two", "three"]
    lst = LinkedList(contents)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == contents
    assert len(lst) == 0
    assert lst.head is None


def test_for_each_visits_everything():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.for_each(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list():
    lst = LinkedList(["ab", "cd"])
    mapped = lst.map(str.upper, lambda _: None)
    assert list(mapped) == ["AB", "CD"]
    assert list(lst) == ["ab", "cd"]


def test_map_empty_gives_empty():
    mapped = LinkedList().map(str.upper, lambda _: None)
    assert list(mapped) == []


def test_map_failure_cleans_up_partial_result():
    lst = LinkedList([1, 2, 0, 4])
    deleted = []

    def invert(value):
        return 10 // value

    with pytest.raises(ZeroDivisionError):
        lst.map(invert, deleted.append)
    assert deleted == [10 // 1, 10 // 2]


def test_map_requires_callables():
    lst = LinkedList([1])
    with pytest.raises(TypeError):
        lst.map(None, lambda _: None)
    with pytest.raises(TypeError):
        lst.map(str, None)