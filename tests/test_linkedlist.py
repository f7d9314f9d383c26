import pytest

from structsalad.linkedlist import LinkedList, ListNode


def test_init_keeps_order_and_length():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_add_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.add_front(1)
    assert isinstance(node, ListNode)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_add_back_appends_and_becomes_last():
    lst = LinkedList()
    first = lst.add_back("x")
    assert lst.head is first
    second = lst.add_back("y")
    assert lst.last() is second
    assert list(lst) == ["x", "y"]


def test_last_returns_tail_content():
    lst = LinkedList([10, 20, 30])
    assert lst.last().content == 30
    assert lst.last().next is None


def test_pop_front_returns_content_and_calls_delete():
    deleted = []
    lst = LinkedList(["one", "two"])
    assert lst.pop_front(deleted.append) == "one"
    assert deleted == ["one"]
    assert list(lst) == ["two"]


def test_pop_front_without_delete():
    lst = LinkedList([5])
    assert lst.pop_front() == 5
    assert len(lst) == 0


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_from_tail_to_head():
    items = [1, 2, 3, 4]
    deleted = []
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == list(reversed(items))
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    source = LinkedList(["a", "bb", "ccc"])
    mapped = source.map(len)
    assert list(mapped) == [len(s) for s in ["a", "bb", "ccc"]]
    assert list(source) == ["a", "bb", "ccc"]
    assert mapped.head is not source.head


def test_map_failure_deletes_partial_result_and_raises():
    deleted = []

    def f(x):
        return None if x == 3 else x * 10

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [f(2), f(1)]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0