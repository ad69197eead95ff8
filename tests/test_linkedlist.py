import pytest
from hypothesis import given, strategies as st

from pushswap.linkedlist import LinkedList, Node


def test_build_from_items_keeps_order():
    items = [3, "x", None, 7]
    chain = LinkedList(items)
    assert list(chain) == items
    assert len(chain) == len(items)


def test_empty_list():
    chain = LinkedList()
    assert len(chain) == 0
    assert list(chain) == []
    assert chain.last() is None
    assert chain.head is None


def test_add_front_prepends():
    chain = LinkedList([2, 3])
    node = chain.add_front(1)
    assert list(chain) == [1, 2, 3]
    assert chain.head is node
    assert node.next.content == 2


def test_add_back_appends_and_updates_last():
    chain = LinkedList([1])
    node = chain.add_back(2)
    assert list(chain) == [1, 2]
    assert chain.last() is node
    assert node.next is None


def test_add_front_on_empty_sets_last():
    chain = LinkedList()
    node = chain.add_front("a")
    assert chain.last() is node
    assert chain.head is node


def test_last_returns_final_node():
    chain = LinkedList(["a", "b", "c"])
    last = chain.last()
    assert isinstance(last, Node) and last.content == "c"


def test_clear_calls_delete_in_order_and_empties():
    items = ["a", "b", "c"]
    chain = LinkedList(items)
    deleted = []
    chain.clear(deleted.append)
    assert deleted == items
    assert len(chain) == 0
    assert list(chain) == []
    assert chain.last() is None


def test_clear_without_delete():
    chain = LinkedList([1, 2])
    chain.clear()
    assert len(chain) == 0


def test_for_each_visits_every_content():
    items = [5, 6, 7]
    chain = LinkedList(items)
    seen = []
    chain.for_each(seen.append)
    assert seen == items


def test_map_builds_new_list_and_leaves_original():
    items = [1, 2, 3]
    chain = LinkedList(items)
    mapped = chain.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(chain) == items
    assert mapped.head is not chain.head


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []


@given(st.lists(st.integers()))
def test_length_matches_iteration(items):
    chain = LinkedList(items)
    assert len(chain) == len(list(chain)) == len(items)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_front_and_back_insertions(front, back):
    chain = LinkedList()
    for item in back:
        chain.add_back(item)
    for item in front:
        chain.add_front(item)
    assert list(chain) == list(reversed(front)) + back
    if front or back:
        expected_last = back[-1] if back else front[0]
        assert chain.last().content == expected_last


@pytest.mark.parametrize("items", [[], [1], [1, 2, 3]])
def test_map_identity_round_trip(items):
    assert list(LinkedList(items).map(lambda value: value)) == items