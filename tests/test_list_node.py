import pytest

from dsprimer.errors import IndexErr
from dsprimer.list_node import LNode, ListNode, delete, init_list, list_insert


def _filled(*values):
    head = ListNode()
    for value in values:
        head.push(value)
    return head


def test_init_list():
    head = init_list()
    assert head.data == 0
    assert head.next is None


def test_list_insert():
    head = init_list()
    list_insert(head, 1, 42)
    assert head.next.data == 42


def test_list_insert_order():
    head = init_list()
    list_insert(head, 1, 10)
    list_insert(head, 2, 30)
    list_insert(head, 2, 20)
    values = []
    node = head.next
    while node is not None:
        values.append(node.data)
        node = node.next
    assert values == [10, 20, 30]


def test_list_insert_position_zero_raises():
    head = init_list()
    with pytest.raises(IndexErr):
        list_insert(head, 0, 1)


def test_list_insert_out_of_range_raises():
    head = init_list()
    with pytest.raises(IndexErr):
        list_insert(head, 3, 1)


def test_delete():
    head = init_list()
    list_insert(head, 1, 10)
    list_insert(head, 2, 20)
    list_insert(head, 3, 30)
    deleted = delete(head, 1)
    assert isinstance(deleted, LNode)
    assert deleted.data == 10
    assert head.next.data == 20
    assert head.next.next.data == 30
    assert head.next.next.next is None


def test_delete_last_node_raises():
    head = init_list()
    list_insert(head, 1, 10)
    with pytest.raises(IndexErr):
        delete(head, 1)


def test_delete_beyond_end_raises():
    head = init_list()
    list_insert(head, 1, 10)
    with pytest.raises(IndexErr):
        delete(head, 5)


def test_sentinel_head():
    head = _filled(1, 2, 3, 4, 5)
    assert head.data is None
    assert head.next.data == 1


def test_get_mut():
    head = _filled(1, 2, 3, 4, 5)
    assert head.get_mut(1).data == 1
    assert head.get_mut(2).data == 2
    assert head.get(0).data is None


def test_get_mut_modifies_node():
    head = _filled(42)
    head.get_mut(1).data = 24
    assert list(head) == [24]


def test_get_past_end_returns_none():
    head = _filled(1, 2)
    assert head.get(3) is None
    assert head.get_mut(3) is None


def test_length():
    head = _filled(1, 2, 3, 4)
    assert head.length() == 4


def test_pop_tail():
    head = _filled(1, 2)
    assert head.pop_tail() == 2
    assert head.length() == 1
    assert list(head) == [1]


def test_pop_tail_on_empty_list():
    head = ListNode()
    assert head.pop_tail() is None
    assert head.length() == 0


def test_insert():
    head = _filled(1, 3)
    head.insert(1, 2)
    assert head.get(1).data == 2
    assert list(head) == [2, 1, 3]


def test_insert_at_end():
    head = _filled(1, 2)
    head.insert(3, 3)
    assert list(head) == [1, 2, 3]


def test_insert_invalid_index_raises():
    head = _filled(1)
    with pytest.raises(IndexErr):
        head.insert(0, 5)
    with pytest.raises(IndexErr):
        head.insert(5, 5)


def test_remove():
    head = _filled(1, 2)
    assert head.remove(1) == 1
    assert head.length() == 1
    assert list(head) == [2]


def test_remove_invalid_index_raises():
    head = _filled(1)
    with pytest.raises(IndexErr):
        head.remove(2)
    with pytest.raises(IndexErr):
        head.remove(0)