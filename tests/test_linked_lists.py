import pytest

from algobox.linked_lists import (
    CircularLinkedList,
    DoublyLinkedList,
    ListNode,
    SinglyLinkedList,
    from_values,
    reverse_list,
    to_values,
)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], [7, 7, 3]])
def test_from_values_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


def test_reverse_list_returns_old_tail():
    head = from_values([1, 2, 3])
    tail = head.next.next
    new_head = reverse_list(head)
    assert new_head is tail
    assert head.next is None


def test_reverse_twice_restores_order():
    values = [4, 8, 15, 16, 23, 42]
    assert to_values(reverse_list(reverse_list(from_values(values)))) == values


def test_list_node_identity():
    node = ListNode(3)
    assert node.next is None
    assert node != ListNode(3)


def _singly(values):
    lst = SinglyLinkedList()
    for value in values:
        lst.insert(value)
    return lst


def test_singly_insert_appends():
    lst = _singly([10, 20, 30, 40])
    assert list(lst) == [10, 20, 30, 40]
    assert to_values(lst.head) == [10, 20, 30, 40]


def test_singly_remove_middle():
    lst = _singly([10, 20, 30, 40])
    lst.remove(20)
    assert list(lst) == [10, 30, 40]


def test_singly_remove_head_and_tail():
    lst = _singly([10, 20, 30])
    lst.remove(10)
    lst.remove(30)
    assert list(lst) == [20]


def test_singly_remove_missing_is_noop():
    lst = _singly([10, 20])
    lst.remove(99)
    assert list(lst) == [10, 20]
    empty = SinglyLinkedList()
    empty.remove(1)
    assert list(empty) == []


def test_singly_remove_first_occurrence_only():
    lst = _singly([5, 6, 5])
    lst.remove(5)
    assert list(lst) == [6, 5]


def test_singly_str():
    lst = _singly([10, 30, 40])
    assert str(lst) == "10 -> 30 -> 40 -> NULL"
    assert str(SinglyLinkedList()) == "NULL"


def _doubly_example():
    dll = DoublyLinkedList()
    dll.insert_at_front(10)
    dll.insert_at_front(20)
    dll.insert_at_end(30)
    dll.insert_at_end(40)
    return dll


def test_doubly_insertions():
    assert list(_doubly_example()) == [20, 10, 30, 40]


def test_doubly_delete_sequence():
    dll = _doubly_example()
    dll.delete(20)
    assert list(dll) == [10, 30, 40]
    dll.delete(40)
    assert list(dll) == [10, 30]
    assert str(dll) == "10 <-> 30 <-> NULL"


def test_doubly_reversed_matches_forward():
    dll = _doubly_example()
    assert list(reversed(dll)) == list(dll)[::-1]
    dll.delete(40)
    dll.delete(20)
    assert list(reversed(dll)) == list(dll)[::-1]


def test_doubly_insert_after_deleting_tail():
    dll = _doubly_example()
    dll.delete(40)
    dll.insert_at_end(50)
    assert list(dll) == [20, 10, 30, 50]
    assert list(reversed(dll)) == [50, 30, 10, 20]


def test_doubly_delete_only_element():
    dll = DoublyLinkedList()
    dll.insert_at_end(1)
    dll.delete(1)
    assert list(dll) == []
    assert list(reversed(dll)) == []
    assert str(dll) == "NULL"


def test_doubly_delete_empty_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList().delete(1)


def test_doubly_delete_missing_raises():
    dll = _doubly_example()
    with pytest.raises(ValueError):
        dll.delete(99)
    assert list(dll) == [20, 10, 30, 40]


def _circular_example():
    cll = CircularLinkedList()
    cll.insert_at_end(10)
    cll.insert_at_end(20)
    cll.insert_at_end(30)
    cll.insert_at_front(5)
    return cll


def test_circular_insertions():
    assert list(_circular_example()) == [5, 10, 20, 30]


def test_circular_delete_sequence():
    cll = _circular_example()
    cll.delete(20)
    assert str(cll) == "5 -> 10 -> 30 -> (Head)"
    cll.delete(5)
    assert str(cll) == "10 -> 30 -> (Head)"


def test_circular_delete_tail_then_append():
    cll = _circular_example()
    cll.delete(30)
    cll.insert_at_end(40)
    assert list(cll) == [5, 10, 20, 40]


def test_circular_delete_only_node():
    cll = CircularLinkedList()
    cll.insert_at_front(1)
    cll.delete(1)
    assert list(cll) == []
    assert str(cll) == "List is empty!"


def test_circular_delete_empty_raises():
    with pytest.raises(ValueError):
        CircularLinkedList().delete(1)


def test_circular_delete_missing_raises():
    cll = _circular_example()
    with pytest.raises(ValueError):
        cll.delete(99)
    assert list(cll) == [5, 10, 20, 30]


def test_circular_single_node_missing_raises():
    cll = CircularLinkedList()
    cll.insert_at_end(3)
    with pytest.raises(ValueError):
        cll.delete(4)
    assert list(cll) == [3]


def test_circular_iteration_is_finite_and_repeatable():
    cll = _circular_example()
    assert list(cll) == list(cll)
    assert len(list(cll)) == 4