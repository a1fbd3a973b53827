from collections import deque

import pytest

from stdext.collections import (
    BinaryHeap,
    b_tree_map,
    b_tree_set,
    binary_heap,
    hash_map,
    hash_set,
    linked_list,
    string,
    vector,
    vector_deque,
)


def test_b_tree_map_equal():
    empty = b_tree_map()
    assert len(empty) == 0
    a = b_tree_map(("a", "a"), ("b", "b"))
    b = b_tree_map(("a", "a"), ("b", "b"))
    assert a == b


def test_b_tree_map_keys_sorted():
    m = b_tree_map(("c", 3), ("a", 1), ("b", 2))
    assert list(m.keys()) == ["a", "b", "c"]


def test_b_tree_set():
    b = b_tree_set()
    a = b_tree_set("a", "b")
    b.add("a")
    b.add("b")
    assert a == b


def test_b_tree_set_ordered():
    assert list(b_tree_set(3, 1, 2, 1)) == [1, 2, 3]


def test_empty_binary_heap():
    heap = binary_heap()
    assert len(heap) == 0


def test_binary_heap_with_elements():
    heap = binary_heap(5, 3, 8, 1)
    assert heap.into_sorted_vec() == [1, 3, 5, 8]


def test_binary_heap_pops_greatest_first():
    heap = binary_heap(5, 3, 8, 1)
    heap.push(7)
    assert heap.peek() == 8
    assert [heap.pop() for _ in range(5)] == [8, 7, 5, 3, 1]
    assert len(heap) == 0


def test_binary_heap_empty_errors():
    heap = BinaryHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_hash_map():
    m = hash_map(("a", 1), ("b", 2))
    assert m["a"] == 1
    assert m["b"] == 2


def test_hash_map_later_key_wins():
    assert hash_map(("a", 1), ("a", 2)) == {"a": 2}
    assert hash_map() == {}


def test_hash_set():
    assert len(hash_set()) == 0
    s = hash_set(1, 2, 3)
    assert 1 in s
    assert 2 in s
    assert 3 in s


def test_linked_list():
    assert len(linked_list()) == 0
    lst = linked_list(1, 2, 3)
    assert len(lst) == 3
    assert lst[0] == 1
    assert lst[-1] == 3


def test_string():
    assert string() == ""
    assert string("Hello") == "Hello"


def test_vector():
    assert vector() == []
    numbers = vector(1, 2, 3)
    assert len(numbers) == 3
    assert numbers[0] == 1
    assert numbers[1] == 2
    assert numbers[2] == 3


def test_vector_deque():
    assert len(vector_deque()) == 0
    numbers = vector_deque(1, 2, 3)
    assert numbers == deque([1, 2, 3])
    assert numbers[0] == 1
    assert numbers[1] == 2
    assert numbers[2] == 3