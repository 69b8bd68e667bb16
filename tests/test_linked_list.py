import random

import pytest

from atelier.linked_list import LinkedList


def test_construct_and_iterate():
    values = [4, 8, 15, 16]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = LinkedList()
    assert linked.is_empty()
    assert len(linked) == 0
    assert linked.render() == "NULL"


def test_render_format():
    assert LinkedList([5, 7]).render() == "[0]5 -> [1]7 -> NULL"


def test_append_and_prepend():
    linked = LinkedList()
    linked.append(2)
    linked.append(3)
    linked.prepend(1)
    assert list(linked) == [1, 2, 3]
    assert not linked.is_empty()


@pytest.mark.parametrize(
    "index, expected",
    [(0, [9, 1, 2, 3]), (1, [1, 9, 2, 3]), (2, [1, 2, 9, 3]), (3, [1, 2, 3, 9])],
)
def test_insert_after(index, expected):
    linked = LinkedList([1, 2, 3])
    linked.insert_after(index, 9)
    assert list(linked) == expected


def test_insert_after_errors():
    linked = LinkedList([1, 2])
    with pytest.raises(ValueError):
        linked.insert_after(-1, 5)
    with pytest.raises(IndexError):
        linked.insert_after(5, 5)
    assert list(linked) == [1, 2]


def test_append_many():
    linked = LinkedList([1])
    linked.append_many(3, 7)
    assert list(linked) == [1, 7, 7, 7]


def test_remove_first_match():
    linked = LinkedList([1, 2, 1, 3])
    linked.remove(1)
    assert list(linked) == [2, 1, 3]
    linked.remove(3)
    assert list(linked) == [2, 1]


def test_remove_missing_raises():
    linked = LinkedList([1, 2])
    with pytest.raises(ValueError):
        linked.remove(42)


def test_find():
    linked = LinkedList([3, 6, 9])
    node = linked.find(6)
    assert node is not None and node.data == 6
    assert node.next is not None and node.next.data == 9
    assert linked.find(100) is None


def test_delete_at():
    linked = LinkedList([10, 20, 30])
    linked.delete_at(1)
    assert list(linked) == [10, 30]
    linked.delete_at(0)
    assert list(linked) == [30]


def test_delete_at_errors():
    linked = LinkedList([10, 20])
    with pytest.raises(ValueError):
        linked.delete_at(-2)
    with pytest.raises(IndexError):
        linked.delete_at(2)
    with pytest.raises(IndexError):
        LinkedList().delete_at(0)


def test_truncate_after():
    linked = LinkedList([1, 2, 3, 4])
    linked.truncate_after(1)
    assert list(linked) == [1, 2]
    with pytest.raises(IndexError):
        linked.truncate_after(5)
    with pytest.raises(ValueError):
        linked.truncate_after(-1)


def test_reverse_twice_is_identity():
    values = [5, 1, 4, 2]
    linked = LinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    linked.reverse()
    assert list(linked) == values


def test_statistics():
    values = [2, 4, 9]
    stats = LinkedList(values).statistics()
    assert stats.count == len(values)
    assert stats.total == sum(values)
    assert stats.average == pytest.approx(sum(values) / len(values))


def test_statistics_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().statistics()


def test_sort():
    values = [5, 3, 8, 1, 3]
    linked = LinkedList(values)
    linked.sort()
    assert list(linked) == sorted(values)


def test_remove_duplicates_keeps_first_occurrence():
    linked = LinkedList([3, 1, 3, 2, 1, 3])
    linked.remove_duplicates()
    assert list(linked) == [3, 1, 2]


def test_fill_random_appends_values_in_range():
    linked = LinkedList([500])
    linked.fill_random(20, random.Random(1))
    values = list(linked)
    assert len(values) == 21
    assert values[0] == 500
    assert all(0 <= v < 100 for v in values[1:])


def test_clear():
    linked = LinkedList([1, 2])
    linked.clear()
    assert linked.is_empty()
    assert list(linked) == []