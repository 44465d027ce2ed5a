import pytest

from dsakit.linked_list import LinkedList

SAMPLE = [7, 14, 44, 67]


@pytest.fixture
def sample():
    return LinkedList(SAMPLE)


def test_traversal_keeps_order(sample):
    assert list(sample) == SAMPLE
    assert len(sample) == len(SAMPLE)


def test_empty_list():
    empty = LinkedList()
    assert list(empty) == []
    assert len(empty) == 0
    assert str(empty) == "NULL"


def test_str_format(sample):
    assert str(sample) == "7 -> 14 -> 44 -> 67 -> NULL"


def test_contains(sample):
    assert 44 in sample
    assert 45 not in sample


def test_insert_at_beginning(sample):
    sample.insert_at_beginning(56)
    assert list(sample) == [56] + SAMPLE
    assert len(sample) == 5


def test_insert_at_beginning_of_empty_then_end():
    items = LinkedList()
    items.insert_at_beginning(3)
    items.insert_at_end(4)
    assert list(items) == [3, 4]


def test_insert_at_end(sample):
    sample.insert_at_end(99)
    assert list(sample) == SAMPLE + [99]


@pytest.mark.parametrize("index", [0, 1, 2, 3, 4])
def test_insert_at_index_places_value(sample, index):
    sample.insert_at_index(index, 99)
    expected = list(SAMPLE)
    expected.insert(index, 99)
    assert list(sample) == expected
    assert len(sample) == 5


@pytest.mark.parametrize("index", [-1, 5])
def test_insert_at_index_out_of_range(sample, index):
    with pytest.raises(IndexError):
        sample.insert_at_index(index, 99)
    assert list(sample) == SAMPLE


def test_insert_at_end_after_index_insert_at_tail(sample):
    sample.insert_at_index(4, 1)
    sample.insert_at_end(2)
    assert list(sample) == SAMPLE + [1, 2]


def test_add_unique_accepts_new_value(sample):
    sample.add_unique(5)
    assert list(sample) == SAMPLE + [5]


def test_add_unique_rejects_duplicate(sample):
    with pytest.raises(ValueError, match="already exists"):
        sample.add_unique(14)
    assert list(sample) == SAMPLE


def test_delete_first(sample):
    assert sample.delete_first() == 7
    assert list(sample) == [14, 44, 67]


def test_delete_last(sample):
    assert sample.delete_last() == 67
    assert list(sample) == [7, 14, 44]
    sample.insert_at_end(1)
    assert list(sample) == [7, 14, 44, 1]


def test_delete_last_single_element():
    single = LinkedList([5])
    assert single.delete_last() == 5
    assert list(single) == []
    single.insert_at_end(6)
    assert list(single) == [6]


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_on_empty_raises(method):
    with pytest.raises(IndexError, match="empty"):
        getattr(LinkedList(), method)()


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_delete_at_index(sample, index):
    assert sample.delete_at_index(index) == SAMPLE[index]
    assert list(sample) == SAMPLE[:index] + SAMPLE[index + 1 :]


@pytest.mark.parametrize("index", [-1, 4])
def test_delete_at_index_out_of_range(sample, index):
    with pytest.raises(IndexError):
        sample.delete_at_index(index)


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_delete_at_position(sample, position):
    assert sample.delete_at_position(position) == SAMPLE[position - 1]
    assert len(sample) == 3
    assert SAMPLE[position - 1] not in sample


def test_delete_at_position_not_found(sample):
    with pytest.raises(IndexError, match="Record not found at position 5"):
        sample.delete_at_position(5)


def test_delete_at_position_empty():
    with pytest.raises(IndexError, match="empty"):
        LinkedList().delete_at_position(1)


def test_delete_key_first_occurrence():
    items = LinkedList([1, 2, 3, 2])
    assert items.delete_key(2) is True
    assert list(items) == [1, 3, 2]


def test_delete_key_head(sample):
    assert sample.delete_key(7) is True
    assert list(sample) == [14, 44, 67]


def test_delete_key_missing(sample):
    assert sample.delete_key(100) is False
    assert list(sample) == SAMPLE