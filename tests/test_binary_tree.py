import pytest

from dsakit.binary_tree import (
    Node,
    delete,
    inorder,
    inorder_predecessor,
    insert,
    is_bst,
    postorder,
    preorder,
    search,
    search_iterative,
)


def make_bst():
    #      5
    #     / \
    #    3   6
    #   / \
    #  1   4
    root = Node(5, Node(3, Node(1), Node(4)), Node(6))
    return root


def make_plain_tree():
    #      4
    #     / \
    #    1   6
    #   / \
    #  5   2
    return Node(4, Node(1, Node(5), Node(2)), Node(6))


def build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def test_traversals_of_source_tree():
    root = make_bst()
    assert inorder(root) == [1, 3, 4, 5, 6]
    assert preorder(root) == [5, 3, 1, 4, 6]
    assert postorder(root) == [1, 4, 3, 6, 5]


def test_traversals_of_empty_tree():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []


def test_traversals_contain_same_values():
    root = make_plain_tree()
    assert sorted(preorder(root)) == sorted(inorder(root)) == sorted(postorder(root))
    assert preorder(root)[0] == 4
    assert postorder(root)[-1] == 4


def test_is_bst_true_for_source_tree():
    assert is_bst(make_bst()) is True


def test_is_bst_false_for_unordered_tree():
    assert is_bst(make_plain_tree()) is False


def test_is_bst_rejects_duplicates():
    assert is_bst(Node(5, Node(5))) is False


def test_is_bst_repeatable():
    root = make_bst()
    assert is_bst(root) is True
    assert is_bst(make_plain_tree()) is False
    assert is_bst(root) is True


def test_is_bst_empty():
    assert is_bst(None) is True


@pytest.mark.parametrize("finder", [search, search_iterative])
def test_search_finds_present_keys(finder):
    root = make_bst()
    for key in (1, 3, 4, 5, 6):
        found = finder(root, key)
        assert found.data == key


@pytest.mark.parametrize("finder", [search, search_iterative])
def test_search_missing_key(finder):
    assert finder(make_bst(), 10) is None
    assert finder(None, 3) is None


def test_insert_source_example():
    root = make_bst()
    result = insert(root, 16)
    assert result is root
    assert root.right.right.data == 16


def test_insert_keeps_bst_order():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    root = build(values)
    assert inorder(root) == sorted(values)
    assert is_bst(root)
    assert root.data == 8


def test_insert_duplicate_raises():
    root = make_bst()
    with pytest.raises(ValueError):
        insert(root, 4)
    assert inorder(root) == [1, 3, 4, 5, 6]


def test_inorder_predecessor():
    root = make_bst()
    assert inorder_predecessor(root).data == 4
    assert inorder_predecessor(root.left).data == 1


def test_inorder_predecessor_without_left_subtree():
    with pytest.raises(ValueError):
        inorder_predecessor(Node(6))


def test_delete_source_example():
    root = make_bst()
    result = delete(root, 3)
    assert inorder(result) == [1, 4, 5, 6]
    assert is_bst(result)


def test_delete_every_value_one_by_one():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    root = build(values)
    remaining = set(values)
    for value in values:
        root = delete(root, value)
        remaining.discard(value)
        assert inorder(root) == sorted(remaining)
        assert is_bst(root)
    assert root is None


def test_delete_node_without_left_child():
    root = build([5, 7, 9])
    root = delete(root, 5)
    assert inorder(root) == [7, 9]
    assert search(root, 5) is None


def test_delete_missing_value_leaves_tree():
    root = make_bst()
    result = delete(root, 2)
    assert inorder(result) == [1, 3, 4, 5, 6]


def test_delete_from_empty_tree():
    assert delete(None, 3) is None