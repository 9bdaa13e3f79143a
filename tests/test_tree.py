import pytest

from dsakit.tree import (
    TreeNode,
    build_from_traversals,
    build_level_order,
    build_preorder,
    flatten,
    from_sorted,
    inorder,
    left_view,
    level_averages,
    level_order,
    morris_inorder,
    preorder,
    size,
)


def _source_flatten_tree():
    root = TreeNode(1)
    root.left = TreeNode(2)
    root.right = TreeNode(5)
    root.left.left = TreeNode(3)
    root.left.right = TreeNode(4)
    root.right.right = TreeNode(6)
    return root


def _left_view_tree():
    root = TreeNode(1)
    root.left = TreeNode(2)
    root.right = TreeNode(3)
    root.left.left = TreeNode(4)
    root.left.right = TreeNode(5)
    root.left.right.left = TreeNode(9)
    return root


def _nodes(root):
    pending = [root] if root else []
    while pending:
        node = pending.pop()
        yield node
        pending.extend(child for child in (node.left, node.right) if child)


def test_from_sorted_inorder_round_trip():
    values = [-10, -3, 0, 5, 9]
    assert inorder(from_sorted(values)) == values


def test_from_sorted_root_is_middle_value():
    values = [-10, -3, 0, 5, 9]
    assert from_sorted(values).data == values[2]


def test_from_sorted_is_balanced():
    root = from_sorted(range(20))
    for node in _nodes(root):
        assert abs(size(node.left) - size(node.right)) <= 1


def test_from_sorted_empty():
    assert from_sorted([]) is None


def test_level_averages_example():
    root = build_level_order([3, 9, 20, -1, -1, 15, 7])
    assert level_averages(root) == [3, 14.5, 11]


def test_level_averages_empty_tree():
    assert level_averages(None) == []


def test_build_from_traversals_round_trip():
    in_values = [4, 2, 8, 5, 9, 1, 6, 3, 7, 10]
    pre_values = [1, 2, 4, 5, 8, 9, 3, 6, 7, 10]
    root = build_from_traversals(in_values, pre_values)
    assert inorder(root) == in_values
    assert preorder(root) == pre_values


def test_build_from_traversals_length_mismatch():
    with pytest.raises(ValueError):
        build_from_traversals([1, 2], [1])


def test_build_from_traversals_inconsistent():
    with pytest.raises(ValueError):
        build_from_traversals([1, 2], [3, 1])


def test_flatten_gives_preorder_chain():
    root = _source_flatten_tree()
    expected = preorder(root)
    flatten(root)
    chain = []
    node = root
    while node is not None:
        assert node.left is None
        chain.append(node.data)
        node = node.right
    assert chain == expected


def test_build_level_order_round_trip():
    root = build_level_order([1, 2, 3, 4, -1, 5, 6])
    assert level_order(root) == [1, 2, 3, 4, 5, 6]
    assert root.left.right is None


def test_build_level_order_accepts_none_markers():
    root = build_level_order([1, None, 2])
    assert root.left is None
    assert root.right.data == 2


def test_build_level_order_empty():
    assert build_level_order([]) is None
    assert build_level_order([-1]) is None


def test_build_preorder():
    root = build_preorder([1, 2, -1, -1, 3, -1, -1])
    assert preorder(root) == [1, 2, 3]
    assert inorder(root) == [2, 1, 3]


def test_build_preorder_empty():
    assert build_preorder([-1]) is None


def test_left_view_example():
    assert left_view(_left_view_tree()) == [1, 2, 4, 9]


def test_left_view_empty():
    assert left_view(None) == []


def test_morris_inorder_matches_inorder_and_restores_tree():
    root = build_level_order([1, 2, 3, 7, 6, 5, 4])
    before_inorder = inorder(root)
    before_levels = level_order(root)
    assert morris_inorder(root) == before_inorder
    assert inorder(root) == before_inorder
    assert level_order(root) == before_levels


def test_size_matches_traversal_length():
    root = build_level_order([1, 2, 3, 4, 5])
    assert size(root) == len(level_order(root)) == 5
    assert size(None) == 0