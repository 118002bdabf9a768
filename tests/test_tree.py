import pytest

from dsakit.tree import (
    TreeNode,
    count_leaves,
    double_tree,
    has_path_sum,
    height,
    inorder,
    is_balanced,
    level_order,
    max_width,
    mirror,
    postorder,
    preorder,
    root_to_leaf_paths,
    spiral_order,
)


def _postorder_tree():
    root = TreeNode(1)
    root.left = TreeNode(2, TreeNode(4), TreeNode(5, None, TreeNode(8)))
    root.right = TreeNode(3, TreeNode(6), TreeNode(7, TreeNode(9)))
    return root


def _full_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def _width_tree():
    root = TreeNode(1)
    root.left = TreeNode(2, TreeNode(4), TreeNode(5, TreeNode(10), TreeNode(11)))
    root.right = TreeNode(3, None, TreeNode(8, TreeNode(6), TreeNode(7)))
    return root


def _bst():
    return TreeNode(
        20,
        TreeNode(8, TreeNode(4), TreeNode(12, TreeNode(10), TreeNode(14))),
        TreeNode(22),
    )


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, root)
    return root


def _all_trees():
    return [_postorder_tree, _full_tree, _width_tree, _bst]


def test_inorder_of_bst_is_sorted():
    values = inorder(_bst())
    assert values == sorted(values)
    assert len(values) == 7


def test_empty_traversals():
    assert inorder(None) == []
    assert preorder(None) == []
    assert level_order(None) == []
    assert postorder(None) == []
    assert spiral_order(None) == []


@pytest.mark.parametrize("build", _all_trees())
def test_traversals_visit_same_values(build):
    root = build()
    expected = sorted(inorder(root))
    assert sorted(preorder(root)) == expected
    assert sorted(level_order(root)) == expected
    assert sorted(postorder(root)) == expected
    assert sorted(spiral_order(root)) == expected


@pytest.mark.parametrize("build", _all_trees())
def test_root_position_in_traversals(build):
    root = build()
    assert preorder(root)[0] == root.data
    assert level_order(root)[0] == root.data
    assert postorder(root)[-1] == root.data


@pytest.mark.parametrize("build", _all_trees())
def test_postorder_is_reverse_preorder_of_mirror(build):
    expected = list(reversed(preorder(mirror(build()))))
    assert postorder(build()) == expected


def test_postorder_single_node():
    assert postorder(TreeNode(5)) == [5]


def test_height():
    assert height(None) == 0
    assert height(TreeNode(1)) == 1
    assert height(_chain([1, 2, 3, 4, 5])) == 5


def test_is_balanced_source_examples():
    tree1 = TreeNode(1, TreeNode(2, TreeNode(4, TreeNode(8)), TreeNode(5)), TreeNode(3))
    tree2 = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert is_balanced(tree1) is False
    assert is_balanced(tree2) is True


def test_is_balanced_chain_and_empty():
    assert is_balanced(None) is True
    assert is_balanced(_chain([1, 2])) is True
    assert is_balanced(_chain([1, 2, 3])) is False


def test_count_leaves_source_example():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert count_leaves(root) == 3
    assert count_leaves(None) == 0


@pytest.mark.parametrize("build", _all_trees())
def test_count_leaves_matches_paths(build):
    root = build()
    assert count_leaves(root) == len(root_to_leaf_paths(root))


def test_spiral_order_source_example():
    assert spiral_order(_full_tree()) == [1, 2, 3, 7, 6, 5, 4]


def test_spiral_order_of_chain_follows_chain():
    values = [3, 1, 4, 1, 5]
    assert spiral_order(_chain(values)) == values


def test_max_width_source_example():
    assert max_width(_width_tree()) == 4


def test_max_width_edge_cases():
    assert max_width(None) == 0
    assert max_width(_chain([1, 2, 3])) == 1


@pytest.mark.parametrize("build", _all_trees())
def test_mirror_reverses_inorder(build):
    original = inorder(build())
    assert inorder(mirror(build())) == list(reversed(original))


@pytest.mark.parametrize("build", _all_trees())
def test_mirror_twice_restores(build):
    root = build()
    before = preorder(root)
    assert preorder(mirror(mirror(root))) == before


def test_mirror_none():
    assert mirror(None) is None


@pytest.mark.parametrize("build", _all_trees())
def test_double_tree_duplicates_each_value_in_inorder(build):
    original = inorder(build())
    doubled = inorder(double_tree(build()))
    assert doubled == [value for value in original for _ in range(2)]


def test_double_tree_source_example():
    root = double_tree(TreeNode(2, TreeNode(1), TreeNode(3)))
    assert inorder(root) == [1, 1, 2, 2, 3, 3]
    assert root.left.data == 2


@pytest.mark.parametrize("build", _all_trees())
def test_paths_start_at_root_and_end_at_leaves(build):
    root = build()
    paths = root_to_leaf_paths(root)
    assert all(path[0] == root.data for path in paths)
    assert len(paths) == count_leaves(root)
    assert max(len(path) for path in paths) == height(root)


def test_paths_of_chain_and_empty():
    assert root_to_leaf_paths(None) == []
    assert root_to_leaf_paths(_chain([7, 8, 9])) == [[7, 8, 9]]


def test_has_path_sum_source_example():
    root = TreeNode(1, TreeNode(2, TreeNode(4, TreeNode(6)), TreeNode(5)), TreeNode(3))
    assert has_path_sum(root, 13) is True
    assert has_path_sum(root, 1000) is False


@pytest.mark.parametrize("build", _all_trees())
def test_has_path_sum_for_every_path(build):
    root = build()
    for path in root_to_leaf_paths(root):
        assert has_path_sum(root, sum(path)) is True


def test_has_path_sum_empty():
    assert has_path_sum(None, 0) is False