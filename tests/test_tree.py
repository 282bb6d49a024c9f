from dsprimer.tree import BinaryNode, BinaryTree


def _sample_tree():
    #       1
    #      / \
    #     2   3
    #    / \
    #   4   5
    root = BinaryNode(1)
    root.set_left(2)
    root.left.set_left(4).set_right(5)
    root.set_right(3)
    tree = BinaryTree.with_root(1)
    tree.set_root(root)
    return tree


def test_binary_tree():
    tree = BinaryTree()
    assert tree.is_empty() is True
    tree.set_root(BinaryNode(1))
    assert tree.root.data == 1
    assert tree.is_empty() is False
    tree.root.set_left(2)
    assert tree.root.left.data == 2
    tree.root.left.set_left(5)
    assert tree.root.left.left.data == 5


def test_in_order_traversal():
    tree = _sample_tree()
    assert tree.in_order_traverse() == [4, 2, 5, 1, 3]


def test_node_in_order_traversal():
    tree = _sample_tree()
    assert tree.root.in_order_traverse() == [4, 2, 5, 1, 3]
    assert tree.root.left.in_order_traverse() == [4, 2, 5]


def test_empty_tree_traversal():
    assert BinaryTree().in_order_traverse() == []


def test_single_node_traversal():
    tree = BinaryTree.with_root(42)
    assert tree.in_order_traverse() == [42]


def test_next_node():
    tree = BinaryTree()
    tree.set_root(BinaryNode(1))
    node = tree.root.set_left(2).left
    assert node == BinaryNode(2)


def test_set_left_replaces_subtree():
    root = BinaryNode(1)
    root.set_left(2)
    root.left.set_left(3)
    root.set_left(9)
    assert root.in_order_traverse() == [9, 1]


def test_missing_child_is_none():
    root = BinaryNode(1).set_right(2)
    assert root.left is None
    assert root.right == BinaryNode(2)