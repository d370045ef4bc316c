import pytest

from dstructs.binarytree import Node
from dstructs.bst import BinarySearchTree, equal, main, mirrored

INSERTION_ORDER = [3, 5, 4, 2, 8, 0, 7, 1, 6]
SEARCH_ITEMS = [71, 43, 64, 92, 80, 27, 58, 3, 16]


def test_iteration_is_sorted():
    tree = BinarySearchTree(INSERTION_ORDER)
    assert list(tree) == sorted(INSERTION_ORDER)


def test_reversed_is_descending():
    tree = BinarySearchTree(INSERTION_ORDER)
    assert list(reversed(tree)) == sorted(INSERTION_ORDER, reverse=True)


def test_membership():
    tree = BinarySearchTree(SEARCH_ITEMS)
    assert all(item in tree for item in SEARCH_ITEMS)
    assert 50 not in tree
    assert 5 not in BinarySearchTree()


def test_insert_keeps_duplicates_on_the_left():
    tree = BinarySearchTree([5, 5, 5])
    assert tree.count(5) == 3
    assert tree.root.right is None
    assert tree.root.left.item == 5


def test_insert_unique_skips_equal_items():
    tree = BinarySearchTree()
    for item in [4, 2, 4, 6, 2]:
        tree.insert_unique(item)
    assert list(tree) == [2, 4, 6]


def test_count_matches_list_count():
    items = [3, 7, 3, 1, 3, 3, 3, 6]
    tree = BinarySearchTree(items)
    assert tree.count(3) == items.count(3)
    assert tree.count(9) == 0


def test_maximum_and_pop_max():
    tree = BinarySearchTree(SEARCH_ITEMS)
    assert tree.maximum() == max(SEARCH_ITEMS)
    assert tree.pop_max() == max(SEARCH_ITEMS)
    remaining = sorted(SEARCH_ITEMS)[:-1]
    assert list(tree) == remaining
    assert tree.maximum() == remaining[-1]


def test_pop_all_gives_descending_order():
    tree = BinarySearchTree(INSERTION_ORDER)
    popped = [tree.pop_max() for _ in INSERTION_ORDER]
    assert popped == sorted(INSERTION_ORDER, reverse=True)
    assert tree.root is None


def test_empty_tree_errors():
    tree = BinarySearchTree()
    with pytest.raises(IndexError):
        tree.pop_max()
    with pytest.raises(IndexError):
        tree.maximum()


@pytest.mark.parametrize("item", INSERTION_ORDER)
def test_remove_each_item(item):
    tree = BinarySearchTree(INSERTION_ORDER)
    tree.remove(item)
    expected = sorted(INSERTION_ORDER)
    expected.remove(item)
    assert list(tree) == expected
    assert item not in tree


def test_remove_absent_item_is_noop():
    tree = BinarySearchTree(INSERTION_ORDER)
    tree.remove(42)
    assert list(tree) == sorted(INSERTION_ORDER)


def test_remove_only_one_occurrence():
    tree = BinarySearchTree([4, 4, 2, 6])
    tree.remove(4)
    assert tree.count(4) == 1


def test_remove_all():
    items = [3, 7, 3, 1, 3, 3, 3, 6]
    tree = BinarySearchTree(items)
    tree.remove_all(3)
    assert tree.count(3) == 0
    assert list(tree) == sorted(x for x in items if x != 3)


def test_render_layout():
    tree = BinarySearchTree([2, 1, 3])
    assert tree.render() == "   3\n2\n   1\n"
    assert BinarySearchTree().render() == ""


def test_equal():
    assert equal(BinarySearchTree(INSERTION_ORDER), BinarySearchTree(INSERTION_ORDER))
    assert not equal(BinarySearchTree([2, 1, 3]), BinarySearchTree([1, 2, 3]))
    assert equal(BinarySearchTree(), None)
    assert not equal(BinarySearchTree([1]), None)


def test_mirrored():
    left = Node(Node(None, 1, None), 2, Node(None, 3, Node(None, 4, None)))
    right = Node(Node(Node(None, 4, None), 3, None), 2, Node(None, 1, None))
    assert mirrored(left, right)
    assert mirrored(right, left)
    assert not mirrored(left, left)
    assert mirrored(None, None)


def test_main_lists_both_orders(capsys):
    assert main([str(x) for x in INSERTION_ORDER]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert " ".join(map(str, sorted(INSERTION_ORDER))) in lines
    assert " ".join(map(str, sorted(INSERTION_ORDER, reverse=True))) in lines


def test_main_search(monkeypatch, capsys):
    answers = iter(["71", "50", "-1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([str(x) for x in SEARCH_ITEMS] + ["--search"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["Encontrado.", "Inexistente"]