"""Binary search tree with duplicates kept to the left of equal items."""

from __future__ import annotations

import argparse
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple, Union

from dstructs.binarytree import Node, inorder, reverse_inorder

Tree = Optional[Node]

_EXAMPLE_ITEMS = (7, 4, 6, 8, 2, 5, 3, 1)
_SEPARATOR = "-------------"


def _pop_max(node: Node) -> Tuple[Tree, Any]:
    """Detach the largest item of a non-empty subtree; return the new subtree and the item."""
    if node.right is None:
        return node.left, node.item
    node.right, item = _pop_max(node.right)
    return node, item


def _remove_root(node: Node) -> Tree:
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    node.left, node.item = _pop_max(node.left)
    return node


def _remove(node: Tree, item: Any) -> Tree:
    if node is None:
        return None
    if item == node.item:
        return _remove_root(node)
    if item < node.item:
        node.left = _remove(node.left, item)
    else:
        node.right = _remove(node.right, item)
    return node


def _remove_all(node: Tree, item: Any) -> Tree:
    if node is None:
        return None
    if item == node.item:
        return _remove_all(_remove_root(node), item)
    if item < node.item:
        node.left = _remove_all(node.left, item)
    else:
        node.right = _remove_all(node.right, item)
    return node


def _count(node: Tree, item: Any) -> int:
    if node is None:
        return 0
    return (item == node.item) + _count(node.left, item) + _count(node.right, item)


def _render_lines(node: Tree, depth: int) -> Iterator[str]:
    if node is None:
        return
    yield from _render_lines(node.right, depth + 1)
    yield " " * (3 * depth) + str(node.item)
    yield from _render_lines(node.left, depth + 1)


class BinarySearchTree:
    """An unbalanced binary search tree; items not greater than a node go to its left."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.root: Tree = None
        if items is not None:
            for item in items:
                self.insert(item)

    def insert(self, item: Any) -> None:
        """Insert ``item``, keeping duplicates."""
        new = Node(None, item, None)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if item <= node.item:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def insert_unique(self, item: Any) -> None:
        """Insert ``item`` unless an equal item is already present."""
        if self.root is None:
            self.root = Node(None, item, None)
            return
        node = self.root
        while item != node.item:
            if item < node.item:
                if node.left is None:
                    node.left = Node(None, item, None)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(None, item, None)
                    return
                node = node.right

    def __contains__(self, item: Any) -> bool:
        node = self.root
        while node is not None:
            if item == node.item:
                return True
            node = node.left if item < node.item else node.right
        return False

    def pop_max(self) -> Any:
        """Remove and return the largest item."""
        if self.root is None:
            raise IndexError("pop from an empty tree")
        self.root, item = _pop_max(self.root)
        return item

    def remove(self, item: Any) -> None:
        """Remove one occurrence of ``item``; do nothing if it is absent."""
        self.root = _remove(self.root, item)

    def remove_all(self, item: Any) -> None:
        """Remove every occurrence of ``item``."""
        self.root = _remove_all(self.root, item)

    def maximum(self) -> Any:
        """Return the largest item."""
        if self.root is None:
            raise IndexError("maximum of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.item

    def count(self, item: Any) -> int:
        """Return how many times ``item`` occurs."""
        return _count(self.root, item)

    def __iter__(self) -> Iterator[Any]:
        return inorder(self.root)

    def __reversed__(self) -> Iterator[Any]:
        return reverse_inorder(self.root)

    def render(self) -> str:
        """Draw the tree sideways, three spaces of indentation per level."""
        return "".join(line + "\n" for line in _render_lines(self.root, 0))

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"


TreeLike = Union[BinarySearchTree, Tree]


def _root_of(tree: TreeLike) -> Tree:
    return tree.root if isinstance(tree, BinarySearchTree) else tree


def _equal(first: Tree, second: Tree) -> bool:
    if first is None or second is None:
        return first is second
    if first.item != second.item:
        return False
    return _equal(first.left, second.left) and _equal(first.right, second.right)


def _mirrored(first: Tree, second: Tree) -> bool:
    if first is None or second is None:
        return first is second
    if first.item != second.item:
        return False
    return _mirrored(first.left, second.right) and _mirrored(first.right, second.left)


def equal(first: TreeLike, second: TreeLike) -> bool:
    """Tell whether two trees have the same shape and items."""
    return _equal(_root_of(first), _root_of(second))


def mirrored(first: TreeLike, second: TreeLike) -> bool:
    """Tell whether one tree is the mirror image of the other."""
    return _mirrored(_root_of(first), _root_of(second))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a search tree, draw it, list it both ways and optionally search it."""
    parser = argparse.ArgumentParser(description="Build and query a binary search tree.")
    parser.add_argument("items", nargs="*", type=int, help="items to insert")
    parser.add_argument(
        "--search", action="store_true", help="read items to look up until a negative one"
    )
    args = parser.parse_args(argv)

    tree = BinarySearchTree(args.items or _EXAMPLE_ITEMS)
    print(tree.render(), end="")
    print(_SEPARATOR)
    print(" ".join(map(str, tree)))
    print(_SEPARATOR)
    print(" ".join(map(str, reversed(tree))))
    print(_SEPARATOR)

    if args.search:
        print("Para sair, digite um inteiro negativo.")
        while True:
            try:
                line = input("Item a ser buscado: ")
            except EOFError:
                break
            value = int(line)
            if value < 0:
                break
            print("Encontrado." if value in tree else "Inexistente")
    return 0