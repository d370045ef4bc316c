"""Binary trees built from linked nodes, with generators, measures and traversals."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence

_ITEM_BOUND = 100


@dataclass
class Node:
    """A binary tree node; an empty tree is ``None``."""

    left: Optional[Node]
    item: Any
    right: Optional[Node]


Tree = Optional[Node]


def _lines(tree: Tree, depth: int) -> Iterator[str]:
    if tree is None:
        return
    yield from _lines(tree.right, depth + 1)
    yield f"{'.':>{3 * depth}} {tree.item}" if depth else f". {tree.item}"
    yield from _lines(tree.left, depth + 1)


def render(tree: Tree) -> str:
    """Draw the tree sideways: right subtree above, left subtree below the root."""
    return "".join(line + "\n" for line in _lines(tree, 0))


def _generator(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def complete(height: int, rng: Optional[random.Random] = None) -> Tree:
    """Build a complete tree of the given height holding random items below 100."""
    if height < 0:
        raise ValueError("height must not be negative")
    rng = _generator(rng)

    def build(level: int) -> Tree:
        if level == 0:
            return None
        left = build(level - 1)
        item = rng.randrange(_ITEM_BOUND)
        return Node(left, item, build(level - 1))

    return build(height)


def balanced(size: int, rng: Optional[random.Random] = None) -> Tree:
    """Build a tree of ``size`` random items whose sides differ by at most one node."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = _generator(rng)

    def build(count: int) -> Tree:
        if count == 0:
            return None
        left_count = (count - 1) // 2
        left = build(left_count)
        item = rng.randrange(_ITEM_BOUND)
        return Node(left, item, build(count - 1 - left_count))

    return build(size)


def random_tree(size: int, rng: Optional[random.Random] = None) -> Tree:
    """Build a tree of ``size`` random items with a randomly chosen shape."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = _generator(rng)

    def build(count: int) -> Tree:
        if count == 0:
            return None
        left_count = rng.randrange(count)
        left = build(left_count)
        item = rng.randrange(_ITEM_BOUND)
        return Node(left, item, build(count - 1 - left_count))

    return build(size)


def count_nodes(tree: Tree) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + count_nodes(tree.left) + count_nodes(tree.right)


def total(tree: Tree) -> Any:
    """Return the sum of all items in the tree."""
    if tree is None:
        return 0
    return tree.item + total(tree.left) + total(tree.right)


def _is_leaf(tree: Node) -> bool:
    return tree.left is None and tree.right is None


def count_leaves(tree: Tree) -> int:
    """Return the number of nodes with no children."""
    if tree is None:
        return 0
    if _is_leaf(tree):
        return 1
    return count_leaves(tree.left) + count_leaves(tree.right)


def height(tree: Tree) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if tree is None:
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def clone(tree: Tree) -> Tree:
    """Return a deep copy of the tree structure."""
    if tree is None:
        return None
    return Node(clone(tree.left), tree.item, clone(tree.right))


def contains(item: Any, tree: Tree) -> bool:
    """Tell whether ``item`` occurs anywhere in the tree."""
    if tree is None:
        return False
    if item == tree.item:
        return True
    return contains(item, tree.left) or contains(item, tree.right)


def preorder(tree: Tree) -> Iterator[Any]:
    """Yield items root first, then left subtree, then right subtree."""
    if tree is None:
        return
    yield tree.item
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Tree) -> Iterator[Any]:
    """Yield items of the left subtree, then the root, then the right subtree."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.item
    yield from inorder(tree.right)


def postorder(tree: Tree) -> Iterator[Any]:
    """Yield items of both subtrees before the root."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.item


def reverse_inorder(tree: Tree) -> Iterator[Any]:
    """Yield items of the right subtree, then the root, then the left subtree."""
    if tree is None:
        return
    yield from reverse_inorder(tree.right)
    yield tree.item
    yield from reverse_inorder(tree.left)


def prune(tree: Tree) -> Tree:
    """Remove every leaf in place and return the remaining tree."""
    if tree is None or _is_leaf(tree):
        return None
    tree.left = prune(tree.left)
    tree.right = prune(tree.right)
    return tree


def _example() -> Node:
    return Node(Node(None, 2, None), 1, Node(None, 3, Node(None, 4, None)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a tree, draw it and print its measures and traversals."""
    parser = argparse.ArgumentParser(description="Build and inspect a binary tree.")
    parser.add_argument(
        "--kind",
        choices=("example", "complete", "balanced", "random"),
        default="example",
        help="how to build the tree",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=7,
        help="height for complete trees, node count otherwise",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if args.kind == "example":
        tree = _example()
    elif args.kind == "complete":
        tree = complete(args.size, rng)
    elif args.kind == "balanced":
        tree = balanced(args.size, rng)
    else:
        tree = random_tree(args.size, rng)

    print(render(tree), end="")
    print(f"nos = {count_nodes(tree)}")
    print(f"Soma = {total(tree)}")
    print(f"Folhas = {count_leaves(tree)}")
    print(f"Altura = {height(tree)}")
    print("preordem:", " ".join(map(str, preorder(tree))))
    print("emordem:", " ".join(map(str, inorder(tree))))
    print("posordem:", " ".join(map(str, postorder(tree))))
    return 0