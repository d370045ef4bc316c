# dstructs

A small collection of classic data structures and the algorithms built on
them, written in plain Python with no third-party dependencies:

- `dstructs.stack` – a bounded `Stack`, plus `reverse_string` and `to_binary`
- `dstructs.circular_queue` – a bounded ring-buffer `CircularQueue` and
  `is_palindrome`
- `dstructs.expressions` – infix to postfix conversion and postfix
  evaluation, for arithmetic and for boolean (`V`/`F`) expressions
- `dstructs.binarytree` – the `Node` type, tree builders (`complete`,
  `balanced`, `random_tree`), measures (`count_nodes`, `total`,
  `count_leaves`, `height`), `clone`, `contains`, `prune`, traversals and
  `render`
- `dstructs.bst` – `BinarySearchTree` with insertion, search, removal and
  in-order / reverse in-order iteration, plus `equal` and `mirrored`
- `dstructs.linkedlist` – a singly linked `LinkedList` and an always-ordered
  `SortedList`
- `dstructs.mapping` – `SortedMap`, a map kept in key order
- `dstructs.sorting` – `swap`, `bubble_sort`, `merge`, `merge_sort`,
  `linear_search`, `binary_search`

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Usage

### Stacks and queues

```python
from dstructs.stack import Stack, StackEmptyError, reverse_string, to_binary
from dstructs.circular_queue import CircularQueue, is_palindrome

stack = Stack(3)
stack.push(1)
stack.push(2)
stack.top()        # 2
stack.pop()        # 2
len(stack)         # 1

reverse_string("abc")   # "cba"
to_binary(6)            # "110"

queue = CircularQueue(2)
queue.enqueue("a")
queue.enqueue("b")
queue.is_full()    # True
queue.dequeue()    # "a"

is_palindrome("socorram-me, subi no onibus em marrocos")  # True
```

Pushing onto a full stack raises `StackFullError`; popping or reading the top
of an empty one raises `StackEmptyError`. Queues raise `QueueFullError` and
`QueueEmptyError` the same way. A negative capacity raises `ValueError`.

`to_binary` accepts non-negative numbers below 2**32 (its stack holds 32
digits); a negative number raises `ValueError`. `is_palindrome` compares only
alphabetic characters and is case-sensitive.

### Expressions

Operands are single digits; operators are `+ - * /`. Division truncates
toward zero.

```python
from dstructs.expressions import to_postfix, evaluate_postfix, priority

postfix = to_postfix("(1+2)*3")   # "12+3*"
evaluate_postfix(postfix)         # 9
priority("*")                     # 2
```

`to_postfix_parenthesized` handles fully parenthesized input without operator
priorities, and `boolean_to_postfix` / `evaluate_boolean_postfix` do the same
for fully parenthesized expressions over `V`, `F`, `!`, `&` and `|`
(`evaluate_boolean_postfix` returns a `bool`). The evaluators raise
`ValueError` on an unexpected character.

### Binary trees

An empty tree is `None`; a non-empty one is a `Node(left, item, right)`.

```python
import random
from dstructs import binarytree

rng = random.Random(0)
tree = binarytree.balanced(7, rng)
binarytree.count_nodes(tree)   # 7
binarytree.height(tree)        # 3
list(binarytree.inorder(tree))
print(binarytree.render(tree))
```

The builders draw items below 100; `rng` is optional. `render` draws the tree
sideways, right subtree above the root. `prune` removes every leaf in place
and returns what remains.

```python
from dstructs.bst import BinarySearchTree, equal, mirrored

bst = BinarySearchTree([7, 4, 6, 8, 2, 5, 3, 1])
3 in bst            # True
list(bst)           # [1, 2, 3, 4, 5, 6, 7, 8]
list(reversed(bst)) # [8, 7, 6, 5, 4, 3, 2, 1]
bst.maximum()       # 8
bst.remove(4)
```

`insert` keeps duplicates (to the left of equal items); `insert_unique` skips
them. `remove` drops one occurrence, `remove_all` every occurrence, and
`count` tells how many there are. `pop_max` and `maximum` raise `IndexError`
on an empty tree.

### Lists and maps

```python
from dstructs.linkedlist import LinkedList, SortedList
from dstructs.mapping import SortedMap

items = LinkedList([3, 1, 5])
len(items)          # 3
items.extend([9])
print(items.render(), end="")   # one item per line

ordered = SortedList([5, 1, 3])
list(ordered)       # [1, 3, 5]

people = SortedMap([(36, "Leo"), (15, "Ivo"), (42, "Eva")])
people[29] = "Ana"
list(people)        # [15, 29, 36, 42]
del people[36]
str(people)         # "[(15,Ivo),(29,Ana),(42,Eva)]"
```

`LinkedList.random(size, bound, rng)` builds a list of random items in
`range(bound)`. Deleting or reading a missing key from a `SortedMap` raises
`KeyError`; `discard` and `get` do not.

### Sorting and searching

```python
from dstructs.sorting import bubble_sort, merge_sort, binary_search, linear_search

values = [83, 31, 91, 46, 27]
merge_sort(values)
binary_search(46, values)   # True
linear_search(50, values)   # False
```

Both sorts work in place. `binary_search` expects an ascending sequence.

## Command-line tools

```
dstructs-expr "(1+2)*3"              # prints the postfix form and its value
dstructs-expr --boolean "((V&F)|V)"  # the same for boolean expressions
dstructs-tree --kind balanced --size 9 --seed 1
dstructs-bst 7 4 6 8 2 5 3 1 --search
```

- `dstructs-expr` reads the expression from standard input when none is
  given.
- `dstructs-tree` builds an `example`, `complete`, `balanced` or `random`
  tree (`--kind`), draws it and prints its node count, sum, leaves, height
  and traversals. `--size` is the height for complete trees and the node
  count otherwise.
- `dstructs-bst` inserts the given items (or a built-in example), draws the
  tree and lists it in both orders; with `--search` it then reads items to
  look up until a negative one or end of input.