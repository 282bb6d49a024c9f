# dsprimer

A small collection of the data structures and algorithms found in an
introductory data-structures course, written as plain Python classes and
functions. It is meant for reading, teaching and experimenting.

Positions in the list-like structures are *ordinal*: the first element is at
position 1, as in the textbook conventions these structures follow.

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## What is inside

| Module               | Contents                                                                 |
|----------------------|--------------------------------------------------------------------------|
| `dsprimer.errors`    | `DataStructureError` and its subclasses `IndexErr` and `FullErr`         |
| `dsprimer.array`     | the abstract `List` interface, `SqList` and `ArrayList` (capacity 100)   |
| `dsprimer.list_node` | `ListNode` (linked list with a sentinel head); `LNode` with `init_list`, `list_insert`, `delete` |
| `dsprimer.stack`     | `SequentialStack`, a bounded stack                                       |
| `dsprimer.queue`     | `Queue`, a circular queue that holds one element fewer than its size     |
| `dsprimer.sorting`   | `quick`, in-place quick sort over an inclusive index range               |
| `dsprimer.string`    | `CharString` with brute-force matching (`index_bf`), and `index_kmp`     |
| `dsprimer.tree`      | `BinaryNode` and `BinaryTree` with in-order traversal                    |
| `dsprimer.graph`     | `AMGraph`, an adjacency-matrix graph that can be read interactively      |

## Errors

`IndexErr` (also an `IndexError`) is raised for a position outside the valid
range or for an operation on an empty container; `FullErr` is raised when a
bounded container has no room left. Both derive from `DataStructureError`.

## Lists

`SqList` implements `List`. Lookups that fail return `None` (or `0` for
`locate_elem`); `list_insert` and `list_delete` raise `IndexErr` for a bad
position and `list_insert` raises `FullErr` once 100 elements are held.

```python
from dsprimer.array import SqList

items = SqList()
items.list_insert(1, 42)
items.list_insert(2, 73)
assert items.get_elem(1) == 42
assert items.locate_elem(73) == 2
assert items.prior_elem(73) == 42
assert items.next_elem(42) == 73
assert items.list_length() == 2
```

`ArrayList` raises instead of returning `None`: `get_element`, `insert` and
`delete` raise `IndexErr`, `locate_index` raises `ValueError` when the element
is absent, and `prior_element` / `next_element` raise `IndexErr` on an empty
list and `ValueError` when there is no predecessor or successor. Note that
`ArrayList.empty()` returns `True` when the list is **not** empty.

`traverse_list` and `traverse` print each element's `repr` on its own line.

## Linked lists

```python
from dsprimer.list_node import ListNode

head = ListNode()          # sentinel, holds no data
for value in (1, 3):
    head.push(value)
head.insert(2, 2)          # becomes the second element
assert list(head) == [1, 2, 3]
assert head.get(1).data == 1
assert head.remove(1) == 1
assert head.pop_tail() == 3
assert head.length() == 1
```

`get(0)` returns the sentinel itself; an index past the end gives `None`.

The `LNode` functions work on integer lists with a head node:
`init_list()` returns the head, `list_insert(head, i, e)` inserts at position
`i`, and `delete(head, i)` swaps the target's data with its successor and
unlinks the successor, so the last node cannot be deleted (`IndexErr`).

## Stack and queue

```python
from dsprimer.stack import SequentialStack
from dsprimer.queue import Queue

stack = SequentialStack(2)
stack.push(1)
stack.push(2)
assert stack.is_full()
assert stack.pop() == 2
stack.replace_top(10)
assert stack.peek() == 10

queue = Queue(3)           # capacity() == 2
queue.push("a")
queue.push("b")
assert queue.is_full()
assert queue.pop() == "a"
```

`SequentialStack.push` raises `FullErr` when full and `pop` raises `IndexErr`
when empty; `Queue.push` raises `FullErr` when full and `Queue.pop` returns
`None` when empty.

## Sorting

```python
from dsprimer.sorting import quick

numbers = [5, 4, 3, 2, 1]
quick(numbers, 0, len(numbers) - 1)
assert numbers == [1, 2, 3, 4, 5]
```

## String matching

```python
from dsprimer.string import CharString, index_kmp

text = CharString("ababcabcacbab")
assert text.index_bf(CharString("abcac"), 0) == 5
assert text.index_bf(CharString("xyz"), 0) == 0   # 0 also means "not found"

assert index_kmp(list("abcde"), list("cd")) == 2
assert index_kmp(list("abc"), list("xyz")) is None
assert index_kmp(list("abc"), []) == 0
```

## Binary trees

```python
from dsprimer.tree import BinaryNode, BinaryTree

root = BinaryNode(1).set_left(2).set_right(3)
root.left.set_left(4).set_right(5)
tree = BinaryTree(root)
assert tree.in_order_traverse() == [4, 2, 5, 1, 3]
assert BinaryTree.with_root(42).in_order_traverse() == [42]
assert BinaryTree().is_empty()
```

## Graphs

`AMGraph(vexs, arcs, arc_num)` holds vertex values and a square adjacency
matrix of weights. `AMGraph.from_user_input(size, convert=int, stdin=None,
stdout=None)` prompts for `size` vertex values, the number of edges (at most
`size * size`) and then each edge as `start end weight`, asking again after
invalid lines and raising `EOFError` if input runs out. Any text streams can be
passed in place of standard input and output:

```python
import io
from dsprimer.graph import AMGraph

answers = io.StringIO("10\n20\n1\n0 1 7\n")
graph = AMGraph.from_user_input(2, stdin=answers, stdout=io.StringIO())
assert graph.vexs == [10, 20]
assert graph.arcs == [[0, 7], [0, 0]]
```

## What it does not do

The package is a library only: it installs no command-line program. The
graph offers storage and interactive input but no traversal or path
algorithms, and sorting covers quick sort only.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.