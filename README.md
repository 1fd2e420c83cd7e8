# dstructs

Classic data structures and graph algorithms in plain Python, with no
dependencies beyond the standard library.

## Installation

```
pip install dstructs
```

## What is inside

| Module | Contents |
| --- | --- |
| `dstructs.stack` | `Stack`: a bounded LIFO stack (default capacity 10) |
| `dstructs.ringqueue` | `RingQueue`: a bounded FIFO queue; a queue of capacity `n` holds at most `n - 1` items (default capacity 100) |
| `dstructs.forward_list` | `ForwardList`: a singly linked list |
| `dstructs.double_linked_list` | `DoubleLinkedList`: a doubly linked list |
| `dstructs.circular_list` | `CircularList`: a circular doubly linked list with a sentinel node |
| `dstructs.hash_table` | `HashTable`: a chained hash table mapping single characters to integers |
| `dstructs.sparse_matrix` | `SparseMatrix`: a sparse matrix storing only non-zero entries |
| `dstructs.trie` | `Trie`: a prefix tree over the letters `a`–`z` |
| `dstructs.disjoint_set` | `DisjointSet`, `Edge`, `kruskal_mst` |
| `dstructs.avl` | `AVLTree`: a self-balancing binary search tree |
| `dstructs.bst` | `BST`, `TreeNode`: an unbalanced binary search tree with several traversal orders |
| `dstructs.heap` | `MinHeap`, `MaxHeap`: binary heaps |
| `dstructs.btree` | `BTree`: a B-tree of minimum degree `t` with insertion and deletion |
| `dstructs.bplustree` | `BPlusTree`: a B+ tree with a fixed bucket size |
| `dstructs.graph` | `Graph`, `NegativeCycleError`, `INF`, `format_distances` |

## Behaviour worth knowing

- `Stack.push` and `RingQueue.enqueue` silently ignore new items when the
  container is full. Popping, peeking or dequeuing an empty container raises
  `IndexError`, as do `front`, `back` and the `pop_*` methods of the lists.
- `HashTable(size)` clamps the bucket count to at most 100 and raises
  `ValueError` if it would be 0. Keys must be single characters; `get`
  returns `0` for an absent key, and `remove` ignores absent keys.
- `Trie` methods raise `ValueError` for words with characters outside `a`–`z`.
- `AVLTree` and `BST` ignore duplicate values; `BTree` keeps them.
- `Graph` is directed. Unreachable distances are `INF` (`math.inf`).
  `Graph.bellman_ford` raises `NegativeCycleError` when a negative-weight
  cycle can be reached from the source.

## Examples

### Stacks and queues

```python
from dstructs.stack import Stack
from dstructs.ringqueue import RingQueue

stack = Stack(10)
stack.push(1)
stack.push(2)
assert stack.pop() == 2
assert 1 in stack

queue = RingQueue(100)
queue.enqueue("a")
queue.enqueue("b")
assert queue.dequeue() == "a"
assert len(queue) == 1
```

### Lists

```python
from dstructs.double_linked_list import DoubleLinkedList

items = DoubleLinkedList([3, 1, 2])
items.sort()
assert list(items) == [1, 2, 3]
items.reverse()
assert list(items) == [3, 2, 1]
assert items[0] == 3
assert list(reversed(items)) == [1, 2, 3]
```

### Trees

```python
from dstructs.avl import AVLTree
from dstructs.bst import BST
from dstructs.btree import BTree
from dstructs.bplustree import BPlusTree

avl = AVLTree([10, 20, 30, 40, 50])
assert avl.in_order() == [10, 20, 30, 40, 50]
assert avl.height() == 2

bst = BST([8, 3, 10, 1, 6])
assert bst.levels() == [[8], [3, 10], [1, 6]]

btree = BTree(3)
for key in (10, 20, 5, 6, 12, 30, 7, 17):
    btree.insert(key)
btree.remove(6)
assert 6 not in btree
assert list(btree) == [5, 7, 10, 12, 17, 20, 30]

bplus = BPlusTree(3)
for key in (5, 1, 9, 3, 7):
    bplus.insert(key)
assert bplus.leaf_keys() == [1, 3, 5, 7, 9]
assert 7 in bplus
```

### Heaps

```python
from dstructs.heap import MinHeap, MaxHeap

heap = MinHeap([5, 3, 8, 1])
assert heap.pop() == 1
assert heap.peek() == 3

assert MaxHeap([5, 3, 8, 1]).pop() == 8
```

### Tries, hash tables and sparse matrices

```python
from dstructs.trie import Trie
from dstructs.hash_table import HashTable
from dstructs.sparse_matrix import SparseMatrix

trie = Trie()
trie.insert("tree")
assert trie.search("tree")
assert "tr" not in trie

table = HashTable(26)
table.insert("a", 1)
table.update("a", 2)
assert table.get("a") == 2

matrix = SparseMatrix([[0, 2], [3, 0]])
assert matrix[1, 0] == 3
assert matrix.shape == (2, 2)
print(matrix.format())
```

### Graphs

```python
from dstructs.graph import Graph, format_distances

graph = Graph()
for _ in range(3):
    graph.add_node()
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
graph.add_edge(0, 2, 7)

assert graph.dijkstra(0)[2] == 5
assert graph.bfs(0) == [0, 1, 2]
assert graph.is_path(0, 2)
print(format_distances(graph.floyd_warshall()))
```

`Graph` also offers `dfs`, `find_scc`, `topological_sort` and `bellman_ford`.

### Minimum spanning trees

```python
from dstructs.disjoint_set import Edge, kruskal_mst

edges = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]
tree = kruskal_mst(edges, 4)
assert sum(edge.weight for edge in tree) == 19
```

## What the package does not do

- `BPlusTree` supports insertion and lookup only; keys cannot be removed.
- There is no command-line interface; the package is a library only.
- Nothing is persisted: every structure lives in memory.

## Running the tests

```
pip install -e ".[test]"
pytest
```