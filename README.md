# dslabs

A small collection of classic data structures and the exercises built on
top of them. It has no dependencies beyond the standard library.

## Data structures

| Module                      | What it holds                                                          |
|-----------------------------|------------------------------------------------------------------------|
| `dslabs.vector`             | `Vector`: a growable array with `resize` and `capacity`                |
| `dslabs.fixed_array`        | `FixedArray`: an array whose size is set at creation                   |
| `dslabs.stack`              | `Stack`: last in, first out (`push`, `peek`, `pop`, `is_empty`)        |
| `dslabs.linked_list`        | `LinkedList` and `ListItem`: a doubly linked list                      |
| `dslabs.fifo_queue`         | `Queue`: first in, first out (`insert`, `get`, `remove`, `is_empty`)   |
| `dslabs.avltree`            | `AVLTree` and `Node`: a self-balancing search tree of comparable keys  |
| `dslabs.associative_array`  | `AssociativeArray`: key/value storage backed by `AVLTree`              |
| `dslabs.graph`              | `Graph`, `Vertex`, `Edge`: a directed, weighted graph                  |

Index access on `Vector` and `FixedArray` outside their size raises
`IndexError`. `Stack.peek`/`pop` and `Queue.get`/`remove` on an empty
container raise `IndexError`. A `Vector` starts with a capacity of 10; growing
past the capacity reserves twice the requested size.

```python
from dslabs.stack import Stack
from dslabs.fifo_queue import Queue
from dslabs.graph import Graph

stack = Stack()
stack.push(1)
stack.push(2)
stack.peek()        # 2

queue = Queue()
queue.insert(1)
queue.insert(2)
queue.get()         # 1

graph = Graph(3, 0)
graph.add_edge(graph.get_vertex(0), graph.get_vertex(2), 7)
graph.get_edge_weight(graph.get_vertex(0), graph.get_vertex(2))   # 7
```

`AVLTree` allows equal keys; `search` returns the `Node` holding the key or
`None`, `remove` returns whether an entry was removed, and iterating yields
`(key, value)` pairs in ascending key order.

## Exercises

Each exercise is importable as a module and also installed as a command.

- `dslabs.evens` / `dslabs-evens [LENGTH]`: fills a `FixedArray` of the
  given length (asked for when not given) with random numbers from 0 to 50
  and prints the indices of the even ones. `fill_random` and
  `even_indices` do the work.
- `dslabs.postfix` / `dslabs-postfix [EXPRESSION ...]`: prints each
  expression given as an argument, or each line of standard input, in
  postfix notation (`to_postfix("a+b*c")` gives `"abc*+"`). Unbalanced
  parentheses raise `ValueError`.
- `dslabs.maze` / `dslabs-maze [FILE]`: reads a maze (default file
  `vhod.txt`) where `X` marks the start, `Y` the finish and `#` a wall, and
  prints it with the shortest path drawn in `x`, or `IMPOSSIBLE` when the
  finish cannot be reached. `solve_maze` returns the marked lines or `None`.
- `dslabs.shortest_paths` / `dslabs-shortest-paths`: reads the number of
  vertices, their data and their weighted edges from standard input and
  prints the matrix of shortest path lengths, with `-1` where no path
  exists. `weight_matrix` and `floyd` use `None` for a missing path.
- `dslabs.benchmark` / `dslabs-benchmark [STEP [MAXIMUM]]`: times insertion
  into `AssociativeArray` against a built-in dictionary for lengths from
  STEP to MAXIMUM (defaults 50000 and 1000000), in whole milliseconds.
- `dslabs.practice`: small warm-up functions `total`, `zero_last`,
  `reverse_input`, `lookup_definitions` and `below_threshold`.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```