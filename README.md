# algobox

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Requires Python 3.10 or later.

## Installation

From a checkout of the project:

```
pip install .
```

## What is inside

- `algobox.trees`: a `TreeNode` dataclass (`val`, `left`, `right`; nodes
  compare by identity), binary search tree `insert`, `find_height` (in edges,
  -1 for an empty tree), `max_depth` (in nodes, 0 for an empty tree),
  `lowest_common_ancestor`, `good_nodes`, `leaf_values`, `leaf_similar` and
  `path_sum`.
- `algobox.linked_lists`: a `ListNode` dataclass with `from_values`,
  `to_values` and `reverse_list` (in place), plus `SinglyLinkedList`,
  `DoublyLinkedList` (iterable in both directions) and `CircularLinkedList`.
  All three lists iterate over their values and render with `str()`.
  `SinglyLinkedList.remove` ignores a missing value, while the `delete`
  methods of the doubly and circular lists raise `ValueError` when the list
  is empty or the value is absent.
- `algobox.containers`: a linked `Stack` (`push`, `pop`, `top`, `len()`,
  iteration from the top), a `QueueUsingStacks` (`enqueue`, `dequeue`,
  `len()`), `calculate_mean` (0.0 for no data) and `format_data`. Popping or
  peeking an empty stack and dequeuing an empty queue raise `IndexError`.
- `algobox.graphs`: an undirected `Graph` with `add_edge` and a
  breadth-first `bfs` that returns the visiting order, plus
  `count_provinces`, `min_reorder`, `calc_equation`, `nearest_exit` and
  `oranges_rotting`. The grid functions leave their input unchanged.
- `algobox.arrays`: `apply_operations`, `pivot_array`,
  `find_missing_and_repeated_values`, `merge_arrays`, `remove_element`
  (compacts the list in place and returns the kept count) and
  `unique_occurrences`.
- `algobox.searching`: `guess_number` (takes the guessing callback as an
  argument), `find_peak_element` and `search_insert`.
- `algobox.number_theory`: `primes_in_range`, `closest_primes`,
  `count_bits` and `check_powers_of_three`.
- `algobox.strings`: `letter_combinations`, `longest_common_prefix`,
  `longest_common_prefix_by_columns`, `is_palindrome` and
  `shortest_common_supersequence`.

## Examples

```python
from algobox.trees import insert, find_height
from algobox.linked_lists import from_values, reverse_list, to_values
from algobox.strings import longest_common_prefix
from algobox.number_theory import closest_primes

root = None
for value in [10, 5, 15, 3, 7, 12, 18]:
    root = insert(root, value)
print(find_height(root))            # 2

head = reverse_list(from_values([1, 2, 3, 4, 5]))
print(to_values(head))              # [5, 4, 3, 2, 1]

print(longest_common_prefix(["flower", "flow", "flight"]))  # "fl"
print(closest_primes(10, 19))       # [11, 13]
```

```python
from algobox.containers import Stack, QueueUsingStacks
from algobox.graphs import Graph

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.top(), len(stack))      # 2 2

queue = QueueUsingStacks()
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue())              # 1

graph = Graph(6)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]:
    graph.add_edge(u, v)
print(graph.bfs(0))                 # [0, 1, 2, 3, 4, 5]
```

## What it does not do

algobox is a library only: it has no command-line program, and nothing in it
reads input files or prints on its own. Call the functions and classes from
your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```