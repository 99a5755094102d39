# dsakit

Classic data structures and algorithms in plain Python, with no dependencies
outside the standard library. Python 3.10 or later.

## Modules

### Linked structures

- `dsakit.linked`: the `Node` class (`data`, `next`) and chain helpers:
  `build_chain`, `chain_values`, `reverse_chain`, `reverse_in_groups`,
  `find_middle` and `is_circular` (an empty chain counts as circular).
  `LinkedList` keeps a head and a tail and offers `insert_at_head`,
  `insert_at_tail`, `insert_at_position` and `delete_at_position`, with
  1-based positions. It also has `reverse`, `reverse_in_groups(k)` and
  `middle()`, which returns the second of the two middles for an even length.
  It supports iteration and `len()`.
- `dsakit.loops`: `detect_loop` (where the slow and fast walkers meet),
  `has_loop`, `loop_start` and `remove_loop`. `remove_loop` reports whether
  a cycle was cut.
- `dsakit.nodeops`: `add_numbers` (digits stored most significant first,
  returns a new chain), `merge_sorted`, `is_palindrome` (the chain is
  restored afterwards), `remove_sorted_duplicates`,
  `remove_unsorted_duplicates`, and two ways to sort chains of 0s, 1s and 2s:
  `sort_012_counting` rewrites values and `sort_012_relink` relinks nodes.
- `dsakit.circular`: `CircularLinkedList`, with `insert_at_head`,
  `insert_at_tail`, `insert_at_position`, `insert_after(element, value)`,
  `delete(element)` and `is_circular`.
- `dsakit.doubly`: `DoublyNode` and `DoublyLinkedList`, with positional
  insertion and deletion, iteration both ways (`reversed()`) and `len()`.

### Trees, heaps, graphs

- `dsakit.trees`: `TreeNode`, `insert_into_bst`, and `build_bst`, which stops
  at the `-1` sentinel. `build_tree_preorder` and `build_tree_level_order`
  take an iterable with `-1` marking a missing child, and raise `ValueError`
  if the input ends early. The traversals `inorder`, `preorder` and
  `postorder` return lists. `level_order` returns a list of levels.
- `dsakit.heap`: `MaxHeap(capacity=100)` with `insert` and `delete_root`.
  It raises `OverflowError` when full and `IndexError` when empty.
- `dsakit.graph`: `Graph`, built on an adjacency list. It has
  `add_edge(u, v, directed=False)` and `neighbours(node)`. `str(graph)` gives
  lines such as `1->2,3,`.

### Queues and stacks

- `dsakit.queues`: `LinearQueue`, a fixed-size queue whose slots are freed
  only once it runs empty. `CircularQueue`, `ArrayDeque`, and `KQueues`,
  which holds several queues numbered from 1 that share one store.
  `QueueUsingStacks` and `StackUsingQueue`. Also `reverse_queue`.
  Full and empty cases raise `QueueOverflow` and `QueueUnderflow`.
- `dsakit.queue_algos`: `circular_tour` (returns `None` if no start works),
  `first_non_repeating`, `first_negatives`, `reverse_first_k` and
  `sum_of_window_extremes`.
- `dsakit.stacks`: `ArrayStack`, `LinkedStack`, `TwoStacks` (`push1`/`push2`,
  `pop1`/`pop2`), and `NStacks`, which holds several stacks numbered from 0
  that share one store. Full and empty cases raise `StackOverflow` and
  `StackUnderflow`.
- `dsakit.stack_algos`: `find_celebrity`, `delete_middle`,
  `insert_at_bottom`, `reverse_stack`, `sort_stack`, `has_redundant_brackets`,
  `is_valid_parentheses`, `next_smaller_elements`, `largest_histogram_area`,
  `largest_rectangle_of_ones`, `min_cost_to_balance` (returns `None` for an
  odd length) and `reverse_string`. Stacks here are plain lists, bottom
  first.

### Recursion and strings

- `dsakit.recursion` has these functions:
  - searching: `binary_search`, `linear_search`
  - sorting: `bubble_sort`, `selection_sort`, `is_sorted`
  - counting: `count_ways`, `count_ways_three`, `count_up`, `sum_values`
  - numbers: `fibonacci`, `fibonacci_series`, `power`
  - collections: `subsets`, `subsequences`, `permutations`
  - text: `is_palindrome`, `reverse_string`, `say_digits`
  - backtracking: `phone_keypad`, `rat_in_maze`
  - traces: `pre_in_post`, `src_to_dest`
- `dsakit.strings`: `is_valid_palindrome` ignores ASCII letter case.
  `primes_below(n)` returns the primes below n. `reverse_words` reverses each
  word and keeps every space in place.

## Example

```python
from dsakit.linked import LinkedList
from dsakit.stack_algos import largest_histogram_area
from dsakit.recursion import phone_keypad

lst = LinkedList([5, 6, 7, 8, 9])
lst.reverse_in_groups(2)
print(list(lst))                                # [6, 5, 8, 7, 9]

print(largest_histogram_area([2, 4, 5, 6, 1]))  # 12
print(phone_keypad("23"))
```

## What it does not do

dsakit is a library only. It has no command-line program and reads nothing
from standard input. The tree builders take their values from any iterable
you pass in.

## Running the tests

```
pip install -e ".[test]"
pytest
```