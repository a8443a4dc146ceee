# algokit

Classic data structures and small algorithm routines, written in plain
Python with no third-party dependencies. It is a library only: there is no
command-line program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

- `algokit.stack.Stack`: a LIFO stack with `push`, `pop`, `peek`, `clear`,
  `values` and `len()`. Pushing `None` is ignored; `pop` and `peek` on an
  empty stack raise `IndexError`.
- `algokit.min_stack.MinStack`: an integer stack with `push`, `pop`, `top`
  and `get_min`, where `get_min` runs in constant time.
- `algokit.sorted_stack.SortedStack`: a stack that keeps its smallest value
  on top (`push`, `pop`, `peek`, `is_empty`, `clear`, `values`).
- `algokit.queue.Queue`: a FIFO queue (`push`, `pop`, `peek`, `clear`).
- `algokit.queue.TwoStackQueue`: a FIFO queue made of two `Stack`s; like
  `Stack`, it ignores pushed `None`.
- `algokit.linked_list.LinkedList`: a doubly linked list of `DoublyNode`s
  with 1-based positions (`add`, `append`, `insert`, `get`, `delete`),
  iterable forwards and with `reversed()`.
- `algokit.string_set.StringSet`: a set of strings (`add`, `discard`, `in`,
  iteration, `len()`).
- `algokit.graph.Graph`: an undirected graph of `GraphNode`s with
  `add_node`, `add_edge` and `bfs`, which returns the reachable nodes in
  breadth-first order. Its methods take a lock, so it can be shared between
  threads.
- `algokit.median.MedianFinder`: a running median (`add_num`,
  `find_median`).
- `algokit.leaderboard.Leaderboard`: `User` records (`id`, `number`) ranked
  by score with `insert`, `delete`, `update` and `ranking`; equal scores
  keep insertion order.
- `algokit.trie.Trie`: a prefix tree (`insert`, `search`, `starts_with`).
- `algokit.bst.TreeNode`: a binary tree node with `search` and `insert` for
  binary search trees.
- `algokit.linked_lists.LRUCache`: a least-recently-used cache (`get`,
  `put`); `get` returns -1 for a missing key.
- `algokit.task_pool.TaskPool`: a fixed number of worker threads running
  submitted callables; `wait` blocks until all are done, stops the workers
  and re-raises the first exception a task raised.

## Algorithm collections

- `algokit.bits`: bit tricks (`insert_bits`, `print_bin`, `reverse_bits`,
  `find_closed_numbers`, `convert_integer`, `exchange_bits`, `draw_line`,
  `subsets`, `multiply`, `reverse_words`) and sliding-window string counts.
- `algokit.grid`: `find_lonely_pixel`, `valid_word_square`.
- `algokit.counting`: hash-map counting puzzles such as `four_sum_count`
  and `can_permute_palindrome`.
- `algokit.search`: `binary_search`, `first_bad_version`, `first_uniq_char`,
  `two_sum`.
- `algokit.intervals`: `smallest_common_element`, `find_missing_ranges`,
  `can_attend_meetings`.
- `algokit.sorting`: `quick_sort` and `counting_sort` (in place),
  `merge_sort` and `merge` (returning new lists).
- `algokit.arrays`: array and string puzzles (`max_sub_array`, `calculate`,
  `title_to_number`, `length_of_longest_substring`, ...) plus
  `RandomizedSet` and `Shuffler`.
- `algokit.graph`: also `path_with_obstacles` and `flood_fill` on grids.
- `algokit.median`: also `max_sliding_window`.
- `algokit.linked_lists`: singly linked `ListNode` puzzles (`reverse_list`,
  `has_cycle`, `merge_two_lists`, ...) and `copy_random_list` for
  `RandomNode` lists.
- `algokit.bst`: `sorted_array_to_bst`, `list_of_depth`, `is_valid_bst`,
  `inorder_successor`.
- `algokit.binary_tree`: `is_balanced`, `height`, `lowest_common_ancestor`,
  `check_sub_tree`, `path_sum`.
- `algokit.tree_walks`: `Codec` (tree to string and back), level-order
  walks, `kth_smallest`, `is_sub_structure`, `mirror_tree`, `is_symmetric`.

## Examples

```python
from algokit.trie import Trie
from algokit.median import MedianFinder
from algokit.linked_lists import LRUCache
from algokit.sorting import merge_sort

trie = Trie(["her", "xa"])
trie.search("her")        # True
trie.starts_with("ha")    # False

finder = MedianFinder()
for n in (1, 2, 3):
    finder.add_num(n)
finder.find_median()      # 2.0

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)              # 1
cache.put(3, 3)           # evicts key 2
cache.get(2)              # -1

merge_sort([5, 2, 4, 1])  # [1, 2, 4, 5]
```

Running work on a thread pool:

```python
from algokit.task_pool import TaskPool

results = []
pool = TaskPool(2)
for i in range(5):
    pool.submit(lambda i=i: results.append(i * i))
pool.wait()
sorted(results)           # [0, 1, 4, 9, 16]
```

## What it does not do

There is no general-purpose heap class; `MedianFinder` and
`max_sliding_window` use the standard `heapq` module internally, and
`heapq` is what to reach for when a heap is needed directly.