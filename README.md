# algonotes

Compact, tested solutions to classic algorithm problems: linked lists,
binary and n-ary trees, integer sequences, strings, number puzzles, an LRU
cache and a binary max-heap. Everything is plain Python with no runtime
dependencies.

## Installation

From a checkout of the project:

```
pip install .
```

With the test tools (pytest and hypothesis):

```
pip install ".[test]"
```

## Modules

### `algonotes.linked_lists`

- `ListNode(val, next=None)`: a singly linked list node; iterating a node
  yields the values from it to the end of the list.
- `RandomListNode(label, next=None, random=None)`: a node that also points at
  any node of its list.
- `from_values(values)` / `to_values(head)`: build a list from values and read
  it back.
- `reverse(head)`: reverse a list in place, returning the new head.
- `reverse_k_group(head, k)`: reverse every run of `k` nodes; a shorter final
  run keeps its order.
- `reorder_list(head)`, `reorder_list_with_list(head)`,
  `reorder_list_by_reversal(head)`: rearrange `L0, L1, ..., Ln` into
  `L0, Ln, L1, Ln-1, ...` in place (linear time with constant space, linear
  time with a deque, and quadratic time respectively).
- `copy_random_list(head)`: deep-copy a list with random pointers.

### `algonotes.trees`

- `TreeNode(val, left=None, right=None)` and `NaryNode(val, children=[])`;
  `None` entries among an n-ary node's children are ignored.
- `is_same_tree(p, q)`, `level_order(root)`, `sorted_list_to_bst(head)`
  (takes a sorted `ListNode` list), `max_path_sum(root)` (raises `ValueError`
  for an empty tree), `find_target(root, k)`.
- `nary_level_order(root)`, `max_depth(root)`, `preorder(root)`,
  `postorder(root)`.

### `algonotes.sequences`

- `longest_consecutive(nums)`: length of the longest run of consecutive integers.
- `two_sum_sorted(numbers, target)`: 1-based positions of two entries of a
  sorted sequence that sum to `target`; `ValueError` if there are none.
- `largest_number(nums)`: the largest number formed by concatenating the entries.
- `count_smaller(nums)`: for each entry, how many smaller entries follow it.
- `min_jumps(nums)` (greedy) and `min_jumps_dp(nums)` (dynamic programming,
  `ValueError` if the end cannot be reached): fewest jumps to the last position.
- `median_sliding_window(nums, k)`: medians of every window of `k` entries.
- `dominant_index(nums)`: index of the largest entry if it is at least twice
  every other, else `-1`.
- `sort_colors(nums)`: sort a list of 0s, 1s and 2s in place.
- `first_bad_version(n, is_bad)`: binary search for the first version in
  `1..n` that the callable `is_bad` reports.

### `algonotes.strings`

- `is_match(text, pattern)`: wildcard match with `?` and `*`.
- `check_inclusion(s1, s2)`: whether a permutation of `s1` occurs in `s2`.
- `min_distance(word1, word2)`: fewest deletions that make two words equal.
- `full_justify(words, max_width)`: fully justified lines of `max_width`
  characters; `ValueError` for a word longer than the width.
- `min_window(s, t)`: shortest substring of `s` holding every character of `t`.
- `find_and_replace_pattern(words, pattern)`: words matching a letter pattern.
- `num_decodings(s)`: ways to decode a digit string with `A=1 ... Z=26`.
- `reorder_log_files(logs)`: letter logs first, sorted by contents then
  identifier; digit logs keep their order.

### `algonotes.numeric`

- `coin_change(coins, amount)`: fewest coins for `amount`, or `-1`.
- `integer_break(n)`: largest product of at least two positive parts summing to `n`.
- `super_pow(a, b)`: `a` raised to the decimal digits `b`, modulo 1337.
- `last_remaining(n)`: survivor of the elimination game on `1..n`.
- `check_record(n)`: number of rewardable attendance records of length `n`,
  modulo `10**9 + 7`.
- `reordered_power_of_2(n)`: whether the digits of `n` rearrange into a power of two.
- `add(a, b)`: add unsigned 32-bit integers with bit operations, wrapping on overflow.
- `combine(n, k)`: all `k`-element choices from `1..n`.
- `subsets(nums)`: all subsets of `nums`.

### `algonotes.caches`

- `LRUCache(capacity)`: `get(key)` returns the value or `-1`; `put(key, value)`
  stores it, evicting the least recently used entry when full. Supports
  `len()` and `in`. A capacity below 1 raises `ValueError`.

### `algonotes.heap`

- `MaxHeap()`: `push(item)`, `top()`, `pop()` and `len()`; `top` and `pop`
  raise `IndexError` on an empty heap.

## Examples

```python
from algonotes.linked_lists import from_values, reverse_k_group, to_values
from algonotes.sequences import largest_number, longest_consecutive
from algonotes.strings import full_justify, is_match
from algonotes.caches import LRUCache
from algonotes.heap import MaxHeap

to_values(reverse_k_group(from_values([1, 2, 3, 4, 5]), 2))  # [2, 1, 4, 3, 5]
longest_consecutive([100, 4, 200, 1, 3, 2])                  # 4
largest_number([3, 30, 34, 5, 9])                            # "9534330"
is_match("abceb", "*a*b")                                    # True
full_justify(["Hello", "I", "am", "happy"], 5)               # ["Hello", "I  am", "happy"]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)   # 1
cache.put(3, 3)
cache.get(2)   # -1, evicted

heap = MaxHeap()
for n in (3, 9, 5):
    heap.push(n)
heap.top()     # 9
heap.pop()     # 9
len(heap)      # 2
```

## What it does not do

algonotes is a library only: it has no command-line program, and it does not
print, store or load anything. Use it by importing its functions and classes.

## Running the tests

```
pytest
```