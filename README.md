# algopad

Classic algorithm and data-structure exercises, written as plain Python
functions. Each function takes ordinary Python values (lists, strings,
integers) and returns a result. The package has no dependencies beyond the
standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algopad.arrays` | h-index, two sum, summary ranges, plus one, product except self, interval insertion, pivot index, sliding windows, asteroid collision, two-pointer problems, in-place `merge` and `move_zeroes` |
| `algopad.greedy` | `can_place_flowers`, `can_complete_circuit`, `increasing_triplet`, `can_jump`, `jump` |
| `algopad.hashing` | duplicate detection, missing numbers, set differences and intersections, longest consecutive run, unique occurrences, `RandomizedSet` |
| `algopad.string_maps` | first unique character, anagram grouping and checks, Roman numerals, isomorphic strings, word patterns, ransom notes |
| `algopad.strings` | fizz buzz, string GCD, zigzag conversion, star removal, longest substring without repeats, vowel windows, subsequence check, word reversal, in-place `compress` |
| `algopad.bits` | counting bits, binary addition, Hamming weight, reversing 32-bit values, single number, found-difference character |
| `algopad.maths` | digital root, dividing digits, spreadsheet column titles, palindromic numbers, powers of two, 32-bit integer reversal, integer square root |
| `algopad.searching` | binary search, insert position, number guessing |
| `algopad.linked_list` | `ListNode`, `from_values` / `to_values`, and singly linked list exercises |
| `algopad.trees` | `TreeNode`, `build_tree`, traversals, search-tree insertion-free operations (search, delete, minimum difference), depth, balance, symmetry and path sums |
| `algopad.dp_sequences` | LCS, deletion distance, LIS and its count, arithmetic subsequences, palindromic subsequences, obstacle courses, pair chains, nested envelopes |
| `algopad.dp_classic` | stairs, Fibonacci and Tribonacci, coin change, house robber (row and circle), grid paths, falling and triangle paths, maximal square, Pascal's triangle, perfect squares, partitioning, question points |

## Examples

```python
from algopad.arrays import summary_ranges
from algopad.dp_classic import coin_change, generate_pascal
from algopad.linked_list import from_values, reverse_list, to_values
from algopad.trees import build_tree, inorder_traversal, max_depth

summary_ranges([0, 1, 2, 4, 5, 7])   # ['0->2', '4->5', '7']
coin_change([1, 2, 5], 11)           # 3
generate_pascal(3)                   # [[1], [1, 1], [1, 2, 1]]

head = from_values([1, 2, 3])
to_values(reverse_list(head))        # [3, 2, 1]

root = build_tree([3, 9, 20, None, None, 15, 7])
max_depth(root)                      # 3
inorder_traversal(root)              # [9, 3, 15, 20, 7]
```

Trees are built from level-order lists in which `None` marks a missing child.
Linked lists are built with `from_values` and read back with `to_values`;
a `ListNode` can also be iterated directly for its values.

`guess_number` takes the upper end of the range and a callable standing in
for the hidden-number oracle: it returns `-1` when the guess is too high, `1`
when it is too low and `0` when it is right.

```python
from algopad.searching import guess_number

guess_number(10, lambda g: (g < 6) - (g > 6))   # 6
```

`RandomizedSet` supports `insert`, `remove`, `get_random`, `len()` and `in`.
It accepts an optional `random.Random` instance for reproducible picks;
`get_random` on an empty set raises `IndexError`.

## Errors

Where an input has no sensible answer, functions raise instead of returning a
sentinel. For example, `jump` raises `ValueError` when the last index cannot
be reached, `remove_stars` when a star has nothing to delete,
`find_max_average` and `max_vowels` when the window length is out of range,
and `coin_change` / `change` for an empty coin list, non-positive coins or a
negative amount.

## What it does not do

This is a library of functions only. It has no command-line program, reads
no files and keeps no state beyond the objects you create.