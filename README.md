# puzzlekit

A small collection of algorithmic puzzle solutions, written as plain Python
functions with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlekit.disjoint_set`

`DisjointSet(n)` is a union-find structure over the nodes `0 .. n-1`.
`find(node)` returns the representative of a node's set and compresses the path.
`union(u, v)` merges two sets. The smaller root always becomes the root of the
merged set, so `find` returns the smallest member of a set. `len()` gives the
number of nodes.

### `puzzlekit.candy`

- `candy(ratings)` returns the fewest candies needed for children in a row.
  Every child gets at least one, and a child rated higher than a neighbour gets
  more than that neighbour. It visits the children from the lowest rating to the
  highest.
- `candy_two_pass(ratings)` gives the same answer with one left-to-right sweep
  and one right-to-left sweep. It returns 0 for an empty list.

### `puzzlekit.digits`

- `max_diff(num)` remaps one digit to make the largest value and one digit to
  make the smallest value with no leading zero and no zero result. It returns the
  difference between the two.
- `min_max_difference(num)` returns the difference between the largest and the
  smallest values reachable by remapping one digit. The smallest value may have
  leading zeros.
- `find_kth_number(n, k)` returns the k-th number (counting from 1) of `1 .. n`
  in lexicographic order.
- `lexical_order(n)` returns `1 .. n` in lexicographic order.

### `puzzlekit.textops`

- `smallest_equivalent_string(s1, s2, base_str)`: `s1[i]` and `s2[i]` are
  equivalent letters. The function replaces every letter of `base_str` with the
  smallest letter equivalent to it. It raises `ValueError` when `s1` and `s2`
  differ in length.
- `robot_with_string(s)` returns the lexicographically smallest string that can
  be written by pushing the characters of `s` onto a stack and writing from the
  top of that stack.
- `clear_stars(s)` removes each `*` together with the rightmost occurrence of
  the smallest letter left of it. A star with no letter left to remove stays in
  the result.
- `answer_string(word, num_friends)` returns the lexicographically largest
  piece over every split of `word` into `num_friends` non-empty pieces.
- `minimum_deletions(word, k)` returns the fewest characters to delete so that
  any two remaining letter frequencies differ by at most `k`.
- `max_distance(s, k)` returns the largest Manhattan distance from the origin
  reached along a path of `N`/`S`/`E`/`W` moves when at most `k` moves may be
  changed.

### `puzzlekit.arrays`

- `max_candies(status, candies, keys, contained_boxes, initial_boxes)` returns
  the total candies collected from every box that can be opened, starting from
  `initial_boxes`. Opening a box gives its candies, its keys and the boxes inside
  it. The input lists are not modified.
- `maximum_difference(nums)` returns the largest `nums[j] - nums[i]` with
  `i < j` and `nums[i] < nums[j]`. It returns `-1` when no such pair exists.
- `minimize_max(nums, p)` returns the smallest possible maximum difference over
  `p` disjoint pairs of elements.
- `divide_array(nums, k)` sorts `nums` and splits it into triples whose largest
  and smallest members differ by at most `k`. It returns `[]` when that cannot be
  done and raises `ValueError` when the length is not a multiple of 3.

## Example

```python
from puzzlekit.candy import candy
from puzzlekit.digits import lexical_order
from puzzlekit.textops import smallest_equivalent_string

candy([1, 0, 2])                                          # 5
lexical_order(13)                                         # [1, 10, 11, 12, 13, 2, 3, ..., 9]
smallest_equivalent_string("parker", "morris", "parser")  # "makkek"
```

## What it does not do

puzzlekit is a library only. It has no command-line program, and it does not read
puzzles from files or input streams. Call the functions from Python.