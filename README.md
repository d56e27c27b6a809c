# algokit

Classic competitive-programming algorithms as importable Python functions and
classes. Every function takes ordinary Python values (lists, tuples, strings,
integers) and returns its answer.

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

| Module | Contents |
| --- | --- |
| `algokit.geometry` | `Point` (with `dot`, `cross`, `norm`), `Location`, `cross`, `convex_hull`, `in_range`, `segments_intersect`, `point_in_polygon`, `triangle_doubled_area`, `doubled_polygon_area`, `squares_intersect`, `circle_line_intersection`, `circle_circle_intersection` |
| `algokit.lichao` | `Line`, `LiChaoTree` (minimum or maximum of lines over an integer domain), `ConvexHullTrick` (lines added by decreasing slope, queried at non-decreasing x) |
| `algokit.segment_tree` | `LazySumTree` (range add, range sum), `SparseTable` (range maximum) |
| `algokit.number_theory` | `chinese_remainder`, `discrete_log`, `linear_sieve`, `xor_pyramid_top` |
| `algokit.strings` | `prefix_function`, `kmp_search`, `z_function`, `polynomial_hash`, `same_string_hash` |
| `algokit.graphs` | `bfs`, `dfs`, `LowestCommonAncestor`, `topological_sort`, `dijkstra`, `floyd_warshall` |
| `algokit.trees` | `centroids`, `subordinates`, `tree_max_distances`, `tree_distance_sums` |
| `algokit.greedy` | `apartments`, `array_division`, `ferris_wheel`, `movie_festival`, `stick_lengths`, `towers`, `restaurant_customers`, `room_allocation`, `concert_tickets`, `distinct_numbers`, `maximum_subarray_sum` |
| `algokit.sequences` | `collecting_numbers`, `collecting_numbers_with_swaps`, `josephus`, `josephus_skip`, `nearest_smaller_values`, `nested_ranges`, `playlist`, `sliding_window_median`, `subarray_sums`, `sum_of_two_values`, `traffic_lights` |
| `algokit.text_problems` | `finding_borders`, `count_occurrences`, `word_combinations` |
| `algokit.dp` | `digit_sum_in_range`, `magic_numbers`, `edit_distance`, `max_digit_product`, `product_sum`, `yakiniku` |
| `algokit.contests` | `count_digit_products`, `slime_eating`, `slabstone_area`, `longest_weighted_path`, `random_test_arrays` |

## Conventions

- Graphs in `algokit.graphs` are sequences indexed by vertex `0..n-1`, holding
  neighbour lists, or `(neighbour, weight)` pairs for weighted graphs.
  `dijkstra` reports unreachable vertices as `math.inf`; `floyd_warshall`
  expects `math.inf` for missing edges and leaves its input unchanged.
- `tree_max_distances` and `tree_distance_sums` take 1-based edges; several
  functions in `algokit.sequences` and `algokit.greedy` return 1-based
  positions or room numbers, as their docstrings state.
- Range queries in `algokit.segment_tree` use 0-based inclusive bounds and
  raise `IndexError` for a bad range.
- Where there is no answer, functions return `None`: `discrete_log`,
  `sum_of_two_values`, and each unserved customer in `concert_tickets`.
- Invalid input, such as a polygon with fewer than three vertices, a cyclic
  graph passed to `topological_sort`, or an empty sequence where a value is
  required, raises `ValueError`.

## Examples

```python
from algokit.geometry import Point, convex_hull, point_in_polygon
from algokit.strings import kmp_search, z_function
from algokit.number_theory import chinese_remainder, linear_sieve
from algokit.graphs import dijkstra
from algokit.lichao import Line, LiChaoTree

square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
point_in_polygon(square, Point(1, 1))     # Location.INSIDE
convex_hull(square + [Point(1, 1)])       # the four corners

kmp_search("aba", "abababa")              # [0, 2, 4]
z_function("aabxaab")                     # [0, 1, 0, 0, 3, 1, 0]

chinese_remainder([2, 3, 2], [3, 5, 7])   # 23
spf, primes = linear_sieve(10)            # primes == [2, 3, 5, 7]

dijkstra([[(1, 4), (2, 1)], [], [(1, 2)]], 0)   # [0, 3, 1]

tree = LiChaoTree(-100, 100)
tree.add(Line(2, 3))
tree.add(Line(-1, 10))
tree.query(4)                             # 6
```

## What it does not do

algokit is a library only. It installs no command-line program and reads no
problem input from standard input; to solve a problem from a file or a
terminal, parse the input yourself and call the matching function.
`random_test_arrays` returns generated arrays rather than printing them.