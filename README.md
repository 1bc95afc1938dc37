# algokit

A collection of classic algorithms written as plain Python functions. Every
function takes ordinary Python values (lists, strings, tuples) and returns a
new result. Nothing is printed, and the inputs you pass in are left unchanged.

The package has no third-party dependencies.

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
| `algokit.sorting_basic` | `bubble_sort`, `cocktail_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `wave_sort`. `bubble_sort_with_stats`, `insertion_sort_with_stats` and `selection_sort_with_stats` return the sorted list together with a `SortStats` holding `passes`, `comparisons`, `swaps` and a `snapshots` list of the data after each pass. |
| `algokit.sorting_advanced` | `counting_sort` and `radix_sort` (non-negative integers), `heap_sort`, `merge_sort`, `quick_sort`, `tim_sort` (with an optional `run` length, 32 by default), `bucket_sort` (numbers in `[0, 1)`) |
| `algokit.searching` | `binary_search`, `lower_bound_search`, `interpolation_search`, `linear_search`, `square_root` (truncated to a number of decimal places), `rabin_karp` (every index where a pattern occurs) |
| `algokit.number_theory` | `sieve_of_eratosthenes`, `gcd`, `extended_gcd`, `lcm`, `to_binary`, `from_binary`, `is_prime`, `is_perfect_square`, `is_power_of_two`, `power` |
| `algokit.dp_sequences` | `lcs_length`, `longest_common_subsequence`, `longest_common_substring`, `longest_palindromic_subsequence`, `longest_repeating_subsequence`, `min_insertions_deletions`, `min_palindrome_partitions`, `shortest_common_supersequence_length`, `shortest_common_supersequence` |
| `algokit.dp_counting` | `knapsack_01`, `unbounded_knapsack`, `count_subsets_with_sum`, `has_subset_with_sum`, `fibonacci`, `ladder_ways`, `coin_change_ways`, `min_coins`, `matrix_chain_cost`, `min_steps_to_one`, `rod_cutting`, `unique_paths`, `wine_profit` |
| `algokit.arrays` | `count_frequencies`, `max_subarray_sum`, `max_subarray` |
| `algokit.trees` | `TreeNode`, `height`, `spiral_order` |
| `algokit.geometry` | `distance`, `closest_pair` |
| `algokit.greedy` | `largest_undefended_area`, `max_activities`, `load_balance`, `max_meetings`, `min_badness`, `count_chopstick_pairs`, `job_sequencing` with `Job`, `min_platforms` |
| `algokit.graphs` | `dijkstra` on an adjacency matrix (zero means no edge, unreachable vertices get `math.inf`), `Graph` with `add_edge` and `topological_sort` |
| `algokit.backtracking` | `solve_n_queens`, `rat_in_maze` |

## Examples

```python
from algokit.sorting_basic import bubble_sort_with_stats
from algokit.searching import binary_search, rabin_karp, square_root
from algokit.number_theory import extended_gcd
from algokit.graphs import Graph
from algokit.backtracking import solve_n_queens, rat_in_maze

ordered, stats = bubble_sort_with_stats([5, 1, 4, 2, 8])
print(ordered, stats.passes, stats.comparisons, stats.swaps)

binary_search([2, 3, 4, 10, 40], 10)    # 3
rabin_karp("AA", "ABCCDEEABCCAA")        # [11]
square_root(50, 3)                       # 7.071
extended_gcd(30, 20)                     # (1, -1, 10): 30*1 + 20*(-1) == 10

g = Graph(6)
for u, v in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(u, v)
g.topological_sort()                     # [5, 4, 2, 3, 1, 0]

len(solve_n_queens(4))                   # 2
rat_in_maze([[1, 0, 0, 0],
             [1, 1, 0, 1],
             [1, 1, 0, 0],
             [0, 1, 1, 1]])              # ['DDRDRR', 'DRDDRR']
```

## Results and errors

Search functions that find nothing return `-1`, as does `min_coins` when an
amount cannot be paid and `load_balance` when the loads cannot be shared out
equally. Input that an algorithm cannot handle, such as an empty list where an
element is required, a negative value where only non-negative ones make sense,
or sequences of mismatched lengths, raises `ValueError`.

## What it does not do

algokit is a library only. It installs no command-line program and reads
nothing from standard input; to run an algorithm on your own data, import the
function and call it.