# algodrills

A collection of classic algorithm exercises, each written as a small,
plain function that takes Python values and returns Python values, plus a
command that reads an exercise's input as text and prints its answer.

The drills are grouped by technique:

| Module | What it covers |
| --- | --- |
| `algodrills.prefix_sums` | digit sums, adjusted averages, 1-D and 2-D range sums, subarrays whose sum is divisible by a number |
| `algodrills.two_pointers` | consecutive sums, pairs with a given sum, "good" numbers, DNA password windows, sliding-window minimum |
| `algodrills.stacks_queues` | stack sequences, next greater element, the card game, an absolute-value heap |
| `algodrills.sorting` | merge, bubble and counting sort, quick-select, bubble-sort passes, inversion counting, digit sorting, total waiting time |
| `algodrills.graphs` | connected components, DFS/BFS orders, maze shortest path, tree diameter, friend chains, primes built digit by digit |
| `algodrills.searching` | binary-search membership, minimum Blu-ray size, k-th number in a multiplication table |
| `algodrills.greedy` | coin change, card merging cost, bundling numbers, meeting rooms, minimising an expression |
| `algodrills.number_theory` | primes in a range, counting prime powers ("almost primes") in a range |
| `algodrills.conversions` | a tour of string/number conversions |
| `algodrills.cli` | the `algodrills` command and `run(problem, text)` |

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algodrills.sorting import merge_sort, kth_smallest
from algodrills.stacks_queues import next_greater, last_card, AbsoluteHeap
from algodrills.two_pointers import count_consecutive_sums
from algodrills.greedy import min_expression_value
from algodrills.number_theory import primes_between
from algodrills.searching import kth_in_product_table

merge_sort([5, 3, 1])               # [1, 3, 5]
kth_smallest([4, 1, 2, 3, 5], 2)    # 2
next_greater([3, 5, 2, 7])          # [5, 7, 7, -1]
last_card(6)                        # 4
count_consecutive_sums(15)          # 4
min_expression_value("55-50+40")    # -35
primes_between(3, 16)               # [3, 5, 7, 11, 13]
kth_in_product_table(3, 7)          # 6

heap = AbsoluteHeap()
for value in (3, -1, 1, -3):
    heap.push(value)
heap.pop()                          # -1 (smallest absolute value, negatives first)
len(heap)                           # 3
```

Where an input cannot produce an answer the functions raise an exception
rather than returning a status code: most raise `ValueError`, and
`stack_sequence_ops` raises `StackSequenceError` (a `ValueError`) when the
sequence cannot be built with a stack. `AbsoluteHeap.pop` raises
`IndexError` on an empty heap.

## Command line

Installing the package provides the `algodrills` command. It takes the name
of a problem, reads that problem's whitespace-separated input from standard
input (or from a file given with `-i`/`--input`) and prints the answer:

```
algodrills PROBLEM < input.txt
algodrills PROBLEM --input input.txt
```

For example, two range-sum queries over the values `1 2 3 4`:

```
$ echo "4 2  1 2 3 4  1 2  3 4" | algodrills range-sum
3
7
```

The problems are:

`merge-demo`, `digit-sum`, `average`, `range-sum`, `grid-sum`,
`remainder-sum`, `consecutive-sum`, `armor`, `good-numbers`,
`dna-password`, `window-min`, `stack-sequence`, `next-greater`, `card`,
`abs-heap`, `bubble-sort`, `bubble-passes`, `sort-inside`, `atm`,
`kth-smallest`, `merge-sort`, `bubble-swaps`, `counting-sort`,
`components`, `amazing-primes`, `friend-chain`, `dfs-bfs`, `maze`,
`tree-diameter`, `find`, `bluray`, `kth-number`, `coins`, `card-merge`,
`bundle`, `meetings`, `brackets`, `primes`, `almost-primes`, `type-cast`.

`merge-demo` sorts the numbers it is given, or twenty random numbers from
1 to 1000 when the input is empty, and prints them before and after.
`stack-sequence` prints `NO` when the sequence cannot be built.

On bad input (a missing or malformed number, an unreadable file, a value
out of range) the command prints `algodrills: <reason>` to standard error
and exits with status 1.

The same work is available from Python through
`algodrills.cli.run(problem, text)`, which takes the input text and returns
the output text, each line ending in a newline.