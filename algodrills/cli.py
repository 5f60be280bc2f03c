"""Command-line front end: read a drill's input as text and print its answer."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence

from algodrills.conversions import type_cast_demo
from algodrills.graphs import (
    amazing_primes,
    bfs_order,
    count_components,
    dfs_order,
    has_friend_chain,
    shortest_maze_path,
    tree_diameter,
)
from algodrills.greedy import (
    max_bundled_sum,
    max_meetings,
    min_coins,
    min_expression_value,
    min_merge_cost,
)
from algodrills.number_theory import count_almost_primes, primes_between
from algodrills.prefix_sums import (
    adjusted_average,
    count_divisible_subarrays,
    digit_sum,
    grid_range_sums,
    range_sums,
)
from algodrills.searching import kth_in_product_table, membership, min_bluray_size
from algodrills.sorting import (
    bubble_sort,
    bubble_sort_passes,
    count_swaps,
    counting_sort,
    kth_smallest,
    merge_sort,
    min_total_wait,
    sort_digits_descending,
)
from algodrills.stacks_queues import (
    StackSequenceError,
    absolute_heap_results,
    last_card,
    next_greater,
    stack_sequence_ops,
)
from algodrills.two_pointers import (
    count_consecutive_sums,
    count_good_numbers,
    count_pairs_with_sum,
    count_valid_passwords,
    sliding_window_minimum,
)

DEMO_SIZE = 20
DEMO_MAX = 1000


class _Tokens:
    """Whitespace-separated tokens of an input text, read one at a time."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]

    def rest(self) -> list[int]:
        remaining = []
        for word in self._items:
            try:
                remaining.append(int(word))
            except ValueError:
                raise ValueError(f"expected an integer, got {word!r}") from None
        return remaining


_Handler = Callable[[_Tokens], list[str]]
_PROBLEMS: dict[str, _Handler] = {}


def _problem(name: str) -> Callable[[_Handler], _Handler]:
    def register(handler: _Handler) -> _Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


def _lines(values: Sequence[object]) -> list[str]:
    return [str(value) for value in values]


def _joined(values: Sequence[object]) -> list[str]:
    return [" ".join(str(value) for value in values)]


@_problem("merge-demo")
def _merge_demo(tokens: _Tokens) -> list[str]:
    values = tokens.rest() or [
        random.randint(1, DEMO_MAX) for _ in range(DEMO_SIZE)
    ]
    return [
        "[PREV]",
        *_joined(values),
        "",
        "[NEXT]",
        *_joined(merge_sort(values)),
    ]


@_problem("digit-sum")
def _digit_sum(tokens: _Tokens) -> list[str]:
    tokens.number()
    return [str(digit_sum(tokens.word()))]


@_problem("average")
def _average(tokens: _Tokens) -> list[str]:
    scores = tokens.numbers(tokens.number())
    return [f"{adjusted_average(scores):g}"]


@_problem("range-sum")
def _range_sum(tokens: _Tokens) -> list[str]:
    size, query_count = tokens.number(), tokens.number()
    values = tokens.numbers(size)
    return _lines(range_sums(values, tokens.pairs(query_count)))


@_problem("grid-sum")
def _grid_sum(tokens: _Tokens) -> list[str]:
    size, query_count = tokens.number(), tokens.number()
    grid = [tokens.numbers(size) for _ in range(size)]
    queries = [tuple(tokens.numbers(4)) for _ in range(query_count)]
    return _lines(grid_range_sums(grid, queries))


@_problem("remainder-sum")
def _remainder_sum(tokens: _Tokens) -> list[str]:
    size, divisor = tokens.number(), tokens.number()
    return [str(count_divisible_subarrays(tokens.numbers(size), divisor))]


@_problem("consecutive-sum")
def _consecutive_sum(tokens: _Tokens) -> list[str]:
    return [str(count_consecutive_sums(tokens.number()))]


@_problem("armor")
def _armor(tokens: _Tokens) -> list[str]:
    size, target = tokens.number(), tokens.number()
    return [str(count_pairs_with_sum(tokens.numbers(size), target))]


@_problem("good-numbers")
def _good_numbers(tokens: _Tokens) -> list[str]:
    return [str(count_good_numbers(tokens.numbers(tokens.number())))]


@_problem("dna-password")
def _dna_password(tokens: _Tokens) -> list[str]:
    tokens.number()
    window = tokens.number()
    dna = tokens.word()
    return [str(count_valid_passwords(dna, window, tokens.numbers(4)))]


@_problem("window-min")
def _window_min(tokens: _Tokens) -> list[str]:
    size, window = tokens.number(), tokens.number()
    return _joined(sliding_window_minimum(tokens.numbers(size), window))


@_problem("stack-sequence")
def _stack_sequence(tokens: _Tokens) -> list[str]:
    sequence = tokens.numbers(tokens.number())
    try:
        return stack_sequence_ops(sequence)
    except StackSequenceError:
        return ["NO"]


@_problem("next-greater")
def _next_greater(tokens: _Tokens) -> list[str]:
    return _joined(next_greater(tokens.numbers(tokens.number())))


@_problem("card")
def _card(tokens: _Tokens) -> list[str]:
    return [str(last_card(tokens.number()))]


@_problem("abs-heap")
def _abs_heap(tokens: _Tokens) -> list[str]:
    return _lines(absolute_heap_results(tokens.numbers(tokens.number())))


@_problem("bubble-sort")
def _bubble_sort(tokens: _Tokens) -> list[str]:
    return _lines(bubble_sort(tokens.numbers(tokens.number())))


@_problem("bubble-passes")
def _bubble_passes(tokens: _Tokens) -> list[str]:
    return [str(bubble_sort_passes(tokens.numbers(tokens.number())))]


@_problem("sort-inside")
def _sort_inside(tokens: _Tokens) -> list[str]:
    return [sort_digits_descending(tokens.word())]


@_problem("atm")
def _atm(tokens: _Tokens) -> list[str]:
    return [str(min_total_wait(tokens.numbers(tokens.number())))]


@_problem("kth-smallest")
def _kth_smallest(tokens: _Tokens) -> list[str]:
    size, k = tokens.number(), tokens.number()
    return [str(kth_smallest(tokens.numbers(size), k))]


@_problem("merge-sort")
def _merge_sort(tokens: _Tokens) -> list[str]:
    return _lines(merge_sort(tokens.numbers(tokens.number())))


@_problem("bubble-swaps")
def _bubble_swaps(tokens: _Tokens) -> list[str]:
    return [str(count_swaps(tokens.numbers(tokens.number())))]


@_problem("counting-sort")
def _counting_sort(tokens: _Tokens) -> list[str]:
    return _lines(counting_sort(tokens.numbers(tokens.number())))


@_problem("components")
def _components(tokens: _Tokens) -> list[str]:
    vertices, edge_count = tokens.number(), tokens.number()
    return [str(count_components(vertices, tokens.pairs(edge_count)))]


@_problem("amazing-primes")
def _amazing_primes(tokens: _Tokens) -> list[str]:
    return _lines(amazing_primes(tokens.number()))


@_problem("friend-chain")
def _friend_chain(tokens: _Tokens) -> list[str]:
    nodes, edge_count = tokens.number(), tokens.number()
    return [str(int(has_friend_chain(nodes, tokens.pairs(edge_count))))]


@_problem("dfs-bfs")
def _dfs_bfs(tokens: _Tokens) -> list[str]:
    nodes, edge_count, start = tokens.number(), tokens.number(), tokens.number()
    edges = tokens.pairs(edge_count)
    return [
        *_joined(dfs_order(nodes, edges, start)),
        *_joined(bfs_order(nodes, edges, start)),
    ]


@_problem("maze")
def _maze(tokens: _Tokens) -> list[str]:
    rows, cols = tokens.number(), tokens.number()
    maze = [tokens.word() for _ in range(rows)]
    if any(len(row) != cols for row in maze):
        raise ValueError(f"every maze row must have {cols} cells")
    return [str(shortest_maze_path(maze))]


@_problem("tree-diameter")
def _tree_diameter(tokens: _Tokens) -> list[str]:
    node_count = tokens.number()
    adjacency: dict[int, list[tuple[int, int]]] = {}
    for _ in range(node_count):
        node = tokens.number()
        neighbours = adjacency.setdefault(node, [])
        while (neighbour := tokens.number()) != -1:
            neighbours.append((neighbour, tokens.number()))
    return [str(tree_diameter(node_count, adjacency))]


@_problem("find")
def _find(tokens: _Tokens) -> list[str]:
    values = tokens.numbers(tokens.number())
    queries = tokens.numbers(tokens.number())
    return [str(int(found)) for found in membership(values, queries)]


@_problem("bluray")
def _bluray(tokens: _Tokens) -> list[str]:
    lessons, discs = tokens.number(), tokens.number()
    return [str(min_bluray_size(tokens.numbers(lessons), discs))]


@_problem("kth-number")
def _kth_number(tokens: _Tokens) -> list[str]:
    n, k = tokens.number(), tokens.number()
    return [str(kth_in_product_table(n, k))]


@_problem("coins")
def _coins(tokens: _Tokens) -> list[str]:
    count, amount = tokens.number(), tokens.number()
    return [str(min_coins(tokens.numbers(count), amount))]


@_problem("card-merge")
def _card_merge(tokens: _Tokens) -> list[str]:
    return [str(min_merge_cost(tokens.numbers(tokens.number())))]


@_problem("bundle")
def _bundle(tokens: _Tokens) -> list[str]:
    return [str(max_bundled_sum(tokens.numbers(tokens.number())))]


@_problem("meetings")
def _meetings(tokens: _Tokens) -> list[str]:
    return [str(max_meetings(tokens.pairs(tokens.number())))]


@_problem("brackets")
def _brackets(tokens: _Tokens) -> list[str]:
    return [str(min_expression_value(tokens.word()))]


@_problem("primes")
def _primes(tokens: _Tokens) -> list[str]:
    start, end = tokens.number(), tokens.number()
    return _lines(primes_between(start, end))


@_problem("almost-primes")
def _almost_primes(tokens: _Tokens) -> list[str]:
    low, high = tokens.number(), tokens.number()
    return [str(count_almost_primes(low, high))]


@_problem("type-cast")
def _type_cast(tokens: _Tokens) -> list[str]:
    return type_cast_demo()


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the whitespace-separated input ``text``.

    Returns the output lines, each ending in a newline.
    """
    handler = _PROBLEMS.get(problem)
    if handler is None:
        raise ValueError(f"unknown problem: {problem!r}")
    return "\n".join(handler(_Tokens(text))) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="algodrills", description="Solve an algorithm drill from its input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument(
        "-i", "--input", help="file to read the input from (default: stdin)"
    )
    args = parser.parse_args(argv)
    try:
        if args.input:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
        output = run(args.problem, text)
    except (OSError, ValueError) as error:
        print(f"algodrills: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0