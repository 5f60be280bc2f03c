"""Graph drills: components, DFS/BFS orders, maze paths and tree diameters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from math import isqrt

CHAIN_LENGTH = 5
_PRIME_DIGITS = (2, 3, 5, 7)
_ODD_DIGITS = (1, 3, 5, 7, 9)


def _adjacency(
    node_count: int, edges: Iterable[tuple[int, int]], first: int
) -> dict[int, list[int]]:
    if node_count < 0:
        raise ValueError("node count must not be negative")
    adjacency: dict[int, list[int]] = {
        node: [] for node in range(first, first + node_count)
    }
    for a, b in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) names an unknown node")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def count_components(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count connected components of an undirected graph on nodes 1..vertex_count."""
    adjacency = _adjacency(vertex_count, edges, 1)
    seen: set[int] = set()
    components = 0
    for root in adjacency:
        if root in seen:
            continue
        components += 1
        seen.add(root)
        stack = [root]
        while stack:
            for neighbour in adjacency[stack.pop()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    return components


def _is_prime(number: int) -> bool:
    return number >= 2 and all(number % d for d in range(2, isqrt(number) + 1))


def amazing_primes(length: int) -> list[int]:
    """Primes of ``length`` digits whose every leading prefix is also prime."""
    if length < 1:
        raise ValueError("length must be at least 1")
    found: list[int] = []

    def extend(number: int, size: int) -> None:
        if size == length:
            found.append(number)
            return
        for digit in _ODD_DIGITS:
            candidate = number * 10 + digit
            if _is_prime(candidate):
                extend(candidate, size + 1)

    for start in _PRIME_DIGITS:
        extend(start, 1)
    return found


def has_friend_chain(node_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether some simple path visits five distinct nodes (nodes 0..node_count-1)."""
    adjacency = _adjacency(node_count, edges, 0)
    on_path: set[int] = set()

    def reaches(node: int, depth: int) -> bool:
        if depth == CHAIN_LENGTH:
            return True
        on_path.add(node)
        found = any(
            neighbour not in on_path and reaches(neighbour, depth + 1)
            for neighbour in adjacency[node]
        )
        on_path.discard(node)
        return found

    return any(reaches(node, 1) for node in adjacency)


def _sorted_adjacency(
    node_count: int, edges: Iterable[tuple[int, int]], start: int
) -> dict[int, list[int]]:
    adjacency = _adjacency(node_count, edges, 1)
    if start not in adjacency:
        raise ValueError(f"start node {start} is outside 1..{node_count}")
    for neighbours in adjacency.values():
        neighbours.sort()
    return adjacency


def dfs_order(
    node_count: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Depth-first visiting order from ``start``, smaller neighbours first."""
    adjacency = _sorted_adjacency(node_count, edges, start)
    order: list[int] = []
    seen: set[int] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        order.append(node)
        stack.extend(reversed([n for n in adjacency[node] if n not in seen]))
    return order


def bfs_order(
    node_count: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Breadth-first visiting order from ``start``, smaller neighbours first."""
    adjacency = _sorted_adjacency(node_count, edges, start)
    order: list[int] = []
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return order


def shortest_maze_path(maze: Sequence[Sequence[int | str]]) -> int:
    """Cells on the shortest path from the top-left to the bottom-right cell.

    Each row is a string of ``0``/``1`` characters or a sequence of 0/1
    values; ``0`` is a wall. Both end cells are counted.
    """
    if not maze or not maze[0]:
        raise ValueError("the maze must not be empty")
    width = len(maze[0])
    if any(len(row) != width for row in maze):
        raise ValueError("all maze rows must have the same length")
    open_cells = {
        (r, c)
        for r, row in enumerate(maze)
        for c, cell in enumerate(row)
        if str(cell) != "0"
    }
    start, goal = (0, 0), (len(maze) - 1, width - 1)
    if start not in open_cells:
        raise ValueError("the starting cell is a wall")
    distance = {start: 1}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for step in ((r, c + 1), (r + 1, c), (r, c - 1), (r - 1, c)):
            if step in open_cells and step not in distance:
                distance[step] = distance[(r, c)] + 1
                queue.append(step)
    if goal not in distance:
        raise ValueError("the exit cannot be reached")
    return distance[goal]


def _distances(
    adjacency: Mapping[int, list[tuple[int, int]]], source: int
) -> dict[int, int]:
    distance = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour, weight in adjacency.get(node, ()):
            if neighbour not in distance:
                distance[neighbour] = distance[node] + weight
                queue.append(neighbour)
    return distance


def tree_diameter(
    node_count: int, adjacency: Mapping[int, Iterable[tuple[int, int]]]
) -> int:
    """Longest weighted path in a tree on nodes 1..node_count.

    ``adjacency`` maps a node to ``(neighbour, weight)`` pairs.
    """
    if node_count < 1:
        raise ValueError("the tree needs at least one node")
    edges = {node: list(pairs) for node, pairs in adjacency.items()}
    first = _distances(edges, 1)
    farthest = max(range(1, node_count + 1), key=lambda n: first.get(n, 0))
    return max(_distances(edges, farthest).values())