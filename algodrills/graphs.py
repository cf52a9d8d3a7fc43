"""Graph and grid exercises: shortest paths, islands and knight tours."""

from __future__ import annotations

import math
from collections.abc import Sequence

INF = 999
"""Distance that stands for "no edge" in :func:`floyd_warshall` matrices."""


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances of a square adjacency matrix.

    Missing edges are given as :data:`INF`, which is treated as an ordinary
    large distance.
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("the adjacency matrix must be square")
    dist = [list(row) for row in graph]
    for k in range(n):
        pivot = dist[k]
        for row in dist:
            for j in range(n):
                through = row[k] + pivot[j]
                if through < row[j]:
                    row[j] = through
    return dist


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """The matrix as right-aligned columns four wide, ``INF`` for :data:`INF`."""
    return "".join(
        "".join(f"{'INF':>4}" if value == INF else f"{value:4d}" for value in row) + "\n"
        for row in matrix
    )


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of islands of ``"1"`` cells joined horizontally or vertically.

    Any cell other than ``"0"`` joins an island, but only ``"1"`` starts one.
    """
    passable = {
        (r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell != "0"
    }
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != "1" or (r, c) not in passable:
                continue
            count += 1
            passable.remove((r, c))
            stack = [(r, c)]
            while stack:
                i, j = stack.pop()
                for neighbour in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
                    if neighbour in passable:
                        passable.remove(neighbour)
                        stack.append(neighbour)
    return count


def _is_knight_move(start: tuple[int, int], finish: tuple[int, int]) -> bool:
    dr = abs(start[0] - finish[0])
    dc = abs(start[1] - finish[1])
    return (dr, dc) in ((1, 2), (2, 1))


def check_valid_grid(grid: Sequence[Sequence[int]]) -> bool:
    """True if the grid numbers a knight's tour starting at the top-left corner."""
    if not grid or not grid[0]:
        raise ValueError("empty grid")
    if grid[0][0] != 0:
        return False
    n = len(grid)
    positions: dict[int, tuple[int, int]] = {}
    for r, row in enumerate(grid):
        for c, value in enumerate(row[:n]):
            positions.setdefault(value, (r, c))
    steps = [positions.get(step, (-1, -1)) for step in range(n * n)]
    return all(_is_knight_move(a, b) for a, b in zip(steps, steps[1:]))


def find_cheapest_price(
    n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Cheapest price from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    dist: list[float] = [math.inf] * n
    dist[src] = 0
    for _ in range(k + 1):
        updated = list(dist)
        for origin, target, price in flights:
            if dist[origin] != math.inf and dist[origin] + price < updated[target]:
                updated[target] = dist[origin] + price
        dist = updated
    return -1 if dist[dst] == math.inf else int(dist[dst])