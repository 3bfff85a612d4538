"""Graph traversals: BFS, connected components, route reordering,
division evaluation and grid searches."""

from __future__ import annotations

from collections import deque
from typing import Sequence

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Graph:
    """An undirected graph on vertices ``0 .. vertices - 1`` stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in self._adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    n = len(is_connected)
    visited = [False] * n
    provinces = 0
    for start in range(n):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbor, linked in enumerate(is_connected[node]):
                if linked == 1 and not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append(neighbor)
    return provinces


def min_reorder(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Fewest road reversals so that every city can reach city 0."""
    graph: list[list[tuple[int, bool]]] = [[] for _ in range(n)]
    for source, target in connections:
        graph[source].append((target, True))
        graph[target].append((source, False))

    visited = [False] * n
    visited[0] = True
    queue = deque([0])
    count = 0
    while queue:
        current = queue.popleft()
        for neighbor, away_from_zero in graph[current]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
                if away_from_zero:
                    count += 1
    return count


def calc_equation(
    equations: Sequence[Sequence[str]],
    values: Sequence[float],
    queries: Sequence[Sequence[str]],
) -> list[float]:
    """Answer each query ``C / D`` from the given ratios; -1.0 where it cannot be found."""
    graph: dict[str, dict[str, float]] = {}
    for (numerator, denominator), value in zip(equations, values):
        graph.setdefault(numerator, {})[denominator] = value
        graph.setdefault(denominator, {})[numerator] = 1.0 / value

    def evaluate(source: str, target: str) -> float:
        if source not in graph or target not in graph:
            return -1.0
        if source == target:
            return 1.0
        visited = {source}
        queue = deque([(source, 1.0)])
        while queue:
            node, product = queue.popleft()
            for neighbor, weight in graph[node].items():
                if neighbor in visited:
                    continue
                result = product * weight
                if neighbor == target:
                    return result
                visited.add(neighbor)
                queue.append((neighbor, result))
        return -1.0

    return [evaluate(source, target) for source, target in queries]


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Steps from ``entrance`` to the closest open border cell other than itself; -1 if none.

    Open cells are ``'.'``, walls ``'+'``. The maze is not modified.
    """
    grid = [list(row) for row in maze]
    rows, cols = len(grid), len(grid[0])
    start_row, start_col = entrance
    grid[start_row][start_col] = "+"
    queue = deque([(start_row, start_col)])
    steps = 0
    while queue:
        steps += 1
        for _ in range(len(queue)):
            row, col = queue.popleft()
            for dr, dc in _DIRECTIONS:
                r, c = row + dr, col + dc
                if 0 <= r < rows and 0 <= c < cols and grid[r][c] == ".":
                    if r in (0, rows - 1) or c in (0, cols - 1):
                        return steps
                    grid[r][c] = "+"
                    queue.append((r, c))
    return -1


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) remains next to rot (2); -1 if some never rot.

    The grid is not modified.
    """
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    queue: deque[tuple[int, int]] = deque()
    fresh = 0
    for r, row in enumerate(cells):
        for c, cell in enumerate(row):
            if cell == 2:
                queue.append((r, c))
            elif cell == 1:
                fresh += 1
    if fresh == 0:
        return 0

    minutes = 0
    while queue and fresh > 0:
        for _ in range(len(queue)):
            row, col = queue.popleft()
            for dr, dc in _DIRECTIONS:
                r, c = row + dr, col + dc
                if 0 <= r < rows and 0 <= c < cols and cells[r][c] == 1:
                    cells[r][c] = 2
                    queue.append((r, c))
                    fresh -= 1
        minutes += 1
    return -1 if fresh > 0 else minutes