"""Shortest knight circuit through the four corners of a square board.

A knight starts in one corner and must visit the other three corners in
clockwise order before coming back. By symmetry the answer is four times
the distance from a corner to an adjacent corner.
"""

from __future__ import annotations

import argparse
import math
from collections import deque
from collections.abc import Iterator

_KNIGHT_STEPS = (
    (1, -2),
    (1, 2),
    (-1, -2),
    (-1, 2),
    (2, -1),
    (2, 1),
    (-2, -1),
    (-2, 1),
)

METHODS = ("bfs", "dfs")


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"board size must be at least 1, got {size}")


def _neighbours(x: int, y: int, size: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _KNIGHT_STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size:
            yield nx, ny


def bfs_corner_distance(size: int) -> int | None:
    """Fewest knight moves from (0, 0) to (size-1, 0), or None if unreachable."""
    _check_size(size)
    target = (size - 1, 0)
    visited = bytearray(size * size)
    visited[0] = 1
    queue = deque([(0, 0, 0)])
    while queue:
        x, y, moves = queue.popleft()
        if (x, y) == target:
            return moves
        for nx, ny in _neighbours(x, y, size):
            cell = nx * size + ny
            if not visited[cell]:
                visited[cell] = 1
                queue.append((nx, ny, moves + 1))
    return None


def dfs_corner_distance(size: int) -> int | None:
    """Same distance as the breadth-first search, found by pruned exhaustive paths.

    Paths stop at the target corner and whenever a cell is reached with no
    fewer moves than the best seen for it so far.
    """
    _check_size(size)
    target = (size - 1, 0)
    best = [[math.inf] * size for _ in range(size)]
    on_path: set[tuple[int, int]] = set()
    shortest: int | None = None

    def visit(x: int, y: int, moves: int) -> None:
        nonlocal shortest
        if (x, y) == target:
            if shortest is None or moves < shortest:
                shortest = moves
            return
        if (x, y) in on_path or moves >= best[x][y]:
            return
        best[x][y] = moves
        on_path.add((x, y))
        for nx, ny in _neighbours(x, y, size):
            visit(nx, ny, moves + 1)
        on_path.discard((x, y))

    visit(0, 0, 0)
    return shortest


def circuit_moves(size: int, method: str = "bfs") -> int:
    """Moves for the full clockwise corner circuit; 0 when no circuit exists."""
    if method == "bfs":
        distance = bfs_corner_distance(size)
    elif method == "dfs":
        distance = dfs_corner_distance(size)
    else:
        raise ValueError(f"unknown method {method!r}; expected one of {METHODS}")
    return 0 if distance is None else distance * 4


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fewest knight moves to tour the four corners of a board."
    )
    parser.add_argument("--size", type=int, default=8, help="board side length")
    parser.add_argument("--method", choices=METHODS, default="bfs")
    args = parser.parse_args(argv)
    try:
        result = circuit_moves(args.size, args.method)
    except ValueError as exc:
        parser.error(str(exc))
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())