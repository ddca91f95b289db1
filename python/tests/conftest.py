"""Shared fixtures: exact distances from brute-force breadth-first search."""

from __future__ import annotations

from collections import deque

import pytest

from backend.models.board import Board


def bfs_distances(size: int) -> dict[Board, int]:
    """Map every board reachable from the goal to its shortest distance."""
    goal = Board.goal(size)
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        for nb in board.neighbors():
            if nb not in dist:
                dist[nb] = dist[board] + 1
                queue.append(nb)
    return dist


@pytest.fixture(scope="session")
def distances_2x2() -> dict[Board, int]:
    return bfs_distances(2)


@pytest.fixture(scope="session")
def distances_3x3() -> dict[Board, int]:
    return bfs_distances(3)
