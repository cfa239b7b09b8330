"""Breadth-first traversal primitives shared by the engine and the recommenders.

All helpers take the adjacency mapping directly (``user_id -> neighbour set``)
and never mutate it.
"""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Mapping, Set

# Returned by shortest_distance when no path exists.
UNREACHABLE = sys.maxsize

Adjacency = Mapping[int, Set[int]]


def neighbours(graph: Adjacency, user_id: int) -> Set[int]:
    return graph.get(user_id, frozenset())


def friends_of_friends(graph: Adjacency, user_id: int) -> Iterator[tuple[int, int]]:
    """Yield ``(friend, candidate)`` for every two-hop path ``user - friend - candidate``.

    Candidates equal to ``user_id`` or already direct friends are skipped. A
    candidate reachable through several friends is yielded once per friend.
    """
    friends = neighbours(graph, user_id)
    for friend in friends:
        for candidate in neighbours(graph, friend):
            if candidate == user_id or candidate in friends:
                continue
            yield friend, candidate


def bfs_levels(graph: Adjacency, source: int, max_depth: int | None = None) -> Iterator[tuple[int, int]]:
    """Yield ``(user_id, distance)`` in BFS order, starting with ``(source, 0)``.

    Each node is produced once, at its shortest distance. When ``max_depth`` is
    given, nodes further than ``max_depth`` hops away are neither produced nor
    expanded.
    """
    if source not in graph:
        return
    visited = {source}
    queue: deque[tuple[int, int]] = deque([(source, 0)])

    while queue:
        current, distance = queue.popleft()
        yield current, distance

        if max_depth is not None and distance >= max_depth:
            continue

        for neighbour in neighbours(graph, current):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append((neighbour, distance + 1))


def shortest_distance(graph: Adjacency, source: int, target: int) -> int:
    if target not in graph:
        return UNREACHABLE
    for user_id, distance in bfs_levels(graph, source):
        if user_id == target:
            return distance
    return UNREACHABLE
