"""Social network graph engine.

Holds the undirected friendship graph as ``user_id -> set of friend ids`` and
exposes the mutation, lookup and recommendation operations on top of it.
Connections are always mutual: every mutation updates both endpoints.
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from frs.graph.traversal import shortest_distance
from frs.models.advanced import weighted_scores
from frs.models.base import Rec
from frs.models.common_friends import common_friend_counts
from frs.models.network_distance import network_distances


class SocialNetwork:
    """Undirected friendship graph with friend recommendations.

    Unknown users are never an error: lookups return empty results and
    distances return ``UNREACHABLE``.
    """

    def __init__(self) -> None:
        self._graph: dict[int, set[int]] = {}

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._graph

    def users(self) -> Iterator[int]:
        """Known user ids in ascending order."""
        return iter(sorted(self._graph))

    # ── Mutations ─────────────────────────────────────────

    def add_user(self, user_id: int) -> None:
        self._graph.setdefault(user_id, set())

    def add_connection(self, user_a: int, user_b: int) -> None:
        """Connect two users, creating either of them if needed.

        Self-connections are accepted as-is; the recommenders never suggest a
        user to itself, so they have no effect on rankings.
        """
        self.add_user(user_a)
        self.add_user(user_b)
        self._graph[user_a].add(user_b)
        self._graph[user_b].add(user_a)

    def remove_connection(self, user_a: int, user_b: int) -> None:
        if user_a not in self._graph or user_b not in self._graph:
            logger.debug("remove_connection({}, {}): unknown user, ignored", user_a, user_b)
            return
        self._graph[user_a].discard(user_b)
        self._graph[user_b].discard(user_a)

    # ── Queries ───────────────────────────────────────────

    def get_friends(self, user_id: int) -> set[int]:
        """Direct friends of ``user_id`` (a copy), or an empty set."""
        return set(self._graph.get(user_id, ()))

    def get_total_users(self) -> int:
        return len(self._graph)

    def get_network_distance(self, user_a: int, user_b: int) -> int:
        """Shortest hop count between two users, or ``UNREACHABLE``."""
        return shortest_distance(self._graph, user_a, user_b)

    # ── Recommendations ───────────────────────────────────

    def recommend_by_common_friends(self, user_id: int) -> list[Rec]:
        """Friends of friends ranked by how many of the user's friends lead to them."""
        return common_friend_counts(self._graph, user_id)

    def recommend_by_network_distance(self, user_id: int, max_distance: int) -> list[Rec]:
        """Non-friends within ``max_distance`` hops, nearest first."""
        return network_distances(self._graph, user_id, max_distance)

    def advanced_recommendation(self, user_id: int, max_distance: int) -> list[Rec]:
        """Friends of friends ranked by the weighted common-friends/proximity score."""
        return weighted_scores(self._graph, user_id, max_distance)

    def render_network(self) -> str:
        lines = []
        for user_id in self.users():
            friends = " ".join(str(f) for f in sorted(self._graph[user_id]))
            lines.append(f"User {user_id} is connected to: {friends}".rstrip())
        return "\n".join(lines)
