from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from frs.graph.traversal import Adjacency, bfs_levels, neighbours
from frs.models.base import Rec, rank

if TYPE_CHECKING:
    from frs.graph.social_network import SocialNetwork


def network_distances(graph: Adjacency, user_id: int, max_distance: int) -> list[Rec]:
    """Rank every user within ``max_distance`` hops that is not already a friend.

    The score is the hop count, so the list runs from nearest to farthest.
    Direct friends (distance 1) and the user itself are never included.
    """
    if max_distance < 1:
        return []

    friends = neighbours(graph, user_id)
    distances: dict[int, int] = {}
    for candidate, distance in bfs_levels(graph, user_id, max_depth=max_distance):
        if candidate == user_id or candidate in friends:
            continue
        distances[candidate] = distance
    return rank(distances, descending=False)


@dataclass
class NetworkDistanceRecommender:
    network: SocialNetwork
    max_distance: int

    def recommend(self, user_id: int, k: int) -> list[Rec]:
        if k <= 0:
            return []
        return self.network.recommend_by_network_distance(user_id, self.max_distance)[:k]
