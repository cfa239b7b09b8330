"""Weighted friend-of-friend scoring.

Each time a candidate is reached through one of the user's friends it earns
``2 * common_friends + 1 / (distance + 1)``. The common-friends factor is
recomputed and re-added on every such encounter, so a candidate reached
through three friends collects it three times. The accumulated float is
truncated toward zero before ranking.

The distance term comes from a single unbounded BFS from the user.
``max_distance`` is accepted to keep the signature in line with the distance
strategy but does not bound that search.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from frs.graph.traversal import UNREACHABLE, Adjacency, bfs_levels, friends_of_friends, neighbours
from frs.models.base import Rec, rank

if TYPE_CHECKING:
    from frs.graph.social_network import SocialNetwork

COMMON_FRIENDS_WEIGHT = 2


def weighted_scores(graph: Adjacency, user_id: int, max_distance: int | None = None) -> list[Rec]:
    friends = neighbours(graph, user_id)
    totals: defaultdict[int, float] = defaultdict(float)
    # hop count from the user to every reachable node
    distances = dict(bfs_levels(graph, user_id))

    for _, candidate in friends_of_friends(graph, user_id):
        common = len(friends & neighbours(graph, candidate))
        distance = distances.get(candidate, UNREACHABLE)
        totals[candidate] += common * COMMON_FRIENDS_WEIGHT + 1.0 / (distance + 1)

    return rank({candidate: int(score) for candidate, score in totals.items()}, descending=True)


@dataclass
class AdvancedRecommender:
    network: SocialNetwork
    max_distance: int

    def recommend(self, user_id: int, k: int) -> list[Rec]:
        if k <= 0:
            return []
        return self.network.advanced_recommendation(user_id, self.max_distance)[:k]
