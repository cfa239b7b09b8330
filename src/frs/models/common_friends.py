from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from frs.graph.traversal import Adjacency, friends_of_friends
from frs.models.base import Rec, rank

if TYPE_CHECKING:
    from frs.graph.social_network import SocialNetwork


def common_friend_counts(graph: Adjacency, user_id: int) -> list[Rec]:
    # one point per path user -> friend -> candidate
    counts = Counter(candidate for _, candidate in friends_of_friends(graph, user_id))
    return rank(counts, descending=True)


@dataclass
class CommonFriendsRecommender:
    network: SocialNetwork

    def recommend(self, user_id: int, k: int) -> list[Rec]:
        if k <= 0:
            return []
        return self.network.recommend_by_common_friends(user_id)[:k]
