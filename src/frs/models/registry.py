from __future__ import annotations

from typing import TYPE_CHECKING

from frs.models.advanced import AdvancedRecommender
from frs.models.base import Recommender
from frs.models.common_friends import CommonFriendsRecommender
from frs.models.network_distance import NetworkDistanceRecommender

if TYPE_CHECKING:
    from frs.graph.social_network import SocialNetwork

STRATEGIES = ("common_friends", "network_distance", "advanced")


def build_recommenders(network: SocialNetwork, max_distance: int) -> dict[str, Recommender]:
    return {
        "common_friends": CommonFriendsRecommender(network),
        "network_distance": NetworkDistanceRecommender(network, max_distance),
        "advanced": AdvancedRecommender(network, max_distance),
    }
