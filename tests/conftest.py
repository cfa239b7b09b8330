import pytest

from frs.graph.social_network import SocialNetwork

SCENARIO_EDGES = [(1, 2), (1, 3), (2, 4), (3, 4), (3, 5), (4, 5), (4, 6)]


@pytest.fixture
def network() -> SocialNetwork:
    return SocialNetwork()


@pytest.fixture
def scenario() -> SocialNetwork:
    """Users 1-6: 1-2, 1-3, 2-4, 3-4, 3-5, 4-5, 4-6."""
    net = SocialNetwork()
    for a, b in SCENARIO_EDGES:
        net.add_connection(a, b)
    return net


@pytest.fixture
def chain() -> SocialNetwork:
    """1 - 2 - 3 - 4"""
    net = SocialNetwork()
    for a, b in [(1, 2), (2, 3), (3, 4)]:
        net.add_connection(a, b)
    return net
