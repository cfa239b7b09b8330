import sys

from frs.graph.social_network import SocialNetwork
from frs.graph.traversal import UNREACHABLE


def _snapshot(net: SocialNetwork) -> dict[int, set[int]]:
    return {uid: net.get_friends(uid) for uid in net.users()}


def test_empty_network(network):
    assert network.get_total_users() == 0
    assert len(network) == 0
    assert network.get_friends(1) == set()
    assert network.recommend_by_common_friends(1) == []
    assert network.recommend_by_network_distance(1, 3) == []
    assert network.advanced_recommendation(1, 3) == []


def test_add_user_is_idempotent(network):
    network.add_user(7)
    network.add_connection(7, 8)
    network.add_user(7)
    assert network.get_total_users() == 2
    assert network.get_friends(7) == {8}


def test_add_connection_creates_both_users(network):
    network.add_connection(10, 20)
    assert 10 in network and 20 in network
    assert network.get_friends(10) == {20}
    assert network.get_friends(20) == {10}


def test_add_connection_twice_is_same_as_once(network):
    network.add_connection(1, 2)
    once = _snapshot(network)
    network.add_connection(1, 2)
    network.add_connection(2, 1)
    assert _snapshot(network) == once


def test_connections_stay_mutual_after_mixed_mutations(network):
    ops = [("add", 1, 2), ("add", 2, 3), ("add", 3, 1), ("remove", 1, 2), ("add", 4, 1), ("remove", 3, 2), ("remove", 9, 1)]
    for op, a, b in ops:
        if op == "add":
            network.add_connection(a, b)
        else:
            network.remove_connection(a, b)

    for a in network.users():
        for b in network.users():
            assert (b in network.get_friends(a)) == (a in network.get_friends(b))
    assert network.get_friends(1) == {3, 4}
    assert network.get_friends(2) == set()


def test_remove_connection_with_unknown_user_is_noop(scenario):
    before = _snapshot(scenario)
    scenario.remove_connection(1, 99)
    scenario.remove_connection(99, 1)
    scenario.remove_connection(98, 99)
    scenario.remove_connection(1, 6)  # both known, not connected
    assert _snapshot(scenario) == before
    assert 99 not in scenario


def test_get_friends_returns_a_copy(scenario):
    friends = scenario.get_friends(1)
    friends.add(42)
    assert scenario.get_friends(1) == {2, 3}


def test_users_are_sorted(network):
    for uid in (5, 3, 9, 1):
        network.add_user(uid)
    assert list(network.users()) == [1, 3, 5, 9]


def test_network_distance(scenario):
    assert scenario.get_network_distance(1, 1) == 0
    assert scenario.get_network_distance(1, 4) == 2
    assert scenario.get_network_distance(1, 6) == 3
    assert scenario.get_network_distance(6, 1) == 3


def test_network_distance_unreachable(network):
    network.add_connection(1, 2)
    network.add_connection(3, 4)
    assert network.get_network_distance(1, 3) == UNREACHABLE == sys.maxsize
    assert network.get_network_distance(1, 99) == UNREACHABLE
    assert network.get_network_distance(99, 1) == UNREACHABLE
    assert network.get_network_distance(99, 99) == UNREACHABLE


def test_self_connection_is_never_recommended(network):
    network.add_connection(1, 1)
    network.add_connection(1, 2)
    network.add_connection(2, 3)
    assert network.get_friends(1) == {1, 2}
    assert [r.user_id for r in network.recommend_by_common_friends(1)] == [3]
    assert [r.user_id for r in network.recommend_by_network_distance(1, 2)] == [3]
    assert [r.user_id for r in network.advanced_recommendation(1, 2)] == [3]


def test_render_network(network):
    network.add_user(0)
    network.add_connection(2, 1)
    network.add_connection(1, 3)
    assert network.render_network() == (
        "User 0 is connected to:\n"
        "User 1 is connected to: 2 3\n"
        "User 2 is connected to: 1\n"
        "User 3 is connected to: 1"
    )
