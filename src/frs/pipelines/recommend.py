from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from loguru import logger

from frs.config.logging import configure_logging
from frs.data.driver_input import DriverInput, parse_driver_input
from frs.errors import InputValidationError
from frs.graph.social_network import SocialNetwork

EXIT_INPUT_ERROR = 2


def build_network(data: DriverInput) -> SocialNetwork:
    network = SocialNetwork()
    for user_id in range(data.users):
        network.add_user(user_id)
    for a, b in data.connections:
        network.add_connection(a, b)
    return network


def render_recommendations(network: SocialNetwork, user_id: int, max_distance: int) -> str:
    lines = [f"Friend Recommendations for {user_id}", "By Common Friends:"]
    for rec in network.recommend_by_common_friends(user_id):
        lines.append(f"User {rec.user_id} (Common Friends: {rec.score})")

    lines += ["", "By Network Distance:"]
    for rec in network.recommend_by_network_distance(user_id, max_distance):
        lines.append(f"User {rec.user_id} (Distance: {rec.score})")

    lines += ["", "Advanced Recommendation:"]
    for rec in network.advanced_recommendation(user_id, max_distance):
        lines.append(f"User {rec.user_id} (Score: {rec.score})")
    return "\n".join(lines)


def run(
    source: str | TextIO,
    max_distance: int | None = None,
    user_ids: Iterable[int] | None = None,
) -> str:
    data = parse_driver_input(source)
    network = build_network(data)
    bound = data.max_distance if max_distance is None else max_distance
    logger.info(
        "network built: users={} connections={} max_distance={}",
        network.get_total_users(),
        len(data.connections),
        bound,
    )

    # Reports cover ids 1..users, as the input format has always been read
    targets = list(user_ids) if user_ids is not None else range(1, data.users + 1)

    blocks = ["Social Network Structure:\n" + network.render_network()]
    blocks += [render_recommendations(network, uid, bound) for uid in targets]
    return "\n\n".join(blocks) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print friend recommendations for a social network.")
    parser.add_argument("--input", default=None, help="input file (default: stdin)")
    parser.add_argument("--max-distance", type=int, default=None)
    parser.add_argument("--user", type=int, action="append", dest="users")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    try:
        if args.input is None:
            output = run(sys.stdin, max_distance=args.max_distance, user_ids=args.users)
        else:
            with open(args.input, encoding="utf-8") as f:
                output = run(f, max_distance=args.max_distance, user_ids=args.users)
    except OSError as e:
        logger.error("cannot read input: {}", e)
        return EXIT_INPUT_ERROR
    except InputValidationError as e:
        logger.error("invalid input: {}", e)
        return EXIT_INPUT_ERROR

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
