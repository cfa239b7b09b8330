from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from frs.errors import InputValidationError


@dataclass(frozen=True)
class DriverInput:
    users: int
    max_distance: int
    connections: tuple[tuple[int, int], ...]


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    try:
        for line in lines:
            yield from line.split()
    except UnicodeDecodeError as e:
        raise InputValidationError(f"input is not valid text: {e}") from e


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        raw = next(tokens)
    except StopIteration:
        raise InputValidationError(f"unexpected end of input: expected {what}") from None
    try:
        return int(raw)
    except ValueError:
        raise InputValidationError(f"expected integer {what}, got {raw!r}") from None


def _next_count(tokens: Iterator[str], what: str) -> int:
    value = _next_int(tokens, what)
    if value < 0:
        raise InputValidationError(f"{what} must be non-negative, got {value}")
    return value


def parse_driver_input(source: str | TextIO) -> DriverInput:
    """
    Parse the whitespace-separated driver format:
      <users> <max_distance> <connections> then <connections> pairs of user ids.
    Line breaks are not significant.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    tokens = _tokens(lines)

    users = _next_count(tokens, "user count")
    max_distance = _next_count(tokens, "maximum distance")
    n_connections = _next_count(tokens, "connection count")

    connections = []
    for i in range(n_connections):
        a = _next_int(tokens, f"first user of connection {i + 1}")
        b = _next_int(tokens, f"second user of connection {i + 1}")
        connections.append((a, b))

    leftover = next(tokens, None)
    if leftover is not None:
        raise InputValidationError(f"unexpected trailing token {leftover!r}")

    return DriverInput(users=users, max_distance=max_distance, connections=tuple(connections))
