from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Rec:
    user_id: int
    score: int


class Recommender(Protocol):
    def recommend(self, user_id: int, k: int) -> list[Rec]:
        ...


def rank(scores: Mapping[int, int], descending: bool = True) -> list[Rec]:
    # ties fall back to ascending user id so rankings are reproducible
    sign = -1 if descending else 1
    ordered = sorted(scores.items(), key=lambda item: (sign * item[1], item[0]))
    return [Rec(user_id, score) for user_id, score in ordered]
