from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class EvalResult:
    precision_at_k: float
    recall_at_k: float
    coverage: float


def precision_recall_at_k(recs: dict[int, list[int]], truth: dict[int, set[int]], k: int) -> tuple[float, float]:
    precisions = []
    recalls = []

    for user_id, rlist in recs.items():
        topk = rlist[:k]
        tset = truth.get(user_id, set())
        if not tset:
            continue
        hits = sum(1 for uid in topk if uid in tset)
        precisions.append(hits / max(k, 1))
        recalls.append(hits / len(tset))

    if not precisions:
        return 0.0, 0.0
    return float(np.mean(precisions)), float(np.mean(recalls))


def user_coverage(recs: dict[int, list[int]], users: set[int]) -> float:
    """Share of evaluated users that received at least one recommendation."""
    if not users:
        return 0.0
    served = sum(1 for uid in users if recs.get(uid))
    return served / len(users)
