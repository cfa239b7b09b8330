from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from frs.evaluation.metrics import EvalResult, precision_recall_at_k, user_coverage
from frs.models.base import Recommender


@dataclass(frozen=True)
class SplitEdges:
    train: pd.DataFrame
    test: pd.DataFrame


def holdout_split(edges: pd.DataFrame, test_ratio: float = 0.2, seed: int = 42) -> SplitEdges:
    # Random edge hold-out; edges whose removal would isolate a user go back to train
    if len(edges) < 2 or test_ratio <= 0:
        return SplitEdges(train=edges.reset_index(drop=True), test=edges.iloc[0:0].copy())

    train, test = train_test_split(edges, test_size=test_ratio, random_state=seed)

    degree = Counter(train["source"].tolist()) + Counter(train["target"].tolist())
    keep_out = []
    for row in test.itertuples(index=False):
        if degree[row.source] == 0 or degree[row.target] == 0:
            degree[row.source] += 1
            degree[row.target] += 1
            keep_out.append(False)
        else:
            keep_out.append(True)

    mask = np.array(keep_out, dtype=bool)
    train = pd.concat([train, test[~mask]], ignore_index=True)
    test = test[mask].reset_index(drop=True)
    return SplitEdges(train=train, test=test)


def truth_from_edges(test: pd.DataFrame) -> dict[int, set[int]]:
    truth: dict[int, set[int]] = defaultdict(set)
    for row in test.itertuples(index=False):
        truth[int(row.source)].add(int(row.target))
        truth[int(row.target)].add(int(row.source))
    return dict(truth)


def evaluate(
    model: Recommender,
    test: pd.DataFrame,
    k: int = 10,
    max_users: int | None = None,
    seed: int = 42,
) -> EvalResult:
    truth = truth_from_edges(test)

    users = sorted(truth)
    if max_users is not None and len(users) > max_users:
        rng = np.random.default_rng(seed)
        users = sorted(int(u) for u in rng.choice(users, size=max_users, replace=False))

    recs: dict[int, list[int]] = {}
    for uid in users:
        recs[uid] = [r.user_id for r in model.recommend(uid, k)]

    p, r = precision_recall_at_k(recs, {uid: truth[uid] for uid in users}, k)
    coverage = user_coverage(recs, set(users))
    return EvalResult(precision_at_k=p, recall_at_k=r, coverage=coverage)
