from __future__ import annotations

from pathlib import Path

import pandas as pd

from frs.errors import InputValidationError
from frs.graph.social_network import SocialNetwork

EDGE_COLUMNS = ["source", "target"]


def load_edge_list(path: str | Path) -> pd.DataFrame:
    """
    Load an undirected edge list (one `a b` or `a,b` pair per line).
    Lines starting with `#` are comments; `.gz` files are decompressed.
    Extra fields after the pair (weights, timestamps) are ignored.
    """
    path = Path(path)
    if not path.exists():
        raise InputValidationError(f"edge list not found: {path}")
    try:
        raw = pd.read_csv(path, sep=r"[\s,]+", engine="python", comment="#", header=None)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise InputValidationError(f"could not parse edge list {path}: {e}") from e
    if raw.shape[1] < 2:
        raise InputValidationError(f"edge list {path} needs two user ids per line")

    edges = raw.iloc[:, :2].copy()
    edges.columns = EDGE_COLUMNS
    return edges


def preprocess_edges(edges: pd.DataFrame) -> pd.DataFrame:
    # Basic cleaning
    edges = edges.dropna(subset=EDGE_COLUMNS).copy()
    try:
        edges = edges.astype({"source": int, "target": int})
    except (TypeError, ValueError) as e:
        raise InputValidationError(f"edge list contains non-integer user ids: {e}") from e

    edges = edges[edges["source"] != edges["target"]]

    # Undirected: keep one row per unordered pair
    lo = edges[EDGE_COLUMNS].min(axis=1)
    hi = edges[EDGE_COLUMNS].max(axis=1)
    edges = pd.DataFrame({"source": lo, "target": hi}).drop_duplicates(ignore_index=True)
    return edges


def network_from_edges(edges: pd.DataFrame, users: int | None = None) -> SocialNetwork:
    network = SocialNetwork()
    if users is not None:
        for user_id in range(users):
            network.add_user(user_id)
    for row in edges.itertuples(index=False):
        network.add_connection(int(row.source), int(row.target))
    return network
