from __future__ import annotations

from datetime import datetime, timezone

from frs.evaluation.metrics import EvalResult

STRATEGY_LABELS = {
    "common_friends": "Common friends",
    "network_distance": "Network distance",
    "advanced": "Advanced (weighted)",
}


def render_report(run_id: str, results: dict[str, EvalResult], k: int, max_distance: int) -> str:
    ts = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    rows = "\n".join(
        f"| {STRATEGY_LABELS.get(name, name)} | {res.precision_at_k:.4f} | {res.recall_at_k:.4f} | {res.coverage:.4f} |"
        for name, res in results.items()
    )
    return f"""# Offline Evaluation Report

Run ID: `{run_id}`
Generated: `{ts}`
Max distance: `{max_distance}`

## Results (k={k})

| Strategy | Precision@{k} | Recall@{k} | User coverage |
|---|---:|---:|---:|
{rows}

## Notes
- Edges are hidden at random; a recommendation is a hit when it restores a hidden edge.
- Ties are broken by ascending user id, so rankings are reproducible across runs.
"""
