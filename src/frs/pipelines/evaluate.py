import argparse
import json
from pathlib import Path
from typing import Any

from loguru import logger

from frs.config.logging import configure_logging
from frs.config.settings import settings
from frs.data.download import download_snap_facebook
from frs.data.preprocess import load_edge_list, network_from_edges, preprocess_edges
from frs.errors import InputValidationError
from frs.evaluation.offline_eval import evaluate, holdout_split
from frs.evaluation.report import render_report
from frs.models.registry import build_recommenders


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def run_evaluation(
    run_id: str,
    edges_path: str | None = None,
    k: int = settings.top_k,
    max_distance: int = settings.max_distance,
    max_users: int | None = settings.max_users,
    test_ratio: float = 0.2,
    seed: int = 42,
) -> dict[str, Any]:
    logger.info("[evaluate] start")

    if edges_path is None:
        logger.info("[evaluate] downloading dataset...")
        edges_file = download_snap_facebook(settings.data_dir)
        dataset = "snap-ego-facebook"
    else:
        edges_file = Path(edges_path)
        dataset = edges_file.name
    logger.info("[evaluate] edge list ready at: {}", edges_file)

    edges = preprocess_edges(load_edge_list(edges_file))
    logger.info("[evaluate] preprocess done: edges={}", len(edges))

    split = holdout_split(edges, test_ratio=test_ratio, seed=seed)
    logger.info("[evaluate] split done: train={} test={}", len(split.train), len(split.test))

    network = network_from_edges(split.train)
    logger.info("[evaluate] network built: users={}", network.get_total_users())

    results = {}
    for name, model in build_recommenders(network, max_distance).items():
        results[name] = evaluate(model, split.test, k=k, max_users=max_users, seed=seed)
        logger.info("[evaluate] {} evaluation done", name)

    logger.info("[evaluate] exporting artifacts...")
    out_dir = Path(settings.artifacts_dir) / run_id
    _ensure_dir(out_dir)

    metrics = {
        "run_id": run_id,
        "k": k,
        "max_distance": max_distance,
        **{name: res.__dict__ for name, res in results.items()},
    }
    (out_dir / "metrics.json").write_text(json.dumps(metrics, indent=2))

    report = render_report(run_id, results, k=k, max_distance=max_distance)
    (out_dir / "report.md").write_text(report)

    manifest = {
        "run_id": run_id,
        "dataset": dataset,
        "rows": {
            "edges_train": int(len(split.train)),
            "edges_test": int(len(split.test)),
            "users": int(network.get_total_users()),
        },
        "strategies": list(results),
    }
    (out_dir / "manifest.json").write_text(json.dumps(manifest, indent=2))

    logger.info("[evaluate] done, artifacts written to {}", out_dir)
    return metrics


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--run-id", default=settings.run_id)
    parser.add_argument("--edges", default=None)
    parser.add_argument("--k", type=int, default=settings.top_k)
    parser.add_argument("--max-distance", type=int, default=settings.max_distance)
    parser.add_argument("--max-users", type=int, default=settings.max_users)
    parser.add_argument("--test-ratio", type=float, default=0.2)
    args = parser.parse_args(argv)

    configure_logging()
    try:
        run_evaluation(
            args.run_id,
            edges_path=args.edges,
            k=args.k,
            max_distance=args.max_distance,
            max_users=args.max_users,
            test_ratio=args.test_ratio,
        )
    except InputValidationError as e:
        logger.error("invalid edge list: {}", e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
