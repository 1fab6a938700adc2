#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path

from wikisentiment.config import DEFAULT_INPUT_PATH, DEFAULT_SEED, DEFAULT_TEST_FRACTION
from wikisentiment.evaluation.evaluate import evaluate, select_threshold, threshold_report
from wikisentiment.pipeline import build_text_pipeline
from wikisentiment.training.dataset import load_dataset, partition
from wikisentiment.training.trainer import fit


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sweep decision thresholds and report precision/recall/F1.")
    parser.add_argument("--input", default=str(DEFAULT_INPUT_PATH), help="Labeled TSV file")
    parser.add_argument("--split", type=float, default=DEFAULT_TEST_FRACTION, help="Evaluation fraction")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Split and learner seed")
    parser.add_argument("--output", default=None, help="Optional JSON report path")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    data = load_dataset(Path(args.input))
    partitions = partition(data, args.split, args.seed)
    model = fit(build_text_pipeline(), partitions.train, seed=args.seed)
    result = evaluate(model, partitions.test)

    rows = threshold_report(result.scored)
    best = select_threshold(rows)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"best_threshold": best, "thresholds": rows}
        output_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        print(f"[OK] report: {output_path}")

    for row in rows:
        print(
            f"thr={row['threshold']:.2f} "
            f"prec={row['precision']:.3f} rec={row['recall']:.3f} f1={row['f1']:.3f}"
        )
    print(f"best F1 threshold: {best:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
