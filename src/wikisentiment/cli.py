# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from rich.logging import RichHandler

from .config import DemoConfig
from .console import MLConsole
from .errors import InvalidInputError, SentimentError
from .evaluation.evaluate import evaluate
from .inference.predictor import PredictionEngine
from .pipeline import build_text_pipeline
from .schemas import SentimentRecord
from .training.dataset import load_dataset, partition
from .training.trainer import fit

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wikisentiment",
        description="Train and evaluate a boosted-tree sentiment classifier on a labeled TSV file.",
    )
    parser.add_argument("--input", dest="input_path", default=None, help="Delimited input file (label, id, text)")
    parser.add_argument("--split", dest="test_fraction", type=float, default=None, help="Fraction held out for evaluation")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the split and the learner")
    parser.add_argument(
        "--predict-text",
        dest="predict_texts",
        action="append",
        default=None,
        help="Sentence to score after training (repeatable)",
    )
    parser.add_argument("--train-preview", dest="train_preview_rows", type=int, default=None, help="Training rows to show")
    parser.add_argument("--test-preview", dest="test_preview_rows", type=int, default=None, help="Test rows to show")
    parser.add_argument("--stratify", action="store_true", default=None, help="Keep the label ratio in both partitions")
    parser.add_argument("--no-color", dest="color", action="store_false", default=None, help="Disable coloured output")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper)
    args = parser.parse_args(argv)
    if args.test_fraction is not None and not 0.0 < args.test_fraction < 1.0:
        parser.error("--split must lie strictly between 0 and 1")
    return args


def configure_logging(level: str, console: MLConsole) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=console.console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def run(config: DemoConfig, console: MLConsole) -> int:
    console.banner()
    console.header("Loading Data")
    data = load_dataset(config.input_path)
    console.info(f"Loaded {len(data)} rows from {config.input_path}")
    partitions = partition(data, config.test_fraction, config.seed, stratify=config.stratify)
    console.data_preview(partitions.train, title="Train set", rows=config.train_preview_rows)
    console.data_preview(partitions.test, title="Test set", rows=config.test_preview_rows)

    recipe = build_text_pipeline()

    console.header("Training model")
    model = fit(recipe, partitions.train, seed=config.seed)
    console.success(f"Trained {model} on {model.train_rows} rows")

    console.header("Evaluating model")
    result = evaluate(model, partitions.test)
    console.metrics_table(result.metrics.as_dict(), title=f"Metrics for binary classification model {model}")

    console.header("Making a prediction")
    engine = PredictionEngine(model)
    records = [SentimentRecord(text=text) for text in config.predict_texts]
    for record, outcome in zip(records, engine.predict_many(records)):
        if isinstance(outcome, InvalidInputError):
            console.warn(f"Skipped prediction: {outcome}")
            continue
        console.prediction_report(str(record.text), outcome)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = DemoConfig.from_env().with_overrides(**vars(args))
    console = MLConsole(enabled=config.color)
    configure_logging(config.log_level, console)
    try:
        return run(config, console)
    except (SentimentError, ValueError) as exc:
        logger.debug("Run aborted", exc_info=True)
        console.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
