# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.metrics import (
    accuracy_score,
    average_precision_score,
    confusion_matrix,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)

from ..errors import EvaluationError
from ..schemas import MetricsSummary
from ..training.trainer import FittedModel

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS = tuple(raw / 100.0 for raw in range(5, 96, 5))


@dataclass(frozen=True)
class Evaluation:
    metrics: MetricsSummary
    scored: pd.DataFrame


def _safe_ranking_metric(metric, y_true: np.ndarray, y_prob: np.ndarray, name: str) -> float:
    if len(np.unique(y_true)) < 2:
        logger.warning("%s is undefined on a single-class evaluation set", name)
        return float("nan")
    return float(metric(y_true, y_prob))


def _prior_entropy(y_true: np.ndarray) -> float:
    positive_rate = float(np.mean(y_true))
    if positive_rate in (0.0, 1.0):
        return 0.0
    return -(positive_rate * math.log2(positive_rate) + (1.0 - positive_rate) * math.log2(1.0 - positive_rate))


def compute_metrics(y_true: np.ndarray, y_prob: np.ndarray, threshold: float = 0.5) -> MetricsSummary:
    y_true = np.asarray(y_true, dtype=int)
    y_prob = np.asarray(y_prob, dtype=float)
    y_pred = (y_prob >= threshold).astype(int)
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    # Reported in bits, like the entropy.
    loss = float(log_loss(y_true, y_prob, labels=[0, 1])) / math.log(2)
    entropy = _prior_entropy(y_true)
    if entropy > 0.0:
        loss_reduction = (entropy - loss) / entropy
    else:
        logger.warning("log-loss reduction is undefined when the prior entropy is zero")
        loss_reduction = float("nan")
    return MetricsSummary(
        accuracy=float(accuracy_score(y_true, y_pred)),
        auc=_safe_ranking_metric(roc_auc_score, y_true, y_prob, "AUC"),
        auprc=_safe_ranking_metric(average_precision_score, y_true, y_prob, "AUPRC"),
        f1=float(f1_score(y_true, y_pred, zero_division=0)),
        precision=float(precision_score(y_true, y_pred, zero_division=0)),
        recall=float(recall_score(y_true, y_pred, zero_division=0)),
        negative_precision=float(precision_score(y_true, y_pred, pos_label=0, zero_division=0)),
        negative_recall=float(recall_score(y_true, y_pred, pos_label=0, zero_division=0)),
        log_loss=loss,
        log_loss_reduction=float(loss_reduction),
        entropy=float(entropy),
        tp=int(tp),
        fp=int(fp),
        tn=int(tn),
        fn=int(fn),
    )


def evaluate(model: FittedModel, test_frame: pd.DataFrame) -> Evaluation:
    """Score the held-out subset and aggregate binary classification metrics."""
    if test_frame.empty:
        raise EvaluationError("evaluation data is empty")
    label_column = model.classifier_stage.label_column
    if label_column not in test_frame.columns:
        raise EvaluationError(f"label column {label_column!r} missing from evaluation data")
    for stage, _featurizer in model.featurizers:
        if stage.input_column not in test_frame.columns:
            raise EvaluationError(f"input column {stage.input_column!r} missing from evaluation data")
    scored = model.transform(test_frame)
    y_true = scored[label_column].astype(bool).astype(int).to_numpy()
    metrics = compute_metrics(y_true, scored["probability"].to_numpy(), threshold=model.classifier_stage.threshold)
    logger.info(
        "Evaluated %d rows: accuracy=%.4f auc=%.4f f1=%.4f",
        len(scored),
        metrics.accuracy,
        metrics.auc,
        metrics.f1,
    )
    return Evaluation(metrics=metrics, scored=scored)


def threshold_report(
    scored: pd.DataFrame,
    thresholds: tuple[float, ...] = DEFAULT_THRESHOLDS,
    *,
    label_column: str = "label",
) -> list[dict[str, float]]:
    y_true = scored[label_column].astype(bool).astype(int).to_numpy()
    probs = scored["probability"].to_numpy(dtype=float)
    report: list[dict[str, float]] = []
    for thr in thresholds:
        y_pred = (probs >= thr).astype(int)
        report.append(
            {
                "threshold": float(thr),
                "precision": float(precision_score(y_true, y_pred, zero_division=0)),
                "recall": float(recall_score(y_true, y_pred, zero_division=0)),
                "f1": float(f1_score(y_true, y_pred, zero_division=0)),
            }
        )
    return report


def select_threshold(report: list[dict[str, float]], *, default: float = 0.5) -> float:
    best_thr = default
    best_f1 = -1.0
    for row in report:
        if row["f1"] > best_f1:
            best_f1 = row["f1"]
            best_thr = row["threshold"]
    return float(best_thr)
