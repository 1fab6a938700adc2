# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from sklearn.ensemble import GradientBoostingClassifier
from sklearn.pipeline import FeatureUnion

from ..errors import TrainingCancelled, TrainingError
from ..features import vocabulary_size
from ..pipeline import ClassifyStage, FeaturizeStage, PipelineRecipe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FittedModel:
    """Fitted stages of a recipe, in application order. Never refit."""

    recipe: PipelineRecipe
    featurizers: tuple[tuple[FeaturizeStage, FeatureUnion], ...]
    classifier_stage: ClassifyStage
    classifier: GradientBoostingClassifier
    seed: int
    train_rows: int
    labels_positive: int
    labels_negative: int

    def _features(self, frame: pd.DataFrame) -> Any:
        columns: dict[str, Any] = {name: frame[name] for name in frame.columns}
        for stage, featurizer in self.featurizers:
            if stage.input_column not in columns:
                raise KeyError(f"column {stage.input_column!r} missing for featurize stage")
            columns[stage.output_column] = featurizer.transform(columns[stage.input_column].fillna("").astype(str))
        return columns[self.classifier_stage.feature_column]

    def transform(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Score ``frame`` and return a copy with score/probability/predicted_label columns."""
        out = frame.copy()
        if out.empty:
            out["score"] = pd.Series(dtype=float)
            out["probability"] = pd.Series(dtype=float)
            out["predicted_label"] = pd.Series(dtype=bool)
            return out
        features = self._features(out)
        scores = np.asarray(self.classifier.decision_function(features), dtype=float).ravel()
        probs = np.asarray(self.classifier.predict_proba(features)[:, 1], dtype=float)
        out["score"] = scores
        out["probability"] = probs
        out["predicted_label"] = probs >= self.classifier_stage.threshold
        return out

    @property
    def model_version(self) -> str:
        return f"seed{self.seed}-rows{self.train_rows}"

    def metadata(self) -> dict[str, Any]:
        return {
            "model_version": self.model_version,
            "pipeline": self.recipe.describe(),
            "seed": self.seed,
            "train_rows": self.train_rows,
            "labels_positive": self.labels_positive,
            "labels_negative": self.labels_negative,
        }

    def __str__(self) -> str:
        return f"{self.recipe} [{self.model_version}]"


def _check_cancel(cancel: threading.Event | None) -> None:
    if cancel is not None and cancel.is_set():
        raise TrainingCancelled("training cancelled")


def _validate_training_frame(frame: pd.DataFrame, label_column: str) -> pd.Series:
    if frame.empty:
        raise TrainingError("training data is empty")
    if label_column not in frame.columns:
        raise TrainingError(f"label column {label_column!r} missing from training data")
    labels = frame[label_column].astype(bool)
    if labels.nunique() < 2:
        raise TrainingError(f"training data holds a single label class ({bool(labels.iloc[0])}); need both")
    return labels


def fit(
    recipe: PipelineRecipe,
    train_frame: pd.DataFrame,
    *,
    seed: int = 99,
    cancel: threading.Event | None = None,
) -> FittedModel:
    """Fit every stage of ``recipe`` in order against ``train_frame`` only."""
    classify = recipe.classifier
    if classify is None or not isinstance(recipe.stages[-1], ClassifyStage):
        raise TrainingError("pipeline must end with a classify stage")
    labels = _validate_training_frame(train_frame, classify.label_column)

    logger.info("Training %s on %d rows", recipe, len(train_frame))
    columns: dict[str, Any] = {name: train_frame[name] for name in train_frame.columns}
    fitted_featurizers: list[tuple[FeaturizeStage, FeatureUnion]] = []
    classifier: GradientBoostingClassifier | None = None
    for stage in recipe.stages:
        _check_cancel(cancel)
        missing = [name for name in stage.inputs if name not in columns]
        if missing:
            raise TrainingError(f"{stage.kind} stage reads missing column(s): {', '.join(missing)}")
        if isinstance(stage, FeaturizeStage):
            featurizer = stage.build()
            try:
                columns[stage.output_column] = featurizer.fit_transform(
                    columns[stage.input_column].fillna("").astype(str)
                )
            except ValueError as exc:
                raise TrainingError(f"featurizer could not be fit: {exc}") from exc
            logger.debug("Featurize stage %s -> %s: %d terms", stage.input_column, stage.output_column, vocabulary_size(featurizer))
            fitted_featurizers.append((stage, featurizer))
        elif isinstance(stage, ClassifyStage):
            if stage is not classify:
                raise TrainingError("pipeline must hold exactly one classify stage")
            classifier = stage.build(seed=seed)
            classifier.fit(columns[stage.feature_column], labels.astype(int).to_numpy())
            logger.debug("Classify stage fit %d estimators", classifier.n_estimators_)
        else:
            raise TrainingError(f"unsupported stage: {stage!r}")
    _check_cancel(cancel)
    if classifier is None:
        raise TrainingError("pipeline produced no classifier")

    positives = int(labels.sum())
    model = FittedModel(
        recipe=recipe,
        featurizers=tuple(fitted_featurizers),
        classifier_stage=classify,
        classifier=classifier,
        seed=seed,
        train_rows=int(len(train_frame)),
        labels_positive=positives,
        labels_negative=int(len(labels) - positives),
    )
    logger.info("Training finished: %s", model)
    return model
