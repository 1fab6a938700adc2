# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Declarative description of the text classification pipeline.

A recipe is an ordered tuple of stage descriptors. Nothing is computed here:
:func:`wikisentiment.training.trainer.fit` walks the stages in order, fitting
each one against the column table produced by the stages before it.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Union

from sklearn.ensemble import GradientBoostingClassifier
from sklearn.pipeline import FeatureUnion

from .features import build_featurizer


@dataclass(frozen=True, slots=True)
class FeaturizeStage:
    kind: ClassVar[str] = "featurize"

    input_column: str = "text"
    output_column: str = "features"
    word_ngrams: tuple[int, int] = (1, 2)
    char_ngrams: tuple[int, int] = (3, 3)
    norm: str | None = None
    use_idf: bool = True
    min_df: int = 1
    max_features: int | None = None

    @property
    def inputs(self) -> tuple[str, ...]:
        return (self.input_column,)

    @property
    def outputs(self) -> tuple[str, ...]:
        return (self.output_column,)

    def params(self) -> dict[str, Any]:
        payload = asdict(self)
        payload.pop("input_column")
        payload.pop("output_column")
        return payload

    def build(self) -> FeatureUnion:
        return build_featurizer(**self.params())


@dataclass(frozen=True, slots=True)
class ClassifyStage:
    kind: ClassVar[str] = "classify"

    feature_column: str = "features"
    label_column: str = "label"
    n_estimators: int = 100
    learning_rate: float = 0.2
    max_leaf_nodes: int = 20
    min_samples_leaf: int = 1
    subsample: float = 1.0
    threshold: float = 0.5

    @property
    def inputs(self) -> tuple[str, ...]:
        return (self.feature_column, self.label_column)

    @property
    def outputs(self) -> tuple[str, ...]:
        return ("score", "probability", "predicted_label")

    def params(self) -> dict[str, Any]:
        payload = asdict(self)
        payload.pop("feature_column")
        payload.pop("label_column")
        return payload

    def build(self, *, seed: int) -> GradientBoostingClassifier:
        return GradientBoostingClassifier(
            n_estimators=self.n_estimators,
            learning_rate=self.learning_rate,
            max_leaf_nodes=self.max_leaf_nodes,
            min_samples_leaf=self.min_samples_leaf,
            subsample=self.subsample,
            random_state=seed,
        )


Stage = Union[FeaturizeStage, ClassifyStage]


@dataclass(frozen=True)
class PipelineRecipe:
    stages: tuple[Stage, ...] = field(default_factory=tuple)

    def append(self, stage: Stage) -> PipelineRecipe:
        return PipelineRecipe(stages=(*self.stages, stage))

    @property
    def classifier(self) -> ClassifyStage | None:
        for stage in self.stages:
            if isinstance(stage, ClassifyStage):
                return stage
        return None

    def describe(self) -> list[dict[str, Any]]:
        return [
            {
                "stage": stage.kind,
                "inputs": list(stage.inputs),
                "outputs": list(stage.outputs),
                "params": stage.params(),
            }
            for stage in self.stages
        ]

    def __str__(self) -> str:
        return " -> ".join(f"{stage.kind}({', '.join(stage.inputs)})" for stage in self.stages)


def build_text_pipeline(*, text_column: str = "text", label_column: str = "label") -> PipelineRecipe:
    return (
        PipelineRecipe()
        .append(FeaturizeStage(input_column=text_column, output_column="features"))
        .append(ClassifyStage(feature_column="features", label_column=label_column))
    )
