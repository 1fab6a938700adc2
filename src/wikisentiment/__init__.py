# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Wiki sentiment demo package."""

from .errors import (
    DataFormatError,
    EvaluationError,
    InvalidInputError,
    ResourceNotFoundError,
    SentimentError,
    TrainingError,
)
from .evaluation.evaluate import evaluate
from .inference.predictor import PredictionEngine
from .pipeline import ClassifyStage, FeaturizeStage, PipelineRecipe, build_text_pipeline
from .schemas import ColumnSchema, MetricsSummary, SentimentPrediction, SentimentRecord
from .training.dataset import load_dataset, partition
from .training.trainer import FittedModel, fit

__all__ = [
    "ClassifyStage",
    "ColumnSchema",
    "DataFormatError",
    "EvaluationError",
    "FeaturizeStage",
    "FittedModel",
    "InvalidInputError",
    "MetricsSummary",
    "PipelineRecipe",
    "PredictionEngine",
    "ResourceNotFoundError",
    "SentimentError",
    "SentimentPrediction",
    "SentimentRecord",
    "TrainingError",
    "build_text_pipeline",
    "evaluate",
    "fit",
    "load_dataset",
    "partition",
]
