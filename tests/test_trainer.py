# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import threading

import pandas as pd
import pytest

from wikisentiment.errors import TrainingCancelled, TrainingError
from wikisentiment.evaluation.evaluate import evaluate
from wikisentiment.features import vocabulary_terms
from wikisentiment.pipeline import ClassifyStage, FeaturizeStage, PipelineRecipe, build_text_pipeline
from wikisentiment.training.dataset import load_dataset, partition
from wikisentiment.training.trainer import fit


def test_fit_returns_model_with_training_stats(polarized_frame):
    model = fit(build_text_pipeline(), polarized_frame, seed=99)
    assert model.train_rows == 9
    assert model.labels_positive == 5
    assert model.labels_negative == 4
    assert len(model.featurizers) == 1
    assert model.metadata()["pipeline"][1]["stage"] == "classify"


def test_transform_adds_score_columns(polarized_frame):
    model = fit(build_text_pipeline(), polarized_frame, seed=99)
    scored = model.transform(polarized_frame)
    assert {"score", "probability", "predicted_label"} <= set(scored.columns)
    assert scored["probability"].between(0.0, 1.0).all()
    assert scored["predicted_label"].tolist() == polarized_frame["label"].tolist()
    assert "score" not in polarized_frame.columns


def test_training_is_deterministic(toy_tsv):
    parts = partition(load_dataset(toy_tsv), 0.2, 99)
    first = evaluate(fit(build_text_pipeline(), parts.train, seed=99), parts.test)
    second = evaluate(fit(build_text_pipeline(), parts.train, seed=99), parts.test)
    assert first.metrics.as_dict() == pytest.approx(second.metrics.as_dict(), nan_ok=True)
    assert first.scored["score"].tolist() == second.scored["score"].tolist()


def test_featurizer_never_sees_evaluation_text(toy_tsv):
    frame = load_dataset(toy_tsv)
    parts = partition(frame, 0.2, 99)
    altered = frame.copy()
    altered.loc[parts.test.index, "text"] = altered.loc[parts.test.index, "text"] + " zqzq"
    altered_parts = partition(altered, 0.2, 99)

    model = fit(build_text_pipeline(), parts.train, seed=99)
    altered_model = fit(build_text_pipeline(), altered_parts.train, seed=99)

    terms = vocabulary_terms(altered_model.featurizers[0][1])
    assert terms == vocabulary_terms(model.featurizers[0][1])
    assert not any("zq" in term for term in terms)
    assert evaluate(model, parts.test).metrics.as_dict() == pytest.approx(
        evaluate(altered_model, altered_parts.test).metrics.as_dict(), nan_ok=True
    )


def test_single_class_training_data_is_rejected():
    frame = pd.DataFrame([{"label": True, "text": "good"}, {"label": True, "text": "great"}])
    with pytest.raises(TrainingError, match="single label class"):
        fit(build_text_pipeline(), frame)


def test_empty_training_data_is_rejected():
    frame = pd.DataFrame({"label": pd.Series(dtype=bool), "text": pd.Series(dtype=object)})
    with pytest.raises(TrainingError, match="empty"):
        fit(build_text_pipeline(), frame)


def test_empty_vocabulary_is_a_training_error():
    frame = pd.DataFrame([{"label": True, "text": ""}, {"label": False, "text": "  "}])
    with pytest.raises(TrainingError, match="featurizer"):
        fit(build_text_pipeline(), frame)


def test_recipe_without_classifier_is_rejected(polarized_frame):
    with pytest.raises(TrainingError, match="classify stage"):
        fit(PipelineRecipe().append(FeaturizeStage()), polarized_frame)


def test_stage_reading_unknown_column_is_rejected(polarized_frame):
    recipe = PipelineRecipe().append(FeaturizeStage(input_column="body")).append(ClassifyStage())
    with pytest.raises(TrainingError, match="body"):
        fit(recipe, polarized_frame)


def test_cancelled_training_stops_before_any_stage(polarized_frame):
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(TrainingCancelled):
        fit(build_text_pipeline(), polarized_frame, cancel=cancel)


def test_model_description_is_stable_across_runs(polarized_frame):
    first = fit(build_text_pipeline(), polarized_frame, seed=99)
    second = fit(build_text_pipeline(), polarized_frame, seed=99)
    assert str(first) == str(second)
    assert first.model_version == "seed99-rows9"
    assert first.metadata()["model_version"] == second.metadata()["model_version"]
