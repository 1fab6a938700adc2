# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pytest

from wikisentiment.errors import InvalidInputError
from wikisentiment.evaluation.evaluate import evaluate
from wikisentiment.inference.predictor import PredictionEngine
from wikisentiment.pipeline import build_text_pipeline
from wikisentiment.schemas import SentimentPrediction, SentimentRecord
from wikisentiment.training.dataset import load_dataset, partition
from wikisentiment.training.trainer import fit


@pytest.fixture
def engine(polarized_frame) -> PredictionEngine:
    return PredictionEngine(fit(build_text_pipeline(), polarized_frame, seed=99))


def test_not_bad_at_all_is_positive(engine):
    prediction = engine.predict(SentimentRecord(text="Not bad at all"))
    assert prediction.predicted_label is True
    assert prediction.probability > 0.5
    assert prediction.score > 0.0


def test_missing_text_is_invalid_input(engine):
    with pytest.raises(InvalidInputError):
        engine.predict(SentimentRecord(text=None))
    with pytest.raises(InvalidInputError):
        engine.predict(None)


def test_predict_reproduces_evaluation_scores(toy_tsv):
    parts = partition(load_dataset(toy_tsv), 0.2, 99)
    model = fit(build_text_pipeline(), parts.train, seed=99)
    scored = evaluate(model, parts.test).scored
    engine = PredictionEngine(model)
    for _index, row in scored.iterrows():
        prediction = engine.predict(SentimentRecord(text=row["text"], label=bool(row["label"])))
        assert prediction.predicted_label == bool(row["predicted_label"])
        assert prediction.score == pytest.approx(float(row["score"]))
        assert prediction.probability == pytest.approx(float(row["probability"]))


def test_predict_many_keeps_order_and_returns_errors(engine):
    records = [
        SentimentRecord(text="honestly not bad"),
        SentimentRecord(text=None),
        SentimentRecord(text="terrible waste of time"),
    ]
    outcomes = engine.predict_many(records, max_workers=3)
    assert isinstance(outcomes[0], SentimentPrediction)
    assert isinstance(outcomes[1], InvalidInputError)
    assert isinstance(outcomes[2], SentimentPrediction)
    assert outcomes[0].predicted_label is True
    assert outcomes[2].predicted_label is False


def test_concurrent_predictions_match_sequential(engine):
    texts = ["not bad for the price", "awful and boring"] * 4
    sequential = [engine.predict_text(text) for text in texts]
    concurrent = engine.predict_many([SentimentRecord(text=text) for text in texts], max_workers=4)
    assert concurrent == sequential
