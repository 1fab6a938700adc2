# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

import pandas as pd

from ..errors import InvalidInputError
from ..schemas import SentimentPrediction, SentimentRecord
from ..training.trainer import FittedModel


class PredictionEngine:
    """Scores one record at a time against a fitted model.

    The engine keeps no state besides the model reference, so it can be shared
    across threads.
    """

    def __init__(self, model: FittedModel) -> None:
        self.model = model

    def predict(self, record: SentimentRecord | None) -> SentimentPrediction:
        if record is None or record.text is None:
            raise InvalidInputError("record text is missing")
        frame = pd.DataFrame([{"text": str(record.text)}])
        scored = self.model.transform(frame)
        row = scored.iloc[0]
        return SentimentPrediction(
            predicted_label=bool(row["predicted_label"]),
            probability=float(row["probability"]),
            score=float(row["score"]),
        )

    def predict_text(self, text: str | None) -> SentimentPrediction:
        return self.predict(SentimentRecord(text=text))

    def predict_many(
        self,
        records: Iterable[SentimentRecord | None],
        *,
        max_workers: int | None = None,
    ) -> list[SentimentPrediction | InvalidInputError]:
        """Score independent records concurrently, keeping input order.

        Invalid records come back as their ``InvalidInputError`` instead of
        aborting the batch.
        """

        def _one(record: SentimentRecord | None) -> SentimentPrediction | InvalidInputError:
            try:
                return self.predict(record)
            except InvalidInputError as exc:
                return exc

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(_one, list(records)))
