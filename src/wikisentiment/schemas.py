# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class SentimentRecord:
    text: str | None
    label: bool | None = None


@dataclass(frozen=True, slots=True)
class SentimentPrediction:
    predicted_label: bool
    probability: float
    score: float


@dataclass(frozen=True, slots=True)
class ColumnSchema:
    """Positional layout of a delimited input file.

    Columns other than ``label_index`` and ``text_index`` are opaque and skipped.
    """

    label_index: int = 0
    text_index: int = 2
    has_header: bool = True
    separator: str = "\t"

    @property
    def min_width(self) -> int:
        return max(self.label_index, self.text_index) + 1


@dataclass(frozen=True, slots=True)
class MetricsSummary:
    accuracy: float
    auc: float
    auprc: float
    f1: float
    precision: float
    recall: float
    negative_precision: float
    negative_recall: float
    log_loss: float
    log_loss_reduction: float
    entropy: float
    tp: int
    fp: int
    tn: int
    fn: int

    def as_dict(self) -> dict[str, float]:
        return {key: float(value) for key, value in asdict(self).items()}
