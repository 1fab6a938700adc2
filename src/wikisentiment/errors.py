# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations


class SentimentError(Exception):
    """Base class for every failure raised by the sentiment pipeline."""


class ResourceNotFoundError(SentimentError, FileNotFoundError):
    def __init__(self, path: object) -> None:
        super().__init__(f"Input file not found: {path}")
        self.path = path


class DataFormatError(SentimentError, ValueError):
    def __init__(self, message: str, *, line_number: int, raw: str) -> None:
        super().__init__(f"line {line_number}: {message} (raw: {raw!r})")
        self.line_number = line_number
        self.raw = raw


class TrainingError(SentimentError):
    pass


class TrainingCancelled(TrainingError):
    pass


class EvaluationError(SentimentError):
    pass


class InvalidInputError(SentimentError, ValueError):
    pass
