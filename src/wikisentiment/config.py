# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .env import get_bool_env, get_env, get_float_env, get_int_env

DEFAULT_INPUT_PATH = Path("data") / "simpleTest.tsv"
DEFAULT_TEST_FRACTION = 0.2
DEFAULT_SEED = 99
DEFAULT_PREDICT_TEXT = "Not bad at all"


@dataclass(frozen=True)
class DemoConfig:
    input_path: Path = DEFAULT_INPUT_PATH
    test_fraction: float = DEFAULT_TEST_FRACTION
    seed: int = DEFAULT_SEED
    predict_texts: tuple[str, ...] = (DEFAULT_PREDICT_TEXT,)
    train_preview_rows: int = 8
    test_preview_rows: int = 2
    stratify: bool = False
    color: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> DemoConfig:
        predict_text = get_env("ML_PREDICT_TEXT")
        return cls(
            input_path=Path(get_env("ML_INPUT_PATH", str(DEFAULT_INPUT_PATH)) or DEFAULT_INPUT_PATH),
            test_fraction=get_float_env("ML_TEST_FRACTION", DEFAULT_TEST_FRACTION),
            seed=get_int_env("ML_SEED", DEFAULT_SEED),
            predict_texts=(predict_text,) if predict_text else (DEFAULT_PREDICT_TEXT,),
            stratify=get_bool_env("ML_STRATIFY", False),
            log_level=(get_env("ML_LOG_LEVEL", "WARNING") or "WARNING").upper(),
        )

    def with_overrides(self, **overrides: Any) -> DemoConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "input_path" in changes:
            changes["input_path"] = Path(changes["input_path"])
        if "predict_texts" in changes:
            changes["predict_texts"] = tuple(changes["predict_texts"])
        if "log_level" in changes:
            changes["log_level"] = str(changes["log_level"]).upper()
        return replace(self, **changes)
