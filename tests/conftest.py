# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

TOY_ROWS = [
    ("True", "101", "the movie was good and great, i love it"),
    ("True", "102", "the hotel was good and great, i love it"),
    ("False", "103", "the soup was bad and awful, i hate it"),
    ("True", "104", "the concert was good and great, i love it"),
    ("False", "105", "the train was bad and awful, i hate it"),
    ("True", "106", "the museum was good and great, i love it"),
    ("True", "107", "the garden was good and great, i love it"),
    ("False", "108", "the laptop was bad and awful, i hate it"),
    ("True", "109", "the beach was good and great, i love it"),
    ("False", "110", "the dentist was bad and awful, i hate it"),
]

POLARIZED_TEXTS = [
    (True, "Not bad at all"),
    (True, "not bad, i enjoyed it"),
    (True, "honestly not bad"),
    (True, "not bad for the price"),
    (True, "really not bad at all"),
    (False, "awful and boring"),
    (False, "terrible waste of time"),
    (False, "this was dreadful"),
    (False, "horrible experience, never again"),
]


def write_tsv(path: Path, rows: list[tuple[str, ...]], header: str = "Label\trev_id\tText") -> Path:
    lines = [header] + ["\t".join(row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def toy_rows() -> list[tuple[str, str, str]]:
    return list(TOY_ROWS)


@pytest.fixture
def toy_tsv(tmp_path: Path) -> Path:
    return write_tsv(tmp_path / "toy.tsv", TOY_ROWS)


@pytest.fixture
def polarized_frame() -> pd.DataFrame:
    return pd.DataFrame([{"label": label, "text": text} for label, text in POLARIZED_TEXTS])
