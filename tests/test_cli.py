# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pytest

from conftest import write_tsv
from wikisentiment.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ML_INPUT_PATH", "ML_TEST_FRACTION", "ML_SEED", "ML_PREDICT_TEXT", "ML_STRATIFY", "ML_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_full_run_prints_three_sections(toy_tsv, capsys):
    code = main(["--input", str(toy_tsv), "--no-color", "--predict-text", "the cinema was good and great, i love it"])
    output = capsys.readouterr().out
    assert code == 0
    assert "Loading Data" in output
    assert "Evaluating model" in output
    assert "Making a prediction" in output
    assert "Accuracy" in output
    assert "Text:        the cinema was good and great, i love it" in output
    assert "Prediction:  True" in output


def test_input_path_from_environment(toy_tsv, capsys, monkeypatch):
    monkeypatch.setenv("ML_INPUT_PATH", str(toy_tsv))
    assert main(["--no-color"]) == 0
    assert "Text:        Not bad at all" in capsys.readouterr().out


def test_missing_input_exits_non_zero(tmp_path, capsys):
    code = main(["--input", str(tmp_path / "absent.tsv"), "--no-color"])
    assert code == 1
    assert "Input file not found" in capsys.readouterr().out


def test_malformed_input_exits_non_zero(tmp_path, capsys):
    path = write_tsv(tmp_path / "bad.tsv", [("True", "1", "good"), ("nope", "2", "bad")])
    assert main(["--input", str(path), "--no-color"]) == 1
    assert "line 3" in capsys.readouterr().out


def test_single_class_training_exits_non_zero(tmp_path, capsys):
    rows = [("True", str(index), f"row {index} is good") for index in range(6)]
    path = write_tsv(tmp_path / "one_class.tsv", rows)
    assert main(["--input", str(path), "--no-color"]) == 1
    assert "single label class" in capsys.readouterr().out


def test_split_outside_unit_interval_is_a_usage_error(toy_tsv):
    with pytest.raises(SystemExit) as info:
        main(["--input", str(toy_tsv), "--split", "1.5"])
    assert info.value.code == 2
