# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd
from sklearn.model_selection import train_test_split

from ..errors import DataFormatError, ResourceNotFoundError
from ..schemas import ColumnSchema, SentimentRecord

logger = logging.getLogger(__name__)

TRUE_LABELS = {"true", "1"}
FALSE_LABELS = {"false", "0"}


@dataclass(frozen=True)
class Partitions:
    train: pd.DataFrame
    test: pd.DataFrame


def parse_label(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in TRUE_LABELS:
        return True
    if lowered in FALSE_LABELS:
        return False
    raise ValueError(f"not a boolean label: {raw!r}")


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line_start = data.rfind(b"\n", 0, exc.start) + 1
        line_end = data.find(b"\n", exc.start)
        if line_end < 0:
            line_end = len(data)
        raise DataFormatError(
            f"invalid utf-8 byte at offset {exc.start}",
            line_number=data.count(b"\n", 0, exc.start) + 1,
            raw=data[line_start:line_end].decode("utf-8", errors="replace").rstrip("\r"),
        ) from exc


def _locate(lines: list[str], raw: str) -> int:
    for number, line in enumerate(lines, start=1):
        if line == raw:
            return number
    return 0


def _read_frame(text: str, schema: ColumnSchema) -> pd.DataFrame:
    lines = [line.rstrip("\r") for line in text.split("\n")]

    def _reject_wide_row(fields: list[str]) -> None:
        raw = schema.separator.join(fields)
        raise DataFormatError(
            f"found {len(fields)} columns, more than the first row declares",
            line_number=_locate(lines, raw),
            raw=raw,
        )

    # Blank lines are kept so that frame positions map straight back to file lines.
    return pd.read_csv(
        io.StringIO(text, newline=None),
        sep=schema.separator,
        header=0 if schema.has_header else None,
        index_col=False,
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
        skip_blank_lines=False,
        engine="python",
        on_bad_lines=_reject_wide_row,
    )


def _parse_rows(raw_frame: pd.DataFrame, schema: ColumnSchema) -> list[SentimentRecord]:
    rows: list[SentimentRecord] = []
    width = len(raw_frame.columns)
    first_line = 2 if schema.has_header else 1
    for position, values in enumerate(raw_frame.itertuples(index=False, name=None)):
        present = [value for value in values if isinstance(value, str)]
        if not any(value.strip() for value in present):
            continue
        line_number = position + first_line
        raw = schema.separator.join(present)
        if len(present) != width:
            raise DataFormatError(f"expected {width} columns, found {len(present)}", line_number=line_number, raw=raw)
        if width < schema.min_width:
            raise DataFormatError(
                f"schema needs {schema.min_width} columns, row has {width}",
                line_number=line_number,
                raw=raw,
            )
        try:
            label = parse_label(values[schema.label_index])
        except ValueError as exc:
            raise DataFormatError(str(exc), line_number=line_number, raw=raw) from exc
        rows.append(SentimentRecord(text=values[schema.text_index], label=label))
    return rows


def to_dataframe(rows: list[SentimentRecord]) -> pd.DataFrame:
    data = [{"label": bool(row.label), "text": str(row.text or "")} for row in rows]
    return pd.DataFrame(data, columns=["label", "text"]).astype({"label": bool, "text": object})


def load_dataset(path: Path | str, schema: ColumnSchema = ColumnSchema()) -> pd.DataFrame:
    """Read a delimited file into a frame with ``label`` and ``text`` columns.

    The frame index is the zero-based ordinal of each data row.
    """
    path = Path(path)
    if not path.is_file():
        raise ResourceNotFoundError(path)
    text = _decode(path.read_bytes())
    if not text.strip():
        frame = to_dataframe([])
    else:
        frame = to_dataframe(_parse_rows(_read_frame(text, schema), schema))
    logger.info("Loaded %d rows from %s", len(frame), path)
    return frame


def partition(
    frame: pd.DataFrame,
    test_fraction: float = 0.2,
    seed: int = 99,
    *,
    stratify: bool = False,
) -> Partitions:
    """Split ``frame`` into disjoint train/test subsets with a seeded shuffle.

    Fewer than two rows cannot be split and raise ``ValueError``.
    """
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f"test_fraction must lie in (0, 1), got {test_fraction}")
    if len(frame) < 2:
        raise ValueError(f"cannot partition a dataset of {len(frame)} row(s)")
    train, test = train_test_split(
        frame,
        test_size=test_fraction,
        random_state=seed,
        shuffle=True,
        stratify=frame["label"] if stratify else None,
    )
    train = train.sort_index()
    test = test.sort_index()
    logger.info("Partitioned %d rows into %d train / %d test (seed=%d)", len(frame), len(train), len(test), seed)
    return Partitions(train=train, test=test)
