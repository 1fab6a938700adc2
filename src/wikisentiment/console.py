# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import IO, Mapping

import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import SentimentPrediction

ASCII_BANNER = r"""
__        ___ _    _   ____             _   _                      _
\ \      / (_) | _(_) / ___|  ___ _ __ | |_(_)_ __ ___   ___ _ __ | |_
 \ \ /\ / /| | |/ / | \___ \ / _ \ '_ \| __| | '_ ` _ \ / _ \ '_ \| __|
  \ V  V / | |   <| |  ___) |  __/ | | | |_| | | | | | |  __/ | | | |_
   \_/\_/  |_|_|\_\_| |____/ \___|_| |_|\__|_|_| |_| |_|\___|_| |_|\__|
"""

METRIC_LABELS = {
    "accuracy": "Accuracy",
    "auc": "Area Under Roc Curve",
    "auprc": "Area Under PR Curve",
    "f1": "F1 Score",
    "log_loss": "LogLoss",
    "log_loss_reduction": "LogLossReduction",
    "precision": "PositivePrecision",
    "recall": "PositiveRecall",
    "negative_precision": "NegativePrecision",
    "negative_recall": "NegativeRecall",
    "tp": "TruePositives",
    "fp": "FalsePositives",
    "tn": "TrueNegatives",
    "fn": "FalseNegatives",
}


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{value:.4f}"


@dataclass
class MLConsole:
    enabled: bool = True
    file: IO[str] | None = None

    def __post_init__(self) -> None:
        self._console = Console(
            file=self.file,
            color_system="auto" if self.enabled else None,
            soft_wrap=True,
            highlight=self.enabled,
        )

    @property
    def console(self) -> Console:
        return self._console

    def banner(self) -> None:
        self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Wiki Sentiment", border_style="cyan"))

    def header(self, text: str) -> None:
        self._console.rule(f"[bold yellow]{escape(text)}[/bold yellow]")

    def info(self, text: str) -> None:
        self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")

    def warn(self, text: str) -> None:
        self._console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")

    def success(self, text: str) -> None:
        self._console.print(f"[bold green]OK[/bold green] {escape(text)}")

    def error(self, text: str) -> None:
        self._console.print(f"[bold red]ERROR[/bold red] {escape(text)}")

    def data_preview(self, frame: pd.DataFrame, *, title: str, rows: int) -> None:
        table = Table(title=f"{title} ({len(frame)} rows, showing {min(rows, len(frame))})", show_lines=True)
        table.add_column("#", justify="right", style="dim")
        for column in frame.columns:
            table.add_column(str(column), overflow="fold")
        for index, row in frame.head(max(rows, 0)).iterrows():
            table.add_row(str(index), *(escape(str(row[column])) for column in frame.columns))
        self._console.print(table)

    def metrics_table(self, metrics: Mapping[str, float], *, title: str) -> None:
        table = Table(title=title, show_lines=True)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        for key, label in METRIC_LABELS.items():
            if key in metrics:
                table.add_row(label, _format_value(float(metrics[key])))
        self._console.print(table)

    def prediction_report(self, text: str, prediction: SentimentPrediction) -> None:
        self._console.print(f"  Text:        {text}", markup=False, highlight=False)
        self._console.print(f"  Prediction:  {prediction.predicted_label}", markup=False)
        self._console.print(f"  Probability: {prediction.probability:.2%}", markup=False)
        self._console.print(f"  Score:       {prediction.score}", markup=False)
