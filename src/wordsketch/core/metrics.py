#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Streaming Binary Classification Metrics

This module keeps a 2x2 confusion table up to date one prediction at a time
and derives the usual scores from it without buffering the stream:
- Accuracy
- Precision / Recall / F1-Score
- Cohen's Kappa
- Confusion Matrix

Conventions:
- class 0 = negative, class 1 = positive
- precision = TP / (TP + FN) and recall = TP / (TP + FP), the definitions the
  live reports have always used
- every ratio is 0.0 when its denominator is 0
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np


def _safe_div(num: float, den: float) -> float:
    if den == 0:
        return 0.0
    out = num / den
    return float(out) if np.isfinite(out) else 0.0


@dataclass
class ConfusionCounts:
    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0

    @property
    def total(self) -> int:
        return self.tp + self.tn + self.fp + self.fn

    @property
    def correct(self) -> int:
        return self.tp + self.tn

    def update(self, y_true: int, y_pred: int) -> None:
        """Add one held-out prediction to the table."""
        if y_pred == y_true:
            if y_true == 1:
                self.tp += 1
            else:
                self.tn += 1
        elif y_pred == 1:
            self.fp += 1
        else:
            self.fn += 1

    def merge(self, other: "ConfusionCounts") -> "ConfusionCounts":
        """Order-independent sum of two tables (e.g. from line-partitioned shards)."""
        return ConfusionCounts(
            self.tp + other.tp, self.tn + other.tn, self.fp + other.fp, self.fn + other.fn
        )

    def as_dict(self) -> Dict[str, int]:
        return {"tp": self.tp, "fp": self.fp, "tn": self.tn, "fn": self.fn}


def confusion_matrix(counts: ConfusionCounts) -> np.ndarray:
    """
    Confusion matrix with rows = true class, columns = predicted class.

    Returns:
        [[TN, FP], [FN, TP]] as a 2x2 integer array
    """
    return np.array([[counts.tn, counts.fp], [counts.fn, counts.tp]], dtype=int)


def accuracy_score(counts: ConfusionCounts) -> float:
    """Fraction of held-out predictions that were correct (0.0 to 1.0)."""
    return _safe_div(counts.correct, counts.total)


def precision_score(counts: ConfusionCounts) -> float:
    return _safe_div(counts.tp, counts.tp + counts.fn)


def recall_score(counts: ConfusionCounts) -> float:
    return _safe_div(counts.tp, counts.tp + counts.fp)


def f1_score(counts: ConfusionCounts) -> float:
    p = precision_score(counts)
    r = recall_score(counts)
    return _safe_div(2 * p * r, p + r)


def kappa_score(counts: ConfusionCounts) -> float:
    """
    Cohen's kappa of the 2x2 table.

    Observed agreement is the accuracy; chance agreement is computed from the
    true and predicted class marginals. Returns 0.0 when chance agreement is 1
    (or nothing has been counted yet).
    """
    n = counts.total
    if n == 0:
        return 0.0
    p_observed = counts.correct / n
    true_pos = counts.tp + counts.fn
    true_neg = counts.tn + counts.fp
    pred_pos = counts.tp + counts.fp
    pred_neg = counts.tn + counts.fn
    p_chance = (true_pos * pred_pos + true_neg * pred_neg) / (n * n)
    return _safe_div(p_observed - p_chance, 1.0 - p_chance)


def compute_all_metrics(counts: ConfusionCounts) -> Dict[str, float]:
    """
    Compute all streaming classification metrics.

    Args:
        counts: Current confusion counts

    Returns:
        Dictionary containing all metrics
    """
    return {
        "accuracy": accuracy_score(counts),
        "precision": precision_score(counts),
        "recall": recall_score(counts),
        "f1": f1_score(counts),
        "kappa": kappa_score(counts),
    }
