#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Online (prequential) evaluation of lexicon words.

Every (word, vector) event whose word is in the lexicon is labelled from the
lexicon, scored by the classifier first, and then either used for a training
update (train split) or counted in the confusion table (test split). Every
``report_interval`` lexicon events a report row is computed and printed.

Reported accuracy is cumulative over all held-out predictions so far.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, fields
from typing import List, Optional, TextIO

import numpy as np
import pandas as pd

from ..core.metrics import ConfusionCounts, compute_all_metrics
from ..core.vectors import SparseFeatureVector
from ..lexicon import TRAIN, Lexicon
from ..models.base import FeatureSchema, OnlineClassifier

logger = logging.getLogger(__name__)

REPORT_FIELDS = (
    "held_out",
    "accuracy",
    "tp",
    "fp",
    "tn",
    "fn",
    "f1",
    "precision",
    "recall",
    "kappa",
    "wall_seconds",
    "cpu_seconds",
)


@dataclass
class ReportRow:
    samples_seen: int
    held_out: int
    accuracy: float
    tp: int
    fp: int
    tn: int
    fn: int
    f1: float
    precision: float
    recall: float
    kappa: float
    wall_seconds: float
    cpu_seconds: float

    def format_line(self) -> str:
        return ",".join(
            f"{v:.4f}" if isinstance(v, float) else str(v)
            for v in (getattr(self, name) for name in REPORT_FIELDS)
        )


class OnlineEvaluator:
    """
    Drives the classifier and owns every evaluation counter.

    Lifecycle: created once per run (which configures the classifier schema),
    mutated by ``process`` for every emitted vector, read by ``report`` and
    discarded at the end of the run.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        classifier: OnlineClassifier,
        n_features: int,
        report_interval: int = 1000,
        out: Optional[TextIO] = None,
    ):
        """
        Args:
            lexicon: Ground-truth polarities and train/test splits
            classifier: Online classifier, configured here exactly once
            n_features: Number of data dimensions (the context size)
            report_interval: Lexicon events between two reports
            out: Stream report lines are printed to (default: stdout)
        """
        if report_interval < 1:
            raise ValueError("report_interval must be >= 1")
        self.lexicon = lexicon
        self.classifier = classifier
        self.schema = FeatureSchema(n_features)
        self.report_interval = report_interval
        self.out = out

        self.classifier.configure(self.schema)

        self.counts = ConfusionCounts()
        self.samples_seen = 0
        self.trained = 0
        self.held_out = 0
        self.query_counter = 0
        self.history: List[ReportRow] = []

        self._wall_start = time.perf_counter()
        self._cpu_start = time.process_time()

    def process(self, word: str, vector: SparseFeatureVector) -> Optional[int]:
        """
        Handle one emitted vector.

        Returns:
            The arg-max predicted class, or None when the word is not in the lexicon
        """
        entry = self.lexicon.get(word)
        if entry is None:
            return None

        label = entry.class_value
        vector.set_label(label)

        scores = np.asarray(self.classifier.predict(vector), dtype=float)
        predicted = int(np.argmax(scores))

        if entry.split == TRAIN:
            self.classifier.train(vector, label)
            self.trained += 1
        else:
            self.counts.update(label, predicted)
            self.held_out += 1

        self.samples_seen += 1
        self.query_counter += 1
        if self.query_counter == self.report_interval:
            logger.debug("%s %s %s predicted=%d", word, entry.polarity, entry.split, predicted)
            self.report()
            self.query_counter = 0
        return predicted

    def snapshot(self) -> ReportRow:
        """Current cumulative metrics without printing or recording them."""
        m = compute_all_metrics(self.counts)
        return ReportRow(
            samples_seen=self.samples_seen,
            held_out=self.held_out,
            accuracy=m["accuracy"],
            tp=self.counts.tp,
            fp=self.counts.fp,
            tn=self.counts.tn,
            fn=self.counts.fn,
            f1=m["f1"],
            precision=m["precision"],
            recall=m["recall"],
            kappa=m["kappa"],
            wall_seconds=time.perf_counter() - self._wall_start,
            cpu_seconds=time.process_time() - self._cpu_start,
        )

    def report(self) -> ReportRow:
        row = self.snapshot()
        self.history.append(row)
        print(row.format_line(), file=self.out if self.out is not None else sys.stdout)
        return row

    def history_frame(self) -> pd.DataFrame:
        """Every report emitted so far, one row per report."""
        return pd.DataFrame([asdict(r) for r in self.history], columns=[f.name for f in fields(ReportRow)])
