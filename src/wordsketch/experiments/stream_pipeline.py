#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Main Streaming Pipeline for Lexicon Word Classification

This module wires the complete single-pass run:
1. Seed lexicon loading (polarities + train/test split)
2. Word-context matrix building over the corpus stream
3. Online classification of lexicon words with periodic reports
4. Results export (report history CSV + JSON summary)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, TextIO

from ..core.config import StreamConfig
from ..core.errors import WordSketchError
from ..core.matrix_builder import WordContextMatrix
from ..lexicon import Lexicon
from ..models.base import OnlineClassifier
from ..models.models_registry import get_classifier
from ..text_utils import read_lines, tokenize
from .online_evaluator import REPORT_FIELDS, OnlineEvaluator

logger = logging.getLogger(__name__)


class StreamPipeline:
    """
    Single-pass pipeline: corpus lines -> word vectors -> online evaluation.

    The builder and the evaluator are strict producer and consumer; nothing
    flows back from the evaluator to the builder.
    """

    def __init__(
        self,
        config: StreamConfig,
        lexicon: Lexicon,
        classifier: Optional[OnlineClassifier] = None,
        tokenizer: Callable[[str], List[str]] = tokenize,
        out: Optional[TextIO] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Validated run configuration
            lexicon: Seed lexicon with polarities and splits
            classifier: Online classifier (default: built from ``config.classifier``)
            tokenizer: Line tokenizer handed to the matrix builder
            out: Stream for report lines (default: stdout)
        """
        self.config = config
        self.lexicon = lexicon
        self.matrix = WordContextMatrix(config, tokenizer=tokenizer)
        if classifier is None:
            classifier = get_classifier(config.classifier, config)
        self.evaluator = OnlineEvaluator(
            lexicon,
            classifier,
            n_features=config.context_size,
            report_interval=config.report_interval,
            out=out,
        )
        self.results: Dict[str, Any] = {}

    def run(self, lines: Iterable[str]) -> Dict[str, Any]:
        """Consume every line of ``lines`` and return the run summary."""
        c = self.config
        logger.info(
            "Vocab size: %d Context size: %d Window size: %d Sketching method: %s "
            "Weighting method: %s Sample frequency: %d",
            c.vocab_size, c.context_size, c.window_size, c.sketching, c.weighting, c.report_interval,
        )
        for word, vector in self.matrix.build(lines):
            self.evaluator.process(word, vector)

        final = self.evaluator.snapshot()
        self.results = {
            "config": c.to_dict(),
            "lines": self.matrix.processed_lines,
            "tokens_seen": self.matrix.tokens_seen,
            "vectors_emitted": self.matrix.emitted,
            "vocabulary_size": len(self.matrix.vocabulary),
            "context_index_size": len(self.matrix.index),
            "lexicon_events": self.evaluator.samples_seen,
            "trained": self.evaluator.trained,
            "held_out": self.evaluator.held_out,
            "confusion": self.evaluator.counts.as_dict(),
            "final": {k: getattr(final, k) for k in REPORT_FIELDS},
            "reports": len(self.evaluator.history),
        }
        logger.info(
            "Run complete: %d held-out, accuracy=%.4f", final.held_out, final.accuracy
        )
        return self.results

    def run_file(self, path: str | Path) -> Dict[str, Any]:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Corpus file not found: {path}")
        return self.run(read_lines(path))

    def save_results(self, results_dir: str | Path) -> Dict[str, Path]:
        """Write the report history CSV and the JSON summary under ``results_dir``."""
        results_dir = Path(results_dir)
        results_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        history_path = results_dir / f"stream_history_{stamp}.csv"
        self.evaluator.history_frame().to_csv(history_path, index=False, encoding="utf-8")

        summary_path = results_dir / f"stream_results_{stamp}.json"
        with open(summary_path, "w", encoding="utf-8") as f:
            json.dump(self.results, f, ensure_ascii=False, indent=2, default=str)
        return {"history": history_path, "summary": summary_path}


# -----------------------------
# CLI
# -----------------------------
def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Build word-context sketches from a corpus and classify lexicon words online"
    )
    ap.add_argument("--lexicon", type=Path, required=True, help="Seed lexicon (train lexicon with --test-lexicon)")
    ap.add_argument("--test-lexicon", type=Path, default=None, help="Optional held-out lexicon file")
    ap.add_argument("--corpus", type=Path, required=True, help="Corpus file, one record per line")
    ap.add_argument("--config", type=Path, default=None, help="JSON file with configuration values")
    ap.add_argument("--results-dir", type=Path, default=None, help="Save report history and summary here")
    ap.add_argument("--split-policy", choices=["parity", "threshold"], default="parity")
    ap.add_argument("--train-size", type=int, default=None, help="Leading train entries for --split-policy threshold")
    ap.add_argument("--skip-bad-lexicon-lines", action="store_true", help="Warn and skip malformed lexicon lines")
    ap.add_argument("--log-level", default="INFO")

    # Overrides (take precedence over --config)
    ap.add_argument("--vocab-size", default=None)
    ap.add_argument("--context-size", default=None)
    ap.add_argument("--window-size", default=None)
    ap.add_argument("--sketching", default=None, help="none | hashing")
    ap.add_argument("--weighting", default=None, help="none | normalized | ppmi")
    ap.add_argument("--report-interval", default=None)
    ap.add_argument("--min-occurrences", default=None)
    ap.add_argument("--focus-last-token", action="store_true", default=None)
    ap.add_argument("--classifier", default=None, help="sgd | projection-sgd")
    ap.add_argument("--random-state", default=None)
    ap.add_argument("--projection-percent", default=None)
    return ap.parse_args(argv)


def build_config(args: argparse.Namespace) -> StreamConfig:
    raw: Dict[str, Any] = {}
    if args.config is not None:
        raw.update(StreamConfig.from_json(args.config).to_dict())
    overrides = {
        "vocab_size": args.vocab_size,
        "context_size": args.context_size,
        "window_size": args.window_size,
        "sketching": args.sketching,
        "weighting": args.weighting,
        "report_interval": args.report_interval,
        "min_occurrences": args.min_occurrences,
        "focus_last_token": args.focus_last_token,
        "classifier": args.classifier,
        "random_state": args.random_state,
        "projection_percent": args.projection_percent,
    }
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return StreamConfig.from_dict(raw)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # file being read, for decode errors raised mid-stream
    source = str(args.config)
    try:
        config = build_config(args)
        source = ", ".join(str(p) for p in (args.lexicon, args.test_lexicon) if p is not None)
        lexicon = Lexicon.load(
            args.lexicon,
            test_path=args.test_lexicon,
            split_policy=args.split_policy,
            train_size=args.train_size,
            on_error="skip" if args.skip_bad_lexicon_lines else "raise",
        )
        pipeline = StreamPipeline(config, lexicon)
        print(",".join(REPORT_FIELDS))
        source = str(args.corpus)
        results = pipeline.run_file(args.corpus)
    except (WordSketchError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"Error: {source} is not valid UTF-8 text ({e.reason})", file=sys.stderr)
        return 2

    if args.results_dir is not None:
        paths = pipeline.save_results(args.results_dir)
        print(f"Saved report history: {paths['history']}", file=sys.stderr)
        print(f"Saved summary: {paths['summary']}", file=sys.stderr)

    print(json.dumps(results["final"], ensure_ascii=False), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
