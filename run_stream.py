#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Runner for a single streaming word-classification pass.

- Run from project root (or install the package and use `wordsketch-run`).
- Prints one CSV report line per report interval on stdout:
    held_out,accuracy,tp,fp,tn,fn,f1,precision,recall,kappa,wall_seconds,cpu_seconds
- Diagnostics and the final summary go to stderr.

Example:
    python run_stream.py --lexicon data/seed_lexicon.tsv --corpus data/tweets.txt \
        --context-size 1000 --sketching hashing --weighting ppmi --results-dir results
"""

import sys
from pathlib import Path

# ---------------------------------------------------------------------
# Ensure we can import `wordsketch` without installing it
# ---------------------------------------------------------------------
ROOT = Path(__file__).parent.resolve()
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from wordsketch.experiments.stream_pipeline import main  # type: ignore


if __name__ == "__main__":
    sys.exit(main())
