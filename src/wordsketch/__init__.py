"""
This package builds sparse word-context vectors from a text stream under fixed
memory bounds and uses them to classify seed-lexicon words online.

Key modules:
- core.vocabulary / core.context_index: capacity-bounded dictionaries
- core.hashing: Jenkins one-at-a-time sketch bins
- core.vectors / core.weighting: sparse vectors with identity, normalized or PPMI weights
- core.matrix_builder: the sliding-window word-context matrix
- core.metrics: streaming confusion counts and scores
- lexicon: seed lexicon polarities and train/test splits
- models: online classifier interface and adapters
- experiments.online_evaluator / experiments.stream_pipeline: evaluation loop and run wiring
"""

__version__ = "0.1.0"
