# weighting.py
"""
Feature weighting transforms applied to a word's raw context counts.

Each transform takes the sorted raw counts of one vector (label slot
excluded) and returns the weighted values:

- identity:   raw counts, unchanged
- normalized: count / max(count), all zeros when the max is 0
- ppmi:       max(0, log2(c * T / (f * g))), with degenerate cells set to 0
"""

from typing import Callable, Dict

import numpy as np

from .config import WEIGHTING_ALIASES, canonical_selector


class WeightingContext:
    """Running corpus statistics a transform may read."""

    def __init__(self, focus_count: int, feature_counts: np.ndarray, tokens_seen: int):
        self.focus_count = focus_count
        self.feature_counts = feature_counts
        self.tokens_seen = tokens_seen


def identity_weights(counts: np.ndarray, ctx: WeightingContext) -> np.ndarray:
    return counts.astype(float)


def normalized_weights(counts: np.ndarray, ctx: WeightingContext) -> np.ndarray:
    counts = counts.astype(float)
    if counts.size == 0:
        return counts
    peak = counts.max()
    if peak <= 0:
        return np.zeros_like(counts)
    return counts / peak


def ppmi_weights(counts: np.ndarray, ctx: WeightingContext) -> np.ndarray:
    """Positive PMI of every cell against the focus word and feature marginals."""
    c = counts.astype(float)
    g = np.asarray(ctx.feature_counts, dtype=float)
    denom = float(ctx.focus_count) * g
    with np.errstate(divide="ignore", invalid="ignore"):
        pmi = np.log2((c * float(ctx.tokens_seen)) / denom)
    pmi[~np.isfinite(pmi)] = 0.0
    return np.maximum(pmi, 0.0)


WEIGHTINGS: Dict[str, Callable[[np.ndarray, WeightingContext], np.ndarray]] = {
    "none": identity_weights,
    "normalized": normalized_weights,
    "ppmi": ppmi_weights,
}


def get_weighting(name: str) -> Callable[[np.ndarray, WeightingContext], np.ndarray]:
    """Weighting transform for a selector name (aliases accepted).

    Raises:
        ConfigurationError: for an unrecognised selector
    """
    return WEIGHTINGS[canonical_selector("weighting", name, WEIGHTING_ALIASES)]
