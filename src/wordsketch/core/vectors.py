# vectors.py
"""
Sparse feature vectors and the sketch builder that produces them.

A vector holds strictly increasing data dimensions in ``[0, context_size)``
followed by exactly one label pair at dimension ``context_size``. The label
value stays NaN until the evaluator fills it in.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from scipy.sparse import csr_matrix

from .context_index import ContextIndex
from .vocabulary import Vocabulary, WordRepresentation
from .weighting import WeightingContext


@dataclass
class SparseFeatureVector:
    indices: np.ndarray
    values: np.ndarray

    @property
    def label_dimension(self) -> int:
        return int(self.indices[-1])

    @property
    def label(self) -> float:
        return float(self.values[-1])

    def set_label(self, class_value: int) -> None:
        self.values[-1] = float(class_value)

    @property
    def feature_indices(self) -> np.ndarray:
        return self.indices[:-1]

    @property
    def feature_values(self) -> np.ndarray:
        return self.values[:-1]

    def pairs(self) -> List[Tuple[int, float]]:
        return [(int(i), float(v)) for i, v in zip(self.indices, self.values)]

    def to_csr(self) -> csr_matrix:
        """Data dimensions as a 1 x label_dimension CSR row (label dropped)."""
        n = self.label_dimension
        return csr_matrix(
            (self.feature_values, self.feature_indices, np.array([0, len(self.feature_indices)])),
            shape=(1, n),
        )


def collect_counts(rep: WordRepresentation, index: ContextIndex) -> Tuple[np.ndarray, np.ndarray]:
    """Raw counts of ``rep`` per global dimension, sorted by dimension.

    Names that share a dimension (several literal names folded into the
    unknown dimension) have their counts summed.
    """
    per_dim: Dict[int, int] = {}
    for name, count in rep.context_counts.items():
        dim = index.resolve(name)
        per_dim[dim] = per_dim.get(dim, 0) + count
    dims = np.array(sorted(per_dim), dtype=np.int64)
    counts = np.array([per_dim[d] for d in dims], dtype=np.int64)
    return dims, counts


def collect_marginals(
    rep: WordRepresentation, index: ContextIndex, vocabulary: Optional[Vocabulary] = None
) -> np.ndarray:
    """Corpus occurrence count of the feature behind each dimension of ``rep``.

    Hashing bins read the global per-bin token counts of the index. Literal
    names read the context word's vocabulary occurrence count; names folded
    onto one dimension are summed and words outside the vocabulary count 0.
    Entries line up with the dimensions returned by ``collect_counts``.
    """
    per_dim: Dict[int, int] = {}
    for name in rep.context_counts:
        dim = index.resolve(name)
        if index.hashing:
            per_dim[dim] = index.feature_count(dim)
        elif vocabulary is not None:
            per_dim[dim] = per_dim.get(dim, 0) + vocabulary.lookup(name).occurrence_count
        else:
            per_dim[dim] = 0
    return np.array([per_dim[d] for d in sorted(per_dim)], dtype=np.int64)


def build_vector(
    rep: WordRepresentation,
    index: ContextIndex,
    weighting: Callable[[np.ndarray, WeightingContext], np.ndarray],
    tokens_seen: int,
    vocabulary: Optional[Vocabulary] = None,
) -> SparseFeatureVector:
    """Weighted sparse vector for ``rep`` with an unset trailing label slot.

    ``vocabulary`` supplies the literal-mode feature marginals PPMI needs.
    """
    dims, counts = collect_counts(rep, index)
    ctx = WeightingContext(rep.occurrence_count, collect_marginals(rep, index, vocabulary), tokens_seen)
    weights = weighting(counts, ctx)

    indices = np.append(dims, index.capacity).astype(np.int64)
    values = np.append(np.asarray(weights, dtype=float), np.nan)
    return SparseFeatureVector(indices, values)
