# Core components for the streaming word-context sketch

from .errors import (
    WordSketchError,
    ConfigurationError,
    LexiconFormatError,
    SketchInvariantError,
)
from .config import StreamConfig
from .hashing import jenkins_hash, bin_id
from .context_index import ContextIndex, UNKNOWN, UNKNOWN_DIMENSION
from .vocabulary import Vocabulary, WordRepresentation, add_context
from .vectors import SparseFeatureVector, build_vector, collect_marginals
from .weighting import get_weighting
from .matrix_builder import WordContextMatrix
from .metrics import (
    ConfusionCounts,
    accuracy_score,
    precision_score,
    recall_score,
    f1_score,
    kappa_score,
    confusion_matrix,
    compute_all_metrics,
)

__all__ = [
    "WordSketchError",
    "ConfigurationError",
    "LexiconFormatError",
    "SketchInvariantError",
    "StreamConfig",
    "jenkins_hash",
    "bin_id",
    "ContextIndex",
    "UNKNOWN",
    "UNKNOWN_DIMENSION",
    "Vocabulary",
    "WordRepresentation",
    "add_context",
    "SparseFeatureVector",
    "build_vector",
    "collect_marginals",
    "get_weighting",
    "WordContextMatrix",
    "ConfusionCounts",
    "accuracy_score",
    "precision_score",
    "recall_score",
    "f1_score",
    "kappa_score",
    "confusion_matrix",
    "compute_all_metrics",
]
