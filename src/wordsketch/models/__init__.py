# Online classifier implementations for lexicon word classification

from .base import CLASS_LABELS, FeatureSchema, OnlineClassifier
from .sgd_classifier import SGDOnlineClassifier, create_sgd_factory
from .random_projection import RandomProjectionClassifier
from .models_registry import get_classifier

__all__ = [
    "CLASS_LABELS",
    "FeatureSchema",
    "OnlineClassifier",
    "SGDOnlineClassifier",
    "create_sgd_factory",
    "RandomProjectionClassifier",
    "get_classifier",
]
