# models_registry.py
from typing import Any, Dict

from ..core.config import CLASSIFIER_ALIASES, StreamConfig, canonical_selector
from .base import OnlineClassifier
from .random_projection import RandomProjectionClassifier
from .sgd_classifier import create_sgd_factory


def get_classifier(name: str, config: StreamConfig, **params: Dict[str, Any]) -> OnlineClassifier:
    """
    Build an (unconfigured) online classifier by selector name.

    "sgd" is a logistic-loss SGD; "projection-sgd" puts the random ReLU
    projection in front of it. Extra ``params`` go to the SGD estimator.
    """
    model = canonical_selector("classifier", name, CLASSIFIER_ALIASES)
    factory = create_sgd_factory({"random_state": config.random_state})
    if model == "sgd":
        return factory(params)
    if model == "projection-sgd":
        return RandomProjectionClassifier(
            factory(params),
            percent=config.projection_percent,
            random_state=config.random_state,
        )
    raise ValueError(f"Unknown model: {name}")
