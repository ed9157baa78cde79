# base.py
"""Capability interface every online classifier plugged into the evaluator implements."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..core.vectors import SparseFeatureVector

CLASS_LABELS: Tuple[str, str] = ("negative", "positive")


@dataclass(frozen=True)
class FeatureSchema:
    """Attribute layout shared by every vector: ``n_features`` data dims plus a class."""

    n_features: int
    class_labels: Tuple[str, ...] = CLASS_LABELS

    @property
    def n_classes(self) -> int:
        return len(self.class_labels)


class OnlineClassifier(ABC):
    @abstractmethod
    def configure(self, schema: FeatureSchema) -> None:
        """Set the attribute/class schema. Called once, before first use."""

    @abstractmethod
    def train(self, vector: SparseFeatureVector, label: int) -> None:
        """One incremental update on a labelled vector."""

    @abstractmethod
    def predict(self, vector: SparseFeatureVector) -> np.ndarray:
        """Scores indexed by class (0 = negative, 1 = positive)."""
