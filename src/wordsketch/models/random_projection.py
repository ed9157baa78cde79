# random_projection.py
"""
Random ReLU projection in front of another online classifier.

The ``n_features`` inputs are mapped through a fixed Gaussian matrix onto
``H = max(1, n_features * percent // 100)`` hidden units, ``z = max(0, W x)``,
and the inner classifier only ever sees ``z``.
"""
from typing import Optional

import numpy as np

from ..core.vectors import SparseFeatureVector
from .base import FeatureSchema, OnlineClassifier


class RandomProjectionClassifier(OnlineClassifier):
    def __init__(self, inner: OnlineClassifier, percent: int = 10, random_state: int = 42):
        if percent < 1:
            raise ValueError("percent must be >= 1")
        self.inner = inner
        self.percent = percent
        self.random_state = random_state
        self.W: Optional[np.ndarray] = None

    @property
    def hidden_units(self) -> int:
        return 0 if self.W is None else self.W.shape[0]

    def configure(self, schema: FeatureSchema) -> None:
        d = schema.n_features
        h = max(1, d * self.percent // 100)
        rng = np.random.default_rng(self.random_state)
        self.W = rng.standard_normal((h, d))
        self.inner.configure(FeatureSchema(h, schema.class_labels))

    def project(self, vector: SparseFeatureVector) -> SparseFeatureVector:
        if self.W is None:
            raise RuntimeError("configure() must be called before train/predict")
        x_idx = vector.feature_indices
        z = self.W[:, x_idx] @ vector.feature_values
        z = np.maximum(z, 0.0)
        h = self.W.shape[0]
        indices = np.append(np.arange(h), h).astype(np.int64)
        values = np.append(z, vector.label)
        return SparseFeatureVector(indices, values)

    def train(self, vector: SparseFeatureVector, label: int) -> None:
        self.inner.train(self.project(vector), label)

    def predict(self, vector: SparseFeatureVector) -> np.ndarray:
        return self.inner.predict(self.project(vector))
