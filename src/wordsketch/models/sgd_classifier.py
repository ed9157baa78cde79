# sgd_classifier.py
from typing import Any, Dict, Optional

import numpy as np
from sklearn.linear_model import SGDClassifier

from ..core.vectors import SparseFeatureVector
from .base import FeatureSchema, OnlineClassifier


class SGDOnlineClassifier(OnlineClassifier):
    """Logistic-loss SGD updated one sparse vector at a time via ``partial_fit``.

    params:
      - loss: SGD loss (default "log_loss", so predict_proba is available)
      - alpha: L2 regularisation strength
      - random_state: seed for reproducible updates
    Before the first training update every prediction scores 0 for both classes.
    """

    def __init__(self, **params: Dict[str, Any]):
        self.p = params
        self.schema: Optional[FeatureSchema] = None
        self.model: Optional[SGDClassifier] = None
        self.updates = 0

    def configure(self, schema: FeatureSchema) -> None:
        self.schema = schema
        self.classes_ = np.arange(schema.n_classes)
        self.model = SGDClassifier(
            loss=self.p.get("loss", "log_loss"),
            alpha=self.p.get("alpha", 1e-4),
            learning_rate=self.p.get("learning_rate", "optimal"),
            random_state=self.p.get("random_state", 42),
        )
        self.updates = 0

    def _check_configured(self):
        if self.model is None:
            raise RuntimeError("configure() must be called before train/predict")

    def train(self, vector: SparseFeatureVector, label: int) -> None:
        self._check_configured()
        self.model.partial_fit(vector.to_csr(), np.array([int(label)]), classes=self.classes_)
        self.updates += 1

    def predict(self, vector: SparseFeatureVector) -> np.ndarray:
        self._check_configured()
        if self.updates == 0:
            return np.zeros(len(self.classes_))
        X = vector.to_csr()
        if hasattr(self.model, "predict_proba"):
            return self.model.predict_proba(X)[0]
        # 二分类 decision_function -> [-s, s]
        s = float(self.model.decision_function(X)[0])
        return np.array([-s, s])


def create_sgd_factory(defaults: Dict[str, Any]):
    def factory(params: Dict[str, Any]):
        cfg = {**defaults, **params}
        return SGDOnlineClassifier(**cfg)
    return factory
