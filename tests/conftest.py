"""Shared fixtures for the wordsketch tests."""
import numpy as np
import pytest

from wordsketch.core.config import StreamConfig
from wordsketch.lexicon import Lexicon
from wordsketch.models.base import OnlineClassifier
from wordsketch.text_utils import simple_tokenize


class RecordingClassifier(OnlineClassifier):
    """Always predicts ``fixed_class``; records every call."""

    def __init__(self, fixed_class: int = 1):
        self.fixed_class = fixed_class
        self.schemas = []
        self.trained = []
        self.predicted = []

    def configure(self, schema):
        self.schemas.append(schema)

    def train(self, vector, label):
        self.trained.append((vector, label))

    def predict(self, vector):
        self.predicted.append(vector)
        scores = np.zeros(2)
        scores[self.fixed_class] = 1.0
        return scores


@pytest.fixture
def recording_classifier():
    return RecordingClassifier()


@pytest.fixture
def small_config():
    return StreamConfig(vocab_size=100, context_size=10, window_size=1, report_interval=2)


@pytest.fixture
def tokenizer():
    return simple_tokenize


@pytest.fixture
def lexicon():
    return Lexicon.from_split_lines(
        ["good\t1", "great\t3"],
        ["bad\t-1", "nice\t2"],
    )


@pytest.fixture
def classifier_factory():
    return RecordingClassifier
