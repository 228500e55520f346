from __future__ import annotations

import numpy as np
import pytest

from metric_engine.contracts.metadata import Metadata


class FixedExternalModel:
    """External model stub returning preset predictions and recording calls."""

    def __init__(self, predictions):
        self.predictions = np.asarray(predictions, dtype=float)
        self.calls = []

    def predict(self, scores):
        self.calls.append(np.array(scores, copy=True))
        return self.predictions


@pytest.fixture
def external_model():
    return FixedExternalModel


@pytest.fixture
def rng():
    return np.random.default_rng(20201)


@pytest.fixture
def binary_data(rng):
    n = 500
    labels = (rng.random(n) < 0.4).astype(np.float32)
    margins = rng.normal(size=n) + 1.5 * labels
    weights = rng.uniform(0.1, 3.0, size=n).astype(np.float32)
    return labels, margins, weights


@pytest.fixture
def make_metadata():
    def _make(labels, weights=None):
        return Metadata(labels=np.asarray(labels), sample_weights=None if weights is None else np.asarray(weights))

    return _make
