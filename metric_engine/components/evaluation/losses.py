from __future__ import annotations

"""Pointwise losses for binary classification.

Each loss is a stateless class of static methods so that
:class:`metric_engine.components.evaluation.pointwise.BinaryMetric` can bind
one per subclass and call a single vectorised kernel per chunk.
"""

import math

import numpy as np

# Smallest probability mass allowed inside a logarithm.
K_EPSILON = 1e-15


class BinaryLogloss:
    @staticmethod
    def name() -> str:
        return "binary_logloss"

    @staticmethod
    def loss_on_point(label: float, prob: float, epsilon: float = K_EPSILON) -> float:
        if label <= 0:
            if 1.0 - prob > epsilon:
                return -math.log(1.0 - prob)
        else:
            if prob > epsilon:
                return -math.log(prob)
        return -math.log(epsilon)

    @staticmethod
    def loss_on_points(labels: np.ndarray, probs: np.ndarray, epsilon: float = K_EPSILON) -> np.ndarray:
        probs = np.asarray(probs, dtype=np.float64)
        # probability assigned to the observed class
        p_obs = np.where(np.asarray(labels) > 0, probs, 1.0 - probs)
        # NaN compares False and is clamped like the scalar path
        return -np.log(np.where(p_obs > epsilon, p_obs, epsilon))


class BinaryError:
    """Misclassification indicator at threshold 0.5."""

    @staticmethod
    def name() -> str:
        return "binary_error"

    @staticmethod
    def loss_on_point(label: float, prob: float, epsilon: float = K_EPSILON) -> float:
        if prob <= 0.5:
            return float(label > 0)
        return float(label <= 0)

    @staticmethod
    def loss_on_points(labels: np.ndarray, probs: np.ndarray, epsilon: float = K_EPSILON) -> np.ndarray:
        labels = np.asarray(labels)
        probs = np.asarray(probs, dtype=np.float64)
        return np.where(probs <= 0.5, labels > 0, labels <= 0).astype(np.float64)
