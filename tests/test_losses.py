import math

import numpy as np
import pytest

from metric_engine.components.evaluation.losses import K_EPSILON, BinaryError, BinaryLogloss


def test_logloss_point_values():
    assert BinaryLogloss.loss_on_point(1, 0.8) == pytest.approx(-math.log(0.8))
    assert BinaryLogloss.loss_on_point(0, 0.8) == pytest.approx(-math.log(0.2))
    assert BinaryLogloss.loss_on_point(-1, 0.25) == pytest.approx(-math.log(0.75))


@pytest.mark.parametrize("label, prob", [(1, 0.0), (0, 1.0), (1, 1e-20), (0, 1.0 - 1e-17)])
def test_logloss_clamps_saturated_probabilities(label, prob):
    assert BinaryLogloss.loss_on_point(label, prob) == pytest.approx(-math.log(K_EPSILON))


def test_logloss_vectorised_matches_scalar():
    labels = np.array([0, 1, 1, 0, 1, 0], dtype=np.float32)
    probs = np.array([0.1, 0.9, 0.0, 1.0, 0.5, 0.3])
    expected = [BinaryLogloss.loss_on_point(l, p) for l, p in zip(labels, probs)]
    np.testing.assert_allclose(BinaryLogloss.loss_on_points(labels, probs), expected)


def test_logloss_custom_epsilon():
    assert BinaryLogloss.loss_on_point(1, 0.0, 1e-3) == pytest.approx(-math.log(1e-3))
    out = BinaryLogloss.loss_on_points(np.array([1.0]), np.array([0.0]), 1e-3)
    assert out[0] == pytest.approx(-math.log(1e-3))


def test_error_point_values():
    assert BinaryError.loss_on_point(1, 0.9) == 0.0
    assert BinaryError.loss_on_point(0, 0.2) == 0.0
    assert BinaryError.loss_on_point(1, 0.4) == 1.0
    assert BinaryError.loss_on_point(0, 0.7) == 1.0
    # threshold itself predicts negative
    assert BinaryError.loss_on_point(1, 0.5) == 1.0
    assert BinaryError.loss_on_point(0, 0.5) == 0.0


def test_error_vectorised_matches_scalar():
    labels = np.array([1, 0, 1, 0, 1, 0])
    probs = np.array([0.9, 0.2, 0.4, 0.7, 0.5, 0.5])
    expected = [BinaryError.loss_on_point(l, p) for l, p in zip(labels, probs)]
    np.testing.assert_array_equal(BinaryError.loss_on_points(labels, probs), expected)


def test_names():
    assert BinaryLogloss.name() == "binary_logloss"
    assert BinaryError.name() == "binary_error"
