import numpy as np
import pytest

from metric_engine.components.prediction.adapters import SigmoidOutputAdapter
from metric_engine.components.prediction.sources import (
    resolve_prediction_source,
    resolve_predictions,
)
from metric_engine.contracts.choices import PredictionSource


def test_sigmoid_conversion():
    adapter = SigmoidOutputAdapter(sigmoid=2.0)
    out = adapter.convert_output(np.array([0.0, 1.0, -1.0]))
    np.testing.assert_allclose(out, [0.5, 1 / (1 + np.exp(-2.0)), 1 / (1 + np.exp(2.0))])


def test_sigmoid_saturates_without_warnings():
    out = SigmoidOutputAdapter().convert_output(np.array([-1e4, 1e4]))
    np.testing.assert_array_equal(out, [0.0, 1.0])


def test_sigmoid_must_be_positive():
    with pytest.raises(ValueError):
        SigmoidOutputAdapter(sigmoid=0.0)


def test_missing_external_model():
    adapter = SigmoidOutputAdapter(use_external_model=True)
    assert not adapter.has_external_model()
    with pytest.raises(RuntimeError):
        adapter.get_external_model()


def test_resolve_prediction_source(external_model):
    model = external_model([0.1])
    assert resolve_prediction_source(None) is PredictionSource.RAW
    assert resolve_prediction_source(SigmoidOutputAdapter()) is PredictionSource.CONVERTED
    assert (
        resolve_prediction_source(SigmoidOutputAdapter(use_external_model=True))
        is PredictionSource.CONVERTED
    )
    assert (
        resolve_prediction_source(SigmoidOutputAdapter(external_model=model))
        is PredictionSource.CONVERTED
    )
    assert (
        resolve_prediction_source(SigmoidOutputAdapter(external_model=model, use_external_model=True))
        is PredictionSource.EXTERNAL_OVERRIDE
    )


def test_resolved_predictions_slice_and_convert(external_model):
    scores = np.array([0.0, 2.0, -2.0, 0.5])

    raw = resolve_predictions(scores, None, PredictionSource.RAW)
    np.testing.assert_array_equal(raw.probabilities(1, 3), [2.0, -2.0])

    adapter = SigmoidOutputAdapter()
    converted = resolve_predictions(scores, adapter, PredictionSource.CONVERTED)
    np.testing.assert_allclose(converted.probabilities(0, 2), adapter.convert_output(scores[:2]))

    model = external_model([0.2, 0.4, 0.6, 0.8])
    override_adapter = SigmoidOutputAdapter(external_model=model, use_external_model=True)
    override = resolve_predictions(scores, override_adapter, PredictionSource.EXTERNAL_OVERRIDE)
    np.testing.assert_allclose(override.probabilities(2, 4), [0.6, 0.8])
    assert len(model.calls) == 1
