"""Public metric engine API.

This module is the **stable public surface** for boosting drivers:

    from metric_engine.api import AUCMetric, Metadata, MetricConfig

    metric = AUCMetric(MetricConfig(n_jobs=-1))
    metric.init(Metadata(labels=y_valid), num_data=len(y_valid))
    value, = metric.eval(raw_scores)

The underlying implementations live under :mod:`metric_engine.components`.
"""

from __future__ import annotations

from metric_engine.components.evaluation.base import BaseMetric
from metric_engine.components.evaluation.errors import (
    ConfigurationConflictError,
    MetricAlreadyInitializedError,
    MetricError,
    MetricNotInitializedError,
)
from metric_engine.components.evaluation.losses import K_EPSILON, BinaryError, BinaryLogloss
from metric_engine.components.evaluation.pointwise import (
    BinaryErrorMetric,
    BinaryLoglossMetric,
    BinaryMetric,
)
from metric_engine.components.evaluation.ranking import AUCMetric
from metric_engine.components.interfaces import ExternalModel, LossFunction, Metric, OutputAdapter
from metric_engine.components.prediction.adapters import SigmoidOutputAdapter
from metric_engine.contracts import EvalOrdering, Metadata, MetricConfig, MetricName, PredictionSource
from metric_engine.core.log_config import configure_logging

__all__ = [
    "AUCMetric",
    "BaseMetric",
    "BinaryError",
    "BinaryErrorMetric",
    "BinaryLogloss",
    "BinaryLoglossMetric",
    "BinaryMetric",
    "ConfigurationConflictError",
    "EvalOrdering",
    "ExternalModel",
    "K_EPSILON",
    "LossFunction",
    "Metadata",
    "Metric",
    "MetricAlreadyInitializedError",
    "MetricConfig",
    "MetricError",
    "MetricName",
    "MetricNotInitializedError",
    "OutputAdapter",
    "PredictionSource",
    "SigmoidOutputAdapter",
    "configure_logging",
]
