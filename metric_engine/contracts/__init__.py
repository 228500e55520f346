"""Metric contracts.

Pydantic configuration models, choice enumerations and the metadata container
used to bind labels/weights to a metric.

Keep module imports explicit in most of the codebase:
    from metric_engine.contracts.metric_configs import MetricConfig
The names re-exported here are a convenience for callers that prefer a single
namespace.
"""

from .choices import EvalOrdering, MetricName, PredictionSource
from .metadata import Metadata
from .metric_configs import MetricConfig

__all__ = [
    "EvalOrdering",
    "Metadata",
    "MetricConfig",
    "MetricName",
    "PredictionSource",
]
