from .base import BaseMetric
from .errors import (
    ConfigurationConflictError,
    MetricAlreadyInitializedError,
    MetricError,
    MetricNotInitializedError,
)
from .pointwise import BinaryErrorMetric, BinaryLoglossMetric, BinaryMetric
from .ranking import AUCMetric

__all__ = [
    "AUCMetric",
    "BaseMetric",
    "BinaryErrorMetric",
    "BinaryLoglossMetric",
    "BinaryMetric",
    "ConfigurationConflictError",
    "MetricAlreadyInitializedError",
    "MetricError",
    "MetricNotInitializedError",
]
