"""Metric-specific exceptions.

These are intentionally lightweight so they can be raised from compute paths
without pulling in any driver code.
"""


class MetricError(RuntimeError):
    """Base class for metric contract and configuration errors."""


class MetricNotInitializedError(MetricError):
    """Raised when ``eval`` is called on a metric that was never ``init``-ed."""


class MetricAlreadyInitializedError(MetricError):
    """Raised when ``init`` is called a second time on the same metric."""


class ConfigurationConflictError(MetricError):
    """Raised when external-model predictions are requested for the training-data metric."""
