from __future__ import annotations

"""State shared by every binary metric.

A metric is created once per evaluation dataset, bound to that dataset's
labels/weights with :meth:`BaseMetric.init`, then evaluated once per boosting
round with a fresh score array.

Lifetimes
---------
- labels/weights: read-only views into the metadata owner's buffers, valid
  for as long as the metric lives. The metric never writes through them.
- scores: borrowed for the duration of one ``eval`` call, never stored.

``eval`` does not mutate the metric, but there is no locking: do not run two
``eval`` calls on the same instance at once. Separate instances are
independent.
"""

import logging
from typing import ClassVar, List, Optional

import numpy as np

from metric_engine.components.evaluation.errors import (
    MetricAlreadyInitializedError,
    MetricNotInitializedError,
)
from metric_engine.components.interfaces import Metadata
from metric_engine.contracts.choices import EvalOrdering
from metric_engine.contracts.metric_configs import MetricConfig
from metric_engine.core.shapes import check_len, coerce_1d, readonly_view, sum_weights

logger = logging.getLogger(__name__)


class BaseMetric:
    ordering: ClassVar[EvalOrdering]

    def __init__(self, config: Optional[MetricConfig] = None):
        self.config = config if config is not None else MetricConfig()
        # May be flipped by the driver after construction.
        self.metric_for_train_data: bool = bool(self.config.metric_for_train_data)

        self._names: List[str] = []
        self._num_data: int = 0
        self._label: Optional[np.ndarray] = None
        self._weights: Optional[np.ndarray] = None
        self._sum_weights: float = 0.0
        self._initialized = False

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def metric_name(self) -> str:
        raise NotImplementedError

    def init(self, metadata: Metadata, num_data: int) -> None:
        if self._initialized:
            raise MetricAlreadyInitializedError(
                f"{type(self).__name__}.init() was already called; create a new metric instead."
            )

        num_data = int(num_data)
        if num_data < 1:
            raise ValueError(f"num_data must be >= 1; got {num_data}")

        label = readonly_view(metadata.label(), name="label")
        check_len(num_data, label, "label")

        weights = metadata.weights()
        if weights is not None:
            weights = readonly_view(weights, name="weights")
            check_len(num_data, weights, "weights")
            if np.any(weights < 0):
                raise ValueError("weights must be non-negative")

        total = sum_weights(weights, num_data)
        if not total > 0.0:
            raise ValueError(f"weights must sum to a positive value; got {total}")

        self._num_data = num_data
        self._label = label
        self._weights = weights
        self._sum_weights = total
        self._names.append(self.metric_name())
        self._initialized = True

        logger.debug(
            "Initialized metric %s: num_data=%d, weighted=%s, sum_weights=%.6g",
            self.metric_name(),
            num_data,
            weights is not None,
            total,
        )

    def get_name(self) -> List[str]:
        return list(self._names)

    def eval_ordering(self) -> EvalOrdering:
        return self.ordering

    @property
    def factor_to_bigger_better(self) -> float:
        return self.ordering.factor_to_bigger_better

    @property
    def num_data(self) -> int:
        return self._num_data

    @property
    def sum_weights(self) -> float:
        return self._sum_weights

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def _check_scores(self, scores) -> np.ndarray:
        """Precondition checks shared by every ``eval``; returns float64 scores."""
        if not self._initialized:
            raise MetricNotInitializedError(
                f"{type(self).__name__}.eval() called before init()."
            )
        arr = np.asarray(coerce_1d(scores, name="scores"), dtype=np.float64)
        check_len(self._num_data, arr, "scores")
        return arr
