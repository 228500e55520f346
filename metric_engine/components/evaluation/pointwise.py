from __future__ import annotations

"""Weighted mean of a pointwise loss.

:class:`BinaryMetric` is the aggregation engine; concrete metrics bind a loss
class (see :mod:`metric_engine.components.evaluation.losses`) as the
``loss`` class attribute. The loss kernel is resolved once per subclass, so
the per-chunk call is always the same function.
"""

import logging
from typing import ClassVar, List, Optional, Type

import numpy as np

from metric_engine.components.evaluation.base import BaseMetric
from metric_engine.components.evaluation.errors import ConfigurationConflictError
from metric_engine.components.evaluation.losses import BinaryError, BinaryLogloss
from metric_engine.components.interfaces import LossFunction, OutputAdapter
from metric_engine.components.prediction.sources import (
    resolve_prediction_source,
    resolve_predictions,
)
from metric_engine.contracts.choices import EvalOrdering, PredictionSource
from metric_engine.core.parallel import parallel_sum

logger = logging.getLogger(__name__)


class BinaryMetric(BaseMetric):
    """Weighted mean of ``loss.loss_on_points`` over all instances.

    Where the probabilities come from depends on the adapter:

    - no adapter: ``scores`` are probabilities;
    - adapter without an external model in use: ``adapter.convert_output(scores)``;
    - adapter whose external model is used for evaluation: the model's batched
      predictions, scored without further conversion. Not allowed when this
      metric scores the training data.
    """

    loss: ClassVar[Type[LossFunction]]
    ordering = EvalOrdering.LOWER_IS_BETTER

    def metric_name(self) -> str:
        return self.loss.name()

    def eval(self, scores, adapter: Optional[OutputAdapter] = None) -> List[float]:
        scores = self._check_scores(scores)

        source = resolve_prediction_source(adapter)
        if source is PredictionSource.EXTERNAL_OVERRIDE and self.metric_for_train_data:
            msg = (
                f"{self.metric_name()}: external-model predictions cannot be used "
                "for calculating the training data loss"
            )
            logger.error(msg)
            raise ConfigurationConflictError(msg)

        preds = resolve_predictions(scores, adapter, source)

        loss_on_points = self.loss.loss_on_points
        label = self._label
        weights = self._weights
        epsilon = self.config.epsilon

        def partial(start: int, stop: int) -> float:
            losses = loss_on_points(label[start:stop], preds.probabilities(start, stop), epsilon)
            if weights is None:
                return float(np.sum(losses))
            return float(np.dot(losses, weights[start:stop].astype(np.float64, copy=False)))

        total = parallel_sum(
            partial,
            self._num_data,
            n_jobs=self.config.n_jobs,
            min_parallel_size=self.config.min_parallel_size,
        )
        return [total / self._sum_weights]


class BinaryLoglossMetric(BinaryMetric):
    """Log loss for binary classification."""

    loss = BinaryLogloss


class BinaryErrorMetric(BinaryMetric):
    """Error rate for binary classification."""

    loss = BinaryError
