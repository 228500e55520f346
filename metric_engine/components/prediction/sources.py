from __future__ import annotations

"""Resolve how a score array becomes probabilities for one evaluation round.

The three cases are tagged by :class:`PredictionSource` instead of being
re-derived from nullable adapter checks inside every loop:

- ``RAW``: no adapter, the scores are probabilities already;
- ``CONVERTED``: ``adapter.convert_output`` is applied chunk by chunk;
- ``EXTERNAL_OVERRIDE``: the adapter's external model predicts the whole
  array once and those predictions are scored unchanged.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from metric_engine.components.interfaces import OutputAdapter
from metric_engine.contracts.choices import PredictionSource
from metric_engine.core.shapes import check_len, coerce_1d


def resolve_prediction_source(adapter: Optional[OutputAdapter]) -> PredictionSource:
    if adapter is None:
        return PredictionSource.RAW
    if adapter.has_external_model() and adapter.use_external_model_for_evaluation():
        return PredictionSource.EXTERNAL_OVERRIDE
    return PredictionSource.CONVERTED


@dataclass(frozen=True)
class ResolvedPredictions:
    source: PredictionSource
    values: np.ndarray
    convert: Optional[Callable[[np.ndarray], np.ndarray]] = None

    def probabilities(self, start: int, stop: int) -> np.ndarray:
        """Probabilities for instances ``[start, stop)``."""
        chunk = self.values[start:stop]
        if self.convert is None:
            return chunk
        return np.asarray(self.convert(chunk), dtype=np.float64)


def resolve_predictions(
    scores: np.ndarray,
    adapter: Optional[OutputAdapter],
    source: PredictionSource,
) -> ResolvedPredictions:
    """Build the per-round prediction view for an already resolved ``source``.

    The external model is called here, once, with the full score array.
    """
    if source is PredictionSource.RAW:
        return ResolvedPredictions(source=source, values=scores)

    if source is PredictionSource.CONVERTED:
        return ResolvedPredictions(source=source, values=scores, convert=adapter.convert_output)

    model = adapter.get_external_model()
    corrected = coerce_1d(model.predict(scores), name="external model predictions")
    check_len(scores.shape[0], corrected, "external model predictions")
    return ResolvedPredictions(source=source, values=np.asarray(corrected, dtype=np.float64))
