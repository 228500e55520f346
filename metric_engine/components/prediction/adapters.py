from __future__ import annotations

"""Reference output adapter.

Boosting objectives normally act as the adapter. :class:`SigmoidOutputAdapter`
reproduces the binary objective's conversion so drivers and scripts can
score raw margins without an objective object.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from metric_engine.components.interfaces import ExternalModel


@dataclass
class SigmoidOutputAdapter:
    """Convert raw margins with ``1 / (1 + exp(-sigmoid * x))``.

    If ``external_model`` is set and ``use_external_model`` is True, pointwise
    metrics score the external model's predictions instead.
    """

    sigmoid: float = 1.0
    external_model: Optional[ExternalModel] = None
    use_external_model: bool = False

    def __post_init__(self) -> None:
        if not self.sigmoid > 0.0:
            raise ValueError(f"sigmoid must be positive; got {self.sigmoid}")

    def convert_output(self, raw_scores: np.ndarray) -> np.ndarray:
        raw = np.asarray(raw_scores, dtype=np.float64)
        # exp overflow for very negative margins saturates to 0 as intended
        with np.errstate(over="ignore"):
            return 1.0 / (1.0 + np.exp(-self.sigmoid * raw))

    def has_external_model(self) -> bool:
        return self.external_model is not None

    def use_external_model_for_evaluation(self) -> bool:
        return self.use_external_model

    def get_external_model(self) -> ExternalModel:
        if self.external_model is None:
            raise RuntimeError("No external model is attached to this adapter.")
        return self.external_model
