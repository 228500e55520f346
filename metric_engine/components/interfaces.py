from __future__ import annotations

"""Structural contracts between the metric engine and its collaborators.

The boosting driver owns the metadata and the objective; the engine only
relies on the small surfaces below. Anything matching them structurally works.
"""

from typing import List, Optional, Protocol, Sequence

import numpy as np

from metric_engine.contracts.choices import EvalOrdering


class Metadata(Protocol):
    def label(self) -> np.ndarray:
        """Per-instance labels; <= 0 is negative, > 0 positive."""
        ...

    def weights(self) -> Optional[np.ndarray]:
        """Per-instance non-negative weights, or None for unit weights."""
        ...


class ExternalModel(Protocol):
    def predict(self, scores: np.ndarray) -> np.ndarray:
        """Return one corrected prediction per instance for the full score array."""
        ...


class OutputAdapter(Protocol):
    """Objective-side conversion from raw scores to probabilities.

    An adapter may also carry an external (e.g. Gaussian-process) model whose
    predictions replace the raw scores at evaluation time.
    """

    def convert_output(self, raw_scores: np.ndarray) -> np.ndarray:
        ...

    def has_external_model(self) -> bool:
        ...

    def use_external_model_for_evaluation(self) -> bool:
        ...

    def get_external_model(self) -> ExternalModel:
        ...


class LossFunction(Protocol):
    """Per-instance loss for a pointwise metric.

    ``loss_on_points`` must agree elementwise with ``loss_on_point``; it is the
    path used by the aggregator.
    """

    @staticmethod
    def name() -> str:
        ...

    @staticmethod
    def loss_on_point(label: float, prob: float, epsilon: float = ...) -> float:
        ...

    @staticmethod
    def loss_on_points(labels: np.ndarray, probs: np.ndarray, epsilon: float = ...) -> np.ndarray:
        ...


class Metric(Protocol):
    def init(self, metadata: Metadata, num_data: int) -> None:
        """Bind labels/weights and compute the total weight. Call exactly once."""
        ...

    def get_name(self) -> List[str]:
        ...

    def eval_ordering(self) -> EvalOrdering:
        ...

    def eval(
        self,
        scores: Sequence[float] | np.ndarray,
        adapter: Optional[OutputAdapter] = None,
    ) -> List[float]:
        """Return the metric value(s) for one score array."""
        ...
