"""Prediction components (compute layer).

Public API:
- resolve_prediction_source
- resolve_predictions
- SigmoidOutputAdapter

Lower-level helpers are available under submodules.
"""

from .adapters import SigmoidOutputAdapter
from .sources import ResolvedPredictions, resolve_prediction_source, resolve_predictions

__all__ = [
    "SigmoidOutputAdapter",
    "ResolvedPredictions",
    "resolve_prediction_source",
    "resolve_predictions",
]
