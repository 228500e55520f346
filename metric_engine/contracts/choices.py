from __future__ import annotations

"""Choice types shared across metric contracts.

Keep this file dependency-free (stdlib + typing only). Metric modules import
the enumerations from here rather than repeating literals.
"""

from enum import Enum
from typing import Literal, TypeAlias


# -----------------------------
# Metric names
# -----------------------------

MetricName: TypeAlias = Literal["binary_logloss", "binary_error", "auc"]


# -----------------------------
# Ordering of metric values
# -----------------------------


class EvalOrdering(str, Enum):
    """Which direction of a metric value counts as an improvement."""

    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"

    @property
    def factor_to_bigger_better(self) -> float:
        # +1 keeps the value, -1 flips losses so that "bigger" means "better".
        return 1.0 if self is EvalOrdering.HIGHER_IS_BETTER else -1.0


# -----------------------------
# Where probabilities come from
# -----------------------------


class PredictionSource(str, Enum):
    """How a pointwise metric turns a score array into probabilities.

    RAW
        No adapter; the scores already are probabilities.
    CONVERTED
        The adapter converts each raw score to a probability.
    EXTERNAL_OVERRIDE
        The adapter's external model predicts all instances in one batch and
        those predictions are scored as-is.
    """

    RAW = "raw"
    CONVERTED = "converted"
    EXTERNAL_OVERRIDE = "external_override"


__all__ = ["MetricName", "EvalOrdering", "PredictionSource"]
