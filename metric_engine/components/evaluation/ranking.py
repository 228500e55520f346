from __future__ import annotations

"""Weighted, tie-aware Area Under the ROC Curve.

Rank-sum formulation: instances are sorted by descending score and walked
in tie groups (maximal runs of identical scores). Every group contributes

    cur_neg * (cur_pos / 2 + sum_pos)

where ``cur_pos``/``cur_neg`` are the group's weighted positive/negative
counts and ``sum_pos`` is the positive weight of all earlier groups. Ties
therefore earn half credit (mid-rank correction of the Mann-Whitney U).
The walk is done group-wise with ``np.add.reduceat`` rather than per element.
"""

import logging
from typing import List, Optional

import numpy as np

from metric_engine.components.evaluation.base import BaseMetric
from metric_engine.components.interfaces import OutputAdapter
from metric_engine.contracts.choices import EvalOrdering
from metric_engine.core.parallel import parallel_argsort

logger = logging.getLogger(__name__)


def tie_group_starts(sorted_scores: np.ndarray) -> np.ndarray:
    """Start offsets of each run of equal scores in an already sorted array.

    NaN never equals anything, so every NaN opens its own group.
    """
    changes = np.flatnonzero(sorted_scores[1:] != sorted_scores[:-1]) + 1
    return np.concatenate((np.zeros(1, dtype=changes.dtype), changes))


class AUCMetric(BaseMetric):
    """AUC for binary classification.

    Depends only on the ranking of the scores, so the adapter is ignored.
    When either class has zero total weight the AUC is defined as 1.0.
    """

    ordering = EvalOrdering.HIGHER_IS_BETTER

    def metric_name(self) -> str:
        return "auc"

    def eval(self, scores, adapter: Optional[OutputAdapter] = None) -> List[float]:
        scores = self._check_scores(scores)

        order = parallel_argsort(
            scores,
            descending=True,
            n_jobs=self.config.n_jobs,
            min_parallel_size=self.config.min_parallel_size,
        )
        sorted_scores = scores[order]
        positive = self._label[order] > 0
        if self._weights is None:
            w = np.ones(self._num_data, dtype=np.float64)
        else:
            w = self._weights[order].astype(np.float64)

        starts = tie_group_starts(sorted_scores)
        cur_pos = np.add.reduceat(np.where(positive, w, 0.0), starts)
        cur_neg = np.add.reduceat(np.where(positive, 0.0, w), starts)
        # positive weight of every earlier group
        sum_pos_before = np.concatenate(([0.0], np.cumsum(cur_pos)[:-1]))

        accum = float(np.sum(cur_neg * (cur_pos * 0.5 + sum_pos_before)))
        sum_pos = float(np.sum(cur_pos))
        sum_neg = float(np.sum(cur_neg))

        if sum_pos <= 0.0 or sum_neg <= 0.0:
            logger.debug(
                "auc: single-class data (sum_pos=%.6g, sum_neg=%.6g); returning 1.0",
                sum_pos,
                sum_neg,
            )
            return [1.0]
        return [accum / (sum_pos * sum_neg)]
