from __future__ import annotations

"""Public shape utilities for metric inputs.

Conventions
-----------
- labels, weights and scores are 1D: (n_samples,)
- labels/weights are bound once per metric and must never be written through
  the metric; :func:`readonly_view` hands out non-writeable views.
- scores are borrowed for one evaluation call only and are never stored.
"""

from typing import Optional

import numpy as np
from sklearn.utils import column_or_1d


def coerce_1d(a, *, name: str = "array") -> np.ndarray:
    """Return ``a`` as a 1D ndarray; (n, 1) columns are raveled, anything else raises."""
    try:
        return column_or_1d(a, warn=False)
    except ValueError as e:
        raise ValueError(f"{name} must be 1D; {e}") from e


def readonly_view(a, *, name: str = "array") -> np.ndarray:
    """Non-writeable 1D view of ``a``.

    No copy is made when ``a`` already is a 1D numeric ndarray, so the view
    stays tied to the caller's buffer.
    """
    arr = coerce_1d(a, name=name)
    if arr.dtype.kind not in "biuf":
        raise ValueError(f"{name} must be numeric; got dtype {arr.dtype}")
    view = arr.view()
    view.flags.writeable = False
    return view


def check_len(expected: int, arr: np.ndarray, name: str) -> None:
    if arr.shape[0] != expected:
        raise ValueError(
            f"Length mismatch: expected {expected} entries, {name} has {arr.shape[0]}."
        )


def sum_weights(weights: Optional[np.ndarray], num_data: int) -> float:
    """Total weight: the float64 sum of ``weights`` or ``num_data`` when unweighted."""
    if weights is None:
        return float(num_data)
    return float(np.sum(weights, dtype=np.float64))
