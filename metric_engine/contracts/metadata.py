from __future__ import annotations

"""In-memory metadata container.

The boosting driver usually owns its own dataset metadata object; anything
exposing ``label()`` and ``weights()`` satisfies
:class:`metric_engine.components.interfaces.Metadata`. This dataclass is the
minimal concrete implementation used by scripts and tests.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class Metadata:
    labels: np.ndarray
    sample_weights: Optional[np.ndarray] = None

    def label(self) -> np.ndarray:
        return self.labels

    def weights(self) -> Optional[np.ndarray]:
        return self.sample_weights

    @property
    def num_data(self) -> int:
        return int(np.asarray(self.labels).shape[0])
