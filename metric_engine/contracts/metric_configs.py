from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class MetricConfig(BaseModel):
    """Configuration shared by the binary metrics.

    One config instance may be handed to several metrics; metrics never
    mutate it.
    """

    # Clamp for log-loss: probabilities closer than this to 0/1 score -log(epsilon).
    epsilon: float = Field(default=1e-15, gt=0.0, lt=1.0)

    # Worker threads for the per-instance passes. None runs serially,
    # -1 uses every core (joblib convention).
    n_jobs: Optional[int] = None

    # Below this many instances the fork-join machinery is skipped.
    min_parallel_size: int = Field(default=1 << 16, ge=1)

    # Set by the boosting driver for the metric that scores the training
    # partition itself. External-model overrides are illegal there.
    metric_for_train_data: bool = False

    @field_validator("n_jobs")
    @classmethod
    def _check_n_jobs(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v == 0:
            raise ValueError("n_jobs must be a non-zero integer or None")
        return v
