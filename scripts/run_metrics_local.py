# scripts/run_metrics_local.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from metric_engine.api import (  # noqa: E402
    AUCMetric,
    BinaryErrorMetric,
    BinaryLoglossMetric,
    Metadata,
    MetricConfig,
    SigmoidOutputAdapter,
    configure_logging,
)

# ==== EDIT THESE VALUES AS YOU LIKE ==========================================
N_SAMPLES = 200_000
POSITIVE_RATE = 0.3
WEIGHTED = True
SEED = 42

CONFIG = MetricConfig(
    n_jobs=-1,               # None = serial, -1 = all cores
    min_parallel_size=1 << 16,
)
ADAPTER = SigmoidOutputAdapter(sigmoid=1.0)   # None => scores are probabilities already
# ============================================================================


def main() -> int:
    logger = configure_logging(logging.DEBUG)
    rng = np.random.default_rng(SEED)

    labels = (rng.random(N_SAMPLES) < POSITIVE_RATE).astype(np.float32)
    weights = rng.uniform(0.5, 2.0, size=N_SAMPLES).astype(np.float32) if WEIGHTED else None
    # raw margins, mildly informative
    scores = rng.normal(size=N_SAMPLES) + 1.2 * (labels - POSITIVE_RATE)

    metadata = Metadata(labels=labels, sample_weights=weights)
    metrics = [BinaryLoglossMetric(CONFIG), BinaryErrorMetric(CONFIG), AUCMetric(CONFIG)]
    for m in metrics:
        m.init(metadata, N_SAMPLES)

    for m in metrics:
        (value,) = m.eval(scores, ADAPTER)
        logger.info("%s = %.6f (%s)", m.get_name()[0], value, m.eval_ordering().value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
