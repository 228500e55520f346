"""Smoke test: verify the `metric_engine/` package is importable.

Run from the repository root:

    python scripts/smoke_metric_imports.py

This is intended to fail fast during refactors if imports drift/break.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path


def _ensure_repo_root_on_syspath() -> Path:
    """Ensure repo root is on sys.path.

    This allows running the script from any working directory.
    """

    # This file is <repo_root>/scripts/smoke_metric_imports.py
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)
    return repo_root


def main() -> int:
    _ensure_repo_root_on_syspath()

    modules = [
        "metric_engine.api",
        "metric_engine.contracts",
        "metric_engine.contracts.choices",
        "metric_engine.contracts.metadata",
        "metric_engine.contracts.metric_configs",
        "metric_engine.core.log_config",
        "metric_engine.core.parallel",
        "metric_engine.core.shapes",
        "metric_engine.components.interfaces",
        "metric_engine.components.evaluation.base",
        "metric_engine.components.evaluation.errors",
        "metric_engine.components.evaluation.losses",
        "metric_engine.components.evaluation.pointwise",
        "metric_engine.components.evaluation.ranking",
        "metric_engine.components.prediction.adapters",
        "metric_engine.components.prediction.sources",
    ]

    failures: list[tuple[str, BaseException]] = []
    for mod in modules:
        try:
            importlib.import_module(mod)
        except BaseException as e:  # noqa: BLE001 - this is a smoke test
            failures.append((mod, e))

    if failures:
        print("METRIC ENGINE IMPORT SMOKE TEST: FAILED\n")
        for mod, e in failures:
            print(f"- {mod}: {type(e).__name__}: {e}")
        print("\nFix imports before continuing the refactor.")
        return 1

    # Every metric must expose the full contract.
    from metric_engine.api import AUCMetric, BinaryErrorMetric, BinaryLoglossMetric

    for cls in (AUCMetric, BinaryErrorMetric, BinaryLoglossMetric):
        for attr in ("init", "get_name", "eval_ordering", "eval"):
            assert callable(getattr(cls, attr, None)), f"{cls.__name__} lacks {attr}()"

    print("METRIC ENGINE IMPORT SMOKE TEST: OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
