"""
Data model for the forecasting engine: input samples, forecast points, fit metrics and the result record returned to callers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from engine.enums import ErrorKind, ForecastStatus, Strategy

Timestamp = Union[float, datetime]


@dataclass(frozen=True)
class TimeSeriesSample:
    timestamp: Timestamp
    value: float


@dataclass(frozen=True)
class ForecastPoint:
    timestamp: Timestamp
    point_estimate: float
    lower_bound_95: float
    upper_bound_95: float
    horizon_step: int


@dataclass(frozen=True)
class FitMetrics:
    mse: float = 0.0
    mae: float = 0.0
    rmse: float = 0.0
    mape: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"mse": self.mse, "mae": self.mae, "rmse": self.rmse, "mape": self.mape}


@dataclass(frozen=True)
class ModelFit:
    """Raw output of a strategy before the engine attaches timestamps.

    ``estimates`` and ``half_widths`` have one entry per horizon step;
    ``fitted`` and ``observed`` are the aligned in-sample pairs the
    strategy was able to reconstruct.
    """

    estimates: np.ndarray
    half_widths: np.ndarray
    fitted: np.ndarray
    observed: np.ndarray
    degraded: bool = False

    @property
    def residuals(self) -> np.ndarray:
        return self.observed - self.fitted


@dataclass(frozen=True)
class ForecastResult:
    strategy_used: Optional[Strategy]
    forecasts: Tuple[ForecastPoint, ...]
    in_sample_metrics: FitMetrics
    status: ForecastStatus
    message: str
    confidence_score: float
    error: Optional[ErrorKind] = None
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status == ForecastStatus.success

    def to_document(self) -> Dict[str, Any]:
        return {
            "strategyUsed": self.strategy_used.value if self.strategy_used else None,
            "forecasts": [
                {
                    "timestamp": _timestamp_out(p.timestamp),
                    "value": p.point_estimate,
                    "lowerBound": p.lower_bound_95,
                    "upperBound": p.upper_bound_95,
                    "horizonStep": p.horizon_step,
                }
                for p in self.forecasts
            ],
            "metrics": self.in_sample_metrics.to_dict(),
            "status": self.status.value,
            "message": self.message,
            "confidenceScore": self.confidence_score,
        }


def _timestamp_out(ts: Timestamp) -> Union[float, str]:
    if isinstance(ts, datetime):
        return ts.isoformat()
    return float(ts)


def samples_from(ts: Sequence[Timestamp], vals: Sequence[float]) -> List[TimeSeriesSample]:
    if len(ts) != len(vals):
        raise ValueError(f"timestamps and values differ in length ({len(ts)} != {len(vals)})")
    return [TimeSeriesSample(timestamp=t, value=float(v)) for t, v in zip(ts, vals)]
