"""
Shared numerical helpers for the forecasting strategies: least-squares trend fits, guarded statistics and in-sample error metrics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from engine.forecast.models import FitMetrics


def as_array(vals: Sequence[float]) -> np.ndarray:
    return np.asarray(vals, dtype=float)


def finite_or(value: float, default: float = 0.0) -> float:
    value = float(value)
    return value if math.isfinite(value) else default


def safe_mean(arr: np.ndarray) -> float:
    if len(arr) == 0:
        return 0.0
    return finite_or(np.mean(arr))


def safe_std(arr: np.ndarray) -> float:
    if len(arr) < 2:
        return 0.0
    return finite_or(np.std(arr))


def linear_fit(vals: np.ndarray) -> Tuple[float, float]:
    """OLS slope and intercept of ``vals`` against their index 0..n-1."""
    if len(vals) < 2:
        return 0.0, safe_mean(vals)
    t = np.arange(len(vals), dtype=float)
    slope, intercept = np.polyfit(t, vals, 1)
    return finite_or(slope), finite_or(intercept)


def r_squared(vals: np.ndarray, slope: float, intercept: float) -> float:
    t = np.arange(len(vals), dtype=float)
    predicted = slope * t + intercept
    ss_res = float(np.sum((vals - predicted) ** 2))
    ss_tot = float(np.sum((vals - np.mean(vals)) ** 2)) if len(vals) else 0.0
    if ss_tot <= 0:
        return 0.0
    return min(1.0, max(0.0, 1.0 - ss_res / ss_tot))


def pearson(a: np.ndarray, b: np.ndarray) -> float:
    if len(a) < 2 or len(a) != len(b):
        return 0.0
    da = a - np.mean(a)
    db = b - np.mean(b)
    denom = math.sqrt(float(np.sum(da * da)) * float(np.sum(db * db)))
    if denom == 0:
        return 0.0
    return finite_or(float(np.sum(da * db)) / denom)


def fit_metrics(observed: np.ndarray, fitted: np.ndarray) -> FitMetrics:
    if len(observed) == 0:
        return FitMetrics()
    residuals = observed - fitted
    mse = finite_or(np.mean(residuals ** 2))
    mae = finite_or(np.mean(np.abs(residuals)))
    nonzero = observed != 0
    # zero observations carry no percentage error
    mape = (
        finite_or(np.mean(np.abs(residuals[nonzero] / observed[nonzero])) * 100.0)
        if np.any(nonzero)
        else 0.0
    )
    return FitMetrics(
        mse=round(mse, 6),
        mae=round(mae, 6),
        rmse=round(math.sqrt(mse), 6),
        mape=round(mape, 4),
    )


def trailing_mean_diffs(diffs: np.ndarray, end: int, window: int) -> float:
    """Mean of up to ``window`` differences ending just before index ``end``."""
    start = max(0, end - window)
    return safe_mean(diffs[start:end])
