"""
Trend plus seasonal decomposition forecaster in the spirit of Prophet: a least-squares linear trend over the sample index combined with per-phase average residuals.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numpy as np

from engine.enums import Strategy
from engine.forecast.base import ForecastModel
from engine.forecast.models import ModelFit
from engine.forecast.numeric import linear_fit, safe_std


def _seasonal_effects(residuals: np.ndarray, period: int) -> np.ndarray:
    effects = np.zeros(period)
    phases = np.arange(len(residuals)) % period
    for phase in range(period):
        bucket = residuals[phases == phase]
        if len(bucket):
            effects[phase] = float(np.mean(bucket))
    return effects


class TrendSeasonalDecomposition(ForecastModel):
    strategy = Strategy.trend_seasonal

    def fit(self, vals: np.ndarray, horizon: int, period: int = 1) -> ModelFit:
        n = len(vals)
        p = max(1, period)
        slope, intercept = linear_fit(vals)

        t = np.arange(n, dtype=float)
        trend = intercept + slope * t
        effects = _seasonal_effects(vals - trend, p) if p > 1 else np.zeros(1)

        fitted = trend + effects[np.arange(n) % p]
        residual_std = safe_std(vals - fitted)

        future_t = np.arange(n, n + horizon)
        estimates = intercept + slope * future_t + effects[future_t % p]
        half_widths = np.full(horizon, self.z * residual_std)

        return ModelFit(
            estimates=estimates.astype(float),
            half_widths=half_widths,
            fitted=fitted,
            observed=vals.copy(),
        )
