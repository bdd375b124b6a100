"""
Holt-Winters triple exponential smoothing with additive level, trend and seasonal components, using fixed smoothing constants supplied through an explicit parameter object.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from config import settings
from engine.enums import Strategy
from engine.forecast.base import ForecastModel
from engine.forecast.errors import InvalidParameter
from engine.forecast.models import ModelFit
from engine.forecast.numeric import finite_or


@dataclass(frozen=True)
class HoltWintersParams:
    alpha: float
    beta: float
    gamma: float

    def __post_init__(self) -> None:
        for name in ("alpha", "beta", "gamma"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise InvalidParameter(f"holt-winters {name} must be in (0, 1], got {value}")

    @classmethod
    def from_settings(cls) -> HoltWintersParams:
        return cls(
            alpha=settings.holt_winters_alpha,
            beta=settings.holt_winters_beta,
            gamma=settings.holt_winters_gamma,
        )


class HoltWinters(ForecastModel):
    strategy = Strategy.holt_winters

    def __init__(
        self,
        params: HoltWintersParams | None = None,
        z: float | None = None,
        error_ratio: float | None = None,
    ):
        super().__init__(z)
        self.params = params or HoltWintersParams.from_settings()
        self.error_ratio = settings.holt_winters_error_ratio if error_ratio is None else error_ratio

    def fit(self, vals: np.ndarray, horizon: int, period: int = 1) -> ModelFit:
        alpha, beta, gamma = self.params.alpha, self.params.beta, self.params.gamma
        n = len(vals)
        seasonal_on = period > 1
        p = max(1, period)

        level = float(vals[0])
        trend = 0.0
        seasonal = np.zeros(p)
        if seasonal_on:
            k = min(p, n)
            seasonal[:k] = vals[:k] - vals[0]

        fitted = np.empty(n - 1)
        for t in range(1, n):
            s = float(seasonal[(t - p) % p]) if seasonal_on and t >= p else 0.0
            # one-step-ahead prediction made before observing vals[t]
            fitted[t - 1] = level + trend + s
            prev_level = level
            level = alpha * (vals[t] - s) + (1 - alpha) * (level + trend)
            trend = beta * (level - prev_level) + (1 - beta) * trend
            if seasonal_on:
                seasonal[t % p] = gamma * (vals[t] - level) + (1 - gamma) * s

        estimates = np.empty(horizon)
        for h in range(1, horizon + 1):
            s = float(seasonal[(n + h - 1) % p]) if seasonal_on else 0.0
            estimates[h - 1] = finite_or(level + h * trend + s)

        half_widths = self.z * self.error_ratio * np.abs(estimates)
        return ModelFit(
            estimates=estimates,
            half_widths=half_widths,
            fitted=fitted,
            observed=vals[1:].copy(),
        )
