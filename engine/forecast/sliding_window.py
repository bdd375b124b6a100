"""
Sliding-window memory forecaster, a lightweight stand-in for recurrent sequence models: the average change over a short recent window drives the projection, and in-sample quality is measured walk-forward.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numpy as np

from config import settings
from engine.enums import Strategy
from engine.forecast.base import ForecastModel
from engine.forecast.models import ModelFit
from engine.forecast.numeric import safe_mean, safe_std


class SlidingWindowMemory(ForecastModel):
    strategy = Strategy.sliding_window

    def __init__(self, memory: int | None = None, z: float | None = None):
        super().__init__(z)
        self.memory = settings.sliding_window_memory if memory is None else memory

    def memory_length(self, n: int) -> int:
        return max(1, min(self.memory, n // 2))

    def fit(self, vals: np.ndarray, horizon: int, period: int = 1) -> ModelFit:
        n = len(vals)
        m = self.memory_length(n)

        recent = np.diff(vals[n - m:])
        avg_diff = safe_mean(recent)
        diff_std = safe_std(recent)
        steps = self.steps(horizon)

        estimates = float(vals[-1]) + steps * avg_diff
        half_widths = self.z * diff_std * np.sqrt(steps)

        fitted = np.empty(n - m)
        for i in range(m, n):
            window = vals[i - m:i]
            fitted[i - m] = window[-1] + safe_mean(np.diff(window))

        return ModelFit(
            estimates=estimates,
            half_widths=half_widths,
            fitted=fitted,
            observed=vals[m:].copy(),
        )
