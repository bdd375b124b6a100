"""
ARIMA-style differencing forecaster: picks the more stationary of first-order or seasonal differences and projects the recent average change forward with random-walk error growth.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from config import settings
from engine.enums import Strategy
from engine.forecast.base import ForecastModel
from engine.forecast.models import ModelFit
from engine.forecast.numeric import safe_std, trailing_mean_diffs

log = logging.getLogger(__name__)


def _differences(vals: np.ndarray, period: int) -> Tuple[np.ndarray, int]:
    first = np.diff(vals)
    if period > 1 and len(vals) > period:
        seasonal = vals[period:] - vals[:-period]
        if safe_std(seasonal) < safe_std(first):
            return seasonal, period
    return first, 1


class Differencing(ForecastModel):
    strategy = Strategy.differencing

    def __init__(self, window: int | None = None, z: float | None = None):
        super().__init__(z)
        self.window = settings.differencing_window if window is None else window

    def fit(self, vals: np.ndarray, horizon: int, period: int = 1) -> ModelFit:
        diffs, lag = _differences(vals, period)
        log.debug("differencing at lag %d over %d samples", lag, len(vals))

        avg_diff = trailing_mean_diffs(diffs, len(diffs), self.window)
        diff_std = safe_std(diffs)
        steps = self.steps(horizon)

        estimates = float(vals[-1]) + steps * avg_diff
        half_widths = self.z * diff_std * np.sqrt(steps)

        # diffs[i] describes the change arriving at vals[i + lag]
        observed = vals[lag:]
        fitted = np.empty(len(observed))
        for i in range(len(observed)):
            fitted[i] = vals[i] + trailing_mean_diffs(diffs, i, self.window)

        return ModelFit(
            estimates=estimates,
            half_widths=half_widths,
            fitted=fitted,
            observed=observed.copy(),
        )
