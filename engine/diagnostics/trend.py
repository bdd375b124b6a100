"""
Trend diagnostics for capacity planning: least-squares slope and intercept over the sample index, with trend strength reported as the correlation magnitude sqrt(R²).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from config import settings
from engine.forecast.numeric import as_array, linear_fit, r_squared


@dataclass(frozen=True)
class TrendReport:
    slope: float
    intercept: float
    strength: float
    has_trend: bool


def analyze(vals: Sequence[float] | np.ndarray, strength_threshold: float | None = None) -> TrendReport:
    if strength_threshold is None:
        strength_threshold = settings.trend_strength_threshold
    arr = as_array(vals)
    if len(arr) == 0:
        return TrendReport(slope=0.0, intercept=0.0, strength=0.0, has_trend=False)

    slope, intercept = linear_fit(arr)
    strength = math.sqrt(r_squared(arr, slope, intercept))

    return TrendReport(
        slope=round(slope, 6),
        intercept=round(intercept, 6),
        strength=round(strength, 4),
        has_trend=strength > strength_threshold,
    )
