"""
Seasonality diagnostics: scans candidate lags for autocorrelation and reports the strongest repeating cycles.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.forecast.numeric import as_array, pearson


@dataclass(frozen=True)
class SeasonalCandidate:
    period: int
    strength: float


@dataclass(frozen=True)
class SeasonalityReport:
    candidate_periods: Tuple[SeasonalCandidate, ...]
    dominant_period: Optional[int]
    dominant_strength: float
    has_seasonality: bool


def autocorrelation(arr: np.ndarray, lag: int) -> float:
    n = len(arr)
    if lag <= 0 or lag >= n:
        return 0.0
    return pearson(arr[: n - lag], arr[lag:])


def detect(
    vals: Sequence[float] | np.ndarray,
    max_period: int | None = None,
    threshold: float | None = None,
) -> SeasonalityReport:
    if max_period is None:
        max_period = settings.seasonality_max_period
    if threshold is None:
        threshold = settings.seasonality_correlation_threshold
    arr = as_array(vals)
    n = len(arr)

    found: List[SeasonalCandidate] = []
    for lag in range(2, min(max_period, n // 2) + 1):
        if n - lag < settings.seasonality_min_overlap:
            continue
        r = autocorrelation(arr, lag)
        if abs(r) > threshold:
            found.append(SeasonalCandidate(period=lag, strength=round(r, 4)))

    # multiples and half-cycles of the true period tie on |r|; prefer positive, then shorter
    found.sort(key=lambda c: (-abs(c.strength), c.strength < 0, c.period))
    top = tuple(found[: settings.seasonality_max_candidates])

    if not top:
        return SeasonalityReport(
            candidate_periods=(),
            dominant_period=None,
            dominant_strength=0.0,
            has_seasonality=False,
        )
    return SeasonalityReport(
        candidate_periods=top,
        dominant_period=top[0].period,
        dominant_strength=top[0].strength,
        has_seasonality=True,
    )
