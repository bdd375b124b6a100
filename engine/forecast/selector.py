"""
Heuristic algorithm selection for the "auto" strategy, based on the volatility and half-over-half drift of a series. The thresholds are placeholders rather than a validated model-selection criterion.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from config import settings
from engine.enums import Strategy
from engine.forecast.numeric import as_array, safe_mean, safe_std

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeriesProfile:
    mean: float
    stddev: float
    volatility: float
    trend_strength: float


def profile(vals: Sequence[float] | np.ndarray) -> SeriesProfile:
    arr = as_array(vals)
    mean = safe_mean(arr)
    std = safe_std(arr)
    volatility = std / abs(mean) if mean != 0 else 0.0

    half = len(arr) // 2
    first = safe_mean(arr[:half])
    second = safe_mean(arr[half:])
    trend_strength = abs(second - first) / abs(first) if first != 0 else 0.0

    return SeriesProfile(
        mean=round(mean, 6),
        stddev=round(std, 6),
        volatility=round(volatility, 6),
        trend_strength=round(trend_strength, 6),
    )


def choose(
    prof: SeriesProfile,
    trend_threshold: float | None = None,
    volatility_threshold: float | None = None,
) -> Strategy:
    if trend_threshold is None:
        trend_threshold = settings.selector_trend_threshold
    if volatility_threshold is None:
        volatility_threshold = settings.selector_volatility_threshold

    if prof.trend_strength > trend_threshold and prof.volatility < volatility_threshold:
        return Strategy.differencing
    if prof.volatility >= volatility_threshold:
        return Strategy.holt_winters
    return Strategy.holt_winters


def select(vals: Sequence[float] | np.ndarray) -> Strategy:
    prof = profile(vals)
    chosen = choose(prof)
    log.debug(
        "auto strategy -> %s (volatility=%.4f trend_strength=%.4f)",
        chosen.value, prof.volatility, prof.trend_strength,
    )
    return chosen
