"""
Forecasting engine producing N-step-ahead forecasts with 95% confidence bounds, choosing between Holt-Winters smoothing, differencing, trend/seasonal decomposition and sliding-window memory models either explicitly or through a series-statistics heuristic.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.models import (
    FitMetrics,
    ForecastPoint,
    ForecastResult,
    TimeSeriesSample,
    samples_from,
)
from engine.forecast.errors import DegenerateSeries, ForecastError, InsufficientData, InvalidParameter
from engine.forecast.holt_winters import HoltWinters, HoltWintersParams
from engine.forecast.differencing import Differencing
from engine.forecast.decomposition import TrendSeasonalDecomposition
from engine.forecast.sliding_window import SlidingWindowMemory
from engine.forecast.selector import SeriesProfile, profile, select
from engine.forecast.engine import ForecastEngine, describe, forecast, infer_interval

__all__ = [
    "FitMetrics",
    "ForecastPoint",
    "ForecastResult",
    "TimeSeriesSample",
    "samples_from",
    "DegenerateSeries",
    "ForecastError",
    "InsufficientData",
    "InvalidParameter",
    "HoltWinters",
    "HoltWintersParams",
    "Differencing",
    "TrendSeasonalDecomposition",
    "SlidingWindowMemory",
    "SeriesProfile",
    "profile",
    "select",
    "ForecastEngine",
    "describe",
    "forecast",
    "infer_interval",
]
