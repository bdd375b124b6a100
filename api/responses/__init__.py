"""
Response models for API endpoints.

Forecast responses use the flat camelCase document shape shared with the
dashboard and alerting collaborators; diagnostics keep the engine's field
names.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from engine.forecast import ForecastResult


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class ForecastPointOut(NpModel):

    timestamp: Union[float, str]
    value: float
    lowerBound: float
    upperBound: float
    horizonStep: int


class FitMetricsOut(NpModel):

    mse: float
    mae: float
    rmse: float
    mape: float


class ForecastResponse(NpModel):

    metric_name: str
    strategyUsed: Optional[str]
    forecasts: List[ForecastPointOut]
    metrics: FitMetricsOut
    status: str
    message: str
    confidenceScore: float = Field(ge=0.0, le=1.0)

    @classmethod
    def from_result(cls, metric_name: str, result: ForecastResult) -> ForecastResponse:
        return cls(metric_name=metric_name, **result.to_document())


class ForecastBatchResponse(NpModel):

    results: List[ForecastResponse]


class TrendReportOut(NpModel):

    metric_name: str
    slope: float
    intercept: float
    strength: float = Field(ge=0.0, le=1.0)
    has_trend: bool


class SeasonalCandidateOut(NpModel):

    period: int
    strength: float


class SeasonalityReportOut(NpModel):

    metric_name: str
    candidate_periods: List[SeasonalCandidateOut]
    dominant_period: Optional[int]
    dominant_strength: float
    has_seasonality: bool


class SeriesProfileOut(NpModel):

    metric_name: str
    mean: float
    stddev: float
    volatility: float
    trend_strength: float
    strategy: str
