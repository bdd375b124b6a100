"""
Diagnostics routes reporting trend, seasonality and selector statistics for a metric series, independent of forecasting.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses

from fastapi import APIRouter

from api.requests import SeasonalityRequest, SeriesRequest
from api.responses import SeasonalityReportOut, SeriesProfileOut, TrendReportOut
from api.routes.exception import handle_exceptions
from engine.diagnostics import analyze_trend, detect_seasonality
from engine.forecast import describe

router = APIRouter(tags=["Diagnostics"])


@router.post("/diagnostics/trend", response_model=TrendReportOut)
@handle_exceptions
async def trend(req: SeriesRequest) -> TrendReportOut:
    report = analyze_trend(req.values())
    return TrendReportOut(metric_name=req.metric_name, **dataclasses.asdict(report))


@router.post("/diagnostics/seasonality", response_model=SeasonalityReportOut)
@handle_exceptions
async def seasonality(req: SeasonalityRequest) -> SeasonalityReportOut:
    report = detect_seasonality(req.values(), max_period=req.max_period)
    return SeasonalityReportOut(metric_name=req.metric_name, **dataclasses.asdict(report))


@router.post("/diagnostics/profile", response_model=SeriesProfileOut)
@handle_exceptions
async def series_profile(req: SeriesRequest) -> SeriesProfileOut:
    return SeriesProfileOut(metric_name=req.metric_name, **describe(req.samples()))
