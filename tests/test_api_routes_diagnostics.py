"""
Test Suite for API Routes - Diagnostics

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from api.requests import SeasonalityRequest, SeriesRequest
from api.routes import diagnostics as diagnostics_route


def _points(vals):
    return [{"timestamp": 60.0 * i, "value": v} for i, v in enumerate(vals)]


@pytest.mark.asyncio
async def test_trend_route():
    req = SeriesRequest(metric_name="disk", points=_points([2.0 * i for i in range(12)]))
    resp = await diagnostics_route.trend(req)
    assert resp.metric_name == "disk"
    assert resp.has_trend is True
    assert resp.slope == pytest.approx(2.0)


@pytest.mark.asyncio
async def test_seasonality_route():
    vals = [math.sin(2 * math.pi * i / 12) for i in range(48)]
    resp = await diagnostics_route.seasonality(SeasonalityRequest(points=_points(vals)))
    assert resp.has_seasonality is True
    assert resp.dominant_period == 12
    assert resp.candidate_periods[0].period == 12


@pytest.mark.asyncio
async def test_profile_route_reports_auto_choice():
    req = SeriesRequest(points=_points([10, 12, 11, 13, 12, 14, 13, 15, 14, 16]))
    resp = await diagnostics_route.series_profile(req)
    assert resp.strategy == "Differencing"
    assert resp.mean == pytest.approx(13.0)

