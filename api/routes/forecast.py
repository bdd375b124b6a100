"""
Forecast routes producing N-step-ahead forecasts with confidence bounds for one or many metric series.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from typing import List

from fastapi import APIRouter

from api.requests import ForecastBatchRequest, ForecastRequest
from api.responses import ForecastBatchResponse, ForecastResponse
from api.routes.exception import handle_exceptions
from config import settings
from engine.forecast import forecast

router = APIRouter(tags=["Forecast"])
log = logging.getLogger(__name__)


def _run(req: ForecastRequest) -> ForecastResponse:
    result = forecast(
        req.samples(),
        req.horizon,
        seasonal_period=req.seasonal_period,
        strategy=req.strategy,
    )
    return ForecastResponse.from_result(req.metric_name, result)


@router.post("/forecast", summary="Forecast one metric series", response_model=ForecastResponse)
@handle_exceptions
async def forecast_series(req: ForecastRequest) -> ForecastResponse:
    return await asyncio.to_thread(_run, req)


@router.post("/forecast/batch", summary="Forecast many metric series independently", response_model=ForecastBatchResponse)
@handle_exceptions
async def forecast_batch(req: ForecastBatchRequest) -> ForecastBatchResponse:
    semaphore = asyncio.Semaphore(max(1, int(settings.forecast_max_parallel_tasks)))

    async def _bounded(item: ForecastRequest) -> ForecastResponse:
        async with semaphore:
            return await asyncio.to_thread(_run, item)

    results: List[ForecastResponse] = await asyncio.gather(*[_bounded(item) for item in req.series])
    failed = sum(1 for r in results if r.status != "Success")
    if failed:
        log.info("batch forecast: %d of %d series returned errors", failed, len(results))
    return ForecastBatchResponse(results=results)
