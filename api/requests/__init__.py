from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from config import settings
from engine.forecast import TimeSeriesSample


class SamplePoint(BaseModel):
    timestamp: Union[float, datetime]
    value: float


class SeriesRequest(BaseModel):
    metric_name: str = "metric"
    points: List[SamplePoint] = Field(default_factory=list)

    def samples(self) -> List[TimeSeriesSample]:
        return [TimeSeriesSample(timestamp=p.timestamp, value=p.value) for p in self.points]

    def values(self) -> List[float]:
        return [p.value for p in self.points]


class ForecastRequest(SeriesRequest):
    horizon: int = 24
    seasonal_period: Optional[int] = None
    strategy: str = "auto"


class ForecastBatchRequest(BaseModel):
    series: List[ForecastRequest] = Field(min_length=1, max_length=settings.forecast_batch_max_series)


class SeasonalityRequest(SeriesRequest):
    max_period: Optional[int] = Field(default=None, ge=2)
