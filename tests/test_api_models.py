import pytest

from api.requests import ForecastBatchRequest, ForecastRequest
from api.responses import ForecastResponse
from engine.forecast import forecast
from pydantic import ValidationError


def test_forecast_request_defaults():
    req = ForecastRequest(points=[{"timestamp": 0, "value": 1.0}])
    assert req.strategy == "auto"
    assert req.seasonal_period is None
    assert req.samples()[0].value == 1.0


def test_forecast_request_parses_iso_timestamps():
    req = ForecastRequest(points=[{"timestamp": "2026-01-01T00:00:00", "value": 1.0}])
    assert req.samples()[0].timestamp.year == 2026


def test_batch_request_requires_series():
    with pytest.raises(ValidationError):
        ForecastBatchRequest(series=[])


def test_forecast_response_is_flat_document(make_series):
    result = forecast(make_series(range(12)), 2, strategy="SlidingWindow")
    body = ForecastResponse.from_result("cpu", result).model_dump()
    assert body["metric_name"] == "cpu"
    assert body["strategyUsed"] == "SlidingWindow"
    assert body["forecasts"][0]["horizonStep"] == 1
    assert body["status"] == "Success"
