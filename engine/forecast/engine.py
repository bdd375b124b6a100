"""
Forecast orchestration: validates a sample series and request parameters, resolves the strategy (delegating to the selector for "auto"), runs it and assembles the result record with in-sample fit metrics, confidence intervals and a confidence score.

The engine is a pure function of its inputs. Every failure a caller can
cause is reported through the returned :class:`ForecastResult` with
``status=Error``; numeric edge cases are replaced by neutral defaults and
only lower the confidence score.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
import numbers
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from config import INTERVAL_MODEL_SQRT_HORIZON, INTERVAL_MODELS, settings
from engine.enums import ForecastStatus, Strategy
from engine.forecast import selector
from engine.forecast.base import ForecastModel
from engine.forecast.decomposition import TrendSeasonalDecomposition
from engine.forecast.differencing import Differencing
from engine.forecast.errors import DegenerateSeries, ForecastError, InsufficientData, InvalidParameter
from engine.forecast.holt_winters import HoltWinters, HoltWintersParams
from engine.forecast.models import FitMetrics, ForecastPoint, ForecastResult, ModelFit, TimeSeriesSample, Timestamp
from engine.forecast.numeric import fit_metrics, safe_std
from engine.forecast.sliding_window import SlidingWindowMemory

log = logging.getLogger(__name__)

SampleLike = Union[TimeSeriesSample, Tuple[Timestamp, float]]


def infer_interval(samples: Sequence[TimeSeriesSample]) -> Union[float, timedelta]:
    """Sampling step taken from the last two samples, or the configured default."""
    default = settings.forecast_default_interval_seconds
    if not samples:
        return default
    last = samples[-1].timestamp
    if isinstance(last, datetime):
        default = timedelta(seconds=default)
    if len(samples) < 2:
        return default
    delta = last - samples[-2].timestamp
    zero = timedelta(0) if isinstance(delta, timedelta) else 0
    return delta if delta != zero else default


def _coerce_samples(series: Optional[Sequence[SampleLike]]) -> List[TimeSeriesSample]:
    samples: List[TimeSeriesSample] = []
    for item in (series if series is not None else []):
        if isinstance(item, TimeSeriesSample):
            samples.append(item)
        else:
            try:
                ts, value = item
                samples.append(TimeSeriesSample(timestamp=ts, value=float(value)))
            except (TypeError, ValueError) as exc:
                raise InvalidParameter(f"malformed sample {item!r}") from exc
    return samples


def _integral(value: Any, name: str) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidParameter(f"{name} must be an integer, got {value!r}") from exc
    if not number.is_integer():
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    return int(number)


def _check_ordering(samples: Sequence[TimeSeriesSample]) -> None:
    for s in samples:
        ts = s.timestamp
        if isinstance(ts, bool) or not isinstance(ts, (datetime, numbers.Real)):
            raise InvalidParameter(f"sample timestamp {ts!r} is neither a number nor a datetime")
        if not isinstance(ts, datetime) and not math.isfinite(ts):
            raise InvalidParameter(f"sample timestamp {ts!r} is not finite")
    try:
        for prev, cur in zip(samples, samples[1:]):
            if cur.timestamp < prev.timestamp:
                raise InvalidParameter("samples must be sorted ascending by timestamp")
    except TypeError as exc:
        raise InvalidParameter("sample timestamps are not mutually comparable") from exc


def _resolve_period(seasonal_period: Any, n: int, strategy: Strategy) -> int:
    if seasonal_period is None:
        return 1
    period = _integral(seasonal_period, "seasonal period")
    if period < 1:
        raise InvalidParameter(f"seasonal period must be >= 1, got {period}")
    if not strategy.uses_seasonality:
        return 1
    if period > 1 and period > n // 2:
        raise InvalidParameter(
            f"seasonal period {period} exceeds floor(n/2)={n // 2} for {n} samples"
        )
    return period


class ForecastEngine:
    def __init__(
        self,
        holt_winters: HoltWintersParams | None = None,
        interval_model: str | None = None,
        min_samples: int | None = None,
    ):
        self.holt_winters = holt_winters
        self.interval_model = interval_model or settings.forecast_interval_model
        if self.interval_model not in INTERVAL_MODELS:
            raise ValueError(f"unknown interval model {self.interval_model!r}")
        self.min_samples = settings.forecast_min_samples if min_samples is None else min_samples

    def model_for(self, strategy: Strategy) -> ForecastModel:
        if strategy == Strategy.holt_winters:
            return HoltWinters(self.holt_winters)
        if strategy == Strategy.differencing:
            return Differencing()
        if strategy == Strategy.trend_seasonal:
            return TrendSeasonalDecomposition()
        if strategy == Strategy.sliding_window:
            return SlidingWindowMemory()
        raise InvalidParameter(f"no model for strategy {strategy.value}")

    def forecast(
        self,
        series: Optional[Sequence[SampleLike]],
        horizon: int,
        seasonal_period: Optional[int] = None,
        strategy: Union[str, Strategy] = Strategy.auto,
    ) -> ForecastResult:
        resolved: Optional[Strategy] = None
        try:
            samples = _coerce_samples(series)
            vals, horizon = self._validate(samples, horizon)

            try:
                resolved = Strategy.parse(strategy)
            except ValueError as exc:
                raise InvalidParameter(str(exc)) from exc
            if resolved == Strategy.auto:
                resolved = selector.select(vals)
            period = _resolve_period(seasonal_period, len(vals), resolved)

            with np.errstate(all="ignore"):
                fit = self.model_for(resolved).fit(vals, horizon, period)
            return self._assemble(samples, vals, horizon, resolved, fit)
        except ForecastError as exc:
            log.info("forecast rejected: %s", exc)
            return _error_result(resolved, exc)
        except (np.linalg.LinAlgError, FloatingPointError) as exc:
            log.warning("forecast failed numerically: %s", exc)
            return _error_result(resolved, DegenerateSeries(str(exc)))

    def _validate(self, samples: List[TimeSeriesSample], horizon: Any) -> Tuple[np.ndarray, int]:
        n = len(samples)
        if n < self.min_samples:
            raise InsufficientData(
                f"insufficient data: {n} sample(s) provided, at least {self.min_samples} required"
            )
        steps = _integral(horizon, "horizon")
        if steps < 1:
            raise InvalidParameter(f"horizon must be >= 1, got {steps}")
        if steps > settings.forecast_max_horizon:
            raise InvalidParameter(
                f"horizon {steps} exceeds maximum of {settings.forecast_max_horizon}"
            )
        _check_ordering(samples)

        vals = np.array([s.value for s in samples], dtype=float)
        if not np.all(np.isfinite(vals)):
            raise InvalidParameter("series contains non-finite values")
        return vals, steps

    def _half_widths(self, fit: ModelFit, horizon: int) -> np.ndarray:
        if self.interval_model == INTERVAL_MODEL_SQRT_HORIZON:
            residual_std = safe_std(fit.residuals)
            steps = np.arange(1, horizon + 1, dtype=float)
            return settings.forecast_confidence_z * residual_std * np.sqrt(steps)
        return fit.half_widths

    def _assemble(
        self,
        samples: List[TimeSeriesSample],
        vals: np.ndarray,
        horizon: int,
        strategy: Strategy,
        fit: ModelFit,
    ) -> ForecastResult:
        warnings: List[str] = []
        degraded = fit.degraded

        if safe_std(vals) == 0:
            degraded = True
            warnings.append(str(DegenerateSeries("series has zero variance")))
            log.warning("degenerate series: zero variance over %d samples", len(vals))

        estimates = np.asarray(fit.estimates, dtype=float)
        widths = np.abs(np.asarray(self._half_widths(fit, horizon), dtype=float))
        bad_points = ~np.isfinite(estimates)
        bad_widths = ~np.isfinite(widths)
        if np.any(bad_points) or np.any(bad_widths):
            degraded = True
            warnings.append("non-finite forecast values replaced with neutral defaults")
            estimates = np.where(bad_points, float(vals[-1]), estimates)
            widths = np.where(bad_widths, 0.0, widths)

        step = infer_interval(samples)
        last_ts = samples[-1].timestamp
        points: List[ForecastPoint] = []
        for h in range(1, horizon + 1):
            value = round(float(estimates[h - 1]), 6)
            width = round(float(widths[h - 1]), 6)
            points.append(ForecastPoint(
                timestamp=last_ts + step * h,
                point_estimate=value,
                lower_bound_95=value - width,
                upper_bound_95=value + width,
                horizon_step=h,
            ))

        metrics = fit_metrics(fit.observed, fit.fitted)
        confidence = _confidence(metrics, degraded)
        message = f"Forecast generated with {strategy.value} for {horizon} step(s)"
        if degraded:
            message += " (degraded: " + "; ".join(warnings or ["neutral defaults used"]) + ")"

        return ForecastResult(
            strategy_used=strategy,
            forecasts=tuple(points),
            in_sample_metrics=metrics,
            status=ForecastStatus.success,
            message=message,
            confidence_score=confidence,
            warnings=tuple(warnings),
        )


def _confidence(metrics: FitMetrics, degraded: bool) -> float:
    score = min(1.0, max(0.0, 1.0 - metrics.mape / 100.0))
    if degraded:
        score *= settings.forecast_degraded_confidence_factor
    return round(score, 4)


def _error_result(strategy: Optional[Strategy], exc: ForecastError) -> ForecastResult:
    return ForecastResult(
        strategy_used=strategy,
        forecasts=(),
        in_sample_metrics=FitMetrics(),
        status=ForecastStatus.error,
        message=str(exc),
        confidence_score=0.0,
        error=exc.kind,
    )


def forecast(
    series: Optional[Sequence[SampleLike]],
    horizon: int,
    seasonal_period: Optional[int] = None,
    strategy: Union[str, Strategy] = Strategy.auto,
    holt_winters: HoltWintersParams | None = None,
) -> ForecastResult:
    return ForecastEngine(holt_winters=holt_winters).forecast(
        series, horizon, seasonal_period=seasonal_period, strategy=strategy
    )


def describe(series: Sequence[SampleLike]) -> Dict[str, Any]:
    """Selector statistics for a series plus the strategy "auto" would pick."""
    vals = np.array([s.value for s in _coerce_samples(series)], dtype=float)
    prof = selector.profile(vals)
    return {
        "mean": prof.mean,
        "stddev": prof.stddev,
        "volatility": prof.volatility,
        "trend_strength": prof.trend_strength,
        "strategy": selector.choose(prof).value,
    }
