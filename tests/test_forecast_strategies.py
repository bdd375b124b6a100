"""
Test cases for the individual forecasting strategies: Holt-Winters smoothing, differencing, trend/seasonal decomposition and sliding-window memory.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.forecast import (
    Differencing,
    HoltWinters,
    HoltWintersParams,
    InvalidParameter,
    SlidingWindowMemory,
    TrendSeasonalDecomposition,
    forecast,
)
from engine.forecast.differencing import _differences
from engine.forecast.decomposition import _seasonal_effects


def test_holt_winters_follows_upward_trend():
    vals = np.array([2.0 * t + 5 for t in range(20)])
    fit = HoltWinters().fit(vals, 3)
    assert np.all(np.diff(fit.estimates) > 0)
    assert len(fit.fitted) == len(fit.observed) == 19


def test_holt_winters_width_is_proportional_to_magnitude():
    vals = np.array([100.0 + (t % 3) for t in range(15)])
    fit = HoltWinters().fit(vals, 4)
    assert fit.half_widths == pytest.approx(1.96 * 0.1 * np.abs(fit.estimates))


def test_holt_winters_seasonal_component_shapes_forecast():
    vals = np.array([10.0, 20.0, 10.0, 0.0] * 5)
    fit = HoltWinters().fit(vals, 4, period=4)
    assert np.ptp(fit.estimates) > 0


def test_holt_winters_params_are_configurable():
    vals = np.array([1.0, 3.0, 2.0, 5.0, 4.0, 6.0, 5.0, 8.0, 7.0, 9.0])
    slow = HoltWinters(HoltWintersParams(alpha=0.1, beta=0.1, gamma=0.1)).fit(vals, 1)
    fast = HoltWinters(HoltWintersParams(alpha=0.9, beta=0.1, gamma=0.1)).fit(vals, 1)
    # a faster level tracks the last observation more closely
    assert abs(fast.estimates[0] - vals[-1]) < abs(slow.estimates[0] - vals[-1])


@pytest.mark.parametrize("kwargs", [
    {"alpha": 0.0, "beta": 0.1, "gamma": 0.1},
    {"alpha": 0.3, "beta": 1.5, "gamma": 0.1},
    {"alpha": 0.3, "beta": 0.1, "gamma": -0.2},
])
def test_holt_winters_params_validated(kwargs):
    with pytest.raises(InvalidParameter):
        HoltWintersParams(**kwargs)


def test_engine_uses_supplied_holt_winters_params(make_series):
    series = make_series([1, 3, 2, 5, 4, 6, 5, 8, 7, 9])
    default = forecast(series, 1, strategy="HoltWinters")
    tuned = forecast(series, 1, strategy="HoltWinters", holt_winters=HoltWintersParams(0.9, 0.1, 0.1))
    assert default.forecasts[0].point_estimate != tuned.forecasts[0].point_estimate


def test_differencing_projects_recent_average_change():
    vals = np.array([10, 12, 11, 13, 12, 14, 13, 15, 14, 16], dtype=float)
    fit = Differencing().fit(vals, 3)
    assert fit.estimates == pytest.approx([16.8, 17.6, 18.4])
    std = np.std(np.diff(vals))
    assert fit.half_widths == pytest.approx(1.96 * std * np.sqrt([1, 2, 3]))


def test_differencing_in_sample_fit_uses_trailing_changes():
    vals = np.array([0, 1, 2, 3, 4, 5, 6, 7, 8, 9], dtype=float)
    fit = Differencing().fit(vals, 1)
    # first step has no prior change to learn from
    assert fit.fitted[0] == pytest.approx(0.0)
    assert fit.fitted[1:] == pytest.approx(vals[2:])


def test_differencing_prefers_seasonal_differences_when_more_stationary():
    vals = np.array([10.0, 20.0, 30.0, 40.0] * 4)
    diffs, lag = _differences(vals, 4)
    assert lag == 4
    assert np.all(diffs == 0)
    fit = Differencing().fit(vals, 3, period=4)
    assert fit.estimates == pytest.approx([40.0, 40.0, 40.0])
    assert fit.half_widths == pytest.approx([0.0, 0.0, 0.0])
    assert np.all(fit.residuals == 0)


def test_differencing_keeps_first_differences_for_trend():
    vals = np.arange(20, dtype=float)
    _, lag = _differences(vals, 4)
    assert lag == 1


def test_decomposition_extrapolates_linear_trend():
    vals = np.array([3.0 * t + 2 for t in range(12)])
    fit = TrendSeasonalDecomposition().fit(vals, 3)
    assert fit.estimates == pytest.approx([38.0, 41.0, 44.0])
    assert fit.half_widths == pytest.approx([0.0, 0.0, 0.0], abs=1e-6)


def test_decomposition_recovers_seasonal_effects():
    pattern = np.array([5.0, -5.0, -5.0, 5.0])
    vals = np.tile(pattern, 6) + 100.0
    fit = TrendSeasonalDecomposition().fit(vals, 4, period=4)
    assert fit.estimates == pytest.approx(100.0 + pattern, abs=1e-6)
    assert np.allclose(fit.half_widths, fit.half_widths[0])


def test_seasonal_effects_average_per_phase():
    residuals = np.array([1.0, -1.0, 3.0, -3.0])
    assert _seasonal_effects(residuals, 2) == pytest.approx([2.0, -2.0])


def test_sliding_window_projects_average_change():
    vals = np.array([2.0 * t for t in range(20)])
    model = SlidingWindowMemory()
    fit = model.fit(vals, 3)
    assert model.memory_length(20) == 10
    assert fit.estimates == pytest.approx([40.0, 42.0, 44.0])
    assert fit.half_widths == pytest.approx([0.0, 0.0, 0.0])
    assert len(fit.observed) == 10
    assert np.all(fit.residuals == 0)


def test_sliding_window_memory_capped_by_half_series():
    assert SlidingWindowMemory().memory_length(12) == 6
    assert SlidingWindowMemory(memory=3).memory_length(40) == 3


def test_sliding_window_width_grows_with_sqrt_horizon():
    vals = np.array([1.0, 4.0, 2.0, 6.0, 3.0, 7.0, 5.0, 9.0, 6.0, 11.0, 8.0, 12.0])
    fit = SlidingWindowMemory().fit(vals, 4)
    assert fit.half_widths[3] == pytest.approx(2 * fit.half_widths[0])
    assert fit.half_widths[0] > 0
