"""
Enumerations for forecasting strategies, result status and error kinds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Strategy(str, Enum):
    auto = "auto"
    holt_winters = "HoltWinters"
    differencing = "Differencing"
    trend_seasonal = "TrendSeasonal"
    sliding_window = "SlidingWindow"

    @classmethod
    def parse(cls, name: str | Strategy) -> Strategy:
        """Resolve a caller supplied strategy name.

        Matching is case-insensitive and also accepts the long component
        names (``TrendSeasonalDecomposition``, ``SlidingWindowMemory``).
        Raises :class:`ValueError` for anything else.
        """
        if isinstance(name, Strategy):
            return name
        key = str(name or "").strip().lower().replace("_", "").replace("-", "")
        for member in cls:
            if member.value.lower() == key:
                return member
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"unknown strategy {name!r}")

    @property
    def uses_seasonality(self) -> bool:
        return self in (Strategy.holt_winters, Strategy.trend_seasonal, Strategy.differencing)


_ALIASES = {
    "trendseasonaldecomposition": Strategy.trend_seasonal,
    "slidingwindowmemory": Strategy.sliding_window,
}


class ForecastStatus(str, Enum):
    success = "Success"
    error = "Error"


class ErrorKind(str, Enum):
    insufficient_data = "InsufficientData"
    degenerate_series = "DegenerateSeries"
    invalid_parameter = "InvalidParameter"
