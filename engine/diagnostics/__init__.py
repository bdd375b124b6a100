"""
Diagnostics subpackage for the forecasting engine.

Re-exports the trend and seasonality analyzers so the host application can
report on a series independently of forecasting. The implementations live in
``trend.py`` and ``seasonality.py``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.diagnostics.trend import TrendReport, analyze as analyze_trend
from engine.diagnostics.seasonality import SeasonalCandidate, SeasonalityReport, detect as detect_seasonality

__all__ = [
    "TrendReport",
    "analyze_trend",
    "SeasonalCandidate",
    "SeasonalityReport",
    "detect_seasonality",
]
