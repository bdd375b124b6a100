"""
Base class shared by the forecasting strategies.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC, abstractmethod

import numpy as np

from config import settings
from engine.enums import Strategy
from engine.forecast.models import ModelFit


class ForecastModel(ABC):
    strategy: Strategy

    def __init__(self, z: float | None = None):
        self.z = settings.forecast_confidence_z if z is None else z

    @abstractmethod
    def fit(self, vals: np.ndarray, horizon: int, period: int = 1) -> ModelFit:
        """Forecast ``horizon`` steps past ``vals``.

        ``period`` is the seasonal cycle length in samples; ``1`` disables
        seasonal handling. Callers validate ``2 <= period <= len(vals) // 2``
        whenever ``period > 1``.
        """

    @staticmethod
    def steps(horizon: int) -> np.ndarray:
        return np.arange(1, horizon + 1, dtype=float)
