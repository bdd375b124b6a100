"""
Constants and configuration for the telemetry forecasting engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


TELEFORECAST_HOST: str = os.getenv("TELEFORECAST_HOST", "0.0.0.0")
TELEFORECAST_PORT: int = int(os.getenv("TELEFORECAST_PORT", "4323"))
TELEFORECAST_LOG_LEVEL: str = os.getenv("TELEFORECAST_LOG_LEVEL", "info").lower()

# interval models understood by the engine; "native" keeps each strategy's
# own error growth, "sqrt_horizon" applies residual_std * sqrt(h) everywhere
INTERVAL_MODEL_NATIVE = "native"
INTERVAL_MODEL_SQRT_HORIZON = "sqrt_horizon"
INTERVAL_MODELS = (INTERVAL_MODEL_NATIVE, INTERVAL_MODEL_SQRT_HORIZON)


class Settings(BaseSettings):
    host: str = TELEFORECAST_HOST
    port: int = TELEFORECAST_PORT
    log_level: str = TELEFORECAST_LOG_LEVEL

    # engine input requirements
    forecast_min_samples: int = 10
    forecast_max_horizon: int = 1000
    # step used to advance timestamps when only one sample is available
    forecast_default_interval_seconds: float = 3600.0

    # interval construction
    forecast_confidence_z: float = 1.96
    forecast_interval_model: str = INTERVAL_MODEL_NATIVE
    forecast_degraded_confidence_factor: float = 0.5

    # holt-winters smoothing defaults
    holt_winters_alpha: float = 0.3
    holt_winters_beta: float = 0.1
    holt_winters_gamma: float = 0.1
    # standard error proxy as a fraction of the forecast magnitude
    holt_winters_error_ratio: float = 0.1

    # differencing / sliding window lookbacks
    differencing_window: int = 5
    sliding_window_memory: int = 10

    # algorithm selection heuristics
    selector_trend_threshold: float = 0.2
    selector_volatility_threshold: float = 0.5

    # diagnostics
    trend_strength_threshold: float = 0.1
    seasonality_correlation_threshold: float = 0.3
    seasonality_min_overlap: int = 5
    seasonality_max_candidates: int = 5
    seasonality_max_period: int = 168

    # batch api
    forecast_batch_max_series: int = 100
    forecast_max_parallel_tasks: int = 4

    model_config = {
        "env_prefix": "TELEFORECAST_",
        "extra": "ignore",
    }


settings = Settings()
