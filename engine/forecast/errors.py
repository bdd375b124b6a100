# engine/forecast/errors.py

from __future__ import annotations

from engine.enums import ErrorKind


class ForecastError(Exception):
    kind: ErrorKind = ErrorKind.invalid_parameter

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.kind.value}: {detail}" if detail else self.kind.value


class InsufficientData(ForecastError):
    kind = ErrorKind.insufficient_data


class InvalidParameter(ForecastError):
    kind = ErrorKind.invalid_parameter


class DegenerateSeries(ForecastError):
    kind = ErrorKind.degenerate_series
