"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler so that
errors escaping it become :class:`fastapi.HTTPException` responses.
HTTPExceptions raised by the handler propagate untouched. Engine errors
(:class:`engine.forecast.ForecastError`) that escape outside of a forecast
result, for example malformed samples passed to a diagnostics route, become
a ``422`` carrying the error kind. Anything else is logged and turned into a
``500`` with the exception message as the detail.

Forecast requests themselves never reach this path for caller mistakes: the
engine reports them inside the result document with ``status="Error"``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from engine.forecast import ForecastError

F = TypeVar("F", bound=Callable[..., Any])
log = logging.getLogger(__name__)


def _translate(func: Callable[..., Any], exc: Exception) -> HTTPException:
    if isinstance(exc, ForecastError):
        return HTTPException(status_code=422, detail=str(exc))
    log.exception("unhandled error in %s", getattr(func, "__name__", "route"))
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    Works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _translate(func, exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(func, exc) from exc

    return cast(F, sync_wrapper)
