"""
Tests for the route exception translation decorator.
"""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from api.routes.exception import handle_exceptions
from engine.forecast import InvalidParameter


@pytest.mark.asyncio
async def test_forecast_errors_become_422():
    @handle_exceptions
    async def route():
        raise InvalidParameter("malformed sample")

    with pytest.raises(HTTPException) as info:
        await route()
    assert info.value.status_code == 422
    assert info.value.detail.startswith("InvalidParameter")


@pytest.mark.asyncio
async def test_unexpected_errors_become_500():
    @handle_exceptions
    async def route():
        raise RuntimeError("boom")

    with pytest.raises(HTTPException) as info:
        await route()
    assert info.value.status_code == 500
    assert info.value.detail == "boom"


def test_http_exceptions_pass_through_sync_handlers():
    @handle_exceptions
    def route():
        raise HTTPException(status_code=404, detail="missing")

    with pytest.raises(HTTPException) as info:
        route()
    assert info.value.status_code == 404
