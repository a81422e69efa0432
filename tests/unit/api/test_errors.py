import json

import pytest
from fastapi import Request
from pydantic import ValidationError

from ability_service.api.errors import (
    EXCEPTION_HANDLERS,
    DataSizeExceededError,
    unprocessable_handler,
)
from ability_service.core.errors import InvalidParameterError


def _request(request_id: str | None = None) -> Request:
    request = Request({"type": "http", "method": "POST", "headers": []})
    if request_id is not None:
        request.state.request_id = request_id
    return request


class TestUnprocessableHandler:
    @pytest.mark.asyncio
    async def test_uses_exception_message(self) -> None:
        handler = unprocessable_handler("INVALID_PARAMETER")
        resp = await handler(
            _request("req-1"), InvalidParameterError("p must be in (0, 1)")
        )
        assert resp.status_code == 422
        assert json.loads(resp.body) == {
            "code": "INVALID_PARAMETER",
            "message": "p must be in (0, 1)",
            "request_id": "req-1",
        }

    @pytest.mark.asyncio
    async def test_missing_request_id(self) -> None:
        handler = unprocessable_handler("DATA_SIZE_EXCEEDED")
        resp = await handler(_request(), DataSizeExceededError("too many"))
        body = json.loads(resp.body)
        assert body["request_id"] is None
        assert body["message"] == "too many"

    @pytest.mark.asyncio
    async def test_falls_back_to_str(self) -> None:
        handler = unprocessable_handler("VALIDATION_ERROR")
        resp = await handler(_request(), ValueError("bad value"))
        assert json.loads(resp.body)["message"] == "bad value"


def test_every_handler_registered_once() -> None:
    assert set(EXCEPTION_HANDLERS) == {
        DataSizeExceededError,
        InvalidParameterError,
        ValidationError,
        Exception,
    }
