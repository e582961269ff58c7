"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from api.exception_handlers import setup_exception_handlers
from core.exceptions import MatchNotFoundError, MembershipRequiredError


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _get(app: FastAPI, path: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


def _handler_for(app: FastAPI, exc_class: type):
    return app.exception_handlers[exc_class]


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_app_exception_returns_error_code_and_message(self) -> None:
        app = _create_test_app()

        @app.get("/raise-app")
        async def _() -> None:
            raise MatchNotFoundError("some-id")

        response = await _get(app, "/raise-app")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "MATCH_NOT_FOUND"
        assert "some-id" in body["message"]
        assert body["details"]["match_id"] == "some-id"

    @pytest.mark.asyncio
    async def test_membership_error_is_403(self) -> None:
        app = _create_test_app()

        @app.get("/likes")
        async def _() -> None:
            raise MembershipRequiredError()

        response = await _get(app, "/likes")

        assert response.status_code == 403
        assert response.json()["error_code"] == "MEMBERSHIP_REQUIRED"

    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        response = await _get(_create_test_app(), "/nowhere")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "HTTP_ERROR"
        assert body["details"] is None

    @pytest.mark.asyncio
    async def test_validation_error_returns_field_details(self) -> None:
        from pydantic import BaseModel, Field

        app = _create_test_app()

        class Body(BaseModel):
            content: str = Field(..., min_length=1)

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"content": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.content"

    @pytest.mark.asyncio
    async def test_database_error_returns_500_with_request_id(self) -> None:
        app = _create_test_app()
        request = MagicMock()
        request.state.request_id = "db-req-id"
        exc = OperationalError("SELECT 1", {}, Exception("connection lost"))

        response = await _handler_for(app, SQLAlchemyError)(request, exc)

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "DATABASE_ERROR"
        assert body["details"]["request_id"] == "db-req-id"
        assert "connection lost" not in body["message"]

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self) -> None:
        app = _create_test_app()
        request = MagicMock()
        request.state.request_id = "test-req-id"

        response = await _handler_for(app, Exception)(request, RuntimeError("boom"))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["details"]["request_id"] == "test-req-id"
