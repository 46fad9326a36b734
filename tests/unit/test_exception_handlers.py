"""Exception handlers map errors to status codes with one body shape."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.exc import IntegrityError

from app.core.exception_handlers import register_exception_handlers
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    ResourceNotFoundException,
    UpstreamException,
    ValidationException,
)


class _Body(BaseModel):
    title: str


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    errors = {
        "validation": ValidationException("bad", field="title"),
        "authentication": AuthenticationException(),
        "authorization": AuthorizationException("task", "t1"),
        "missing": ResourceNotFoundException("task", "t1"),
        "conflict": ConflictException("gone"),
        "upstream": UpstreamException("directory"),
        "integrity": IntegrityError("INSERT", {}, Exception("fk violation")),
        "boom": RuntimeError("boom"),
    }

    @app.get("/raise/{name}")
    async def _raise(name: str) -> None:
        raise errors[name]

    @app.post("/body")
    async def _body(body: _Body) -> dict:
        return {"title": body.title}

    return app


@pytest.fixture
async def error_client():
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.parametrize(
    ("name", "status", "code"),
    [
        ("validation", 400, "VALIDATION_ERROR"),
        ("authentication", 401, "AUTHENTICATION_ERROR"),
        ("authorization", 401, "AUTHORIZATION_ERROR"),
        ("missing", 404, "RESOURCE_NOT_FOUND"),
        ("conflict", 409, "CONFLICT"),
        ("upstream", 502, "UPSTREAM_ERROR"),
        ("integrity", 409, "CONFLICT"),
        ("boom", 500, "INTERNAL_ERROR"),
    ],
)
async def test_error_status_and_code(
    error_client: AsyncClient, name: str, status: int, code: str
) -> None:
    response = await error_client.get(f"/raise/{name}")
    assert response.status_code == status
    body = response.json()
    assert body["success"] is False
    assert body["code"] == code
    assert "error" in body


async def test_internal_error_hides_message_outside_debug(error_client: AsyncClient) -> None:
    response = await error_client.get("/raise/boom")
    assert response.json()["error"] == "Internal server error"


async def test_request_validation_is_400_with_field_errors(error_client: AsyncClient) -> None:
    response = await error_client.post("/body", json={})
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]["errors"][0]["loc"] == ["body", "title"]


async def test_rate_limit_uses_uniform_body() -> None:
    app = FastAPI()
    limiter = Limiter(key_func=get_remote_address)
    app.state.limiter = limiter
    register_exception_handlers(app)

    @app.post("/limited")
    @limiter.limit("1/minute")
    async def _limited(request: Request) -> dict:
        return {"ok": True}

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        assert (await ac.post("/limited")).status_code == 200
        response = await ac.post("/limited")

    assert response.status_code == 429
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "RATE_LIMITED"
    assert body["error"].startswith("Rate limit exceeded")
