"""Smoke tests for health and app wiring."""

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from app.infrastructure.persistence.database import get_db
from app.main import app


class _FailingSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


class _HealthySession:
    async def execute(self, *args, **kwargs):
        return None


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok without a token."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("version")


async def test_health_sets_request_and_security_headers(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
    assert response.headers["X-Correlation-ID"] == "abc-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Cache-Control"] == "no-store"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id\nx"})
    assert response.headers["X-Request-ID"] != "bad id\nx"
    assert len(response.headers["X-Request-ID"]) == 36


async def test_ready_returns_ok_when_database_answers(client: AsyncClient) -> None:
    async def _session():
        yield _HealthySession()

    app.dependency_overrides[get_db] = _session
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_ready_returns_503_when_database_unreachable(client: AsyncClient) -> None:
    async def _session():
        yield _FailingSession()

    app.dependency_overrides[get_db] = _session
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json() == {"status": "not_ready", "message": "Database unreachable"}


async def test_unknown_route_uses_error_body(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "HTTP_ERROR"


async def test_openapi_documents_uniform_error_body(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    schema = response.json()
    assert "ErrorResponse" in schema["components"]["schemas"]
    task_get = schema["paths"]["/api/v1/tasks/{task_id}"]["get"]["responses"]
    assert task_get["404"]["content"]["application/json"]["schema"]["$ref"].endswith(
        "/ErrorResponse"
    )
