"""GraphUserDirectory with msal and Graph HTTP calls replaced."""

import httpx
import pytest

from app.application.dtos.user import DirectoryUser
from app.domain.exceptions import UpstreamException
from app.infrastructure.external.directory import graph_directory
from app.infrastructure.external.directory.graph_directory import (
    GraphUserDirectory,
    NullUserDirectory,
)


class _FakeMsalApp:
    token_result: dict = {"access_token": "app-token"}

    def __init__(self, client_id, authority=None, client_credential=None) -> None:
        self.authority = authority

    def acquire_token_for_client(self, scopes):
        return self.token_result


@pytest.fixture(autouse=True)
def fake_msal(monkeypatch):
    monkeypatch.setattr(graph_directory, "ConfidentialClientApplication", _FakeMsalApp)
    _FakeMsalApp.token_result = {"access_token": "app-token"}


def _directory(handler) -> GraphUserDirectory:
    return GraphUserDirectory(
        client_id="cid",
        client_secret="secret",
        tenant_id="tid",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


async def test_get_user_maps_display_name_and_mail() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"displayName": "Ada", "mail": "ada@example.com"})

    user = await _directory(handler).get_user("ext-1")
    assert user == DirectoryUser(name="Ada", email="ada@example.com")
    assert seen[0].url.path.endswith("/users/ext-1")
    assert seen[0].headers["Authorization"] == "Bearer app-token"


async def test_get_user_falls_back_to_principal_name() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"displayName": None, "userPrincipalName": "ada@corp"})

    user = await _directory(handler).get_user("ext-1")
    assert user == DirectoryUser(name="", email="ada@corp")


async def test_missing_user_is_blank_profile() -> None:
    user = await _directory(lambda request: httpx.Response(404)).get_user("ext-1")
    assert user == DirectoryUser()


@pytest.mark.parametrize(
    "response",
    [httpx.Response(500), httpx.Response(200, content=b"not json"), httpx.Response(200, json=[1])],
)
async def test_bad_directory_answers_are_upstream_errors(response: httpx.Response) -> None:
    with pytest.raises(UpstreamException):
        await _directory(lambda request: response).get_user("ext-1")


async def test_token_failure_is_upstream_error() -> None:
    _FakeMsalApp.token_result = {"error": "invalid_client", "error_description": "bad secret"}
    with pytest.raises(UpstreamException):
        await _directory(lambda request: httpx.Response(200, json={})).get_user("ext-1")


async def test_null_directory_returns_blanks() -> None:
    assert await NullUserDirectory().get_user("ext-1") == DirectoryUser()
