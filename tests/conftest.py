"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from deploy_reporter.config import Settings, get_settings
from deploy_reporter.utils.logging import configure_logging

SETTINGS_ENV_VARS = [
    "AUTH_TOKEN",
    "REPOSITORY_URL",
    "COMMIT_HASH",
    "API_BASE_URL",
    "REQUEST_TIMEOUT",
    "SET_SPECIFIC_STATUS",
    "BUILD_URL",
    "STATUS_IDENTIFIER",
    "DESCRIPTION",
    "VERBOSE",
    "BITRISE_BUILD_STATUS",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    configure_logging("DEBUG")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from settings exported by the CI runner."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build settings with required values filled in."""

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "auth_token": "s3cr3t-token",
            "repository_url": "git@github.com:acme/widgets.git",
            "commit_hash": "abc123",
            "api_base_url": "https://api.github.test",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


class FakeGitHub:
    """Records requests and answers like the deployments API."""

    def __init__(
        self,
        deployment_status: int = 201,
        deployment_body: Any = None,
        status_status: int = 201,
    ):
        self.deployment_status = deployment_status
        self.deployment_body = (
            {"id": 42, "url": "https://api.github.test/repos/acme/widgets/deployments/42"}
            if deployment_body is None
            else deployment_body
        )
        self.status_status = status_status
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/statuses"):
            return httpx.Response(self.status_status, json={"state": "success"})
        if isinstance(self.deployment_body, (bytes, str)):
            return httpx.Response(self.deployment_status, content=self.deployment_body)
        return httpx.Response(self.deployment_status, json=self.deployment_body)

    def body(self, index: int) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def github() -> FakeGitHub:
    """Fake GitHub API that accepts both calls."""
    return FakeGitHub()


@pytest.fixture
def make_github() -> Callable[..., FakeGitHub]:
    """Fake GitHub API with configurable answers."""
    return FakeGitHub
