"""Pytest configuration for all tests."""

import json
from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timezone

import httpx
import pytest
import pytest_asyncio
import respx
from httpx import ASGITransport, AsyncClient

from schooldir.core.config import Settings, get_settings
from schooldir.infrastructure.clients.school_directory_client import SchoolDirectoryClient

DIRECTORY_BASE_URL = "http://directory.test"

SEED_SCHOOLS = [
    {
        "id": 1,
        "name": "Springfield Elementary",
        "address": "19 Plympton Street",
        "city": "Metropolis",
        "state": "Illinois",
        "contact": "5550001111",
        "email_id": "office@springfield.edu",
        "image": "",
        "created_at": "2024-09-01T08:00:00Z",
    },
    {
        "id": 2,
        "name": "Oakwood",
        "address": "42 Oakwood Avenue",
        "city": "Springfield",
        "state": "Oregon",
        "contact": "5550002222",
        "email_id": "hello@oakwood.org",
        "image": "oakwood.png",
        "created_at": "2024-09-02T08:00:00Z",
    },
    {
        "id": 3,
        "name": "Riverdale High",
        "address": "7 River Road North",
        "city": "Riverdale",
        "state": "Illinois",
        "contact": "5550003333",
        "email_id": "admin@riverdale.edu",
        "image": "/uploads/riverdale.png",
        "created_at": None,
    },
]


class FakeDirectory:
    """In-memory stand-in for the list/create and upload collaborators.

    ``handle`` is installed as a respx side effect for every request to the
    directory host. Every request is recorded in ``calls`` as ``(method, path)``.
    """

    def __init__(self, schools: list[dict] | None = None) -> None:
        self.schools = [dict(s) for s in (SEED_SCHOOLS if schools is None else schools)]
        self.calls: list[tuple[str, str]] = []
        self.created_payloads: list[dict] = []
        self.uploads: list[bytes] = []
        self.list_response: httpx.Response | None = None
        self.create_response: httpx.Response | None = None
        self.upload_response: httpx.Response | None = None
        self.network_down = False

    def calls_to(self, method: str, path: str) -> int:
        return self.calls.count((method, path))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, request.url.path))
        if self.network_down:
            raise httpx.ConnectError("Connection refused", request=request)

        if request.url.path == "/api/schools/upload" and request.method == "POST":
            self.uploads.append(request.content)
            if self.upload_response is not None:
                return self.upload_response
            return httpx.Response(200, json={"imageUrl": f"/schoolImages/logo-{len(self.uploads)}.png"})

        if request.url.path == "/api/schools" and request.method == "GET":
            if self.list_response is not None:
                return self.list_response
            return httpx.Response(200, json=self.schools)

        if request.url.path == "/api/schools" and request.method == "POST":
            payload = json.loads(request.content)
            self.created_payloads.append(payload)
            if self.create_response is not None:
                return self.create_response
            record = {
                "id": max((s["id"] for s in self.schools), default=0) + 1,
                **payload,
                "created_at": datetime.now(timezone.utc).isoformat(),
            }
            self.schools.append(record)
            return httpx.Response(201, json=record)

        return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="testing",
        directory_base_url=DIRECTORY_BASE_URL,
        max_image_size=1024,
        log_format="console",
    )


@pytest.fixture
def directory() -> Generator[FakeDirectory, None, None]:
    """Route all traffic to the directory host through a FakeDirectory."""
    fake = FakeDirectory()
    with respx.mock(base_url=DIRECTORY_BASE_URL, assert_all_called=False) as respx_mock:
        respx_mock.route().mock(side_effect=fake.handle)
        yield fake


@pytest_asyncio.fixture
async def directory_client(
    directory: FakeDirectory, test_settings: Settings
) -> AsyncGenerator[SchoolDirectoryClient, None]:
    """A real SchoolDirectoryClient talking to the fake collaborators."""
    client = SchoolDirectoryClient.from_settings(test_settings)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def client(
    directory_client: SchoolDirectoryClient, test_settings: Settings
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client wired to the fake collaborators."""
    from schooldir.infrastructure.api.app import app
    from schooldir.infrastructure.api.dependencies import get_directory_client

    app.dependency_overrides[get_directory_client] = lambda: directory_client
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}
