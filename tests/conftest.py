import asyncio

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.services.chuck_norris import ChuckNorrisClient

API_BASE_URL = "https://api.chucknorris.test"


class FakeChuckNorrisApi:
    """Scripted stand-in for the facts API, served through httpx.MockTransport."""

    def __init__(self):
        self.categories = ["dev", "food"]
        self.categories_status = 200
        self.categories_error: Exception | None = None
        self.categories_gate: asyncio.Event | None = None
        self.joke_status = 200
        self.joke_error: Exception | None = None
        self.joke_gate: asyncio.Event | None = None
        self.requests: list[httpx.Request] = []
        self.joke_requests: list[httpx.Request] = []

    def joke_text(self, index: int, category: str) -> str:
        return f"Chuck Norris fact #{index} ({category or 'any'})"

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/jokes/categories":
            if self.categories_gate is not None:
                await self.categories_gate.wait()
            if self.categories_error is not None:
                raise self.categories_error
            return httpx.Response(self.categories_status, json=self.categories)
        if request.url.path == "/jokes/random":
            index = len(self.joke_requests)
            self.joke_requests.append(request)
            if self.joke_gate is not None:
                await self.joke_gate.wait()
            if self.joke_error is not None:
                raise self.joke_error
            category = request.url.params.get("category", "")
            return httpx.Response(
                self.joke_status,
                json={
                    "id": f"joke-{index}",
                    "value": self.joke_text(index, category),
                    "categories": [category] if category else [],
                    "url": f"{API_BASE_URL}/jokes/joke-{index}",
                },
            )
        return httpx.Response(404)


@pytest.fixture
def fake_api():
    return FakeChuckNorrisApi()


@pytest.fixture
def joke_client(fake_api):
    return ChuckNorrisClient(base_url=API_BASE_URL, transport=httpx.MockTransport(fake_api.handler))


@pytest.fixture
def app(joke_client):
    return create_app(joke_client=joke_client)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
    await app.state.viewers.aclose()
