"""Shared test fixtures.

Provides:
- ``FakeClock`` / ``clock``: manually advanced monotonic clock
- ``cache``: a Cache with no sweep thread, driven by ``clock``
- ``api``: an httpx client over MockTransport serving canned PokeAPI bodies
- ``session``: a Session whose output is collected into ``session.lines``, prompts included
"""

import json
import random

import httpx
import pytest

from godex.commands import Session
from godex.config import settings
from godex.services import pokeapi
from godex.services.cache import Cache


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakePokeAPI:
    """Serves bodies registered by URL path and records every request."""

    def __init__(self):
        self.bodies: dict[str, bytes] = {}
        self.requests: list[str] = []
        self.client = httpx.Client(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(str(request.url))
        body = self.bodies.get(request.url.path)
        if body is None:
            return httpx.Response(404, content=b"Not Found")
        return httpx.Response(200, content=body)

    def add_area(self, area_id: int, name: str, pokemon: list[str] | None = None) -> None:
        payload = {
            "id": area_id,
            "name": name,
            "pokemon_encounters": [
                {"pokemon": {"name": p, "url": f"https://pokeapi.co/api/v2/pokemon/{p}/"}}
                for p in (pokemon or [])
            ],
        }
        encoded = json.dumps(payload).encode()
        self.bodies[f"/api/v2/location-area/{area_id}/"] = encoded
        self.bodies[f"/api/v2/location-area/{name}/"] = encoded

    def add_pokemon(self, name: str, base_experience: int = 64, types: list[str] | None = None) -> None:
        stat_names = ["hp", "attack", "defense", "special-attack", "special-defense", "speed"]
        payload = {
            "id": 1,
            "name": name,
            "base_experience": base_experience,
            "height": 7,
            "weight": 69,
            "stats": [
                {"base_stat": 40 + i, "effort": 0, "stat": {"name": s, "url": ""}}
                for i, s in enumerate(stat_names)
            ],
            "types": [
                {"slot": i + 1, "type": {"name": t, "url": ""}}
                for i, t in enumerate(types or ["normal"])
            ],
        }
        self.bodies[f"/api/v2/pokemon/{name}/"] = json.dumps(payload).encode()


@pytest.fixture(autouse=True)
def set_test_config(monkeypatch):
    """Pin settings that tests rely on regardless of the caller's env."""
    monkeypatch.setattr(settings, "pokeapi_base_url", "https://pokeapi.co/api/v2")
    monkeypatch.setattr(settings, "page_size", 20)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    c = Cache(300, time_func=clock, start_sweeper=False)
    yield c
    c.close()


@pytest.fixture
def api(monkeypatch):
    fake = FakePokeAPI()
    monkeypatch.setattr(pokeapi, "_client", fake.client)
    yield fake
    fake.client.close()


@pytest.fixture
def session(cache, api):
    lines: list[str] = []
    s = Session(cache=cache, echo=lines.append, show_prompt=lines.append, rng=random.Random(0))
    s.lines = lines
    return s
