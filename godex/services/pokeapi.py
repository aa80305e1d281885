"""PokeAPI client for location areas and Pokemon.

Free API, no key required. Every lookup goes through the response cache
first; raw bodies are written back on a successful fetch, before decoding.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from godex.config import settings
from godex.errors import DecodeError, FetchError
from godex.models import LocationArea, Pokemon
from godex.services.cache import Cache

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_client: httpx.Client | None = None


def _get_client() -> httpx.Client:
    """Return the shared HTTP client, creating on first call."""
    global _client
    if _client is None:
        _client = httpx.Client(
            timeout=settings.http_timeout_seconds,
            headers={"User-Agent": "godex/1.0"},
            follow_redirects=True,
        )
    return _client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


def location_area_url(area_id: str | int) -> str:
    return f"{settings.pokeapi_base_url}/location-area/{area_id}/"


def pokemon_url(name: str) -> str:
    return f"{settings.pokeapi_base_url}/pokemon/{name}/"


def fetch(url: str, client: httpx.Client | None = None) -> bytes:
    """GET a URL and return the raw body. No retries."""
    client = client or _get_client()
    logger.debug("GET %s", url)
    try:
        resp = client.get(url)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("PokeAPI returned %s for %s", e.response.status_code, url)
        raise FetchError(url, f"HTTP {e.response.status_code}", status_code=e.response.status_code) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("PokeAPI request failed for %s: %s", url[:200], e)
        raise FetchError(url, str(e) or type(e).__name__) from e
    return resp.content


def decode(body: bytes, model: type[ModelT], url: str = "") -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(url, f"{e.error_count()} validation error(s)") from e


def _cached_get(cache: Cache, url: str, model: type[ModelT], client: httpx.Client | None) -> ModelT:
    body, found = cache.get(url)
    if found:
        logger.debug("Cache hit for %s", url)
    else:
        body = fetch(url, client)
        cache.add(url, body)
    return decode(body, model, url)


def get_location_area(cache: Cache, area_id: str | int, client: httpx.Client | None = None) -> LocationArea:
    """Get a location area by id or name."""
    return _cached_get(cache, location_area_url(area_id), LocationArea, client)


def get_pokemon(cache: Cache, name: str, client: httpx.Client | None = None) -> Pokemon:
    """Get a Pokemon by name or id."""
    return _cached_get(cache, pokemon_url(name), Pokemon, client)
