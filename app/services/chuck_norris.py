"""Async client for the public Chuck Norris facts API."""

import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from app import schemas
from app.config import settings

logger = logging.getLogger(__name__)

CATEGORIES_PATH = "/jokes/categories"
RANDOM_JOKE_PATH = "/jokes/random"

_category_list = TypeAdapter(List[str])


class ChuckNorrisError(Exception):
    """Raised when the facts API cannot be reached or answers with a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ChuckNorrisClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def _get(self, path: str, params: dict | None = None):
        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            raise ChuckNorrisError(f"Request to {path} failed: {exc}") from exc
        if not response.is_success:
            raise ChuckNorrisError(
                f"{path} answered with HTTP {response.status_code}", status_code=response.status_code
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ChuckNorrisError(f"{path} returned a body that is not JSON") from exc

    async def list_categories(self) -> List[str]:
        payload = await self._get(CATEGORIES_PATH)
        try:
            return _category_list.validate_python(payload)
        except ValidationError as exc:
            raise ChuckNorrisError(f"{CATEGORIES_PATH} did not return a list of categories") from exc

    async def random_joke(self, category: str = "") -> schemas.Joke:
        """Fetch one random fact; an empty category means any category."""
        payload = await self._get(RANDOM_JOKE_PATH, params={"category": category})
        try:
            return schemas.Joke.model_validate(payload)
        except ValidationError as exc:
            raise ChuckNorrisError(f"{RANDOM_JOKE_PATH} did not return a joke") from exc

    async def aclose(self) -> None:
        await self._http.aclose()
