import logging
from typing import Callable, List, Optional

from app import schemas
from app.services.chuck_norris import ChuckNorrisClient, ChuckNorrisError

logger = logging.getLogger(__name__)

CATEGORIES_LABEL = "Categories"
HTTP_ERROR_MESSAGE = "There was an error fetching the joke categories"
REQUEST_ERROR_MESSAGE = "We could not make the request for the joke categories"


class UnknownCategoryError(ValueError):
    def __init__(self, category: str):
        super().__init__(f"Unknown joke category: {category!r}")
        self.category = category


class CategorySelector:
    """Lists the joke categories and reports the user's choice through ``on_select``.

    Categories are fetched once per instance, in the order the API returns
    them. A failed fetch leaves an error message in place of the list and is
    not retried.
    """

    def __init__(self, client: ChuckNorrisClient, on_select: Callable[[str], None]):
        self._client = client
        self._on_select = on_select
        self._mounted = False
        self.categories: List[str] = []
        self.selected = ""
        self.error: Optional[str] = None
        self.loaded = False

    async def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        try:
            categories = await self._client.list_categories()
        except ChuckNorrisError as exc:
            if exc.status_code is not None:
                logger.warning("Joke categories request failed: %s", exc)
                self.error = HTTP_ERROR_MESSAGE
            else:
                logger.error("Error fetching the joke categories: %s", exc)
                self.error = REQUEST_ERROR_MESSAGE
            return
        self.categories = list(categories)
        self.error = None
        self.loaded = True
        logger.debug("Loaded %d joke categories", len(self.categories))

    def select(self, category: str) -> None:
        if category not in self.categories:
            raise UnknownCategoryError(category)
        self.selected = category
        self._on_select(category)

    def render(self) -> schemas.SelectorState:
        return schemas.SelectorState(
            categories=list(self.categories),
            selected=self.selected,
            error=self.error,
            loaded=self.loaded,
        )
