import asyncio
import logging
from typing import Coroutine, Set

from app import schemas
from app.config import settings
from app.schemas import ViewerStatus
from app.services.chuck_norris import ChuckNorrisClient, ChuckNorrisError
from app.services.selector import CategorySelector

logger = logging.getLogger(__name__)


class JokeViewer:
    """Shows one random fact for the selected category.

    Setting the loading flag (on mount, on a category change or on refresh)
    dispatches a fetch as an asyncio task. Every dispatch bumps the request
    generation and only the completion of the latest generation may update
    the joke or clear the loading flag.
    """

    def __init__(self, client: ChuckNorrisClient, title: str | None = None):
        self._client = client
        self.title = title or settings.app_name
        self.category = ""
        self.joke = ""
        self.loading = True
        self.status = ViewerStatus.IDLE_NO_JOKE
        self.selector = CategorySelector(client, on_select=self.change_category)
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()
        self._mounted = False

    @property
    def generation(self) -> int:
        return self._generation

    def mount(self) -> None:
        """Start the category fetch and the first joke fetch. Needs a running loop."""
        if self._mounted:
            return
        self._mounted = True
        self._spawn(self.selector.mount())
        if self.loading:
            self._dispatch()

    def unmount(self) -> None:
        self._mounted = False
        self._generation += 1
        for task in list(self._tasks):
            task.cancel()

    def change_category(self, category: str) -> None:
        self.category = category
        self._set_loading()

    def refresh(self) -> None:
        self._set_loading()

    def _set_loading(self) -> None:
        self.loading = True
        self._dispatch()

    def _dispatch(self) -> None:
        self._generation += 1
        self.status = ViewerStatus.LOADING
        self._spawn(self._fetch(self._generation, self.category))

    async def _fetch(self, generation: int, category: str) -> None:
        joke = None
        try:
            joke = await self._client.random_joke(category)
        except ChuckNorrisError as exc:
            logger.warning("Error fetching a joke for category %r: %s", category, exc)
        finally:
            # Loading is cleared on every outcome, but only by the latest generation.
            if generation == self._generation:
                if joke is not None:
                    self.joke = joke.value
                    self.status = ViewerStatus.LOADED
                else:
                    self.status = ViewerStatus.LOADED_STALE
                self.loading = False
            else:
                logger.debug("Discarding joke response %d, latest is %d", generation, self._generation)

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Viewer task failed", exc_info=exc)

    async def wait_idle(self) -> None:
        """Wait until no category or joke fetch is in flight."""
        while self._tasks:
            await asyncio.wait(list(self._tasks))

    def render(self) -> schemas.ViewerState:
        return schemas.ViewerState(
            title=self.title,
            status=self.status,
            category=self.category,
            loading=self.loading,
            joke=self.joke,
            selector=self.selector.render(),
        )
