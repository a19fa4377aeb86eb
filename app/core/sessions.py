import logging
import secrets
from collections import OrderedDict
from typing import Tuple

from fastapi import Request, Response

from app.config import settings
from app.services.chuck_norris import ChuckNorrisClient
from app.services.viewer import JokeViewer

logger = logging.getLogger(__name__)


class ViewerRegistry:
    """Mounted viewers keyed by the session cookie, least recently used first."""

    def __init__(self, client: ChuckNorrisClient, max_viewers: int | None = None):
        self.client = client
        self.max_viewers = max_viewers or settings.max_viewers
        self._viewers: "OrderedDict[str, JokeViewer]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._viewers)

    def get(self, viewer_id: str | None) -> JokeViewer | None:
        if not viewer_id:
            return None
        viewer = self._viewers.get(viewer_id)
        if viewer is not None:
            self._viewers.move_to_end(viewer_id)
        return viewer

    def open(self) -> Tuple[str, JokeViewer]:
        while len(self._viewers) >= self.max_viewers:
            evicted_id, evicted = self._viewers.popitem(last=False)
            evicted.unmount()
            logger.info("Evicted viewer %s", evicted_id)
        viewer_id = secrets.token_urlsafe(16)
        viewer = JokeViewer(self.client)
        self._viewers[viewer_id] = viewer
        viewer.mount()
        return viewer_id, viewer

    def close(self, viewer_id: str | None) -> bool:
        viewer = self._viewers.pop(viewer_id, None) if viewer_id else None
        if viewer is None:
            return False
        viewer.unmount()
        return True

    async def aclose(self) -> None:
        for viewer_id in list(self._viewers):
            self.close(viewer_id)
        await self.client.aclose()


def get_registry(request: Request) -> ViewerRegistry:
    return request.app.state.viewers


def resolve_viewer(request: Request) -> Tuple[str, JokeViewer, bool]:
    """Return the session's viewer, opening a new one when the cookie is missing or stale."""
    registry = get_registry(request)
    viewer_id = request.cookies.get(settings.viewer_cookie_name)
    viewer = registry.get(viewer_id)
    if viewer is not None:
        return viewer_id, viewer, False
    viewer_id, viewer = registry.open()
    return viewer_id, viewer, True


def remember_viewer(response: Response, viewer_id: str) -> None:
    response.set_cookie(settings.viewer_cookie_name, viewer_id, httponly=True, samesite="lax")
