import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.core.logging_config import setup_logging
from app.core.sessions import ViewerRegistry
from app.routers import pages, viewer
from app.services.chuck_norris import ChuckNorrisClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s started against %s", settings.app_name, settings.api_base_url)
    yield
    await app.state.viewers.aclose()


def create_app(joke_client: ChuckNorrisClient | None = None) -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.viewers = ViewerRegistry(joke_client or ChuckNorrisClient())

    app.include_router(pages.router)
    app.include_router(viewer.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()
