from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from app import schemas
from app.config import settings
from app.core.sessions import get_registry, remember_viewer, resolve_viewer
from app.services.selector import UnknownCategoryError
from app.services.viewer import JokeViewer

router = APIRouter(prefix="/api/viewer", tags=["viewer"])


async def get_viewer(request: Request, response: Response) -> JokeViewer:
    viewer_id, viewer, created = resolve_viewer(request)
    if created:
        remember_viewer(response, viewer_id)
    return viewer


@router.get("", response_model=schemas.ViewerState)
async def read_viewer(
    wait: bool = Query(default=False, description="Wait for in-flight fetches before answering"),
    viewer: JokeViewer = Depends(get_viewer),
):
    if wait:
        await viewer.wait_idle()
    return viewer.render()


@router.post("/category", response_model=schemas.ViewerState)
async def select_category(payload: schemas.CategorySelection, viewer: JokeViewer = Depends(get_viewer)):
    try:
        viewer.selector.select(payload.category)
    except UnknownCategoryError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return viewer.render()


@router.post("/refresh", response_model=schemas.ViewerState)
async def refresh_joke(viewer: JokeViewer = Depends(get_viewer)):
    viewer.refresh()
    return viewer.render()


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def close_viewer(request: Request, response: Response):
    registry = get_registry(request)
    if not registry.close(request.cookies.get(settings.viewer_cookie_name)):
        raise HTTPException(status_code=404, detail="Viewer not found")
    response.delete_cookie(settings.viewer_cookie_name)
    return None
