from fastapi import APIRouter, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.config import settings
from app.core.sessions import remember_viewer, resolve_viewer
from app.core.templates import templates
from app.services.selector import CATEGORIES_LABEL, UnknownCategoryError

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request):
    viewer_id, viewer, _ = resolve_viewer(request)
    response = templates.TemplateResponse(
        request,
        "viewer.html",
        {
            "state": viewer.render(),
            "categories_label": CATEGORIES_LABEL,
            "refresh_seconds": settings.loading_refresh_seconds,
        },
    )
    remember_viewer(response, viewer_id)
    return response


@router.post("/category", include_in_schema=False)
async def select_category(request: Request, category: str = Form(...)):
    viewer_id, viewer, _ = resolve_viewer(request)
    try:
        viewer.selector.select(category)
    except UnknownCategoryError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    remember_viewer(response, viewer_id)
    return response


@router.post("/refresh", include_in_schema=False)
async def refresh_joke(request: Request):
    viewer_id, viewer, _ = resolve_viewer(request)
    viewer.refresh()
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    remember_viewer(response, viewer_id)
    return response
