from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from .. import views
from ..settings import Settings
from ..store import TodoStore, get_store

router = APIRouter(tags=["pages"])


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Index page",
    description="Full HTML document with the creation form, reload button and current list.",
)
def index(
    store: TodoStore = Depends(get_store),
    settings: Settings = Depends(_get_settings),
) -> HTMLResponse:
    """
    Render the full page.
    """
    return HTMLResponse(content=views.index_page(store.list(), settings))
