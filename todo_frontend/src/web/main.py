from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .logging_setup import setup_logging
from .routers import pages as pages_router
from .routers import todos as todos_router
from .settings import Settings, get_settings
from .store import InMemoryTodoStore, TodoStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "pages", "description": "Full HTML documents."},
    {
        "name": "todos",
        "description": "Todo list fragments and the create/delete actions behind the htmx controls.",
    },
]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer invalid form input with 400 and a consistent JSON structure.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    logger.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, store: Optional[TodoStore] = None) -> FastAPI:
    """
    Build the application with its own settings and todo store.

    Each call gets a fresh, empty InMemoryTodoStore unless a store is passed in.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Todo",
        description="Server-rendered todo list driven by htmx fragments.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else InMemoryTodoStore()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    app.include_router(pages_router.router)
    app.include_router(todos_router.router)

    logger.debug("Application created (static root: %s)", settings.static_dir)
    return app


app = create_app()
