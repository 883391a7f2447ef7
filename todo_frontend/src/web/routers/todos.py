from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, Response

from .. import views
from ..schemas import TodoCreate
from ..store import TodoStore, get_store
from ..utils import is_hx_request, select_outcome, to_response

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)


def _get_store(store: TodoStore = Depends(get_store)) -> TodoStore:
    """
    Dependency wrapper for the store to keep signatures clean.
    """
    return store


# PUBLIC_INTERFACE
@router.get(
    "",
    response_class=HTMLResponse,
    summary="List fragment",
    description="Render the todo list as a <ul> fragment, used by the reload button.",
)
def list_todos(store: TodoStore = Depends(_get_store)) -> HTMLResponse:
    """
    Return the current list as an HTML fragment.
    """
    return HTMLResponse(content=views.todo_list(store.list()))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_class=HTMLResponse,
    summary="Create Todo",
    description=(
        "Append a todo from the form field 'title' (1..100 chars).\n\n"
        "htmx requests (HX-Request: true) get the new <li> row plus an out-of-band "
        "input that clears the form; plain form posts are redirected to '/' with 303."
    ),
    responses={
        200: {"description": "Row fragment for htmx"},
        303: {"description": "Redirect to the full page"},
        400: {"description": "Validation error"},
    },
)
def create_todo(
    request: Request,
    payload: Annotated[TodoCreate, Form()],
    store: TodoStore = Depends(_get_store),
) -> Response:
    """
    Create a new Todo and answer with a fragment or a redirect.
    """
    todo = store.append(payload.title)
    logger.info("Created todo %s (%d chars)", todo["id"], len(todo["title"]))
    outcome = select_outcome(is_hx_request(request), views.created_fragment(todo))
    return to_response(outcome)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_class=HTMLResponse,
    summary="Delete Todo",
    description=(
        "Remove a todo by id. Unknown ids are ignored. htmx requests get an empty "
        "body, which removes the row when swapped with outerHTML; other requests "
        "are redirected to '/' with 303."
    ),
    responses={
        200: {"description": "Empty fragment for htmx"},
        303: {"description": "Redirect to the full page"},
    },
    status_code=status.HTTP_200_OK,
)
def delete_todo(
    todo_id: str,
    request: Request,
    store: TodoStore = Depends(_get_store),
) -> Response:
    """
    Delete a Todo. Deleting an id that is not in the list answers exactly like a real delete.
    """
    if store.remove(todo_id):
        logger.info("Deleted todo %s", todo_id)
    else:
        logger.debug("Delete of unknown todo %s ignored", todo_id)
    outcome = select_outcome(is_hx_request(request), "")
    return to_response(outcome)
