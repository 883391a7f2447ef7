"""
HTML views for the todo page.

Every view is a plain function that takes data and returns ``Markup``. Views
nest by calling each other; interpolated values go through ``Markup.format``
so user text is always escaped.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Optional

from markupsafe import Markup

from .models import Todo
from .schemas import TITLE_MAX_LENGTH
from .settings import Settings

HTMX_CONFIG = {
    "allowScriptTags": False,
    "allowEval": False,
    "selfRequestsOnly": True,
    "historyCacheSize": 0,
    # Full pages and fragments are chosen by HX-Request, so history restores
    # must ask for the full page.
    "historyRestoreAsHxRequest": False,
}


def render_attrs(attrs: Mapping[str, Any]) -> Markup:
    """
    Render an attribute mapping as ``name="value"`` pairs.

    Underscores in names become hyphens (``hx_swap_oob`` -> ``hx-swap-oob``)
    and a trailing underscore is dropped (``class_`` -> ``class``). ``True``
    renders a bare boolean attribute; ``None`` and ``False`` are skipped.
    """
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        name = name.rstrip("_").replace("_", "-")
        if value is True:
            parts.append(Markup(" {}").format(name))
        else:
            parts.append(Markup(' {}="{}"').format(name, value))
    return Markup("").join(parts)


def title_input(class_: Optional[str] = None, **attrs: Any) -> Markup:
    """The title <input>; extra attributes override the defaults."""
    merged: dict[str, Any] = {
        "id": "todo-title",
        "name": "title",
        "required": True,
        "maxlength": TITLE_MAX_LENGTH,
        "placeholder": "e.g. Water the plants",
        "autocomplete": "off",
    }
    merged.update(attrs)
    merged["class"] = " ".join(c for c in ("title-input", class_) if c)
    return Markup("<input{}>").format(render_attrs(merged))


def todo_item(todo: Todo) -> Markup:
    return Markup(
        '<li class="todo-item">'
        '<span class="todo-title">{title}</span>'
        '<button type="button" class="btn btn-danger"'
        ' hx-delete="/todos/{id}"'
        ' hx-target="closest li"'
        ' hx-swap="outerHTML"'
        ' hx-confirm="Delete this todo?">Delete</button>'
        "</li>"
    ).format(title=todo["title"], id=todo["id"])


def todo_list(todos: Optional[Iterable[Todo]] = None) -> Markup:
    rows = Markup("").join(todo_item(t) for t in (todos or ()))
    return Markup('<ul id="todo-list" class="todo-list">{}</ul>').format(rows)


def created_fragment(todo: Todo) -> Markup:
    """
    Response to an htmx create: the new row for the list, then an
    out-of-band copy of the title input with an empty value so the form
    is cleared in place.
    """
    return todo_item(todo) + title_input(value="", hx_swap_oob="true")


def layout(title: str, content: Markup, settings: Settings) -> Markup:
    script_attrs = {
        "src": settings.htmx_script_url,
        "integrity": settings.htmx_script_integrity or None,
        "crossorigin": "anonymous" if settings.htmx_script_integrity else None,
    }
    return Markup(
        "<!DOCTYPE html>"
        '<html lang="{lang}">'
        "<head>"
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        "<title>{title}</title>"
        '<link rel="stylesheet" href="/static/app.css">'
        '<meta name="htmx-config" content="{config}">'
        "<script{script}></script>"
        "</head>"
        "<body>"
        '<main class="container">{content}</main>'
        "</body>"
        "</html>"
    ).format(
        lang=settings.page_lang,
        title=title,
        config=json.dumps(HTMX_CONFIG),
        script=render_attrs(script_attrs),
        content=content,
    )


def index_page(todos: Iterable[Todo], settings: Settings) -> Markup:
    """Full document: creation form, reload control and the current list."""
    content = Markup(
        "<h1>Todo</h1>"
        '<form class="todo-form" method="post" action="/todos"'
        ' hx-post="/todos" hx-target="#todo-list" hx-swap="beforeend">'
        '<div class="grow">{input}</div>'
        '<button type="submit" class="btn btn-primary">Add</button>'
        "</form>"
        '<div class="toolbar">'
        '<button type="button" class="btn btn-secondary"'
        ' hx-get="/todos" hx-target="#todo-list" hx-swap="outerHTML">Reload list</button>'
        "</div>"
        "{list}"
    ).format(input=title_input(), list=todo_list(todos))
    return layout(settings.page_title, content, settings)
