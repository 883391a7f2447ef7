import json
from dataclasses import replace
from html import unescape

from markupsafe import Markup

from src.web import views
from src.web.views import HTMX_CONFIG, created_fragment, index_page, layout, render_attrs, title_input, todo_item, todo_list


def make_todo(todo_id="abc-123", title="Buy milk"):
    return {"id": todo_id, "title": title}


class TestTodoItem:
    def test_row_structure(self):
        html = todo_item(make_todo())
        assert isinstance(html, Markup)
        assert html.startswith('<li class="todo-item">')
        assert html.endswith("</li>")
        assert '<span class="todo-title">Buy milk</span>' in html
        assert 'hx-delete="/todos/abc-123"' in html
        assert 'hx-target="closest li"' in html
        assert 'hx-swap="outerHTML"' in html
        assert "hx-confirm=" in html

    def test_title_and_id_are_escaped(self):
        html = todo_item(make_todo(todo_id='x"y', title="<script>alert(1)</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert 'hx-delete="/todos/x&#34;y"' in html


class TestTodoList:
    def test_empty_and_none(self):
        expected = '<ul id="todo-list" class="todo-list"></ul>'
        assert todo_list([]) == expected
        assert todo_list(None) == expected
        assert todo_list() == expected

    def test_rows_in_order(self):
        todos = [make_todo("1", "one"), make_todo("2", "two")]
        html = todo_list(todos)
        assert html.count("<li") == 2
        assert html.index("one") < html.index("two")

    def test_deterministic(self):
        todos = [make_todo("1", "one"), make_todo("2", "two")]
        assert todo_list(todos) == todo_list(list(todos))


class TestTitleInput:
    def test_defaults(self):
        html = title_input()
        assert html.startswith("<input")
        assert 'id="todo-title"' in html
        assert 'name="title"' in html
        assert ' required' in html
        assert 'maxlength="100"' in html
        assert 'class="title-input"' in html

    def test_extra_attributes_and_class(self):
        html = title_input(class_="wide", value="", hx_swap_oob="true")
        assert 'value=""' in html
        assert 'hx-swap-oob="true"' in html
        assert 'class="title-input wide"' in html

    def test_render_attrs_skips_none_and_false(self):
        assert render_attrs({"a": None, "b": False, "c": True, "d": 1}) == ' c d="1"'


class TestCreatedFragment:
    def test_row_then_oob_input(self):
        html = created_fragment(make_todo())
        row_end = html.index("</li>")
        input_start = html.index("<input")
        assert row_end < input_start
        assert 'hx-swap-oob="true"' in html[input_start:]
        assert 'value=""' in html[input_start:]


class TestPage:
    def test_layout_head(self, settings):
        html = layout("My <Title>", Markup("<p>body</p>"), settings)
        assert html.startswith("<!DOCTYPE html>")
        assert f'<html lang="{settings.page_lang}">' in html
        assert "<title>My &lt;Title&gt;</title>" in html
        assert '<main class="container"><p>body</p></main>' in html
        assert f'src="{settings.htmx_script_url}"' in html

    def test_htmx_config_meta(self, settings):
        html = str(layout("t", Markup(""), settings))
        start = html.index('name="htmx-config" content="') + len('name="htmx-config" content="')
        content = html[start:html.index('"', start)]
        assert json.loads(unescape(content)) == HTMX_CONFIG

    def test_integrity_can_be_disabled(self, settings):
        html = layout("t", Markup(""), replace(settings, htmx_script_integrity=""))
        assert "integrity=" not in html
        assert "crossorigin=" not in html

    def test_integrity_rendered(self, settings):
        html = layout("t", Markup(""), replace(settings, htmx_script_integrity="sha384-abc"))
        assert 'integrity="sha384-abc"' in html
        assert 'crossorigin="anonymous"' in html

    def test_index_page_contents(self, settings):
        html = index_page([make_todo()], settings)
        assert f"<title>{settings.page_title}</title>" in html
        assert 'method="post" action="/todos"' in html
        assert 'hx-post="/todos" hx-target="#todo-list" hx-swap="beforeend"' in html
        assert 'hx-get="/todos" hx-target="#todo-list" hx-swap="outerHTML"' in html
        assert str(views.todo_list([make_todo()])) in html
