import logging

from fastapi import FastAPI

from src.web import serve
from src.web.logging_setup import setup_logging


def test_main_runs_uvicorn_with_settings(monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9100")
    calls = []
    monkeypatch.setattr(serve.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    serve.main()

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9100


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("INFO")
    handlers = list(root.handlers)
    setup_logging("DEBUG")
    assert root.handlers == handlers
    assert root.level == logging.DEBUG
    setup_logging("INFO")
    assert root.level == logging.INFO
