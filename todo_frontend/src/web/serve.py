"""
Run the todo app with uvicorn.

Usage:
    python -m src.web.serve

HOST and PORT come from the environment (see settings.py).
"""
from __future__ import annotations

import logging

import uvicorn

from .main import create_app
from .settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info("Serving on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
