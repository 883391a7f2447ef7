"""
Server-rendered todo list package.

The FastAPI application lives in src.web.main (``app`` for uvicorn,
``create_app()`` for tests and embedding); views, store and routers sit
beside it.
"""
