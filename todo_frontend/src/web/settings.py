from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "static"
_DEFAULT_HTMX_URL = "https://cdn.jsdelivr.net/npm/htmx.org@2.0.8/dist/htmx.min.js"
_DEFAULT_HTMX_INTEGRITY = "sha384-/TgkGk7p307TH7EXJDuUlgG3Ce1UVolAOFopFekQkkXihi5u/6OCvVKyz1W+idaz"
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TODO_STATIC_DIR: directory served under /static (default: the package's static/ dir)
    - TODO_PAGE_TITLE: document <title> of the index page
    - TODO_PAGE_LANG: value of the <html lang> attribute (default: 'en')
    - HTMX_SCRIPT_URL: where the browser loads htmx from
    - HTMX_SCRIPT_INTEGRITY: SRI hash for the htmx script; empty string disables it
    - LOG_LEVEL: root log level (default: INFO)
    - HOST / PORT: bind address used by src.web.serve (default: 127.0.0.1:8000)
    """

    static_dir: str
    page_title: str
    page_lang: str
    htmx_script_url: str
    htmx_script_integrity: str
    log_level: str
    host: str
    port: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int = 8000) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_log_level(value: str, default: str = "INFO") -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        return default
    return level


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    # An explicitly empty integrity disables SRI, so this one bypasses _get_env.
    integrity = os.getenv("HTMX_SCRIPT_INTEGRITY")
    if integrity is None:
        integrity = _DEFAULT_HTMX_INTEGRITY

    return Settings(
        static_dir=_get_env("TODO_STATIC_DIR", str(_DEFAULT_STATIC_DIR)).strip(),
        page_title=_get_env("TODO_PAGE_TITLE", "FastAPI + htmx Todo"),
        page_lang=_get_env("TODO_PAGE_LANG", "en").strip(),
        htmx_script_url=_get_env("HTMX_SCRIPT_URL", _DEFAULT_HTMX_URL).strip(),
        htmx_script_integrity=integrity.strip(),
        log_level=_parse_log_level(_get_env("LOG_LEVEL", "INFO")),
        host=_get_env("HOST", "127.0.0.1").strip(),
        port=_parse_port(_get_env("PORT", "8000")),
    )
