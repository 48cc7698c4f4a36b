"""Pytest configuration and fixtures for portal.

Unit tests build throwaway project trees under tmp_path (config/ plus the
directories referenced by [paths]). HTTP tests use portal.main:app, which
loads the repository's own config/common.ini.
"""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

VALID_SECRET = "0123456789abcdef0123456789abcdef"

PATH_DIRS = ("public", "views", "views/layouts", "views/partials", "views/emails")

COMMON_INI = f"""
    NODE_ENV = development

    [http]
    port = 3000
    bodyLimit = 100kb

    [rateLimit]
    minutes = 15
    requests = 100

    [session]
    secret = {VALID_SECRET}

    [paths]
    static = public
    views = views
    viewsLayouts = views/layouts
    viewsPartials = views/partials
    emails = views/emails
    defaultLayout = main

    [valkey]
    url = redis://localhost:6379
"""


def valid_tree() -> dict:
    """Return a merged tree that passes validation (as the INI loader yields it)."""
    return {
        "NODE_ENV": "development",
        "http": {"port": "3000", "bodyLimit": "100kb"},
        "rateLimit": {"minutes": "15", "requests": "100"},
        "session": {"secret": VALID_SECRET},
        "paths": {
            "static": "public",
            "views": "views",
            "viewsLayouts": "views/layouts",
            "viewsPartials": "views/partials",
            "emails": "views/emails",
            "defaultLayout": "main",
        },
        "valkey": {"url": "redis://localhost:6379"},
    }


@pytest.fixture(autouse=True)
def _default_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with NODE_ENV unset (development) unless it sets one."""
    monkeypatch.delenv("NODE_ENV", raising=False)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project tree with config/ and every directory named in COMMON_INI."""
    for name in PATH_DIRS:
        (tmp_path / name).mkdir(parents=True, exist_ok=True)
    (tmp_path / "config").mkdir()
    return tmp_path


@pytest.fixture
def write_config(project_root: Path) -> Callable[[str, str], Path]:
    """Write a dedented INI file into project_root/config and return its path."""

    def _write(filename: str, text: str) -> Path:
        path = project_root / "config" / filename
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    from portal.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
