# Руководство к файлу (TESTS/conftest.py)
# Назначение:
# - Общие фикстуры для pytest-тестов linkcounter.
# - Поднимает локальный статический HTTP-сервер на aiohttp.web вместо реальных сайтов.

from __future__ import annotations

import asyncio

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer, unused_port


PAGE_WITH_LINKS = """<html><body>
<a href="http://127.0.0.1/a">self</a>
<a HREF = "HTTPS://127.0.0.1/b">self upper</a>
<a href="http://sub.127.0.0.1/c">sub</a>
<a href="http://other.org/d">other</a>
<a href="/relative">relative</a>
<a href="http://[">broken</a>
</body></html>
"""

PAGE_WITHOUT_LINKS = "<html><body><p>no links here</p></body></html>"


async def _links(request: web.Request) -> web.Response:
    return web.Response(text=PAGE_WITH_LINKS, content_type="text/html")


async def _empty(request: web.Request) -> web.Response:
    return web.Response(text=PAGE_WITHOUT_LINKS, content_type="text/html")


async def _slow(request: web.Request) -> web.Response:
    await asyncio.sleep(1)
    return web.Response(text=PAGE_WITH_LINKS, content_type="text/html")


async def _jitter(request: web.Request) -> web.Response:
    """Чем меньше n, тем дольше ответ: порядок завершения обратен порядку запросов."""
    n = int(request.match_info["n"])
    await asyncio.sleep(max(0, 10 - n) * 0.02)
    return web.Response(text=f'<a href="http://127.0.0.1/{n}">x</a>' * n, content_type="text/html")


async def _redirect(request: web.Request) -> web.Response:
    raise web.HTTPFound("/links")


async def _not_found(request: web.Request) -> web.Response:
    return web.Response(status=404, text='<a href="http://127.0.0.1/home">home</a>', content_type="text/html")


def build_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/links", _links)
    app.router.add_get("/empty", _empty)
    app.router.add_get("/slow", _slow)
    app.router.add_get("/jitter/{n}", _jitter)
    app.router.add_get("/redirect", _redirect)
    app.router.add_get("/missing", _not_found)
    return app


@pytest_asyncio.fixture
async def site_server():
    """Статический сайт на 127.0.0.1 со страницами /links, /empty, /slow и т.д."""

    server = TestServer(build_app(), host="127.0.0.1")
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def dead_url() -> str:
    """URL на порту, который никто не слушает (connection refused)."""

    return f"http://127.0.0.1:{unused_port()}/"
