# Руководство к файлу (TESTS/integration/test_processor_integration.py)
# Назначение:
# - Интеграционные тесты UrlProcessor против локального aiohttp-сервера:
#   подсчёт ссылок, таймаут, отказ соединения, редирект, статус 4xx.

from __future__ import annotations

import logging

import pytest

from linkcounter.core.types import Failure, Success, UrlTask
from linkcounter.fetch.http_fetcher import HttpFetcher
from linkcounter.orchestrator.processor import UrlProcessor


pytestmark = pytest.mark.asyncio


async def _process(url: str, timeout_sec: float = 5.0):
    async with HttpFetcher(timeout_sec) as fetcher:
        return await UrlProcessor(fetcher).process(UrlTask(url=url, index=0))


async def test_counts_internal_links(site_server):
    url = str(site_server.make_url("/links"))
    outcome = await _process(url)
    # /a, /b (HREF/HTTPS) и sub.127.0.0.1; other.org, относительная и битая ссылки не считаются
    assert outcome == Success(url=url, internal_links=3)


async def test_page_without_links_counts_zero(site_server):
    url = str(site_server.make_url("/empty"))
    assert await _process(url) == Success(url=url, internal_links=0)


async def test_timeout_becomes_failure(site_server):
    url = str(site_server.make_url("/slow"))
    outcome = await _process(url, timeout_sec=0.2)
    assert isinstance(outcome, Failure)
    assert outcome.url == url
    # TimeoutError без текста или ServerTimeoutError aiohttp, в зависимости от фазы запроса
    assert "Timeout" in outcome.error


async def test_connection_refused_becomes_failure(dead_url):
    outcome = await _process(dead_url)
    assert isinstance(outcome, Failure)
    assert outcome.error


async def test_invalid_request_url_becomes_failure():
    outcome = await _process("definitely not a url")
    assert isinstance(outcome, Failure)
    assert outcome.url == "definitely not a url"


async def test_redirect_is_not_followed(site_server):
    # тело 302-ответа не содержит ссылок; /links не загружается
    url = str(site_server.make_url("/redirect"))
    assert await _process(url) == Success(url=url, internal_links=0)


async def test_error_status_body_is_still_scanned(site_server):
    url = str(site_server.make_url("/missing"))
    assert await _process(url) == Success(url=url, internal_links=1)


async def test_fetched_log_line_carries_content_type(site_server, caplog):
    caplog.set_level(logging.INFO, logger="linkcounter.orchestrator.processor")
    url = str(site_server.make_url("/empty"))
    await _process(url)
    assert f"url={url} status=200 ctype=text/html" in caplog.text
