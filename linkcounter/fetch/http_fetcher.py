# Руководство к файлу
# Назначение: HTTP-загрузчик на aiohttp.ClientSession (keep-alive, общий пул соединений).
# Этап: базовая реализация на aiohttp. Редиректы не выполняются: 3xx-ответ
# возвращается как есть. Обновляйте комментарий при изменениях.

from __future__ import annotations

import logging
from typing import Optional

import aiohttp

from linkcounter.core.types import FetchResult


class HttpFetcher:
    """HTTP-загрузчик на базе aiohttp.ClientSession.

    Ошибки сети и таймауты не перехватываются: их превращает в Failure
    обработчик URL.
    """

    def __init__(self, timeout_sec: float, *, pool_size: int = 100, verify_ssl: bool = True) -> None:
        self._timeout_sec = timeout_sec
        self._pool_size = pool_size
        self._verify_ssl = verify_ssl
        self._session: Optional[aiohttp.ClientSession] = None
        self._log = logging.getLogger(__name__)

    async def start(self) -> None:
        if self._session is not None:
            return
        timeout = aiohttp.ClientTimeout(total=self._timeout_sec)
        connector = aiohttp.TCPConnector(limit=self._pool_size, ssl=self._verify_ssl)
        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector, raise_for_status=False)

    async def stop(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "HttpFetcher":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def fetch(self, url: str) -> FetchResult:
        assert self._session is not None, "HttpFetcher.start() must be called first"
        async with self._session.get(url, allow_redirects=False) as resp:
            ctype = resp.headers.get("Content-Type")
            # кодировка по умолчанию aiohttp; неразборчивые байты заменяются
            text = await resp.text(errors="replace")
            self._log.debug("http-fetch url=%s status=%d bytes=%d", url, resp.status, len(text))
            return FetchResult(url=url, status=resp.status, content_type=ctype, text=text)
