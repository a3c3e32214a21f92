# Руководство к файлу
# Назначение: обработка одного URL: GET, подсчёт внутренних ссылок, исход задачи.
# Этап: базовая реализация. Обработчик никогда не пробрасывает ошибки наружу
# (кроме отмены задачи): любая ошибка превращается в Failure.
# Обновляйте комментарий при изменениях.

from __future__ import annotations

import logging

from linkcounter.core.types import Failure, Success, TaskOutcome, UrlTask, describe_error
from linkcounter.fetch.http_fetcher import HttpFetcher
from linkcounter.parse.link_extractor import LinkExtractor
from linkcounter.utils.url import base_domain


class UrlProcessor:
    """Единица работы: один URL -> один TaskOutcome."""

    def __init__(self, fetcher: HttpFetcher) -> None:
        self.fetcher = fetcher
        self.log = logging.getLogger(__name__)

    async def process(self, task: UrlTask) -> TaskOutcome:
        try:
            res = await self.fetcher.fetch(task.url)
            # домен считается один раз на задачу и переиспользуется для всех ссылок
            domain = base_domain(task.url)
            count = LinkExtractor.count_internal(res.text, domain)
        except Exception as e:
            self.log.warning("process-failed index=%d url=%s err=%r", task.index, task.url, e)
            return Failure(url=task.url, error=describe_error(e))
        self.log.info(
            "fetched index=%d url=%s status=%d ctype=%s internal=%d",
            task.index,
            task.url,
            res.status,
            res.content_type,
            count,
        )
        return Success(url=task.url, internal_links=count)
