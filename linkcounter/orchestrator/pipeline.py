# Руководство к файлу
# Назначение: оркестратор запуска: чтение URL -> fan-out -> упорядоченный fan-in -> файлы результатов.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: ошибки отдельных URL не прерывают запуск; фатальны только ошибки входного/выходного файла.

from __future__ import annotations

import logging
from typing import List

from linkcounter.core.config import RunConfig
from linkcounter.core.types import TaskOutcome
from linkcounter.export.files import Exporter, ResultWriter, read_urls
from linkcounter.fetch.http_fetcher import HttpFetcher
from linkcounter.orchestrator.collector import ResultCollector
from linkcounter.orchestrator.dispatcher import TaskDispatcher
from linkcounter.orchestrator.processor import UrlProcessor


class LinkCountPipeline:
    """Подсчёт внутренних ссылок для списка URL из входного файла."""

    def __init__(self, cfg: RunConfig) -> None:
        self.cfg = cfg
        self.log = logging.getLogger(__name__)

    async def run(self) -> List[TaskOutcome]:
        urls = read_urls(self.cfg.input_path)
        self.log.info(
            "start: urls=%d concurrency=%d timeout=%.1fs input=%s output=%s",
            len(urls),
            self.cfg.concurrency,
            self.cfg.request_timeout_sec,
            self.cfg.input_path,
            self.cfg.output_path,
        )

        fetcher = HttpFetcher(
            self.cfg.request_timeout_sec,
            pool_size=self.cfg.concurrency,
            verify_ssl=self.cfg.verify_ssl,
        )
        async with fetcher:
            dispatcher = TaskDispatcher(UrlProcessor(fetcher), self.cfg.concurrency)
            handles = dispatcher.dispatch(urls)
            try:
                with ResultWriter(self.cfg.output_path) as writer:
                    outcomes = await ResultCollector(writer).collect(handles)
            finally:
                # при фатальной ошибке сборщика незавершённые задачи отменяются до закрытия сессии
                await dispatcher.cancel_pending()

        if self.cfg.report_json:
            Exporter.write_report_json(self.cfg.report_json, outcomes)

        ok = sum(1 for o in outcomes if o.ok)
        self.log.info("done: total=%d ok=%d failed=%d", len(outcomes), ok, len(outcomes) - ok)
        return outcomes
