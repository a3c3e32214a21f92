# Руководство к файлу
# Назначение: диспетчер задач: одна asyncio-задача на каждый URL, запуск сразу,
# без ожидания предыдущих.
# Важно: одновременных загрузок не больше concurrency (asyncio.Semaphore),
# иначе на больших списках кончаются сокеты и дескрипторы.
# Обновляйте комментарий при изменениях.

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, List

from linkcounter.core.types import TaskOutcome, UrlTask
from linkcounter.orchestrator.processor import UrlProcessor


@dataclass(frozen=True)
class TaskHandle:
    """Ссылка на выполняющуюся задачу и исходный UrlTask."""

    task: UrlTask
    future: "asyncio.Task[TaskOutcome]"


class TaskDispatcher:
    """Fan-out: превращает список URL в список выполняющихся задач."""

    def __init__(self, processor: UrlProcessor, concurrency: int) -> None:
        self.processor = processor
        self.log = logging.getLogger(__name__)
        self._sem = asyncio.Semaphore(concurrency)
        self._handles: List[TaskHandle] = []

    async def _run(self, task: UrlTask) -> TaskOutcome:
        async with self._sem:
            return await self.processor.process(task)

    def dispatch(self, urls: Iterable[str]) -> List[TaskHandle]:
        """Создаёт задачи для всех URL и возвращает их в порядке подачи.

        Не блокирует вызывающего: задачи начинают выполняться при первой
        же передаче управления циклу событий.
        """
        handles: List[TaskHandle] = []
        for index, url in enumerate(urls):
            task = UrlTask(url=url, index=index)
            fut = asyncio.create_task(self._run(task), name=f"url-{index}")
            handles.append(TaskHandle(task=task, future=fut))
        self._handles.extend(handles)
        self.log.debug("dispatched count=%d", len(handles))
        return handles

    async def cancel_pending(self) -> int:
        """Отменяет незавершённые задачи и дожидается их остановки."""
        pending = [h.future for h in self._handles if not h.future.done()]
        for fut in pending:
            fut.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            self.log.info("cancelled pending=%d", len(pending))
        return len(pending)
