# Руководство к файлу
# Назначение: сборщик результатов: ожидание задач строго в порядке подачи,
# форматирование строк и последовательная запись в выходной файл.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from __future__ import annotations

import asyncio
import logging
from typing import List, Sequence

from linkcounter.core.types import Failure, TaskOutcome, describe_error, format_outcome
from linkcounter.export.files import ResultWriter
from linkcounter.orchestrator.dispatcher import TaskHandle


class ResultCollector:
    """Fan-in: по одной строке на задачу, в исходном порядке."""

    def __init__(self, writer: ResultWriter, progress_every: int = 50) -> None:
        self.writer = writer
        self.progress_every = progress_every
        self.log = logging.getLogger(__name__)

    async def resolve(self, handle: TaskHandle) -> TaskOutcome:
        """Дожидается одной задачи; отмену и сбой задачи превращает в Failure."""
        fut = handle.future
        # asyncio.wait, а не await fut: отмена самого сборщика не должна отменять задачу
        await asyncio.wait({fut})
        if fut.cancelled():
            return Failure(url=handle.task.url, error="task cancelled")
        exc = fut.exception()
        if exc is not None:
            self.log.error("task-crashed index=%d url=%s err=%r", handle.task.index, handle.task.url, exc)
            return Failure(url=handle.task.url, error=describe_error(exc))
        return fut.result()

    async def collect(self, handles: Sequence[TaskHandle]) -> List[TaskOutcome]:
        outcomes: List[TaskOutcome] = []
        total = len(handles)
        for handle in handles:
            outcome = await self.resolve(handle)
            self.writer.write_line(format_outcome(outcome))
            outcomes.append(outcome)
            # Простое информирование о прогрессе
            done = len(outcomes)
            if done == 1 or done % self.progress_every == 0:
                self.log.info("progress: collected=%d total=%d", done, total)
        return outcomes
