# Руководство к файлу
# Назначение: общие типы/DTO (задача на URL, исход задачи, ответ HTTP).
# Этап: базовая реализация DTO. Обновляйте комментарий при изменениях.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class UrlTask:
    """Задача для диспетчера: URL и его позиция во входном списке."""

    url: str
    index: int


@dataclass(frozen=True)
class Success:
    """Успешный исход: число внутренних ссылок на странице."""

    url: str
    internal_links: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Неуспешный исход: текст ошибки вместо результата."""

    url: str
    error: str

    @property
    def ok(self) -> bool:
        return False


TaskOutcome = Union[Success, Failure]


@dataclass
class FetchResult:
    """Результат загрузки URL."""

    url: str
    status: int
    content_type: Optional[str]
    text: str


def format_outcome(outcome: TaskOutcome) -> str:
    """Строка результата для выходного файла (без перевода строки)."""
    if isinstance(outcome, Success):
        return f"{outcome.url} --> {outcome.internal_links} internal links"
    return f"{outcome.url} --> ERROR: {outcome.error}"


def describe_error(exc: BaseException) -> str:
    # у TimeoutError и части ошибок aiohttp пустой str(), оставляем имя класса
    text = str(exc).strip()
    return text or exc.__class__.__name__
