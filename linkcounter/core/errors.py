# Руководство к файлу
# Назначение: фатальные ошибки запуска (чтение входного файла, запись результатов).
# Ошибки отдельных URL сюда не относятся: они превращаются в Failure внутри обработчика.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from __future__ import annotations


class LinkCounterError(Exception):
    """Базовая фатальная ошибка: прерывает запуск с ненулевым кодом выхода."""


class InputReadError(LinkCounterError):
    """Не удалось прочитать файл со списком URL."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read input file {path}: {reason}")
        self.path = path


class OutputWriteError(LinkCounterError):
    """Не удалось открыть или записать файл результатов."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot write output file {path}: {reason}")
        self.path = path
