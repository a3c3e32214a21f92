# Руководство к файлу
# Назначение: настройка логирования проекта (уровень, формат, вывод в файл/STDERR).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import orjson


class JsonFormatter(logging.Formatter):
    """JSON-форматтер: одна запись лога на строку."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z")
        payload = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return orjson.dumps(payload).decode("utf-8")


def configure_logging(level: str = "INFO", *, to_file: Optional[str] = None, json: bool = False) -> None:
    if to_file:
        h: logging.Handler = logging.FileHandler(to_file, encoding="utf-8")
    else:
        # stdout не занимаем: результаты пишутся в файл, диагностика в stderr
        h = logging.StreamHandler(sys.stderr)
    if json:
        fmt: logging.Formatter = JsonFormatter()
    else:
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    h.setFormatter(fmt)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(h)

    # снизим шум от внешних библиотек
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
