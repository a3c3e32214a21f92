# Руководство к файлу
# Назначение: CLI: параметры запуска (входной/выходной файл, таймаут, concurrency), вызов оркестратора.
# Этап: базовая реализация. Аргументы CLI имеют приоритет над переменными LINKCOUNTER_*.
# Коды выхода: 0 при успехе (даже если часть URL с ошибкой), 1 при фатальной ошибке, 2 при неверных параметрах.
# Обновляйте комментарий при изменениях.

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from linkcounter.core.config import RunConfig
from linkcounter.core.errors import LinkCounterError
from linkcounter.core.logging import configure_logging
from linkcounter.core.types import TaskOutcome
from linkcounter.orchestrator.pipeline import LinkCountPipeline


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="linkcounter: подсчёт внутренних ссылок для списка URL")
    p.add_argument("--input", dest="input_path", type=str, default=None, help="Файл со списком URL")
    p.add_argument("--output", dest="output_path", type=str, default=None, help="Файл результатов")
    p.add_argument("--timeout", dest="request_timeout_sec", type=float, default=None, help="Таймаут запроса, сек")
    p.add_argument("--concurrency", type=int, default=None, help="Максимум одновременных загрузок")
    p.add_argument("--verify-ssl", action=argparse.BooleanOptionalAction, default=None)
    p.add_argument("--report-json", type=str, default=None, help="Путь к JSON-отчёту")
    p.add_argument("--log-level", type=str, default=None, help="Уровень логирования (DEBUG/INFO/WARN/ERROR)")
    p.add_argument("--log-json", action=argparse.BooleanOptionalAction, default=None, help="JSON-логирование")
    p.add_argument("--log-file", type=str, default=None, help="Файл для логов (по умолчанию STDERR)")
    return p.parse_args(argv)


def build_config(ns: argparse.Namespace) -> RunConfig:
    # незаданные флаги не перекрывают окружение и значения по умолчанию
    overrides: Dict[str, Any] = {k: v for k, v in vars(ns).items() if v is not None}
    return RunConfig(**overrides)


async def main_async(cfg: RunConfig) -> List[TaskOutcome]:
    return await LinkCountPipeline(cfg).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = parse_args(argv)
    try:
        cfg = build_config(ns)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        configure_logging(level=cfg.log_level, to_file=cfg.log_file, json=cfg.log_json)
    except OSError as e:
        print(f"Error: cannot open log file {cfg.log_file}: {e}", file=sys.stderr)
        return 1

    try:
        asyncio.run(main_async(cfg))
    except LinkCounterError as e:
        logging.getLogger(__name__).error("fatal: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
