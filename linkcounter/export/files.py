# Руководство к файлу
# Назначение: чтение списка URL, запись строк результатов и JSON-отчёта.
# Этап: базовая реализация. Ошибки файлов здесь фатальны (InputReadError/OutputWriteError).
# Обновляйте комментарий при изменениях.

from __future__ import annotations

from pathlib import Path
from typing import IO, List, Optional, Sequence

import orjson

from linkcounter.core.errors import InputReadError, OutputWriteError
from linkcounter.core.types import Success, TaskOutcome


def _reason(e: OSError) -> str:
    return e.strerror or str(e)


def read_urls(path: str | Path) -> List[str]:
    """Читает файл целиком: одна строка = одна задача, строки не изменяются.

    Пустые строки и строки с пробелами по краям тоже становятся задачами
    и дают строку ERROR в результатах.
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise InputReadError(str(p), _reason(e)) from e
    except UnicodeDecodeError as e:
        raise InputReadError(str(p), f"not valid UTF-8 ({e.reason})") from e
    return raw.splitlines()


class ResultWriter:
    """Выходной файл: открывается один раз, пишется последовательно, закрывается всегда."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._fh: Optional[IO[str]] = None

    def __enter__(self) -> "ResultWriter":
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._fh = self.path.open("w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise OutputWriteError(str(self.path), _reason(e)) from e
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def write_line(self, line: str) -> None:
        assert self._fh is not None, "ResultWriter must be used as a context manager"
        try:
            self._fh.write(line + "\n")
        except OSError as e:
            raise OutputWriteError(str(self.path), _reason(e)) from e


class Exporter:
    """Экспорт исходов в машиночитаемый отчёт."""

    @staticmethod
    def write_report_json(path: str | Path, outcomes: Sequence[TaskOutcome]) -> None:
        p = Path(path)
        results = []
        for index, o in enumerate(outcomes):
            results.append(
                {
                    "index": index,
                    "url": o.url,
                    "ok": o.ok,
                    "internal_links": o.internal_links if isinstance(o, Success) else None,
                    "error": None if isinstance(o, Success) else o.error,
                }
            )
        ok = sum(1 for o in outcomes if o.ok)
        payload = {"total": len(outcomes), "ok": ok, "failed": len(outcomes) - ok, "results": results}
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
        except OSError as e:
            raise OutputWriteError(str(p), _reason(e)) from e
