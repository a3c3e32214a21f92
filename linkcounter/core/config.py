# Руководство к файлу
# Назначение: параметры запуска (пути входа/выхода, таймаут, конкурентность, логирование).
# Этап: базовая реализация на pydantic-settings. Все значения можно переопределить
# переменными окружения LINKCOUNTER_* или аргументами CLI.
# Обновляйте комментарий при изменениях.

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunConfig(BaseSettings):
    """Конфигурация одного запуска подсчёта внутренних ссылок."""

    model_config = SettingsConfigDict(env_prefix="LINKCOUNTER_")

    # Входные/выходные файлы
    input_path: str = Field(default="urls.txt", description="Файл со списком URL, по одному на строку")
    output_path: str = Field(default="results.txt", description="Файл результатов")
    report_json: Optional[str] = Field(default=None, description="Опциональный JSON-отчёт")

    # Сетевые настройки
    request_timeout_sec: float = Field(default=10.0, gt=0, description="Таймаут одного GET-запроса")
    verify_ssl: bool = Field(default=True, description="Проверять TLS-сертификаты")

    # Конкурентность
    concurrency: int = Field(default=100, ge=1, description="Максимум одновременных загрузок")

    # Логирование
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    log_file: Optional[str] = Field(default=None, description="Файл для логов (по умолчанию STDERR)")
