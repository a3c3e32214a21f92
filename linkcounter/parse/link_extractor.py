# Руководство к файлу
# Назначение: извлечение абсолютных http(s)-ссылок из атрибутов href и подсчёт внутренних.
# Этап: базовая реализация на регулярном выражении (без HTML-парсера).
# Обновляйте комментарий при изменениях.

from __future__ import annotations

import logging
import re
from typing import List

from linkcounter.utils.url import get_host, is_internal

# Имя атрибута и схема без учёта регистра; остальная часть ссылки берётся как есть.
LINK_PATTERN = re.compile(r'href\s*=\s*"(https?://[^"]+)"', re.IGNORECASE)

log = logging.getLogger(__name__)


class LinkExtractor:
    """Извлечение href="http(s)://..." из HTML-текста."""

    @staticmethod
    def extract_links(html: str) -> List[str]:
        return LINK_PATTERN.findall(html)

    @staticmethod
    def count_internal(html: str, domain: str) -> int:
        """Считает ссылки, хост которых оканчивается на domain.

        Некорректные ссылки пропускаются и не прерывают подсчёт.
        """
        count = 0
        for link in LinkExtractor.extract_links(html):
            try:
                host = get_host(link)
            except ValueError:
                log.debug("skip-malformed link=%s", link)
                continue
            if is_internal(host, domain):
                count += 1
        return count
