# Руководство к файлу
# Назначение: разбор хоста из URL и сравнение доменов для подсчёта внутренних ссылок.
# Этап: базовая реализация. Хост берётся как есть, без приведения регистра.
# Обновляйте комментарий при изменениях.

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

# Допустимое имя хоста (DNS-имя или IPv4); остальное считается authority без хоста
_HOST_RE = re.compile(r"^[A-Za-z0-9.-]+$")
_WS_RE = re.compile(r"\s")


def get_host(url: str) -> Optional[str]:
    """Хост URL в исходном регистре или None, если хоста нет.

    Синтаксически некорректный URL (``http://[``, пробелы внутри) даёт
    ValueError: его обрабатывает вызывающий код. Authority с недопустимыми
    в имени хоста символами (например, ``_``) считается URL без хоста.
    """
    if _WS_RE.search(url):
        raise ValueError(f"whitespace in URL: {url!r}")
    # urlsplit проверяет скобки IPv6; hostname приводит регистр, поэтому netloc разбираем сами
    netloc = urlsplit(url).netloc.rpartition("@")[2]
    if netloc.startswith("["):
        return netloc[1 : netloc.index("]")] or None
    host = netloc.partition(":")[0]
    if not host or not _HOST_RE.match(host):
        return None
    return host


def base_domain(url: str) -> str:
    """Базовый домен страницы: хост URL запроса. Без хоста считать нечего."""
    host = get_host(url)
    if not host:
        raise ValueError(f"URL has no host: {url!r}")
    return host


def is_internal(link_host: Optional[str], domain: str) -> bool:
    # Сравнение по суффиксу, а не на равенство: sub.example.com считается
    # внутренним для example.com, но и badexample.com тоже.
    return bool(link_host) and link_host.endswith(domain)
