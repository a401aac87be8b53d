# core/utils/validator.py
# -*- coding: utf-8 -*-
"""
Санитизация пользовательского ввода перед подстановкой в URL запроса.
"""

import re
from typing import Union
from urllib.parse import quote

# Обрезаем только пробелы и табы, как и в исходном вводе меню
_TRIM_CHARS = " \t"
_DIGITS_RE = re.compile(r"[0-9]+")


def normalize(raw: str) -> str:
    """Обрезает пробелы и табы по краям. Пустой ввод остаётся пустой строкой."""
    return raw.strip(_TRIM_CHARS)


def encode(text: Union[str, bytes]) -> str:
    """
    Percent-кодирование всего, кроме [A-Za-z0-9-_.~].

    Кодирование побайтовое: строка сначала переводится в UTF-8,
    каждый байт вне безопасного набора превращается в %XX (верхний регистр).
    """
    if isinstance(text, bytes):
        return quote(text, safe="")
    return quote(text, safe="", encoding="utf-8", errors="surrogatepass")


def sanitize_and_encode(raw: str) -> str:
    """Санитизация пользовательского ввода: normalize + encode."""
    return encode(normalize(raw))


def is_numeric(text: str) -> bool:
    """Только ASCII-цифры, без знака и точки. Пустая строка не число."""
    return bool(_DIGITS_RE.fullmatch(text))
