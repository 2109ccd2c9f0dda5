"""
Text Normalizer - декодирование текстовых буферов

Один уровень fallback: строгий UTF-8, при битых последовательностях
переход на Windows-1252 без дальнейших проверок. Полноценного определения кодировки нет.

Стратегия: callable bytes -> Optional[str], где None означает
"не смог, пробуй следующую". Цепочку можно подменить, по умолчанию она
ровно [strict_utf8, permissive_cp1252].

Обе стратегии по умолчанию сначала смотрят на BOM: UTF-8 BOM отбрасывается,
UTF-16 LE/BE BOM переключает декодирование на UTF-16.
"""

from __future__ import annotations

import codecs
from typing import Callable, Optional, Sequence, Tuple

from .logging_config import get_logger

logger = get_logger("parsekit.text_normalizer")

EncodingStrategy = Callable[[bytes], Optional[str]]

FALLBACK_ENCODING = "windows-1252"

BOMS = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def sniff_bom(data: bytes) -> Optional[Tuple[str, int]]:
    """Кодировка и длина BOM в начале буфера, либо None."""
    for bom, encoding in BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return None


def strict_utf8(data: bytes) -> Optional[str]:
    encoding, offset = sniff_bom(data) or ("utf-8", 0)
    try:
        return data[offset:].decode(encoding)
    except UnicodeDecodeError:
        return None


def _c1_passthrough(exc: UnicodeError):
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    undefined = exc.object[exc.start:exc.end]
    return "".join(chr(b) for b in undefined), exc.end


# 0x81, 0x8D, 0x8F, 0x90, 0x9D не определены в cp1252: отдаём их как U+0081 и т.д. (WHATWG)
codecs.register_error("parsekit.c1_passthrough", _c1_passthrough)


def permissive_cp1252(data: bytes) -> str:
    bom = sniff_bom(data)
    if bom is not None:
        encoding, offset = bom
        return data[offset:].decode(encoding, errors="replace")
    return data.decode(FALLBACK_ENCODING, errors="parsekit.c1_passthrough")


class ChardetStrategy:
    """
    Опциональная стратегия на базе chardet.

    В цепочку по умолчанию не входит: подключается вызывающим кодом, если
    нужно что-то шире, чем UTF-8 -> Windows-1252.
    """

    def __init__(self, min_confidence: float = 0.7, sample_size: int = 10240):
        self.min_confidence = min_confidence
        self.sample_size = sample_size

    def __call__(self, data: bytes) -> Optional[str]:
        import chardet  # type: ignore

        detected = chardet.detect(data[: self.sample_size])
        encoding = detected.get("encoding")
        confidence = detected.get("confidence") or 0.0

        logger.debug(f"Encoding detection | encoding={encoding} confidence={confidence:.2f}")

        if not encoding or confidence < self.min_confidence:
            return None
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return None


DEFAULT_STRATEGIES: Sequence[EncodingStrategy] = (strict_utf8, permissive_cp1252)


class TextNormalizer:
    """Перебирает стратегии по порядку, первая не-None побеждает."""

    def __init__(self, strategies: Optional[Sequence[EncodingStrategy]] = None):
        self.strategies = tuple(strategies) if strategies is not None else tuple(DEFAULT_STRATEGIES)

    def normalize(self, data: bytes) -> str:
        for strategy in self.strategies:
            text = strategy(data)
            if text is not None:
                if strategy is not self.strategies[0]:
                    logger.debug(f"Encoding fallback used | strategy={getattr(strategy, '__name__', type(strategy).__name__)}")
                return text
        return permissive_cp1252(data)

    def decode(self, tag: str, data: bytes) -> str:
        return self.normalize(data)


__all__ = [
    "EncodingStrategy",
    "TextNormalizer",
    "ChardetStrategy",
    "sniff_bom",
    "strict_utf8",
    "permissive_cp1252",
    "DEFAULT_STRATEGIES",
]
