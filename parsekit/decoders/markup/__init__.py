"""
Markup Decoders — JSON, XML и HTML.

=== НАЗНАЧЕНИЕ ===
- JSONDecoder — форматирование JSON, невалидный JSON возвращается как текст
- MarkupDecoder — текстовые узлы XML/HTML через пробел

=== СТЕК ТЕХНОЛОГИЙ ===
- json (stdlib)
- beautifulsoup4 (html.parser) — снисходительный разбор разметки
"""

from .json_decoder import JSONDecoder
from .markup_decoder import MarkupDecoder

__all__ = ["JSONDecoder", "MarkupDecoder"]
