#!/usr/bin/env python3
"""
Markup Decoder для ParseKit

Текст XML и HTML. HTML приходит под тегом "xml", поэтому оба формата
идут через один снисходительный парсер: незакрытые теги не ошибка.
Doctype, processing instructions и комментарии в текст не попадают.
"""

from bs4 import BeautifulSoup

from ..base_decoder import BaseDecoder

# Содержимое этих элементов не является текстом документа
SKIPPED_ELEMENTS = ["script", "style"]


class MarkupDecoder(BaseDecoder):
    failure_prefix = "XML parse error"

    def __init__(self):
        super().__init__("markup")

    def _decode(self, tag: str, data: bytes) -> str:
        soup = BeautifulSoup(data.decode("utf-8", errors="replace"), "html.parser")
        for element in soup(SKIPPED_ELEMENTS):
            element.decompose()
        return " ".join(soup.stripped_strings)
