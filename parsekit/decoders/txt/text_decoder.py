#!/usr/bin/env python3
"""
Text Decoder для ParseKit

Текст и всё нераспознанное: байты -> str через TextNormalizer
(строгий UTF-8, затем Windows-1252). Пустой буфер даёт пустую строку.
"""

from typing import Optional

from ..base_decoder import BaseDecoder
from ...text_normalizer import TextNormalizer


class TextDecoder(BaseDecoder):
    def __init__(self, normalizer: Optional[TextNormalizer] = None):
        super().__init__("text")
        self.normalizer = normalizer or TextNormalizer()

    def _decode(self, tag: str, data: bytes) -> str:
        return self.normalizer.normalize(data)
