#!/usr/bin/env python3
"""
JSON Decoder для ParseKit

Валидный JSON возвращается отформатированным (отступ 2, не-ASCII как есть).
Невалидный JSON не считается ошибкой: возвращается исходный текст.
"""

import json

from ..base_decoder import BaseDecoder


class JSONDecoder(BaseDecoder):
    def __init__(self, indent: int = 2):
        super().__init__("json")
        self.indent = indent

    def _decode(self, tag: str, data: bytes) -> str:
        text = data.decode("utf-8", errors="replace")
        try:
            value = json.loads(text)
        except ValueError as e:
            self.logger.debug(f"Invalid JSON, returning raw text | error={e}")
            return text
        return json.dumps(value, indent=self.indent, ensure_ascii=False)
