#!/usr/bin/env python3
"""
DOCX Decoder для ParseKit

Текст Word документа (.docx) через python-docx: сначала абзацы тела
документа, затем строки таблиц (ячейки через табуляцию).
"""

import io
from typing import List

from docx import Document  # type: ignore

from ..base_decoder import BaseDecoder
from ...errors import DecodeError


class WordDecoder(BaseDecoder):
    """Декодер Word документов без OCR встроенных изображений."""

    failure_prefix = "Failed to parse DOCX file"

    def __init__(self, include_tables: bool = True):
        super().__init__("docx")
        self.include_tables = include_tables

    def _decode(self, tag: str, data: bytes) -> str:
        try:
            doc = Document(io.BytesIO(data))
        except Exception as e:
            self.logger.error(f"Failed to open DOCX | error={type(e).__name__}: {e}")
            raise DecodeError(f"Failed to parse DOCX file: {e}") from e

        lines: List[str] = [p.text for p in doc.paragraphs]

        if self.include_tables:
            for table in doc.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells]
                    if any(cells):
                        lines.append("\t".join(cells))

        self.logger.info(f"DOCX decoded | paragraphs={len(doc.paragraphs)} tables={len(doc.tables)}")
        return "\n".join(lines).strip()
