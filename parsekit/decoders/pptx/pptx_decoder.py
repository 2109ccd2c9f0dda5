#!/usr/bin/env python3
"""
PowerPoint Decoder для ParseKit

Текст презентации (.pptx) через python-pptx без OCR:
- текстовые фреймы всех фигур слайда
- таблицы (ячейки через табуляцию)
- заметки докладчика
"""

import io
from typing import List

from pptx import Presentation  # type: ignore

from ..base_decoder import BaseDecoder
from ...errors import DecodeError


class PowerPointDecoder(BaseDecoder):
    """Декодер презентаций: слайды по порядку, блоки через пустую строку."""

    failure_prefix = "Failed to parse PPTX file"

    def __init__(self, include_notes: bool = True):
        super().__init__("pptx")
        self.include_notes = include_notes

    def _decode(self, tag: str, data: bytes) -> str:
        try:
            presentation = Presentation(io.BytesIO(data))
        except Exception as e:
            self.logger.error(f"Failed to open PPTX | error={type(e).__name__}: {e}")
            raise DecodeError(f"Failed to parse PPTX file: {e}") from e

        slide_blocks: List[str] = []
        for slide in presentation.slides:
            parts = self._slide_parts(slide)
            if parts:
                slide_blocks.append("\n".join(parts))

        self.logger.info(f"PPTX decoded | slides={len(presentation.slides)} with_text={len(slide_blocks)}")
        return "\n\n".join(slide_blocks).strip()

    def _slide_parts(self, slide) -> List[str]:
        parts: List[str] = []
        for shape in slide.shapes:
            if getattr(shape, "has_text_frame", False) and shape.text_frame.text.strip():
                parts.append(shape.text_frame.text.strip())
            if getattr(shape, "has_table", False):
                parts.extend(self._table_rows(shape.table))

        if self.include_notes and slide.has_notes_slide:
            notes = slide.notes_slide.notes_text_frame
            if notes is not None and notes.text.strip():
                parts.append(notes.text.strip())
        return parts

    def _table_rows(self, table) -> List[str]:
        rows = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            if any(cells):
                rows.append("\t".join(cells))
        return rows
