#!/usr/bin/env python3
"""
PDF Decoder для ParseKit

Извлечение текстового слоя PDF из памяти через PyMuPDF.
OCR для сканов здесь не выполняется: если текста нет, возвращается
поясняющее сообщение, а не ошибка.
"""

import fitz  # PyMuPDF

from ..base_decoder import BaseDecoder
from ...errors import DecodeError

NO_TEXT_MESSAGE = "PDF contains no extractable text (might be scanned/image-based)"


class PDFDecoder(BaseDecoder):
    """Декодер PDF: текст всех страниц по порядку."""

    failure_prefix = "Failed to parse PDF"

    def __init__(self):
        super().__init__("pdf")

    def _decode(self, tag: str, data: bytes) -> str:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            self.logger.error(f"Failed to open PDF | error={type(e).__name__}: {e}")
            raise DecodeError(f"Failed to parse PDF: {e}") from e

        try:
            parts = []
            for page_num in range(doc.page_count):
                try:
                    page = doc.load_page(page_num)
                    parts.append(page.get_text("text"))
                except Exception as e:
                    # Битая страница не должна ронять весь документ
                    self.logger.warning(f"Skipping unreadable page | page={page_num + 1} error={e}")
                    continue

            self.logger.info(f"PDF decoded | pages={doc.page_count}")
        finally:
            doc.close()

        text = "\n".join(parts).strip()
        if not text:
            return NO_TEXT_MESSAGE
        return text
