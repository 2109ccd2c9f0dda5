"""
PDF Decoder — модуль для PDF-документов.

=== НАЗНАЧЕНИЕ ===
Извлечение текстового слоя PDF, полностью в памяти.

=== СТЕК ТЕХНОЛОГИЙ ===
- PyMuPDF (fitz) — парсинг текста

=== ЭКСПОРТЫ ===
- PDFDecoder — основной декодер
- NO_TEXT_MESSAGE — текст-заглушка для PDF без текстового слоя
"""

from .pdf_decoder import PDFDecoder, NO_TEXT_MESSAGE

__all__ = ["PDFDecoder", "NO_TEXT_MESSAGE"]
