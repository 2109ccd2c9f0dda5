"""
Word Decoder — модуль для документов Word.

=== НАЗНАЧЕНИЕ ===
Извлечение текста из .docx: абзацы и таблицы.

=== СТЕК ТЕХНОЛОГИЙ ===
- python-docx — чтение структуры документа

=== ЭКСПОРТЫ ===
- WordDecoder — основной декодер
"""

from .docx_decoder import WordDecoder

__all__ = ["WordDecoder"]
