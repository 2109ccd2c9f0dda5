"""
PowerPoint Decoder — модуль для презентаций.

=== НАЗНАЧЕНИЕ ===
Извлечение текста из .pptx файлов:
- Текст со слайдов
- Таблицы
- Заметки докладчика

=== СТЕК ТЕХНОЛОГИЙ ===
- python-pptx — основной парсинг

=== ЭКСПОРТЫ ===
- PowerPointDecoder — основной декодер
"""

from .pptx_decoder import PowerPointDecoder

__all__ = ["PowerPointDecoder"]
