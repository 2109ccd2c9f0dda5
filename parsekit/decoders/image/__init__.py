"""
Image Decoder — OCR растровых изображений.

=== НАЗНАЧЕНИЕ ===
Распознавание текста на PNG, JPEG, TIFF и BMP.

=== СТЕК ТЕХНОЛОГИЙ ===
- Pillow — загрузка изображения из памяти
- pytesseract — вызов Tesseract OCR

=== ЭКСПОРТЫ ===
- ImageOcrDecoder — основной декодер
- OcrEngineProvider — однократная (под блокировкой) инициализация движка
- TesseractEngine — параметры инициализированного движка

=== ПОТОКОБЕЗОПАСНОСТЬ ===
Поиск tesseract и tessdata выполняется один раз под threading.Lock.
Один OcrEngineProvider можно разделять между декодерами и потоками.
"""

from .ocr_decoder import ImageOcrDecoder
from .ocr_engine import OcrEngineProvider, TesseractEngine, find_tessdata_dir

__all__ = ["ImageOcrDecoder", "OcrEngineProvider", "TesseractEngine", "find_tessdata_dir"]
