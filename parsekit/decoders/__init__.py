"""
Коллекция декодеров (внешних возможностей) ParseKit.

=== НАЗНАЧЕНИЕ ===
Декодер получает канонический тег формата и байты, возвращает текст
или бросает DecodeError. Ядро не заглядывает внутрь декодеров.

=== ДЕКОДЕРЫ ===
- BaseDecoder — базовый класс для всех декодеров
- PDFDecoder — pdf (PyMuPDF)
- WordDecoder — docx (python-docx)
- PowerPointDecoder — pptx (python-pptx)
- ExcelDecoder — xlsx, xls (openpyxl + xlrd)
- JSONDecoder — json
- MarkupDecoder — xml (в том числе HTML, у него тот же тег)
- ImageOcrDecoder — png, jpeg, tiff, bmp (Pillow + pytesseract)
- TextDecoder — text, unknown (TextNormalizer)

=== ИСПОЛЬЗОВАНИЕ ===

    from parsekit.decoders import build_decoder_registry

    registry = build_decoder_registry()
    decoder = registry.get("docx")
    text = decoder.decode("docx", data)

    # Свой набор декодеров
    registry = DecoderRegistry({
        ("pdf",): PDFDecoder(),
        ("text", "unknown"): TextDecoder(),
    })

=== СОЗДАНИЕ НОВОГО ДЕКОДЕРА ===

    from parsekit.decoders import BaseDecoder

    class RTFDecoder(BaseDecoder):
        def __init__(self):
            super().__init__("rtf")

        def _decode(self, tag: str, data: bytes) -> str:
            return extract_rtf_text(data)
"""

from typing import Optional

from ..settings import Settings, settings as default_settings
from .base_decoder import BaseDecoder
from .registry import DecoderRegistry, RegistryConfig
from .pdf import PDFDecoder
from .word import WordDecoder
from .pptx import PowerPointDecoder
from .excel import ExcelDecoder
from .markup import JSONDecoder, MarkupDecoder
from .image import ImageOcrDecoder, OcrEngineProvider, TesseractEngine, find_tessdata_dir
from .txt import TextDecoder

IMAGE_TAGS = ("png", "jpeg", "tiff", "bmp")
TEXT_TAGS = ("text", "unknown")


def build_decoder_registry(settings: Optional[Settings] = None) -> DecoderRegistry:
    """Создать реестр декодеров с настройками по умолчанию."""
    settings = settings or default_settings

    ocr_engine = OcrEngineProvider(
        tesseract_cmd=settings.TESSERACT_CMD,
        tessdata_prefix=settings.TESSDATA_PREFIX,
        languages=settings.OCR_LANGUAGES,
    )
    text_decoder = TextDecoder()

    return DecoderRegistry(
        {
            ("pdf",): PDFDecoder(),
            ("docx",): WordDecoder(),
            ("pptx",): PowerPointDecoder(),
            ("xlsx", "xls"): ExcelDecoder(max_rows_per_sheet=settings.EXCEL_MAX_ROWS_PER_TABLE),
            ("json",): JSONDecoder(),
            ("xml", "html"): MarkupDecoder(),
            IMAGE_TAGS: ImageOcrDecoder(ocr_engine, timeout=settings.OCR_TIMEOUT),
            TEXT_TAGS: text_decoder,
        },
        fallback=text_decoder,
    )


__all__ = [
    "BaseDecoder",
    "DecoderRegistry",
    "RegistryConfig",
    "PDFDecoder",
    "WordDecoder",
    "PowerPointDecoder",
    "ExcelDecoder",
    "JSONDecoder",
    "MarkupDecoder",
    "ImageOcrDecoder",
    "OcrEngineProvider",
    "TesseractEngine",
    "find_tessdata_dir",
    "TextDecoder",
    "IMAGE_TAGS",
    "TEXT_TAGS",
    "build_decoder_registry",
]
