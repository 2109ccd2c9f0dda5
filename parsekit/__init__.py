"""
ParseKit — извлечение текста из документов с определением формата.

=== НАЗНАЧЕНИЕ ===
Классифицирует произвольный буфер байтов (и, опционально, имя файла)
в один из фиксированных форматов и передаёт его нужному декодеру:
PDF, DOCX, PPTX, XLSX/XLS, PNG/JPEG/TIFF/BMP (OCR), JSON, XML/HTML, текст.

=== ИСПОЛЬЗОВАНИЕ ===

    import parsekit

    text = parsekit.parse_file("report.pdf")
    text = parsekit.parse_bytes(data, max_size=10 * 1024 * 1024)

    parsekit.detect_format("Page.HTML")          # -> "xml"
    parsekit.FormatDetector.detect("scan.txt", b"%PDF-1.4")  # -> FileFormat.PDF

    parser = parsekit.Parser(strict_mode=True)
    parser.parse("  hi  ")                       # -> "hi strict=true"

=== ОШИБКИ ===
SizeLimitExceeded, EmptyInput, IoFailure, DecodeFailure — все наследуют ParseKitError.
"""

from typing import Any, List, Optional

from .contracts import Decoder, FileFormat, ParserConfig
from .dispatcher import Parser, STRICT_MARKER
from .errors import (
    DecodeError,
    DecodeFailure,
    EmptyInput,
    ErrorKind,
    IoFailure,
    ParseKitError,
    SizeLimitExceeded,
    error_class_for,
)
from .format_detector import FormatDetector
from .text_normalizer import ChardetStrategy, TextNormalizer

__version__ = "0.3.0"


def parse(text: str, **options: Any) -> str:
    """Разбор строки с одноразовым Parser."""
    return Parser(options).parse_string(text)


def parse_bytes(data: bytes, filename: Optional[str] = None, **options: Any) -> str:
    """Разбор буфера байтов с одноразовым Parser."""
    return Parser(options).parse_bytes(data, filename)


def parse_file(path, **options: Any) -> str:
    """Разбор файла с одноразовым Parser."""
    return Parser(options).parse_path(path)


def supported_formats() -> List[str]:
    return FormatDetector.supported_extensions()


def supports_file(path) -> bool:
    return Parser().supports_file(path)


def detect_format(filename: Optional[str]) -> str:
    """Тег формата по расширению; "unknown" для None, пустой строки и незнакомых расширений."""
    if not filename:
        return FileFormat.UNKNOWN.tag
    return FormatDetector.detect_from_extension(filename).tag


__all__ = [
    "Decoder",
    "FileFormat",
    "ParserConfig",
    "Parser",
    "STRICT_MARKER",
    "FormatDetector",
    "TextNormalizer",
    "ChardetStrategy",
    "ErrorKind",
    "ParseKitError",
    "SizeLimitExceeded",
    "EmptyInput",
    "IoFailure",
    "DecodeFailure",
    "DecodeError",
    "error_class_for",
    "parse",
    "parse_bytes",
    "parse_file",
    "supported_formats",
    "supports_file",
    "detect_format",
    "__version__",
]
