"""
Определение формата документа по имени файла и содержимому.

=== ПОЛИТИКА detect() ===
1. Если есть содержимое, проверяются сигнатуры. Всё, кроме TEXT/UNKNOWN, возвращается сразу:
   содержимое важнее расширения.
2. Иначе расширение файла, если оно известно.
3. Иначе TEXT, если содержимое распознано как текст.
4. Иначе UNKNOWN.

Таблица расширений и таблица сигнатур являются внешним контрактом:
менять порядок проверок или байты сигнатур нельзя.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Dict, List, Optional

from .contracts import FileFormat

PDF_MAGIC = b"%PDF"
PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
JPEG_MAGIC = b"\xff\xd8\xff"
BMP_MAGIC = b"BM"
TIFF_LE_MAGIC = b"II\x2a\x00"
TIFF_BE_MAGIC = b"MM\x00\x2a"
OLE_MAGIC = b"\xd0\xcf\x11\xe0"
ZIP_MAGIC = b"PK"

JSON_LEADING_WHITESPACE = b" \t\n\r"
OFFICE_SCAN_LIMIT = 2000

EXTENSION_MAP: Dict[str, FileFormat] = {
    "pdf": FileFormat.PDF,
    "docx": FileFormat.DOCX,
    "xlsx": FileFormat.XLSX,
    "xls": FileFormat.XLS,
    "pptx": FileFormat.PPTX,
    "png": FileFormat.PNG,
    "jpg": FileFormat.JPEG,
    "jpeg": FileFormat.JPEG,
    "tiff": FileFormat.TIFF,
    "tif": FileFormat.TIFF,
    "bmp": FileFormat.BMP,
    "json": FileFormat.JSON,
    "xml": FileFormat.XML,
    "html": FileFormat.HTML,
    "htm": FileFormat.HTML,
    "txt": FileFormat.TEXT,
    "text": FileFormat.TEXT,
    "md": FileFormat.TEXT,
    "markdown": FileFormat.TEXT,
    "csv": FileFormat.TEXT,
}

SUPPORTED_EXTENSIONS = (
    "pdf", "docx", "xlsx", "xls", "pptx",
    "png", "jpg", "jpeg", "tiff", "tif", "bmp",
    "json", "xml", "html", "htm",
    "txt", "text", "md", "markdown", "csv",
)


def _lossy(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class FormatDetector:
    """Чистые функции классификации: без I/O и побочных эффектов."""

    @classmethod
    def detect(cls, filename: Optional[str] = None, content: Optional[bytes] = None) -> FileFormat:
        content_format: Optional[FileFormat] = None
        if content is not None:
            content_format = cls.detect_from_content(content)
            if content_format not in (FileFormat.TEXT, FileFormat.UNKNOWN):
                return content_format

        if filename:
            ext_format = cls.detect_from_extension(filename)
            if ext_format is not FileFormat.UNKNOWN:
                return ext_format

        if content_format is FileFormat.TEXT:
            return FileFormat.TEXT

        return FileFormat.UNKNOWN

    @staticmethod
    def extension_of(filename: str) -> Optional[str]:
        """Последнее расширение в нижнем регистре без точки, либо None."""
        suffix = PurePath(filename).suffix
        if not suffix or suffix == ".":
            return None
        return suffix[1:].lower()

    @classmethod
    def detect_from_extension(cls, filename: str) -> FileFormat:
        ext = cls.extension_of(filename)
        if ext is None:
            return FileFormat.UNKNOWN
        return EXTENSION_MAP.get(ext, FileFormat.UNKNOWN)

    @classmethod
    def detect_from_content(cls, data: bytes) -> FileFormat:
        if not data:
            return FileFormat.TEXT

        if data.startswith(PDF_MAGIC):
            return FileFormat.PDF

        if data.startswith(PNG_MAGIC):
            return FileFormat.PNG

        if data.startswith(JPEG_MAGIC):
            return FileFormat.JPEG

        if data.startswith(BMP_MAGIC):
            return FileFormat.BMP

        if data.startswith(TIFF_LE_MAGIC) or data.startswith(TIFF_BE_MAGIC):
            return FileFormat.TIFF

        # OLE Compound Document: старые бинарные форматы Office, считаем таблицей
        if data.startswith(OLE_MAGIC):
            return FileFormat.XLS

        # ZIP: DOCX, XLSX или PPTX
        if data.startswith(ZIP_MAGIC):
            return cls.detect_office_format(data)

        if len(data) >= 5:
            head = _lossy(data[:5])
            if head.startswith("<?xml") or head.startswith("<!"):
                return FileFormat.XML

        if len(data) >= 14:
            head = _lossy(data[:14]).lower()
            if "<!doctype" in head or "<html" in head:
                return FileFormat.HTML

        stripped = data.lstrip(JSON_LEADING_WHITESPACE)
        if stripped[:1] in (b"{", b"["):
            return FileFormat.JSON

        return FileFormat.TEXT

    @staticmethod
    def detect_office_format(data: bytes) -> FileFormat:
        """Различение Office Open XML по путям внутри ZIP. По умолчанию XLSX."""
        content = _lossy(data[:OFFICE_SCAN_LIMIT])

        if "word/" in content:
            return FileFormat.DOCX
        if "xl/" in content:
            return FileFormat.XLSX
        if "ppt/" in content:
            return FileFormat.PPTX
        return FileFormat.XLSX

    @staticmethod
    def supported_extensions() -> List[str]:
        return list(SUPPORTED_EXTENSIONS)


__all__ = [
    "FormatDetector",
    "EXTENSION_MAP",
    "SUPPORTED_EXTENSIONS",
]
