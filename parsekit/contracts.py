"""
Контракты ParseKit.

Типы данных, общие для детектора, диспетчера и декодеров:
- FileFormat — закрытое перечисление форматов и их канонические теги
- ParserConfig — неизменяемая конфигурация экземпляра Parser
- Decoder — протокол внешнего декодера: decode(tag, data) -> text
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class FileFormat(Enum):
    """Распознаваемые форматы. Значение enum совпадает с именем варианта."""

    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"
    XLS = "xls"
    PPTX = "pptx"
    PNG = "png"
    JPEG = "jpeg"
    TIFF = "tiff"
    BMP = "bmp"
    JSON = "json"
    XML = "xml"
    HTML = "html"
    TEXT = "text"
    UNKNOWN = "unknown"

    @property
    def tag(self) -> str:
        """Тег формата на границе системы. HTML намеренно отдаётся как "xml"."""
        return _FORMAT_TAGS[self]


_FORMAT_TAGS: Dict[FileFormat, str] = {
    FileFormat.PDF: "pdf",
    FileFormat.DOCX: "docx",
    FileFormat.XLSX: "xlsx",
    FileFormat.XLS: "xls",
    FileFormat.PPTX: "pptx",
    FileFormat.PNG: "png",
    FileFormat.JPEG: "jpeg",
    FileFormat.TIFF: "tiff",
    FileFormat.BMP: "bmp",
    FileFormat.JSON: "json",
    FileFormat.XML: "xml",
    FileFormat.HTML: "xml",  # совместимость с существующими потребителями
    FileFormat.TEXT: "text",
    FileFormat.UNKNOWN: "unknown",
}


class ParserConfig(BaseModel):
    """
    Конфигурация Parser. Создаётся один раз и больше не меняется.

    - strict_mode — parse_string добавляет маркер " strict=true"
    - max_depth — зарезервировано, детекция и диспетчеризация его не читают
    - encoding — информационное поле, декодирование всегда начинается с UTF-8
    - max_size — жёсткий предел размера буфера в байтах
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    strict_mode: bool = False
    max_depth: int = Field(default=100, ge=0)
    encoding: str = "UTF-8"
    max_size: int = Field(default=100 * 1024 * 1024, ge=0)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "ParserConfig":
        """Слить опции вызывающего поверх значений по умолчанию из settings."""
        from .settings import settings

        merged: Dict[str, Any] = {
            "strict_mode": settings.DEFAULT_STRICT_MODE,
            "max_depth": settings.DEFAULT_MAX_DEPTH,
            "encoding": settings.DEFAULT_ENCODING,
            "max_size": settings.DEFAULT_MAX_SIZE,
        }
        merged.update(options or {})
        merged.update(overrides)
        return cls(**merged)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@runtime_checkable
class Decoder(Protocol):
    """Протокол внешнего декодера. Пустая строка считается успехом."""

    def decode(self, tag: str, data: bytes) -> str:  # pragma: no cover - protocol definition
        ...


__all__ = ["FileFormat", "ParserConfig", "Decoder"]
