"""
Диспетчер ParseKit: Parser.

=== ПОТОК ДАННЫХ ===
bytes (+ имя файла) → проверка max_size → FormatDetector → декодер по тегу
→ текст или единообразная ошибка.

Проверка размера всегда идёт первой: слишком большой буфер не платит
ни за детекцию, ни за декодирование.

=== ИСПОЛЬЗОВАНИЕ ===

    from parsekit import Parser

    parser = Parser(max_size=10 * 1024 * 1024)
    text = parser.parse_file("report.docx")
    text = parser.parse_bytes(data, filename="scan.png")

    Parser.strict().parse("  hi  ")  # -> "hi strict=true"

Parser неизменяем после создания, один экземпляр можно использовать
из нескольких потоков одновременно.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .contracts import FileFormat, ParserConfig
from .decoders import DecoderRegistry, build_decoder_registry
from .errors import DecodeError, DecodeFailure, EmptyInput, IoFailure, SizeLimitExceeded
from .format_detector import FormatDetector
from .logging_config import get_logger

logger = get_logger("parsekit.parser")

STRICT_MARKER = "strict=true"

BytesLike = Union[bytes, bytearray, memoryview]
PathLike = Union[str, "os.PathLike[str]"]

_default_registry: Optional[DecoderRegistry] = None
_default_registry_lock = threading.Lock()


def default_decoder_registry() -> DecoderRegistry:
    """Общий реестр декодеров процесса: создаётся один раз и дальше только читается."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = build_decoder_registry()
        return _default_registry


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")


class Parser:
    """Маршрутизирует байты к декодеру по обнаруженному формату."""

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        registry: Optional[DecoderRegistry] = None,
        **overrides: Any,
    ):
        self._config = ParserConfig.from_options(options, **overrides)
        self._registry = registry

    @classmethod
    def strict(cls, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "Parser":
        """Parser с включённым strict_mode."""
        return cls(options, **{**overrides, "strict_mode": True})

    # === Конфигурация ===

    @property
    def parser_config(self) -> ParserConfig:
        return self._config

    @property
    def config(self) -> Dict[str, Any]:
        return self._config.as_dict()

    @property
    def strict_mode(self) -> bool:
        return self._config.strict_mode

    @property
    def registry(self) -> DecoderRegistry:
        if self._registry is None:
            return default_decoder_registry()
        return self._registry

    # === Основные операции ===

    def parse_string(self, text: str) -> str:
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        if not text:
            raise EmptyInput("Input cannot be empty")

        result = text.strip()
        if self._config.strict_mode:
            return f"{result} {STRICT_MARKER}"
        return result

    parse = parse_string

    def parse_bytes(self, data: BytesLike, filename: Optional[str] = None) -> str:
        """Публичный вход для байтов: пустой буфер отклоняется с EmptyInput."""
        data = _as_bytes(data)
        if not data:
            raise EmptyInput("Data cannot be empty")
        return self.dispatch(data, filename)

    def parse_path(self, path: PathLike) -> str:
        data = self._read_path(path)
        return self.dispatch(data, os.fspath(path))

    parse_file = parse_path

    def detect_path(self, path: PathLike) -> str:
        """Тег формата файла по содержимому и имени, с тем же лимитом размера."""
        data = self._read_path(path)
        if len(data) > self._config.max_size:
            self._reject_oversized(len(data), os.fspath(path))
        return FormatDetector.detect(os.fspath(path), data).tag

    def dispatch(self, data: bytes, filename: Optional[str] = None) -> str:
        """Проверка размера, детекция и вызов декодера. Пустой буфер допустим."""
        if len(data) > self._config.max_size:
            self._reject_oversized(len(data), filename)

        file_format = FormatDetector.detect(filename, data)
        logger.debug(f"Format detected | format={file_format.value} tag={file_format.tag} file={filename}")
        return self._decode(file_format, data)

    # === Прямой вызов отдельных декодеров ===

    def parse_pdf(self, data: BytesLike) -> str:
        return self._decode_direct(FileFormat.PDF, data)

    def parse_docx(self, data: BytesLike) -> str:
        return self._decode_direct(FileFormat.DOCX, data)

    def parse_pptx(self, data: BytesLike) -> str:
        return self._decode_direct(FileFormat.PPTX, data)

    def parse_xlsx(self, data: BytesLike) -> str:
        return self._decode_direct(FileFormat.XLSX, data)

    def parse_json(self, data: BytesLike) -> str:
        return self._decode_direct(FileFormat.JSON, data)

    def parse_xml(self, data: BytesLike) -> str:
        return self._decode_direct(FileFormat.XML, data)

    def parse_text(self, data: BytesLike) -> str:
        return self._decode_direct(FileFormat.TEXT, data)

    def ocr_image(self, data: BytesLike) -> str:
        data = _as_bytes(data)
        file_format = FormatDetector.detect_from_content(data)
        if file_format not in (FileFormat.PNG, FileFormat.JPEG, FileFormat.TIFF, FileFormat.BMP):
            file_format = FileFormat.PNG
        return self._decode_direct(file_format, data)

    # === Детекция и проверки ===

    @staticmethod
    def supported_formats() -> List[str]:
        return FormatDetector.supported_extensions()

    def supports_file(self, path: PathLike) -> bool:
        ext = self.file_extension(path)
        return ext is not None and ext in FormatDetector.supported_extensions()

    def detect_format(self, path: Optional[PathLike]) -> str:
        """Тег формата по расширению; "unknown" для пустого пути."""
        if not path:
            return FileFormat.UNKNOWN.tag
        return FormatDetector.detect_from_extension(os.fspath(path)).tag

    def detect_format_from_bytes(self, data: BytesLike) -> str:
        return FormatDetector.detect_from_content(_as_bytes(data)).tag

    @staticmethod
    def valid_input(value: object) -> bool:
        return isinstance(value, str) and len(value) > 0

    def valid_file(self, path: Optional[PathLike]) -> bool:
        if not path:
            return False
        return Path(path).is_file() and self.supports_file(path)

    @staticmethod
    def file_extension(path: Optional[PathLike]) -> Optional[str]:
        if not path:
            return None
        return FormatDetector.extension_of(os.fspath(path))

    # === Внутреннее ===

    def _read_path(self, path: PathLike) -> bytes:
        file_path = Path(path)
        try:
            # Размер по stat известен заранее: не читаем заведомо слишком большой файл
            size = file_path.stat().st_size
            if file_path.is_file() and size > self._config.max_size:
                self._reject_oversized(size, str(path))
            return file_path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read file | path={path} error={type(e).__name__}: {e}")
            raise IoFailure(f"{path}: {e.strerror or e}") from e

    def _reject_oversized(self, actual: int, filename: Optional[str]) -> None:
        logger.warning(f"Input rejected by size limit | size={actual} limit={self._config.max_size} file={filename}")
        raise SizeLimitExceeded(actual, self._config.max_size)

    def _decode_direct(self, file_format: FileFormat, data: BytesLike) -> str:
        data = _as_bytes(data)
        if len(data) > self._config.max_size:
            self._reject_oversized(len(data), None)
        return self._decode(file_format, data)

    def _decode(self, file_format: FileFormat, data: bytes) -> str:
        tag = file_format.tag
        decoder = self.registry.get(tag)
        if decoder is None:
            raise DecodeFailure(tag, f"No decoder registered for format: {tag}")

        try:
            return decoder.decode(tag, data)
        except DecodeError as e:
            logger.error(f"Decoding failed | format={tag} error={e}")
            raise DecodeFailure(tag, str(e)) from e
        except Exception as e:
            # Сторонний Decoder может не знать про DecodeError
            logger.error(f"Decoder raised unexpected error | format={tag} error={type(e).__name__}: {e}")
            raise DecodeFailure(tag, str(e) or type(e).__name__) from e

    def __repr__(self) -> str:
        return f"Parser({self._config!r})"


__all__ = ["Parser", "STRICT_MARKER", "default_decoder_registry"]
