#!/usr/bin/env python3
"""
OCR Engine - однократная инициализация Tesseract

Инициализация (поиск бинарника tesseract и каталога tessdata) не гарантирует
реентерабельность, поэтому выполняется один раз под блокировкой.
Дальше экземпляр движка только читается и безопасен для общих вызовов.
"""

import os
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import pytesseract

from ...errors import DecodeError
from ...logging_config import get_logger

logger = get_logger("parsekit.decoder.ocr_engine")

# Системные каталоги tessdata, проверяются после TESSDATA_PREFIX
TESSDATA_SEARCH_PATHS = (
    "/usr/share/tessdata",
    "/usr/share/tesseract-ocr/5/tessdata",
    "/usr/share/tesseract-ocr/4.00/tessdata",
    "/usr/local/share/tessdata",
    "/opt/homebrew/share/tessdata",
    "/opt/local/share/tessdata",
)


@dataclass(frozen=True)
class TesseractEngine:
    """Результат инициализации: версия и аргументы командной строки."""

    version: str
    tessdata_dir: Optional[str]
    languages: str

    @property
    def config(self) -> str:
        if self.tessdata_dir:
            return f'--tessdata-dir "{self.tessdata_dir}"'
        return ""


def find_tessdata_dir(prefix: Optional[str] = None, search_paths: Sequence[str] = TESSDATA_SEARCH_PATHS) -> Optional[str]:
    """Первый существующий каталог tessdata, либо None (tesseract найдёт сам)."""
    candidates: List[str] = []
    if prefix:
        candidates.append(prefix)
    env_prefix = os.environ.get("TESSDATA_PREFIX")
    if env_prefix:
        candidates.append(env_prefix)
    candidates.extend(search_paths)

    for path in candidates:
        if os.path.isdir(path):
            return path
    return None


class OcrEngineProvider:
    """Лениво создаёт TesseractEngine ровно один раз (double-checked locking)."""

    def __init__(
        self,
        tesseract_cmd: Optional[str] = None,
        tessdata_prefix: Optional[str] = None,
        languages: Union[str, Sequence[str]] = "eng",
    ):
        self.tesseract_cmd = tesseract_cmd
        self.tessdata_prefix = tessdata_prefix
        if not isinstance(languages, str):
            languages = "+".join(languages)
        self.languages = languages or "eng"
        self._engine: Optional[TesseractEngine] = None
        self._lock = threading.Lock()

    def get(self) -> TesseractEngine:
        engine = self._engine
        if engine is not None:
            return engine

        with self._lock:
            if self._engine is None:
                self._engine = self._initialize()
            return self._engine

    def _initialize(self) -> TesseractEngine:
        if self.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.tesseract_cmd

        try:
            version = str(pytesseract.get_tesseract_version())
        except Exception as e:
            logger.error(f"Tesseract not available | error={type(e).__name__}: {e}")
            raise DecodeError(f"Failed to initialize Tesseract: {e}") from e

        tessdata_dir = find_tessdata_dir(self.tessdata_prefix)
        logger.info(f"Tesseract initialized | version={version} tessdata={tessdata_dir} languages={self.languages}")
        return TesseractEngine(version=version, tessdata_dir=tessdata_dir, languages=self.languages)
