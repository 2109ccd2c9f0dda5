#!/usr/bin/env python3
"""
Image OCR Decoder для ParseKit

OCR растровых изображений (PNG, JPEG, TIFF, BMP) через Tesseract.

Pipeline:
    bytes → Pillow → RGB → pytesseract → trimmed text
"""

import io
from typing import Optional

import pytesseract
from PIL import Image

from ..base_decoder import BaseDecoder
from ...errors import DecodeError
from .ocr_engine import OcrEngineProvider


class ImageOcrDecoder(BaseDecoder):
    """Декодер изображений. Движок OCR инициализируется при первом вызове."""

    failure_prefix = "Failed to perform OCR"

    def __init__(self, engine_provider: Optional[OcrEngineProvider] = None, timeout: int = 120):
        super().__init__("ocr")
        self.engine_provider = engine_provider or OcrEngineProvider()
        self.timeout = timeout

    def _decode(self, tag: str, data: bytes) -> str:
        if not data:
            raise DecodeError("Failed to load image: no data")

        image = self._load_image(data)
        engine = self.engine_provider.get()

        try:
            text = pytesseract.image_to_string(
                image,
                lang=engine.languages,
                config=engine.config,
                timeout=self.timeout,
            )
        except Exception as e:
            self.logger.error(f"OCR failed | tag={tag} error={type(e).__name__}: {e}")
            raise DecodeError(f"Failed to perform OCR: {e}") from e

        text = text.strip()
        self.logger.info(f"OCR completed | tag={tag} size={image.size} chars={len(text)}")
        return text

    def _load_image(self, data: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except Exception as e:
            self.logger.error(f"Failed to load image | error={type(e).__name__}: {e}")
            raise DecodeError(f"Failed to load image: {e}") from e

        # Палитры, 16-битные и CMYK изображения tesseract читает плохо
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        return image
