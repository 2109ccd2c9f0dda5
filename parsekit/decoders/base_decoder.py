#!/usr/bin/env python3
"""
Base Decoder для ParseKit

Базовый класс для всех декодеров: общий логгер и единый формат ошибок.
"""

from abc import ABC, abstractmethod

from ..errors import DecodeError
from ..logging_config import get_logger


class BaseDecoder(ABC):
    """Базовый класс. Реализует шаблон Template Method для декодирования."""

    # Префикс сообщения, если библиотека упала неожиданным исключением
    failure_prefix = "Failed to decode"

    def __init__(self, decoder_name: str):
        self.logger = get_logger(f"parsekit.decoder.{decoder_name}")

    def decode(self, tag: str, data: bytes) -> str:
        """Финальный метод: вызывает `_decode` и приводит любые сбои к DecodeError."""
        self.logger.debug(f"Decoding | tag={tag} bytes={len(data)}")
        try:
            text = self._decode(tag, data)
        except DecodeError:
            raise
        except Exception as e:
            self.logger.error(f"Decoding failed | tag={tag} error={type(e).__name__}: {e}")
            raise DecodeError(f"{self.failure_prefix}: {e}") from e

        self.logger.debug(f"Decoded | tag={tag} chars={len(text)}")
        return text

    @abstractmethod
    def _decode(self, tag: str, data: bytes) -> str:
        """Реализация декодирования в наследнике."""
        raise NotImplementedError
