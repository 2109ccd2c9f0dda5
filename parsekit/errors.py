"""
Таксономия ошибок ParseKit.

=== ВИДЫ ОШИБОК ===
- SizeLimitExceeded(actual, limit) — буфер больше max_size, ничего не выполнялось
- EmptyInput — пустая строка / пустой буфер на публичном входе
- IoFailure(context) — файл не удалось прочитать ("не смогли прочитать")
- DecodeFailure(format, message) — декодер не справился ("не смогли понять")

Каждый класс также наследует подходящее встроенное исключение, чтобы
вызывающий код мог ловить естественные категории (ValueError, OSError, ...).

Декодеры бросают DecodeError; диспетчер оборачивает её в DecodeFailure,
сообщение декодера сохраняется дословно и никак не интерпретируется.

=== РЕЕСТР ===
ERROR_REGISTRY строится один раз при импорте модуля и дальше не меняется:

    from parsekit.errors import ErrorKind, error_class_for

    error_class_for(ErrorKind.EMPTY_INPUT)  # -> EmptyInput
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Type


class ErrorKind(str, Enum):
    """Категории ошибок на границе библиотеки."""

    SIZE_LIMIT_EXCEEDED = "size_limit_exceeded"
    EMPTY_INPUT = "empty_input"
    IO_FAILURE = "io_failure"
    DECODE_FAILURE = "decode_failure"


class ParseKitError(Exception):
    """Базовый класс всех ошибок, которые поднимает диспетчер."""

    kind: ErrorKind


class SizeLimitExceeded(ParseKitError, RuntimeError):
    kind = ErrorKind.SIZE_LIMIT_EXCEEDED

    def __init__(self, actual: int, limit: int):
        self.actual = actual
        self.limit = limit
        super().__init__(f"File size {actual} exceeds maximum allowed size {limit}")


class EmptyInput(ParseKitError, ValueError):
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "Input cannot be empty"):
        super().__init__(message)


class IoFailure(ParseKitError, OSError):
    kind = ErrorKind.IO_FAILURE

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"Failed to read file: {context}")


class DecodeFailure(ParseKitError, RuntimeError):
    kind = ErrorKind.DECODE_FAILURE

    def __init__(self, format: str, message: str):
        self.format = format
        self.message = message
        super().__init__(message)


class DecodeError(Exception):
    """Ошибка внешнего декодера. Сообщение непрозрачно для ядра."""


ERROR_REGISTRY: Mapping[ErrorKind, Type[ParseKitError]] = MappingProxyType({
    ErrorKind.SIZE_LIMIT_EXCEEDED: SizeLimitExceeded,
    ErrorKind.EMPTY_INPUT: EmptyInput,
    ErrorKind.IO_FAILURE: IoFailure,
    ErrorKind.DECODE_FAILURE: DecodeFailure,
})


def error_class_for(kind: ErrorKind | str) -> Type[ParseKitError]:
    """Класс исключения по виду ошибки. Неизвестный вид -> ValueError."""
    return ERROR_REGISTRY[ErrorKind(kind)]


__all__ = [
    "ErrorKind",
    "ParseKitError",
    "SizeLimitExceeded",
    "EmptyInput",
    "IoFailure",
    "DecodeFailure",
    "DecodeError",
    "ERROR_REGISTRY",
    "error_class_for",
]
