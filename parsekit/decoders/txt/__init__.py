"""
Text Decoder — простой текст и неизвестные форматы.

=== ЭКСПОРТЫ ===
- TextDecoder — декодер поверх TextNormalizer
"""

from .text_decoder import TextDecoder

__all__ = ["TextDecoder"]
