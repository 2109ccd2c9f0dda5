"""Decoder registry: canonical format tag -> decoder, built once."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..contracts import Decoder

RegistryConfig = Mapping[Tuple[str, ...], Decoder]


class DecoderRegistry:
    """Неизменяемое отображение тегов на декодеры."""

    def __init__(self, decoders: RegistryConfig, fallback: Optional[Decoder] = None):
        tag_map: Dict[str, Decoder] = {}
        for tags, decoder in decoders.items():
            for tag in tags:
                tag_map[tag.lower()] = decoder
        self._tag_map = MappingProxyType(tag_map)
        self._fallback = fallback

    def get(self, tag: str) -> Optional[Decoder]:
        """Декодер по тегу; для незарегистрированного тега возвращается fallback."""
        return self._tag_map.get(tag.lower(), self._fallback)

    def tags(self) -> List[str]:
        return list(self._tag_map.keys())

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.lower() in self._tag_map


__all__ = ["DecoderRegistry", "RegistryConfig"]
