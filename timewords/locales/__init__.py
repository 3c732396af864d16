"""Реестр построителей фраз по языкам."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from ..models import Locale
from .base import PhraseBuilder
from .ca import CatalanBuilder
from .en import EnglishBuilder
from .es import SpanishBuilder
from .ja import JapaneseBuilder

BUILDERS = MappingProxyType(
    {
        Locale.ES: SpanishBuilder(),
        Locale.EN: EnglishBuilder(),
        Locale.CA: CatalanBuilder(),
        Locale.JA: JapaneseBuilder(),
    }
)


def get_builder(locale: Any) -> PhraseBuilder:
    """Построитель для *locale*; неизвестный код — английский."""
    return BUILDERS[Locale.resolve(locale)]


__all__ = [
    "BUILDERS",
    "PhraseBuilder",
    "SpanishBuilder",
    "EnglishBuilder",
    "CatalanBuilder",
    "JapaneseBuilder",
    "get_builder",
]
