"""Базовый класс построителей фраз."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import ClockReading, Locale, PhraseResult


class PhraseBuilder(ABC):
    """Построитель фразы для одного языка."""

    locale: Locale

    @abstractmethod
    def build(self, reading: ClockReading) -> PhraseResult:
        """Вернуть три строки, полный текст и номер выделенной строки."""
        ...

    def _result(
        self, line1: str, line2: str, line3: str, full_text: str, highlight: int
    ) -> PhraseResult:
        return PhraseResult(line1, line2, line3, full_text, highlight, self.locale)
