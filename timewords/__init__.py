"""Текущее время короткой фразой на испанском, английском, каталанском и японском.

Пример::

    >>> from timewords import render_clock_phrase
    >>> render_clock_phrase({"hour": 16, "minute": 10}, "en").full_text
    'ten past four'

Фраза разбита на три строки, одна из них помечена как выделенная.
Функция чистая: без состояния, ввода-вывода и исключений.
"""

from __future__ import annotations

import logging
from typing import Any

from .locales import get_builder
from .models import ClockReading, Locale, PhraseResult, RoundingResult
from .rounding import round_reading

logger = logging.getLogger(__name__)

SUPPORTED_LOCALES = tuple(loc.value for loc in Locale)


def render_clock_phrase(time: Any, locale: Any = Locale.EN) -> PhraseResult:
    """Преобразовать время в фразу на языке *locale*.

    Parameters
    ----------
    time:
        :class:`ClockReading`, ``datetime``/``time`` или словарь
        с ключами ``hour`` и ``minute``.
    locale:
        ``"es"``, ``"en"``, ``"ca"``, ``"ja"`` или :class:`Locale`.
        Любое другое значение трактуется как английский.
    """
    reading = ClockReading.from_value(time)
    resolved = Locale.resolve(locale)
    logger.debug(
        "render %02d:%02d locale=%r -> %s", reading.hour24, reading.minute, locale, resolved.value
    )
    return get_builder(resolved).build(reading)


__all__ = [
    "ClockReading",
    "Locale",
    "PhraseResult",
    "RoundingResult",
    "SUPPORTED_LOCALES",
    "render_clock_phrase",
    "round_reading",
]
