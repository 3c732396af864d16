"""Связка ядра ``timewords`` с реальными часами.

Здесь живёт всё, что ядру знать не нужно: чтение ``datetime``,
поминутная лента для виджетов и переключение языка по кругу.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import List

from timewords import ClockReading, PhraseResult, render_clock_phrase

# Порядок переключения языка (как по нажатию на циферблат часов)
LANGUAGES = ("es", "en", "ca", "ja")


def next_language(code: str) -> str:
    """Следующий язык по кругу; неизвестный код — первый язык."""
    try:
        idx = LANGUAGES.index(code)
    except ValueError:
        return LANGUAGES[0]
    return LANGUAGES[(idx + 1) % len(LANGUAGES)]


def parse_hhmm(value: str) -> ClockReading:
    """
    Parse "HH:MM" (or "H:MM") to ClockReading.
    """
    if value is None:
        raise ValueError("time is required")

    parts = value.strip().split(":")
    if len(parts) != 2:
        raise ValueError("time must be in HH:MM format")

    try:
        hour = int(parts[0])
        minute = int(parts[1])
    except ValueError as exc:
        raise ValueError("time must be numeric HH:MM") from exc

    if not (0 <= hour <= 23):
        raise ValueError("hour must be 0..23")
    if not (0 <= minute <= 59):
        raise ValueError("minute must be 0..59")

    return ClockReading(hour, minute)


def reading_from_datetime(now: _dt.datetime) -> ClockReading:
    return ClockReading(now.hour, now.minute)


def seconds_until_next_minute(now: _dt.datetime) -> float:
    """Сколько секунд до ближайшего ``HH:MM:00`` (0 < x <= 60)."""
    elapsed = now.second + now.microsecond / 1_000_000
    return 60.0 - elapsed


@dataclass(frozen=True)
class TimelineEntry:
    at: _dt.datetime
    language: str
    phrase: PhraseResult


def _baseline(now: _dt.datetime) -> _dt.datetime:
    if now.second == 0 and now.microsecond == 0:
        return now
    return now.replace(second=0, microsecond=0) + _dt.timedelta(minutes=1)


def build_timeline(now: _dt.datetime, language: str, minutes: int = 60) -> List[TimelineEntry]:
    """Лента фраз: сейчас и затем каждая целая минута.

    Первая запись — на момент *now*. Далее *minutes* отметок начиная
    с ближайшей целой минуты; отметки не позже *now* пропускаются.
    """
    entries = [TimelineEntry(now, language, render_clock_phrase(now, language))]
    start = _baseline(now)
    for offset in range(minutes):
        at = start + _dt.timedelta(minutes=offset)
        if at > now:
            entries.append(TimelineEntry(at, language, render_clock_phrase(at, language)))
    return entries


__all__ = [
    "LANGUAGES",
    "TimelineEntry",
    "build_timeline",
    "next_language",
    "parse_hhmm",
    "reading_from_datetime",
    "seconds_until_next_minute",
]
