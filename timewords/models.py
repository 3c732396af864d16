"""Типы данных движка «время словами».

Все объекты неизменяемые и живут ровно один вызов
:func:`timewords.render_clock_phrase`.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class Locale(str, Enum):
    """Поддерживаемые языки вывода."""

    ES = "es"
    EN = "en"
    CA = "ca"
    JA = "ja"

    @classmethod
    def resolve(cls, code: Any) -> "Locale":
        """Привести код языка к :class:`Locale`.

        Регистр и пробелы не важны, региональный суффикс отбрасывается
        (``"es-ES"`` → ``es``). Всё нераспознанное — английский.
        """
        if isinstance(code, Locale):
            return code
        text = str(code or "").strip().lower().replace("_", "-")
        base = text.split("-", 1)[0]
        try:
            return cls(base)
        except ValueError:
            return cls.EN


def _as_int(value: Any) -> int:
    """Целое из *value*; None и нечисловые значения дают 0."""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass(frozen=True)
class ClockReading:
    """Показание часов: час 0..23 и минута 0..59."""

    hour24: int
    minute: int

    def __post_init__(self) -> None:
        # нормализуем, а не падаем: ядро ошибок не выбрасывает
        object.__setattr__(self, "hour24", _as_int(self.hour24) % 24)
        object.__setattr__(self, "minute", _as_int(self.minute) % 60)

    @classmethod
    def from_value(cls, value: Any) -> "ClockReading":
        """Построить показание из ``datetime``/``time``/словаря."""
        if isinstance(value, ClockReading):
            return value
        if isinstance(value, (_dt.datetime, _dt.time)):
            return cls(value.hour, value.minute)
        if isinstance(value, Mapping):
            hour = value.get("hour", value.get("hour24", 0))
            return cls(hour, value.get("minute", 0))
        return cls(getattr(value, "hour", 0), getattr(value, "minute", 0))

    @property
    def hour12(self) -> int:
        return self.hour24 % 12 or 12


@dataclass(frozen=True)
class RoundingResult:
    """Результат округления к ближайшим пяти минутам."""

    unit: int            # minute % 5
    rounded_minute: int  # 0..55 после переноса часа
    display_hour24: int  # 0..23


@dataclass(frozen=True)
class PhraseResult:
    """Три строки фразы, полный текст и номер выделенной строки (1..3)."""

    line1: str
    line2: str
    line3: str
    full_text: str
    highlight_line: int
    locale: Locale = Locale.EN

    @property
    def lines(self) -> tuple[str, str, str]:
        return (self.line1, self.line2, self.line3)

    @property
    def highlighted(self) -> str:
        return self.lines[self.highlight_line - 1]

    def as_tuple(self) -> tuple[str, str, str, str, int]:
        return (self.line1, self.line2, self.line3, self.full_text, self.highlight_line)

    def to_dict(self) -> dict[str, Any]:
        return {
            "line1": self.line1,
            "line2": self.line2,
            "line3": self.line3,
            "full_text": self.full_text,
            "highlight_line": self.highlight_line,
            "locale": self.locale.value,
        }


__all__ = ["Locale", "ClockReading", "RoundingResult", "PhraseResult"]
