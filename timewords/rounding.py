"""Округление минут к ближайшей пятиминутной отметке.

Общая таксономия для испанского, английского и японского:

* ``unit == 0`` — точно на отметке («it's»);
* ``unit in (1, 2)`` — чуть больше, округляем вниз («just after»);
* ``unit in (3, 4)`` — почти, округляем вверх («nearly»).
"""

from __future__ import annotations

from .models import ClockReading, RoundingResult

EXACT = 0
JUST_PAST = (1, 2)
NEARLY = (3, 4)


def round_reading(hour24: int, minute: int) -> RoundingResult:
    """Округлить (час, минута) до отметки, кратной пяти минутам.

    Если округление вверх даёт 60, час переносится (по модулю 24),
    а минута обнуляется.
    """
    unit = minute % 5
    if unit == EXACT:
        rounded = minute
    elif unit in JUST_PAST:
        rounded = minute - unit
    else:
        rounded = minute + (5 - unit)

    if rounded == 60:
        return RoundingResult(unit=unit, rounded_minute=0, display_hour24=(hour24 + 1) % 24)
    return RoundingResult(unit=unit, rounded_minute=rounded, display_hour24=hour24)


def round_clock(reading: ClockReading) -> RoundingResult:
    return round_reading(reading.hour24, reading.minute)


def to_hour12(hour24: int) -> int:
    """0..23 → 1..12 (полночь и полдень — 12)."""
    return hour24 % 12 or 12


def reference_hour(rounding: RoundingResult) -> int:
    """Час, который называет фраза (в 24-часовом виде).

    После половины часа фраза отсчитывает минуты до следующего часа
    («a quarter to five», «las cinco menos cuarto»).
    """
    if rounding.rounded_minute > 30:
        return (rounding.display_hour24 + 1) % 24
    return rounding.display_hour24


__all__ = ["round_reading", "round_clock", "to_hour12", "reference_hour"]
