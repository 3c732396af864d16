"""Español: «son casi las cinco menos cuarto».

Фраза собирается целиком и режется на три строки балансировщиком.
"""

from __future__ import annotations

from ..balancer import balance_lines
from ..models import ClockReading, Locale, PhraseResult
from ..numerals import ES_HOUR_WORDS, spanish_cardinal, spanish_hour
from ..rounding import JUST_PAST, NEARLY, reference_hour, round_clock, to_hour12
from .base import PhraseBuilder

_PAST_HALF = {
    0: "en punto",
    5: "y cinco",
    10: "y diez",
    15: "y cuarto",
    20: "y veinte",
    25: "y veinticinco",
    30: "y media",
}

# минуты до следующего часа
_TO_NEXT = {
    5: "menos cinco",
    10: "menos diez",
    15: "menos cuarto",
    20: "menos veinte",
    25: "menos veinticinco",
}


def minute_phrase(rounded: int) -> str:
    """0..55 → «y cuarto», «menos veinte» …"""
    if rounded <= 30:
        if rounded in _PAST_HALF:
            return _PAST_HALF[rounded]
        return f"y {spanish_cardinal(rounded)}"
    left = 60 - rounded
    if left in _TO_NEXT:
        return _TO_NEXT[left]
    return f"menos {spanish_cardinal(left)}"


class SpanishBuilder(PhraseBuilder):
    locale = Locale.ES

    def build(self, reading: ClockReading) -> PhraseResult:
        rounding = round_clock(reading)
        h12 = to_hour12(reference_hour(rounding))
        singular = h12 == 1
        verb = "es" if singular else "son"
        hour_text = spanish_hour(h12)
        minute_text = minute_phrase(rounding.rounded_minute)

        if rounding.unit in JUST_PAST:
            past = "pasada" if singular else "pasadas"
            phrase = f"{hour_text} {minute_text} {past}"
            full = phrase
        elif rounding.unit in NEARLY:
            full = f"casi {hour_text} {minute_text}"
            phrase = f"{verb} {full}"
        else:
            full = f"{hour_text} {minute_text}"
            phrase = f"{verb} {full}"

        split = balance_lines(phrase, ES_HOUR_WORDS)
        return self._result(split.line1, split.line2, split.line3, full, split.hour_line)
