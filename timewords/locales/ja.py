"""日本語: «もうすぐ / 四時 / 十五分です»."""

from __future__ import annotations

from ..models import ClockReading, Locale, PhraseResult
from ..numerals import number_to_kanji
from ..rounding import NEARLY, round_clock, to_hour12
from .base import PhraseBuilder

_DESU = "です"


def hour_kanji(h12: int) -> str:
    # 十二時 — фиксированная форма
    if h12 == 12:
        return "十二"
    return number_to_kanji(h12)


class JapaneseBuilder(PhraseBuilder):
    locale = Locale.JA

    def build(self, reading: ClockReading) -> PhraseResult:
        rounding = round_clock(reading)
        minute = rounding.rounded_minute
        hour = f"{hour_kanji(to_hour12(rounding.display_hour24))}時"
        minutes = f"{number_to_kanji(minute)}分"

        if rounding.unit in NEARLY:
            lines = ("もうすぐ", hour, _DESU if minute == 0 else minutes + _DESU)
            highlight = 2
        elif rounding.unit == 0:
            if minute == 0:
                lines, highlight = ("ちょうど", hour, _DESU), 2
            else:
                lines, highlight = (hour, minutes, _DESU), 1
        elif minute == 0:
            lines, highlight = (hour, "ちょっとすぎ", _DESU), 1
        else:
            lines, highlight = (hour, minutes, "ごろです"), 1

        full = "".join(lines)
        if full.endswith(_DESU):
            full = full[: -len(_DESU)]
        return self._result(*lines, full, highlight)
