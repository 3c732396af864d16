"""Català: «tres quarts i dos de quatre».

Каталанский не округляет до пяти минут: часы считаются четвертями
в сторону следующего часа, поэтому работает с сырой минутой.
"""

from __future__ import annotations

from ..models import ClockReading, Locale, PhraseResult
from ..numerals import catalan_cardinal, catalan_feminine, elide_de
from .base import PhraseBuilder


def _hour_with_article(h12: int) -> str:
    article = "la" if h12 == 1 else "les"
    return f"{article} {catalan_feminine(h12)}"


def _quarters(quarters: int) -> str:
    if quarters == 1:
        return "un quart"
    return f"{catalan_cardinal(quarters)} quarts"


class CatalanBuilder(PhraseBuilder):
    locale = Locale.CA

    def build(self, reading: ClockReading) -> PhraseResult:
        minute = reading.minute
        h12 = reading.hour12
        next_h12 = h12 % 12 + 1

        if minute == 0:
            hour = _hour_with_article(h12)
            return self._result(hour, "en punt", "", f"{hour} en punt", 1)

        quarters, remainder = divmod(minute, 15)
        past_text = f"{_hour_with_article(h12)} i {catalan_cardinal(minute)}"

        if quarters == 0:
            if minute == 1:
                count, passed = "un minut", "passat"
            else:
                count, passed = f"{catalan_cardinal(minute)} minuts", "passats"
            return self._result(count, passed, elide_de(catalan_feminine(h12)), past_text, 3)

        if 1 <= quarters <= 3:
            base = _quarters(quarters)
            next_hour = elide_de(catalan_feminine(next_h12))
            if remainder == 0:
                return self._result(base, next_hour, "", f"{base} {next_hour}", 2)
            if remainder == 1:
                extra = "i un"
            elif remainder in (7, 8):
                extra = "i mig"
            else:
                extra = f"i {catalan_cardinal(remainder)}"
            return self._result(base, extra, next_hour, f"{base} {extra} {next_hour}", 3)

        # сюда не попадаем: четверти 1..3 покрывают 15..59
        return self._result(
            f"{catalan_cardinal(minute)} minuts passats", catalan_feminine(h12), "", past_text, 2
        )
