"""English: «it's just after ten past four»."""

from __future__ import annotations

from ..models import ClockReading, Locale, PhraseResult
from ..numerals import english_hour_word, english_minute_phrase
from ..rounding import JUST_PAST, NEARLY, reference_hour, round_clock, to_hour12
from .base import PhraseBuilder

_LEAD = "it's "
_OCLOCK = " o'clock"


def _prefix(unit: int) -> str:
    if unit in JUST_PAST:
        return "it's just after"
    if unit in NEARLY:
        return "it's nearly"
    return "it's"


class EnglishBuilder(PhraseBuilder):
    locale = Locale.EN

    def build(self, reading: ClockReading) -> PhraseResult:
        rounding = round_clock(reading)
        prefix = _prefix(rounding.unit)
        minute_text = english_minute_phrase(rounding.rounded_minute)
        hour_text = english_hour_word(to_hour12(reference_hour(rounding)))

        if rounding.rounded_minute == 0:
            lines = (prefix, hour_text, minute_text)
            highlight = 2
        else:
            lines = (prefix, minute_text, hour_text)
            highlight = 3

        full = " ".join(lines)
        if full.lower().startswith(_LEAD):
            full = full[len(_LEAD):]
        if full.lower().endswith(_OCLOCK):
            full = full[: -len(_OCLOCK)]
        return self._result(*lines, full.strip(), highlight)
