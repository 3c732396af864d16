"""Числительные словами для четырёх языков.

Каждая функция тотальна на своём диапазоне; вне диапазона возвращается
число десятичными цифрами, исключений нет.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
#  Español
# ---------------------------------------------------------------------------

_ES_0_20 = (
    "cero", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve",
    "diez", "once", "doce", "trece", "catorce", "quince", "dieciséis", "diecisiete",
    "dieciocho", "diecinueve", "veinte",
)

_ES_TENS = {2: "veinte", 3: "treinta", 4: "cuarenta", 5: "cincuenta"}

# 21..29 пишутся слитно, у части форм ударение на последнем слоге
_ES_VEINTI = {2: "veintidós", 3: "veintitrés", 6: "veintiséis"}

_ES_HOURS = {
    1: "una", 2: "dos", 3: "tres", 4: "cuatro", 5: "cinco", 6: "seis",
    7: "siete", 8: "ocho", 9: "nueve", 10: "diez", 11: "once", 12: "doce",
}

ES_HOUR_WORDS = frozenset(_ES_HOURS.values())


def spanish_cardinal(n: int) -> str:
    """0‑59 → «treinta y cinco»."""
    if 0 <= n <= 20:
        return _ES_0_20[n]
    if 21 <= n <= 29:
        return _ES_VEINTI.get(n - 20, "veinti" + _ES_0_20[n - 20])
    if 30 <= n <= 59:
        tens, units = divmod(n, 10)
        if units == 0:
            return _ES_TENS[tens]
        return f"{_ES_TENS[tens]} y {_ES_0_20[units]}"
    return str(n)


def spanish_hour_word(h12: int) -> str:
    """1‑12 → «una» … «doce»."""
    if h12 in _ES_HOURS:
        return _ES_HOURS[h12]
    return str(h12)


def spanish_hour(h12: int) -> str:
    """1‑12 с артиклем: «la una», «las dos» …"""
    article = "la" if h12 == 1 else "las"
    return f"{article} {spanish_hour_word(h12)}"


# ---------------------------------------------------------------------------
#  English
# ---------------------------------------------------------------------------

_EN_HOURS = {
    1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six",
    7: "seven", 8: "eight", 9: "nine", 10: "ten", 11: "eleven", 12: "twelve",
}

_EN_MINUTES = {
    0: "o'clock",
    5: "five past",
    10: "ten past",
    15: "a quarter past",
    20: "twenty past",
    25: "twenty-five past",
    30: "half past",
    35: "twenty-five to",
    40: "twenty to",
    45: "a quarter to",
    50: "ten to",
    55: "five to",
}


def english_hour_word(h12: int) -> str:
    if h12 in _EN_HOURS:
        return _EN_HOURS[h12]
    return str(h12)


def english_minute_phrase(rounded: int) -> str:
    """Отметка 0, 5 … 55 → «five past», «a quarter to» …"""
    if rounded in _EN_MINUTES:
        return _EN_MINUTES[rounded]
    return str(rounded)


# ---------------------------------------------------------------------------
#  Català
# ---------------------------------------------------------------------------

_CA_0_19 = (
    "zero", "un", "dos", "tres", "quatre", "cinc", "sis", "set", "vuit", "nou",
    "deu", "onze", "dotze", "tretze", "catorze", "quinze", "setze", "disset",
    "divuit", "dinou",
)

_CA_TENS = {2: "vint", 3: "trenta", 4: "quaranta", 5: "cinquanta"}

_CA_FEMININE = {
    1: "una", 2: "dues", 3: "tres", 4: "quatre", 5: "cinc", 6: "sis",
    7: "set", 8: "vuit", 9: "nou", 10: "deu", 11: "onze", 12: "dotze",
}

_VOWELS = frozenset("aeiou")


def catalan_cardinal(n: int) -> str:
    """0‑59, мужской род: «vint-i-u», «quaranta-i-set»."""
    if 0 <= n <= 19:
        return _CA_0_19[n]
    if 20 <= n <= 59:
        tens, units = divmod(n, 10)
        if units == 0:
            return _CA_TENS[tens]
        # в составных «un» превращается в «u»
        tail = "u" if units == 1 else _CA_0_19[units]
        return f"{_CA_TENS[tens]}-i-{tail}"
    return str(n)


def catalan_feminine(n: int) -> str:
    """1‑12, женский род — только для часов: «una», «dues» …"""
    if n in _CA_FEMININE:
        return _CA_FEMININE[n]
    return str(n)


def elide_de(word: str) -> str:
    """«de» → «d’» перед гласной: ``d’onze``, но ``de dues``."""
    if word[:1].lower() in _VOWELS:
        return "d’" + word
    return "de " + word


# ---------------------------------------------------------------------------
#  日本語
# ---------------------------------------------------------------------------

_KANJI_DIGITS = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")


def number_to_kanji(n: int) -> str:
    """0‑99 → кандзи: 10 → 十, 21 → 二十一, 30 → 三十."""
    if not 0 <= n <= 99:
        return str(n)
    if n < 10:
        return _KANJI_DIGITS[n]
    tens, units = divmod(n, 10)
    # единица перед 十 не пишется
    tens_part = "十" if tens == 1 else _KANJI_DIGITS[tens] + "十"
    if units == 0:
        return tens_part
    return tens_part + _KANJI_DIGITS[units]


__all__ = [
    "ES_HOUR_WORDS",
    "spanish_cardinal",
    "spanish_hour_word",
    "spanish_hour",
    "english_hour_word",
    "english_minute_phrase",
    "catalan_cardinal",
    "catalan_feminine",
    "elide_de",
    "number_to_kanji",
]
