"""Тесты генераторов числительных."""

import pytest

from timewords import numerals as num


@pytest.mark.parametrize(
    "n,expected",
    [
        (0, "cero"),
        (15, "quince"),
        (16, "dieciséis"),
        (20, "veinte"),
        (21, "veintiuno"),
        (22, "veintidós"),
        (25, "veinticinco"),
        (30, "treinta"),
        (35, "treinta y cinco"),
        (59, "cincuenta y nueve"),
    ],
)
def test_spanish_cardinal(n, expected):
    assert num.spanish_cardinal(n) == expected


def test_spanish_hours_and_article():
    assert num.spanish_hour(1) == "la una"
    assert num.spanish_hour(2) == "las dos"
    assert num.spanish_hour(12) == "las doce"
    assert num.ES_HOUR_WORDS == {
        "una", "dos", "tres", "cuatro", "cinco", "seis",
        "siete", "ocho", "nueve", "diez", "once", "doce",
    }


def test_english_tables():
    assert num.english_hour_word(4) == "four"
    assert num.english_hour_word(12) == "twelve"
    assert num.english_minute_phrase(0) == "o'clock"
    assert num.english_minute_phrase(15) == "a quarter past"
    assert num.english_minute_phrase(30) == "half past"
    assert num.english_minute_phrase(45) == "a quarter to"
    assert num.english_minute_phrase(55) == "five to"


@pytest.mark.parametrize(
    "n,expected",
    [(1, "un"), (15, "quinze"), (21, "vint-i-u"), (30, "trenta"), (47, "quaranta-i-set")],
)
def test_catalan_cardinal(n, expected):
    assert num.catalan_cardinal(n) == expected


def test_catalan_feminine():
    assert num.catalan_feminine(1) == "una"
    assert num.catalan_feminine(2) == "dues"
    assert num.catalan_feminine(11) == "onze"


@pytest.mark.parametrize(
    "word,expected",
    [("onze", "d’onze"), ("una", "d’una"), ("Onze", "d’Onze"), ("dues", "de dues"), ("quatre", "de quatre")],
)
def test_elide_de(word, expected):
    assert num.elide_de(word) == expected


@pytest.mark.parametrize(
    "n,expected",
    [(0, "零"), (4, "四"), (10, "十"), (15, "十五"), (21, "二十一"), (30, "三十"), (59, "五十九"), (99, "九十九")],
)
def test_number_to_kanji(n, expected):
    assert num.number_to_kanji(n) == expected


@pytest.mark.parametrize(
    "func,value",
    [
        (num.spanish_cardinal, 60),
        (num.spanish_cardinal, -1),
        (num.spanish_hour_word, 13),
        (num.english_hour_word, 0),
        (num.english_minute_phrase, 7),
        (num.catalan_cardinal, 60),
        (num.catalan_feminine, 13),
        (num.number_to_kanji, 100),
        (num.number_to_kanji, -3),
    ],
)
def test_out_of_domain_falls_back_to_digits(func, value):
    assert func(value) == str(value)
